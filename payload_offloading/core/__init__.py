"""Core: settings, storage configuration and shared constants.

Import settings from payload_offloading.core.config and the immutable
configuration from payload_offloading.core.storage_configuration.
"""
