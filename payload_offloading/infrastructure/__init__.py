"""Infrastructure: S3 accessors, encryption strategies and backend errors."""
