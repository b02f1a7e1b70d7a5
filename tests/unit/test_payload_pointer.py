"""Tests for PayloadPointer (wire format, decode failures, parse result)."""

import json

import pytest

from payload_offloading.core.constants import POINTER_CLASS_NAME
from payload_offloading.domain.exceptions import EncodingError, MalformedPointerError
from payload_offloading.domain.value_objects import PayloadPointer, PointerParseResult


class TestPayloadPointerEncode:
    """to_json produces the tagged JSON form shared with other clients."""

    def test_exact_wire_format(self) -> None:
        p = PayloadPointer("test-bucket-name", "AnyS3key")
        assert p.to_json() == (
            '["software.amazon.payloadoffloading.PayloadS3Pointer",'
            '{"s3BucketName":"test-bucket-name","s3Key":"AnyS3key"}]'
        )

    def test_deterministic(self) -> None:
        assert PayloadPointer("b", "k").to_json() == PayloadPointer("b", "k").to_json()

    def test_special_characters_roundtrip(self) -> None:
        p = PayloadPointer("bucket.with.dots", 'dir/ключ "quoted" \\ 🎉')
        assert PayloadPointer.from_json(p.to_json()) == p

    def test_unserializable_value_raises_encoding_error(self) -> None:
        p = PayloadPointer("b", "k")
        # Bypass frozen dataclass to simulate a value json cannot encode.
        object.__setattr__(p, "s3_bucket_name", object())
        with pytest.raises(EncodingError) as exc_info:
            p.to_json()
        assert exc_info.value.error_code == "POINTER_ENCODING_ERROR"


class TestPayloadPointerDecode:
    """from_json accepts known type tags only and ignores unknown fields."""

    @pytest.mark.parametrize(
        ("bucket", "key"),
        [("b", "k"), ("test-bucket-name", "2f1d4a3c-9f6e-4d8b-a1c2-0e7b6f5d4c3b"), ("x", " ")],
    )
    def test_roundtrip(self, bucket: str, key: str) -> None:
        decoded = PayloadPointer.from_json(PayloadPointer(bucket, key).to_json())
        assert (decoded.s3_bucket_name, decoded.s3_key) == (bucket, key)

    def test_untagged_object_is_not_a_pointer(self) -> None:
        """An ordinary JSON message body with pointer-like fields stays a body."""
        body = '{"s3BucketName":"b","s3Key":"k"}'
        assert not PayloadPointer.is_pointer(body)
        with pytest.raises(MalformedPointerError):
            PayloadPointer.from_json(body)

    def test_unknown_fields_ignored(self) -> None:
        text = json.dumps(
            [POINTER_CLASS_NAME, {"s3BucketName": "b", "s3Key": "k", "version": 2, "extra": {}}]
        )
        assert PayloadPointer.from_json(text) == PayloadPointer("b", "k")

    @pytest.mark.parametrize(
        "tag",
        [
            "com.amazonaws.largepayloadoffloading.PayloadS3Pointer",
            "com.amazon.sqs.javamessaging.MessageS3Pointer",
        ],
    )
    def test_legacy_type_tags_accepted(self, tag: str) -> None:
        text = json.dumps([tag, {"s3BucketName": "b", "s3Key": "k"}])
        assert PayloadPointer.from_json(text) == PayloadPointer("b", "k")

    def test_unknown_type_tag_rejected(self) -> None:
        text = '["com.example.Order",{"s3BucketName":"b","s3Key":"k"}]'
        assert not PayloadPointer.is_pointer(text)
        with pytest.raises(MalformedPointerError) as exc_info:
            PayloadPointer.from_json(text)
        assert "com.example.Order" in exc_info.value.details["reason"]

    @pytest.mark.parametrize(
        "text",
        [
            "IncorrectPointer",
            "",
            "null",
            "42",
            '"just a string"',
            "[]",
            '["tag"]',
            f'["{POINTER_CLASS_NAME}", {{"s3BucketName":"b","s3Key":"k"}}, "extra"]',
            '[1, {"s3BucketName":"b","s3Key":"k"}]',
            '[{}, {"s3BucketName":"b","s3Key":"k"}]',
            f'["{POINTER_CLASS_NAME}", "b/k"]',
            f'["{POINTER_CLASS_NAME}", {{"s3BucketName":"b"}}]',
            f'["{POINTER_CLASS_NAME}", {{"s3Key":"k"}}]',
            f'["{POINTER_CLASS_NAME}", {{"s3BucketName":"","s3Key":"k"}}]',
            f'["{POINTER_CLASS_NAME}", {{"s3BucketName":"b","s3Key":""}}]',
            f'["{POINTER_CLASS_NAME}", {{"s3BucketName":1,"s3Key":"k"}}]',
            f'["{POINTER_CLASS_NAME}", {{"s3BucketName":"b","s3Key":null}}]',
            '["software.amazon.payloadoffloading.PayloadS3Pointer",{"s3BucketName":"b","s3K',
        ],
    )
    def test_malformed_raises(self, text: str) -> None:
        with pytest.raises(MalformedPointerError, match="Failed to read the S3 object pointer"):
            PayloadPointer.from_json(text)

    def test_non_string_input_raises(self) -> None:
        with pytest.raises(MalformedPointerError):
            PayloadPointer.from_json(None)  # type: ignore[arg-type]

    def test_malformed_error_carries_reason(self) -> None:
        with pytest.raises(MalformedPointerError) as exc_info:
            PayloadPointer.from_json(json.dumps([POINTER_CLASS_NAME, {"s3BucketName": "b"}]))
        assert exc_info.value.error_code == "MALFORMED_POINTER"
        assert "s3Key" in exc_info.value.details["reason"]


class TestPointerParseResult:
    """try_from_json returns a result instead of raising."""

    def test_ok(self) -> None:
        result = PayloadPointer.try_from_json(PayloadPointer("b", "k").to_json())
        assert result.ok
        assert result.pointer == PayloadPointer("b", "k")
        assert result.error is None

    def test_failure(self) -> None:
        result = PayloadPointer.try_from_json("not-a-pointer")
        assert isinstance(result, PointerParseResult)
        assert not result.ok
        assert result.pointer is None
        assert isinstance(result.error, MalformedPointerError)

    def test_is_pointer(self) -> None:
        assert PayloadPointer.is_pointer(PayloadPointer("b", "k").to_json())
        assert not PayloadPointer.is_pointer("plain message body")


class TestPayloadPointerValueObject:
    """Construction validation and structural equality."""

    def test_empty_bucket_raises(self) -> None:
        with pytest.raises(ValueError, match="bucket name"):
            PayloadPointer("", "k")

    def test_empty_key_raises(self) -> None:
        with pytest.raises(ValueError, match="S3 key"):
            PayloadPointer("b", "")

    def test_equality_and_hash(self) -> None:
        assert PayloadPointer("b", "k") == PayloadPointer("b", "k")
        assert PayloadPointer("b", "k") != PayloadPointer("b", "k2")
        assert len({PayloadPointer("b", "k"), PayloadPointer("b", "k")}) == 1

    def test_immutable(self) -> None:
        p = PayloadPointer("b", "k")
        with pytest.raises(AttributeError):
            p.s3_key = "other"  # type: ignore[misc]
