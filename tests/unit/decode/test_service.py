"""Unit tests for the decode request runner."""

from __future__ import annotations

from typing import Any

import pytest

from core.config import DecodeConfig
from core.constants import STRATEGY_AES_GZIP, STRATEGY_DIRECT, STRATEGY_GZIP
from core.errors import ResponseSerializationError
from core.types import RawInput
from decode.integrity import content_digest
from decode.result_reporter import call_result_to_payload
from decode.service import BatchDecoder
from schema.batch_report import batch_report_schema
from transforms.gzip_stream import gzip_bytes
from transforms.symmetric_cipher import encrypt_cbc_pkcs7


class _UnrenderableSchema:
    """Schema whose records decode but cannot be rendered."""

    name = "unrenderable"

    def decode(self, data: bytes) -> bytes:
        return data

    def encode(self, record: bytes) -> bytes:
        return record

    def to_value(self, record: Any) -> dict[str, Any]:
        raise ResponseSerializationError("cannot render")


def test_decode_compressed_payload(sample_record_bytes: bytes) -> None:
    """Compressed input should decode with payload and hex of decoded bytes."""
    decoder = BatchDecoder(DecodeConfig())
    raw_input = RawInput(data=gzip_bytes(sample_record_bytes), origin="test")

    result = decoder.decode(raw_input)

    assert result.success is True
    assert result.message == f"Decode succeeded, attempted strategies: succeeded: {STRATEGY_GZIP}"
    assert result.data is not None
    assert result.data.decompressed_hex == sample_record_bytes.hex()
    assert result.data.verdict.input_md5 == content_digest(raw_input.data)
    assert result.data.verdict.is_match is False
    assert result.data.data["event"][0]["session_id"] == "sess-01"


def test_decode_encrypted_payload(sample_record_bytes: bytes) -> None:
    """Encrypted compressed input should report both attempts in the message."""
    decoder = BatchDecoder(DecodeConfig())
    ciphertext = encrypt_cbc_pkcs7(gzip_bytes(sample_record_bytes), decoder.config.cipher)

    result = decoder.decode(RawInput(data=ciphertext, origin="test"))

    assert result.success is True
    assert f"failed: {STRATEGY_GZIP} (transform error" in result.message
    assert result.message.endswith(f" -> succeeded: {STRATEGY_AES_GZIP}")


def test_decode_plain_payload_matches(sample_record_bytes: bytes) -> None:
    """Plain canonical input should yield a matching integrity verdict."""
    result = BatchDecoder(DecodeConfig()).decode(
        RawInput(data=sample_record_bytes, origin="test")
    )

    assert result.success is True and result.data is not None
    assert result.message.endswith(f"succeeded: {STRATEGY_DIRECT}")
    assert result.data.verdict.is_match is True


def test_decode_reports_exhaustion() -> None:
    """Input matching no strategy should return a failure without payload."""
    result = BatchDecoder(DecodeConfig()).decode(RawInput(data=b"\xff\xff", origin="test"))

    assert result.success is False and result.data is None
    assert result.message.startswith("Decode failed, attempted strategies: ")
    assert result.message.count(" -> ") == 2


def test_decode_is_idempotent(sample_record_bytes: bytes) -> None:
    """Repeated decoding of the same bytes should give identical responses."""
    decoder = BatchDecoder(DecodeConfig())
    raw_input = RawInput(data=gzip_bytes(sample_record_bytes), origin="test")

    first = call_result_to_payload(decoder.decode(raw_input))
    second = call_result_to_payload(decoder.decode(raw_input))

    assert first == second


def test_decode_propagates_serialization_errors() -> None:
    """Records that cannot be rendered should fail the request loudly."""
    decoder = BatchDecoder(DecodeConfig(), schema=_UnrenderableSchema())

    with pytest.raises(ResponseSerializationError):
        decoder.decode(RawInput(data=b"anything", origin="test"))


def test_decoder_defaults_to_batch_report_schema(sample_record_bytes: bytes) -> None:
    """Decoder without explicit schema should use the batch report schema."""
    decoder = BatchDecoder(DecodeConfig())
    expected = batch_report_schema().to_value(batch_report_schema().decode(sample_record_bytes))

    result = decoder.decode(RawInput(data=sample_record_bytes, origin="test"))

    assert result.data is not None and dict(result.data.data) == expected
    assert [strategy.name for strategy in decoder.strategies][0] == STRATEGY_GZIP
