"""Round-trip integrity check.

This module compares the digest of the original raw input with the
digest of the re-serialized record. A mismatch is informational: inputs
that arrived compressed or encrypted never match their plain re-encoding.
"""

from __future__ import annotations

import hashlib
from typing import Any

from core.constants import DIGEST_ALGORITHM
from core.logging_config import get_logger
from core.types import IntegrityVerdict, RawInput
from schema.record_schema import RecordSchema

_LOGGER = get_logger(__name__)


def check_integrity(
    record: Any,
    raw_input: RawInput,
    schema: RecordSchema,
) -> IntegrityVerdict:
    """Build the integrity verdict for a decoded record.

    Args:
        record: Record produced by the winning strategy.
        raw_input: Original untransformed input.
        schema: Schema used to re-serialize the record.

    Returns:
        Digest pair and match flag.
    """
    input_md5 = content_digest(raw_input.data)
    result_md5 = content_digest(schema.encode(record))
    verdict = IntegrityVerdict(
        input_md5=input_md5,
        result_md5=result_md5,
        is_match=digests_match(input_md5, result_md5),
    )
    _LOGGER.info(
        "integrity_checked",
        origin=raw_input.origin,
        input_md5=verdict.input_md5,
        result_md5=verdict.result_md5,
        is_match=verdict.is_match,
    )
    return verdict


def content_digest(data: bytes) -> str:
    """Return the uppercase hex digest of a byte sequence."""
    hasher = hashlib.new(DIGEST_ALGORITHM)
    hasher.update(data)
    return hasher.hexdigest().upper()


def digests_match(left: str, right: str) -> bool:
    """Compare two hex digests ignoring letter case."""
    return left.casefold() == right.casefold()
