"""Decode strategy descriptors.

Each historical producer maps to one strategy. Order is priority:
the chain stops at the first strategy whose output parses.
"""

from __future__ import annotations

from functools import partial

from core.config import CipherSettings
from core.constants import STRATEGY_AES_GZIP, STRATEGY_DIRECT, STRATEGY_GZIP
from core.types import DecodeStrategy, TransformStep
from transforms.gzip_stream import gunzip_bytes
from transforms.symmetric_cipher import decrypt_cbc_pkcs7

GUNZIP_STEP = TransformStep(name="gunzip", apply=gunzip_bytes)


def build_default_strategies(cipher: CipherSettings) -> tuple[DecodeStrategy, ...]:
    """Build the fixed, ordered strategy set.

    Args:
        cipher: Process-wide cipher parameters for the encrypted producer.

    Returns:
        Strategies in priority order.
    """
    decrypt_step = TransformStep(
        name="aes_128_cbc_decrypt",
        apply=partial(decrypt_cbc_pkcs7, settings=cipher),
    )
    return (
        DecodeStrategy(name=STRATEGY_GZIP, steps=(GUNZIP_STEP,)),
        DecodeStrategy(name=STRATEGY_AES_GZIP, steps=(decrypt_step, GUNZIP_STEP)),
        DecodeStrategy(name=STRATEGY_DIRECT, steps=()),
    )
