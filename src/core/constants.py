"""Core constants used across the decode toolkit.

This module centralizes fixed values shared by transforms and reporting.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

TOOLKIT_NAME = "batch_decode_toolkit"
TOOLKIT_VERSION = "0.1.0"
TOOLKIT_TITLE = "Batch report event decode toolkit"

# Legacy producer cipher parameters (AES-128-CBC, PKCS7 padding).
CIPHER_KEY = b"46a8qpMw6643TDiV"
CIPHER_IV = b"W3HaJGyGrfOVRb42"
CIPHER_BLOCK_SIZE_BYTES = 16

STRATEGY_GZIP = "gzip_decompress"
STRATEGY_AES_GZIP = "aes_gzip_decompress"
STRATEGY_DIRECT = "direct_parse"

TRACE_SEPARATOR = " -> "
DIGEST_ALGORITHM = "md5"
DEFAULT_LOG_LEVEL = "INFO"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
