"""AES-128-CBC transform for the legacy encrypted envelope.

This module reverses the encrypt step of the encrypted-then-compressed
producer. Misaligned input or malformed padding surfaces as a
``TransformError`` and never escapes as a library exception.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from core.config import CipherSettings
from core.constants import CIPHER_BLOCK_SIZE_BYTES
from core.errors import TransformError

_PADDING_BITS = CIPHER_BLOCK_SIZE_BYTES * 8


def decrypt_cbc_pkcs7(ciphertext: bytes, settings: CipherSettings) -> bytes:
    """Decrypt ciphertext and strip PKCS7 padding.

    Args:
        ciphertext: Encrypted bytes; must be a positive multiple of the block size.
        settings: Fixed key and IV.

    Returns:
        Plaintext bytes without padding.

    Raises:
        TransformError: If the input is misaligned or the padding is invalid.
    """
    if not ciphertext or len(ciphertext) % CIPHER_BLOCK_SIZE_BYTES:
        raise TransformError(
            f"AES decrypt failed: ciphertext length {len(ciphertext)} is not a "
            f"positive multiple of {CIPHER_BLOCK_SIZE_BYTES}."
        )
    decryptor = _build_cipher(settings).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()
    unpadder = padding.PKCS7(_PADDING_BITS).unpadder()
    try:
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as error:
        raise TransformError(f"AES decrypt failed: {error}") from error


def encrypt_cbc_pkcs7(plaintext: bytes, settings: CipherSettings) -> bytes:
    """Pad and encrypt plaintext the way the legacy producer does.

    Args:
        plaintext: Bytes to encrypt.
        settings: Fixed key and IV.

    Returns:
        Ciphertext bytes.
    """
    padder = padding.PKCS7(_PADDING_BITS).padder()
    padded = padder.update(plaintext) + padder.finalize()
    encryptor = _build_cipher(settings).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def _build_cipher(settings: CipherSettings) -> Cipher:
    return Cipher(algorithms.AES(settings.key), modes.CBC(settings.iv))
