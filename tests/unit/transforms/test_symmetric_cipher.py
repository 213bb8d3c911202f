"""Unit tests for the AES-CBC transform."""

from __future__ import annotations

import pytest
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from core.config import CipherSettings
from core.errors import BatchDecodeConfigError, TransformError
from transforms.symmetric_cipher import decrypt_cbc_pkcs7, encrypt_cbc_pkcs7


def test_decrypt_reproduces_plaintext() -> None:
    """Decrypting producer ciphertext should return the exact plaintext."""
    settings = CipherSettings()
    plaintext = b"\x1f\x8b batch report payload of odd length"

    ciphertext = encrypt_cbc_pkcs7(plaintext, settings)

    assert decrypt_cbc_pkcs7(ciphertext, settings) == plaintext


def test_decrypt_handles_block_aligned_plaintext() -> None:
    """A full padding block should be removed for aligned plaintext."""
    settings = CipherSettings()
    plaintext = b"0123456789abcdef" * 2

    ciphertext = encrypt_cbc_pkcs7(plaintext, settings)

    assert len(ciphertext) == 48
    assert decrypt_cbc_pkcs7(ciphertext, settings) == plaintext


def test_decrypt_raises_for_truncated_ciphertext() -> None:
    """Dropping one byte should be a transform failure, not a crash."""
    settings = CipherSettings()
    ciphertext = encrypt_cbc_pkcs7(b"payload", settings)

    with pytest.raises(TransformError):
        decrypt_cbc_pkcs7(ciphertext[:-1], settings)


def test_decrypt_raises_for_empty_input() -> None:
    """Empty ciphertext is not a positive multiple of the block size."""
    with pytest.raises(TransformError):
        decrypt_cbc_pkcs7(b"", CipherSettings())


def test_decrypt_raises_for_invalid_padding() -> None:
    """A final block ending in a zero byte has malformed padding."""
    settings = CipherSettings()
    encryptor = Cipher(algorithms.AES(settings.key), modes.CBC(settings.iv)).encryptor()
    ciphertext = encryptor.update(b"A" * 15 + b"\x00") + encryptor.finalize()

    with pytest.raises(TransformError):
        decrypt_cbc_pkcs7(ciphertext, settings)


def test_cipher_settings_reject_wrong_key_length() -> None:
    """Cipher settings should only accept 128-bit keys and IVs."""
    with pytest.raises(BatchDecodeConfigError):
        CipherSettings(key=b"short")

    with pytest.raises(BatchDecodeConfigError):
        CipherSettings(iv=b"x" * 32)
