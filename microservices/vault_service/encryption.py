"""
Encryption Utilities for Vault Service

AES-256-CBC with PKCS7 padding and a fresh random IV per call.

Security Note:
    Never log keys, plaintext or ciphertext. A (ciphertext, iv) pair is
    useless without the key that produced it; the key is never stored with it.
"""

import os
import logging
from typing import Tuple

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from core.config.vault_config import validate_encryption_key

from .models import BLOCK_SIZE, IV_SIZE
from .protocols import DecryptionError, DecryptionFailure

logger = logging.getLogger(__name__)


def encrypt(plaintext: str, key: bytes) -> Tuple[bytes, bytes]:
    """Encrypt plaintext with AES-256-CBC.

    Returns:
        Tuple of (ciphertext, iv).
    """
    validate_encryption_key(key)
    iv = os.urandom(IV_SIZE)
    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    padded = padder.update(plaintext.encode("utf-8")) + padder.finalize()

    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()
    return ciphertext, iv


def decrypt(ciphertext: bytes, iv: bytes, key: bytes) -> str:
    """Decrypt AES-256-CBC ciphertext.

    Raises:
        DecryptionError: If the IV or ciphertext length is wrong, the padding
            is invalid (tampering or wrong key), or the result is not UTF-8.
    """
    validate_encryption_key(key)
    if len(iv) != IV_SIZE:
        raise DecryptionError(DecryptionFailure.INVALID_IV)
    if not ciphertext or len(ciphertext) % BLOCK_SIZE != 0:
        raise DecryptionError(DecryptionFailure.INVALID_LENGTH)

    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()

    unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
    try:
        data = unpadder.update(padded) + unpadder.finalize()
    except ValueError:
        raise DecryptionError(DecryptionFailure.INVALID_PADDING)

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        raise DecryptionError(DecryptionFailure.INVALID_ENCODING)


class AesCbcEncryption:
    """
    Encryption engine bound to one 256-bit key

    The key is validated here, at startup, so a bad key is a configuration
    error rather than a per-request failure.
    """

    def __init__(self, key: bytes):
        self._key = validate_encryption_key(key)

    def __repr__(self) -> str:
        return "AesCbcEncryption(key=<redacted>)"

    def encrypt(self, plaintext: str) -> Tuple[bytes, bytes]:
        """Encrypt plaintext, returning (ciphertext, iv)"""
        return encrypt(plaintext, self._key)

    def decrypt(self, ciphertext: bytes, iv: bytes) -> str:
        """Decrypt a (ciphertext, iv) pair produced under this engine's key"""
        try:
            return decrypt(ciphertext, iv, self._key)
        except DecryptionError as e:
            logger.warning(f"Decryption failed: {e.reason.value}")
            raise
