"""
Vault Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from enum import Enum
from typing import Optional, Protocol, Tuple, runtime_checkable

# Import only models (no I/O dependencies)
from .models import SecretRecord


class VaultServiceError(Exception):
    """Base exception for vault service"""
    pass


class VaultNotFoundError(VaultServiceError):
    """Raised when vault item not found"""
    pass


class EncryptionError(Exception):
    """Base exception for encryption errors"""
    pass


class DecryptionFailure(str, Enum):
    """Why a decryption attempt was rejected (internal only)"""
    INVALID_IV = "invalid_iv"
    INVALID_LENGTH = "invalid_length"
    INVALID_PADDING = "invalid_padding"
    INVALID_ENCODING = "invalid_encoding"


class DecryptionError(EncryptionError):
    """
    Raised when a (ciphertext, iv) pair cannot be turned back into text.

    The message is the same for every cause; ``reason`` carries the cause
    for logging and tests.
    """

    def __init__(self, reason: DecryptionFailure):
        super().__init__("Failed to decrypt secret")
        self.reason = reason


@runtime_checkable
class EncryptionProtocol(Protocol):
    """
    Interface for the encryption engine.

    Implementations are bound to one key at construction.
    """

    def encrypt(self, plaintext: str) -> Tuple[bytes, bytes]:
        """Encrypt plaintext, returning (ciphertext, iv)"""
        ...

    def decrypt(self, ciphertext: bytes, iv: bytes) -> str:
        """Decrypt a (ciphertext, iv) pair (raises DecryptionError)"""
        ...


@runtime_checkable
class SecretRepositoryProtocol(Protocol):
    """
    Interface for Vault Repository.

    Implementations must provide these methods.
    Used for dependency injection to enable testing.
    """

    async def create_secret(self, record: SecretRecord) -> None:
        """Persist a new secret record"""
        ...

    async def get_secret(self, secret_id: str) -> Optional[SecretRecord]:
        """Get secret record by ID (None if absent)"""
        ...


@runtime_checkable
class ManagedRepositoryProtocol(SecretRepositoryProtocol, Protocol):
    """Repository with a lifecycle, as opened and closed by the application"""

    async def initialize(self) -> None:
        ...

    async def close(self) -> None:
        ...

    async def health_check(self) -> bool:
        ...
