"""
Vault Service

Business logic for storing and retrieving encrypted secrets.
"""

import logging
import uuid
from datetime import datetime, timezone

from .models import SecretRecord, SecretResponse
from .protocols import (
    EncryptionProtocol,
    SecretRepositoryProtocol,
    VaultNotFoundError,
)

logger = logging.getLogger(__name__)


class VaultService:
    """Vault service: encrypt-then-store on create, load-then-decrypt on read"""

    def __init__(
        self,
        repository: SecretRepositoryProtocol,
        encryption: EncryptionProtocol,
    ):
        self.repository = repository
        self.encryption = encryption

    # ============ Core Vault Operations ============

    async def create_secret(self, name: str, plaintext: str) -> str:
        """Encrypt and store a secret, returning its new id"""
        encrypted_value, iv = self.encryption.encrypt(plaintext)

        record = SecretRecord(
            secret_id=str(uuid.uuid4()),
            name=name,
            encrypted_value=encrypted_value,
            initialization_vector=iv,
            created_at=datetime.now(timezone.utc),
        )
        await self.repository.create_secret(record)

        logger.info(f"Secret {record.secret_id} created")
        return record.secret_id

    async def get_secret(self, secret_id: str) -> SecretResponse:
        """
        Load and decrypt a secret

        Raises:
            VaultNotFoundError: If no record exists for secret_id
            DecryptionError: If the stored record cannot be decrypted
        """
        record = await self.repository.get_secret(secret_id)
        if record is None:
            raise VaultNotFoundError(f"Secret {secret_id} not found")

        decrypted_value = self.encryption.decrypt(
            record.encrypted_value, record.initialization_vector
        )

        logger.info(f"Secret {secret_id} read")
        return SecretResponse(
            id=record.secret_id,
            name=record.name,
            decrypted_value=decrypted_value,
            created_at=record.created_at,
        )
