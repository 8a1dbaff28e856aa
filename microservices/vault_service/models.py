"""
Vault Service Models

Data models for encrypted secret storage.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

IV_SIZE = 16  # AES block size
BLOCK_SIZE = 16


# ============ Database Models ============

class SecretRecord(BaseModel):
    """Stored secret (encrypted value and its IV)"""
    secret_id: str = Field(..., description="Opaque unique identifier")
    name: str = Field(..., description="Display label, not unique")
    encrypted_value: bytes = Field(..., description="AES-256-CBC ciphertext")
    # Length is checked by decrypt, so a damaged row still loads and fails as DecryptionError
    initialization_vector: bytes = Field(..., description="IV used for this ciphertext")
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")

    model_config = ConfigDict(frozen=True, from_attributes=True)

    def __repr__(self) -> str:
        return f"SecretRecord(secret_id={self.secret_id!r}, name={self.name!r})"


# ============ Request Models ============

class CreateSecretRequest(BaseModel):
    """Create secret request"""
    name: str = Field(..., description="Display label")
    value: str = Field(..., description="Plaintext value, encrypted before storage")


# ============ Response Models ============

class CreateSecretResponse(BaseModel):
    """Create secret response"""
    message: str
    id: str


class SecretResponse(BaseModel):
    """Decrypted secret"""
    id: str
    name: str
    decrypted_value: str = Field(..., alias="decryptedValue")
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    service: str
    version: str
    store: Optional[str] = None
    store_healthy: Optional[bool] = None
