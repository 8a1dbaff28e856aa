"""
Vault Service Fixtures

Factories for vault service test data.
"""
from datetime import datetime
from typing import Any, Dict, Optional

from core.config import VaultConfig
from microservices.vault_service.encryption import encrypt
from microservices.vault_service.models import SecretRecord

from .auth_fixtures import (
    DEMO_USERNAME,
    TEST_AUDIENCE,
    TEST_ISSUER,
    TEST_SIGNING_KEY,
    make_password_hash,
)
from .common import make_secret_id, make_secret_name, make_secret_value, make_timestamp

TEST_ENCRYPTION_KEY = "0123456789abcdef0123456789abcdef"
OTHER_ENCRYPTION_KEY = "fedcba9876543210fedcba9876543210"


def make_vault_config(**overrides: Any) -> VaultConfig:
    """Create a valid VaultConfig (in-memory store unless database_url is given)"""
    values: Dict[str, Any] = {
        "demo_username": DEMO_USERNAME,
        "demo_password_hash": make_password_hash(),
        "jwt_secret": TEST_SIGNING_KEY,
        "jwt_issuer": TEST_ISSUER,
        "jwt_audience": TEST_AUDIENCE,
        "encryption_key": TEST_ENCRYPTION_KEY,
    }
    values.update(overrides)
    return VaultConfig(**values)


def make_secret_record(
    plaintext: Optional[str] = None,
    key: str = TEST_ENCRYPTION_KEY,
    secret_id: Optional[str] = None,
    name: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> SecretRecord:
    """Create a SecretRecord encrypted under key"""
    ciphertext, iv = encrypt(plaintext if plaintext is not None else make_secret_value(), key.encode("utf-8"))
    return SecretRecord(
        secret_id=secret_id or make_secret_id(),
        name=name or make_secret_name(),
        encrypted_value=ciphertext,
        initialization_vector=iv,
        created_at=created_at or make_timestamp(),
    )


def make_create_secret_request(
    name: Optional[str] = None,
    value: Optional[str] = None,
) -> Dict[str, Any]:
    """Create a create-secret request body"""
    return {
        "name": name or make_secret_name(),
        "value": value if value is not None else make_secret_value(),
    }
