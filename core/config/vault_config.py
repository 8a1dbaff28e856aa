#!/usr/bin/env python3
"""Vault configuration

Secrets-of-secrets for the vault: demo credentials, token signing settings and
the data encryption key. Loaded once at startup; any missing or malformed
required value is fatal.

Security Note:
    Never log key material or the password hash. Only option names are
    included in error messages.
"""
import os
import re
from dataclasses import dataclass, field
from typing import Optional

from .logging_config import LoggingConfig

ENCRYPTION_KEY_LENGTH = 32  # AES-256
MIN_SIGNING_KEY_LENGTH = 32  # HS256 needs at least 256 bits of key

_BCRYPT_HASH_PATTERN = re.compile(r"^\$2[abxy]?\$\d{2}\$[./A-Za-z0-9]{53}$")

REQUIRED_OPTIONS = {
    "demo_username": "AUTH_DEMO_USERNAME",
    "demo_password_hash": "AUTH_DEMO_PASSWORD_HASH",
    "jwt_secret": "JWT_SECRET",
    "jwt_issuer": "JWT_ISSUER",
    "jwt_audience": "JWT_AUDIENCE",
    "encryption_key": "ENCRYPTION_KEY",
}


class ConfigurationError(Exception):
    """Raised when the vault cannot start because of missing or invalid settings"""
    pass


def _bool(val: str) -> bool:
    return val.lower() == "true"


def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


def _require(name: str) -> str:
    value = os.getenv(name)
    if value is None or value == "":
        raise ConfigurationError(
            f"Required configuration option '{name}' is not set"
        )
    return value


def validate_encryption_key(key: bytes) -> bytes:
    """Ensure an encryption key is exactly 32 bytes."""
    if len(key) != ENCRYPTION_KEY_LENGTH:
        raise ConfigurationError(
            f"Encryption key must be exactly {ENCRYPTION_KEY_LENGTH} bytes, "
            f"got {len(key)}"
        )
    return key


@dataclass(frozen=True)
class VaultConfig:
    """Validated vault configuration"""

    demo_username: str
    demo_password_hash: str = field(repr=False)
    jwt_secret: str = field(repr=False)
    jwt_issuer: str
    jwt_audience: str
    encryption_key: str = field(repr=False)

    database_url: Optional[str] = field(default=None, repr=False)
    service_name: str = "vault_service"
    service_host: str = "0.0.0.0"
    service_port: int = 8214
    debug: bool = False
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        for attr, env_name in REQUIRED_OPTIONS.items():
            if not getattr(self, attr):
                raise ConfigurationError(
                    f"Required configuration option '{env_name}' is not set"
                )
        validate_encryption_key(self.encryption_key_bytes)
        if len(self.signing_key) < MIN_SIGNING_KEY_LENGTH:
            raise ConfigurationError(
                f"JWT_SECRET must be at least {MIN_SIGNING_KEY_LENGTH} bytes, "
                f"got {len(self.signing_key)}"
            )
        if not _BCRYPT_HASH_PATTERN.match(self.demo_password_hash):
            raise ConfigurationError(
                "AUTH_DEMO_PASSWORD_HASH is not a valid bcrypt hash"
            )

    @property
    def encryption_key_bytes(self) -> bytes:
        """UTF-8 bytes of the configured encryption key (no KDF applied)"""
        return self.encryption_key.encode("utf-8")

    @property
    def signing_key(self) -> bytes:
        return self.jwt_secret.encode("utf-8")

    @property
    def uses_persistent_store(self) -> bool:
        return bool(self.database_url)

    @classmethod
    def from_env(cls) -> 'VaultConfig':
        """Load vault configuration from environment variables

        Raises:
            ConfigurationError: If a required option is missing or invalid.
        """
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        values = {attr: _require(env_name) for attr, env_name in REQUIRED_OPTIONS.items()}
        return cls(
            **values,
            database_url=os.getenv("DATABASE_URL") or None,
            service_name=os.getenv("SERVICE_NAME", "vault_service"),
            service_host=os.getenv("HOST", "0.0.0.0"),
            service_port=_int(os.getenv("PORT", "8214"), 8214),
            debug=_bool(os.getenv("DEBUG", "true" if env == "development" else "false")),
            logging=LoggingConfig.from_env(),
        )
