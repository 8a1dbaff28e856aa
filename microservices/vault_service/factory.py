"""
Vault Service Factory

Factory functions for creating service instances with real dependencies.
This is the ONLY place that chooses concrete implementations.

Usage:
    from .factory import create_vault_service
    service = create_vault_service(config)
"""
import logging
from typing import Optional

from core.config import VaultConfig
from core.jwt_manager import JWTManager
from microservices.auth_service.auth_service import AuthenticationService

from .encryption import AesCbcEncryption
from .protocols import ManagedRepositoryProtocol
from .vault_repository import InMemoryVaultRepository, VaultRepository
from .vault_service import VaultService

logger = logging.getLogger(__name__)


def create_vault_repository(config: VaultConfig) -> ManagedRepositoryProtocol:
    """
    Create the secret repository.

    Uses PostgreSQL when DATABASE_URL is configured, otherwise a
    process-local store.
    """
    if config.uses_persistent_store:
        return VaultRepository(dsn=config.database_url)

    logger.warning(
        "No DATABASE_URL configured, using in-memory secret store (NOT for production!)"
    )
    return InMemoryVaultRepository()


def create_vault_encryption(config: VaultConfig) -> AesCbcEncryption:
    """
    Create the encryption engine bound to the configured key.

    Raises:
        ConfigurationError: If the key is not exactly 32 bytes
    """
    logger.warning(
        "ENCRYPTION_KEY is used as raw UTF-8 key bytes without a key-derivation function"
    )
    return AesCbcEncryption(config.encryption_key_bytes)


def create_vault_service(
    config: VaultConfig,
    repository: Optional[ManagedRepositoryProtocol] = None,
) -> VaultService:
    """
    Create VaultService with real dependencies.

    Args:
        config: Vault configuration
        repository: Repository override (built from config if not provided)

    Returns:
        Configured VaultService instance
    """
    if repository is None:
        repository = create_vault_repository(config)
    return VaultService(
        repository=repository,
        encryption=create_vault_encryption(config),
    )


def create_jwt_manager(config: VaultConfig) -> JWTManager:
    return JWTManager(
        secret_key=config.signing_key,
        issuer=config.jwt_issuer,
        audience=config.jwt_audience,
    )


def create_auth_service(config: VaultConfig) -> AuthenticationService:
    """Create AuthenticationService bound to the configured credentials and signing key"""
    return AuthenticationService(
        token_manager=create_jwt_manager(config),
        username=config.demo_username,
        password_hash=config.demo_password_hash,
    )


__all__ = [
    "create_vault_service",
    "create_vault_repository",
    "create_vault_encryption",
    "create_jwt_manager",
    "create_auth_service",
]
