"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - component/  : Component tests (in-memory store, mocked collaborators, TestClient)
    - unit/       : Unit tests (pure functions, no I/O)
"""
import os
import sys

import pytest

# Set testing environment BEFORE any project imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from core.config import VaultConfig
from core.jwt_manager import JWTManager
from microservices.vault_service.encryption import AesCbcEncryption

# Import shared fixtures from tests/fixtures
from tests.fixtures import (
    TEST_AUDIENCE,
    TEST_ENCRYPTION_KEY,
    TEST_ISSUER,
    TEST_SIGNING_KEY,
    make_vault_config,
)


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def vault_config() -> VaultConfig:
    """Valid vault configuration with test keys and demo credentials"""
    return make_vault_config()


@pytest.fixture
def encryption_key() -> bytes:
    """32-byte AES key"""
    return TEST_ENCRYPTION_KEY.encode("utf-8")


@pytest.fixture
def encryption(encryption_key) -> AesCbcEncryption:
    """Encryption engine bound to the test key"""
    return AesCbcEncryption(encryption_key)


@pytest.fixture
def jwt_manager() -> JWTManager:
    """Token manager bound to the test signing key, issuer and audience"""
    return JWTManager(
        secret_key=TEST_SIGNING_KEY.encode("utf-8"),
        issuer=TEST_ISSUER,
        audience=TEST_AUDIENCE,
    )
