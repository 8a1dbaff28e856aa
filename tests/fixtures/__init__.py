"""
Shared Test Fixtures

Centralized factories and constants used across all test layers.

Structure:
    - common.py: Base ID generators, timestamps
    - auth_fixtures.py: Credentials, signing keys, login bodies
    - vault_fixtures.py: Config, encryption keys, secret records
"""

# Common utilities
from .common import (
    make_secret_id,
    make_secret_name,
    make_secret_value,
    make_timestamp,
)

# Auth service fixtures
from .auth_fixtures import (
    DEMO_PASSWORD,
    DEMO_USERNAME,
    OTHER_SIGNING_KEY,
    TEST_AUDIENCE,
    TEST_ISSUER,
    TEST_SIGNING_KEY,
    bearer_headers,
    make_login_request,
    make_password_hash,
)

# Vault service fixtures
from .vault_fixtures import (
    OTHER_ENCRYPTION_KEY,
    TEST_ENCRYPTION_KEY,
    make_create_secret_request,
    make_secret_record,
    make_vault_config,
)

__all__ = [
    # Common
    "make_secret_id",
    "make_secret_name",
    "make_secret_value",
    "make_timestamp",
    # Auth
    "DEMO_PASSWORD",
    "DEMO_USERNAME",
    "OTHER_SIGNING_KEY",
    "TEST_AUDIENCE",
    "TEST_ISSUER",
    "TEST_SIGNING_KEY",
    "bearer_headers",
    "make_login_request",
    "make_password_hash",
    # Vault
    "OTHER_ENCRYPTION_KEY",
    "TEST_ENCRYPTION_KEY",
    "make_create_secret_request",
    "make_secret_record",
    "make_vault_config",
]
