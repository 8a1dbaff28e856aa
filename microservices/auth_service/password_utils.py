"""
Password Utilities for Authentication Service

Provides password hashing and credential verification using bcrypt.
"""

import hmac
import logging

import bcrypt

logger = logging.getLogger(__name__)

# Bcrypt work factor
BCRYPT_ROUNDS = 12


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password
        rounds: Bcrypt cost factor

    Returns:
        Bcrypt hash string
    """
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed.decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verify a password against its hash.

    Args:
        password: Plain text password to verify
        password_hash: Bcrypt hash to verify against

    Returns:
        True if password matches, False otherwise
    """
    try:
        return bcrypt.checkpw(
            password.encode('utf-8'),
            password_hash.encode('utf-8')
        )
    except ValueError as e:
        # bcrypt refuses passwords over 72 bytes and malformed hashes
        logger.warning(f"Password verification rejected input: {type(e).__name__}")
        return False


def authenticate(
    username: str,
    password: str,
    configured_username: str,
    configured_password_hash: str,
) -> bool:
    """
    Check a username/password pair against the configured credentials.

    The bcrypt check always runs, so a wrong username costs the same as a
    wrong password.
    """
    username_matches = hmac.compare_digest(
        username.encode('utf-8'), configured_username.encode('utf-8')
    )
    password_matches = verify_password(password, configured_password_hash)
    return username_matches and password_matches
