#!/usr/bin/env python3
"""
Vault administration script
Generates configuration values and prepares the secrets table
"""

import argparse
import asyncio
import getpass
import os
import secrets
import string
import sys
from pathlib import Path

# Add project root to the Python path
sys.path.append(str(Path(__file__).parent.parent))

from microservices.auth_service.password_utils import hash_password
from microservices.vault_service.vault_repository import VaultRepository

KEY_ALPHABET = string.ascii_letters + string.digits


def generate_key(length: int) -> str:
    """Random ASCII key, so its UTF-8 encoding is exactly `length` bytes"""
    return "".join(secrets.choice(KEY_ALPHABET) for _ in range(length))


def cmd_hash_password(args) -> int:
    password = args.password
    if password is None:
        password = getpass.getpass("Password: ")
        if password != getpass.getpass("Confirm password: "):
            print("Passwords do not match", file=sys.stderr)
            return 1
    if len(password.encode("utf-8")) > 72:
        print("bcrypt passwords are limited to 72 bytes", file=sys.stderr)
        return 1
    print(hash_password(password))
    return 0


def cmd_generate_key(args) -> int:
    print(generate_key(64 if args.signing else 32))
    return 0


async def init_db(dsn: str) -> None:
    repository = VaultRepository(dsn=dsn)
    try:
        await repository.initialize()
    finally:
        await repository.close()


def cmd_init_db(args) -> int:
    dsn = args.dsn or os.getenv("DATABASE_URL")
    if not dsn:
        print("DATABASE_URL is not set and --dsn was not given", file=sys.stderr)
        return 1
    asyncio.run(init_db(dsn))
    print("Vault schema ready")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="SecureVault administration")
    subparsers = parser.add_subparsers(dest="command", required=True)

    hash_parser = subparsers.add_parser("hash-password", help="Print a bcrypt hash for AUTH_DEMO_PASSWORD_HASH")
    hash_parser.add_argument("--password", help="Password to hash (prompted if omitted)")
    hash_parser.set_defaults(func=cmd_hash_password)

    key_parser = subparsers.add_parser("generate-key", help="Print a random key for ENCRYPTION_KEY")
    key_parser.add_argument("--signing", action="store_true", help="Generate a 64-character JWT_SECRET instead")
    key_parser.set_defaults(func=cmd_generate_key)

    db_parser = subparsers.add_parser("init-db", help="Create the vault schema and secrets table")
    db_parser.add_argument("--dsn", help="PostgreSQL DSN (defaults to DATABASE_URL)")
    db_parser.set_defaults(func=cmd_init_db)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
