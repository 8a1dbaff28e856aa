"""
Vault Repository

Data access layer for encrypted secret records.
"""

import logging
from typing import Dict, Optional

import asyncpg

from .models import SecretRecord
from .protocols import VaultServiceError

logger = logging.getLogger(__name__)


class VaultRepository:
    """Repository for secret records using an asyncpg connection pool"""

    def __init__(self, dsn: str, min_size: int = 1, max_size: int = 10):
        self._dsn = dsn
        self._min_size = min_size
        self._max_size = max_size
        self._pool: Optional[asyncpg.Pool] = None
        self.schema = "vault"
        self.secrets_table = "secrets"

    @property
    def table(self) -> str:
        return f"{self.schema}.{self.secrets_table}"

    async def initialize(self) -> None:
        """Open the pool and create the schema/table if they do not exist"""
        if self._pool is None:
            self._pool = await asyncpg.create_pool(
                dsn=self._dsn,
                min_size=self._min_size,
                max_size=self._max_size,
            )
            logger.info("PostgreSQL pool opened for vault repository")

        async with self._pool.acquire() as conn:
            await conn.execute(f"CREATE SCHEMA IF NOT EXISTS {self.schema}")
            await conn.execute(f'''
                CREATE TABLE IF NOT EXISTS {self.table} (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    encrypted_value BYTEA NOT NULL,
                    initialization_vector BYTEA NOT NULL,
                    created_at TIMESTAMPTZ NOT NULL
                )
            ''')

    async def close(self) -> None:
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            logger.info("PostgreSQL pool closed for vault repository")

    def _require_pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise VaultServiceError("Vault repository is not initialized")
        return self._pool

    @staticmethod
    def _parse_secret(row: asyncpg.Record) -> SecretRecord:
        return SecretRecord(
            secret_id=row["id"],
            name=row["name"],
            encrypted_value=bytes(row["encrypted_value"]),
            initialization_vector=bytes(row["initialization_vector"]),
            created_at=row["created_at"],
        )

    # ============ Secret Operations ============

    async def create_secret(self, record: SecretRecord) -> None:
        """Insert a new secret record"""
        pool = self._require_pool()
        query = f'''
            INSERT INTO {self.table} (
                id, name, encrypted_value, initialization_vector, created_at
            ) VALUES ($1, $2, $3, $4, $5)
        '''
        try:
            async with pool.acquire() as conn:
                await conn.execute(
                    query,
                    record.secret_id,
                    record.name,
                    record.encrypted_value,
                    record.initialization_vector,
                    record.created_at,
                )
        except asyncpg.PostgresError as e:
            logger.error(f"Error creating secret {record.secret_id}: {type(e).__name__}")
            raise VaultServiceError("Failed to store secret") from e

    async def get_secret(self, secret_id: str) -> Optional[SecretRecord]:
        """Get secret record by ID"""
        pool = self._require_pool()
        query = f'''
            SELECT id, name, encrypted_value, initialization_vector, created_at
            FROM {self.table} WHERE id = $1
        '''
        try:
            async with pool.acquire() as conn:
                row = await conn.fetchrow(query, secret_id)
        except asyncpg.PostgresError as e:
            logger.error(f"Error getting secret {secret_id}: {type(e).__name__}")
            raise VaultServiceError("Failed to load secret") from e

        if row is None:
            return None
        return self._parse_secret(row)

    async def health_check(self) -> bool:
        try:
            async with self._require_pool().acquire() as conn:
                await conn.fetchval("SELECT 1")
            return True
        except (VaultServiceError, asyncpg.PostgresError, OSError):
            return False


class InMemoryVaultRepository:
    """
    Process-local secret store

    Each create/get is a single dict operation, so records are written and
    read atomically. Contents are lost on restart.
    """

    def __init__(self):
        self._records: Dict[str, SecretRecord] = {}

    async def initialize(self) -> None:
        pass

    async def close(self) -> None:
        pass

    async def create_secret(self, record: SecretRecord) -> None:
        self._records[record.secret_id] = record

    async def get_secret(self, secret_id: str) -> Optional[SecretRecord]:
        return self._records.get(secret_id)

    async def health_check(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._records)
