"""
Idempotent schema repair.

Adds columns that older databases are missing. Every fix checks the catalog
first, so running the repair any number of times converges on the same
schema and a second run adds nothing.

Two backends:
- Postgres through asyncpg, checked against ``information_schema.columns``
- SQLite through aiosqlite, checked against ``pragma_table_info``
"""

import asyncio
import sys
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import aiosqlite
import asyncpg

from src.config import configure_logging, get_logger, get_settings
from src.core.exceptions import ConfigurationError, SchemaRepairError

logger = get_logger(__name__)


@dataclass(frozen=True)
class ColumnFix:
    """A column that must exist, with its type on each backend."""

    table: str
    column: str
    pg_type: str
    sqlite_type: str

    @property
    def qualified_name(self) -> str:
        return f"{self.table}.{self.column}"


COLUMN_FIXES: list[ColumnFix] = [
    ColumnFix("products", "barcode", "text", "TEXT"),
    ColumnFix("audit_logs", "previous_snapshot", "jsonb", "TEXT"),
    ColumnFix("audit_logs", "ip_address", "text", "TEXT"),
    ColumnFix("audit_logs", "user_agent", "text", "TEXT"),
    ColumnFix("audit_logs", "risk_flags", "text[]", "TEXT"),
]


class SchemaRepairer(ABC):
    """Applies ``COLUMN_FIXES`` over a single connection."""

    @abstractmethod
    def connect(self) -> Any:
        """Async context manager yielding a backend connection."""
        pass

    @abstractmethod
    async def column_exists(self, conn: Any, table: str, column: str) -> bool:
        pass

    @abstractmethod
    async def add_column(self, conn: Any, fix: ColumnFix) -> None:
        pass

    async def repair(self, fixes: list[ColumnFix] | None = None) -> list[str]:
        """
        Add every missing column.

        Returns:
            Qualified names of the columns that were added

        Raises:
            SchemaRepairError: On the first unexpected database error
        """
        fixes = COLUMN_FIXES if fixes is None else fixes
        added: list[str] = []

        async with self.connect() as conn:
            for fix in fixes:
                try:
                    if await self.column_exists(conn, fix.table, fix.column):
                        logger.info("schema_column_present", column=fix.qualified_name)
                        continue
                    await self.add_column(conn, fix)
                except Exception as e:
                    logger.error(
                        "schema_repair_failed",
                        column=fix.qualified_name,
                        error=str(e),
                    )
                    raise SchemaRepairError(fix.table, fix.column, str(e)) from e

                added.append(fix.qualified_name)
                logger.info("schema_column_added", column=fix.qualified_name)

        logger.info("schema_repair_complete", added=len(added), checked=len(fixes))
        return added


class PostgresSchemaRepairer(SchemaRepairer):
    """Repairs a Postgres schema via asyncpg."""

    def __init__(self, dsn: str, schema: str = "public", timeout: float = 10.0):
        self.dsn = dsn
        self.schema = schema
        self.timeout = timeout

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[asyncpg.Connection]:
        conn = await asyncpg.connect(self.dsn, timeout=self.timeout)
        try:
            yield conn
        finally:
            await conn.close()

    async def column_exists(self, conn: asyncpg.Connection, table: str, column: str) -> bool:
        row = await conn.fetchrow(
            """
            SELECT 1 FROM information_schema.columns
            WHERE table_schema = $1 AND table_name = $2 AND column_name = $3
            """,
            self.schema,
            table,
            column,
        )
        return row is not None

    async def add_column(self, conn: asyncpg.Connection, fix: ColumnFix) -> None:
        await conn.execute(
            f'ALTER TABLE "{self.schema}"."{fix.table}" ADD COLUMN "{fix.column}" {fix.pg_type}'
        )


class SQLiteSchemaRepairer(SchemaRepairer):
    """Repairs the local SQLite database."""

    def __init__(self, db_path: Path):
        self.db_path = db_path

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[aiosqlite.Connection]:
        async with aiosqlite.connect(self.db_path) as conn:
            yield conn
            await conn.commit()

    async def column_exists(self, conn: aiosqlite.Connection, table: str, column: str) -> bool:
        cursor = await conn.execute(
            "SELECT 1 FROM pragma_table_info(?) WHERE name = ?",
            (table, column),
        )
        return await cursor.fetchone() is not None

    async def add_column(self, conn: aiosqlite.Connection, fix: ColumnFix) -> None:
        await conn.execute(f'ALTER TABLE "{fix.table}" ADD COLUMN "{fix.column}" {fix.sqlite_type}')


async def run_schema_repair(
    database_url: str | None = None,
    sqlite_path: Path | None = None,
) -> list[str]:
    """
    Repair the configured database.

    A SQLite path wins over a URL; otherwise ``DATABASE_URL`` from settings is
    used. Raises ConfigurationError when neither is available.
    """
    settings = get_settings()

    if sqlite_path is not None:
        repairer: SchemaRepairer = SQLiteSchemaRepairer(sqlite_path)
    else:
        dsn = database_url or settings.database.database_url
        if not dsn:
            raise ConfigurationError("DATABASE_URL não configurada", code="DATABASE_URL_MISSING")
        repairer = PostgresSchemaRepairer(
            dsn,
            schema=settings.database.database_schema,
            timeout=settings.database.database_connect_timeout,
        )

    return await repairer.repair()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point; returns the process exit status."""
    import argparse

    configure_logging()
    parser = argparse.ArgumentParser(description="Add missing columns to the POS schema")
    parser.add_argument("--database-url", help="Postgres URL (default: DATABASE_URL)")
    parser.add_argument("--sqlite", type=Path, help="Repair a SQLite database file instead")
    args = parser.parse_args(argv)

    try:
        added = asyncio.run(run_schema_repair(args.database_url, args.sqlite))
    except Exception as e:
        logger.error("schema_repair_aborted", error=str(e))
        print(f"Erro: {e}", file=sys.stderr)
        return 1

    if added:
        print("Colunas adicionadas: " + ", ".join(added))
    else:
        print("Esquema já atualizado.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
