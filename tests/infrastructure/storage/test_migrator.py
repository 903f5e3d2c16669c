"""Tests for the versioned SQLite migrator."""

import aiosqlite

from src.infrastructure.storage.sqlite.migrations import (
    discover_migrations,
    get_migration_status,
    initialize_database,
    verify_schema_integrity,
)


def test_discovers_bundled_migrations():
    migrations = discover_migrations()

    assert migrations
    assert migrations[0].version == "001"
    assert len(migrations[0].checksum) == 16


async def test_initialize_is_idempotent(temp_db_path):
    first = await initialize_database(temp_db_path, create_backup_before=False)
    second = await initialize_database(temp_db_path, create_backup_before=False)

    assert first and all(r.success for r in first)
    assert second == []


async def test_status_before_and_after(temp_db_path):
    before = await get_migration_status(temp_db_path)
    assert before["exists"] is False
    assert "001" in before["pending_migrations"]

    await initialize_database(temp_db_path, create_backup_before=False)
    after = await get_migration_status(temp_db_path)

    assert after["exists"] is True
    assert after["pending_migrations"] == []
    assert "001" in after["applied_migrations"]


async def test_schema_integrity_passes(temp_db_path):
    await initialize_database(temp_db_path, create_backup_before=False)

    checks = await verify_schema_integrity(temp_db_path)

    assert {c["check"]: c["status"] for c in checks} == {
        "foreign_keys": "PASS",
        "integrity": "PASS",
        "required_tables": "PASS",
    }


async def test_backup_removed_after_success(temp_db_path):
    async with aiosqlite.connect(temp_db_path) as conn:
        await conn.execute("CREATE TABLE legacy (id INTEGER)")
        await conn.commit()

    await initialize_database(temp_db_path, create_backup_before=True)

    assert list(temp_db_path.parent.glob("*.backup*")) == []
