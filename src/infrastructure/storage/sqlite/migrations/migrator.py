"""
Versioned SQLite migrations.

Migration files live next to this module as ``v<NNN>_<name>.sql`` and are
applied in version order. Each applied version is recorded in
``schema_migrations`` with a checksum of the file so that edits to an
already-applied migration are reported instead of silently re-run.
"""

import hashlib
import re
import shutil
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import aiosqlite

from src.config import get_logger, get_settings

logger = get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).parent
MIGRATION_FILE = re.compile(r"v(\d+)_(\w+)\.sql$")

REQUIRED_TABLES = (
    "users",
    "categories",
    "products",
    "sales",
    "tasks",
    "audit_logs",
    "notifications",
    "schema_migrations",
)


@dataclass
class MigrationInfo:
    """A migration file on disk."""

    version: str
    name: str
    path: Path
    checksum: str

    @classmethod
    def from_file(cls, path: Path) -> "MigrationInfo":
        match = MIGRATION_FILE.match(path.name)
        if match is None:
            raise ValueError(f"Invalid migration filename: {path.name}")
        digest = hashlib.sha256(path.read_bytes()).hexdigest()
        return cls(version=match.group(1), name=match.group(2), path=path, checksum=digest[:16])


@dataclass
class MigrationResult:
    """Outcome of applying one migration."""

    version: str
    name: str
    success: bool
    execution_time_ms: int
    error: str | None = None


def discover_migrations(migrations_dir: Path | None = None) -> list[MigrationInfo]:
    """Migration files in version order; badly named files are skipped."""
    found = []
    for path in sorted((migrations_dir or MIGRATIONS_DIR).glob("v*.sql")):
        try:
            found.append(MigrationInfo.from_file(path))
        except ValueError:
            logger.warning("skipping_invalid_migration", path=str(path))
    return found


async def _applied_checksums(conn: aiosqlite.Connection) -> dict[str, str]:
    try:
        cursor = await conn.execute("SELECT version, checksum FROM schema_migrations")
    except aiosqlite.OperationalError:
        return {}
    return {version: checksum for version, checksum in await cursor.fetchall()}


async def get_current_version(conn: aiosqlite.Connection) -> str | None:
    applied = await _applied_checksums(conn)
    return max(applied) if applied else None


async def apply_migration(conn: aiosqlite.Connection, migration: MigrationInfo) -> MigrationResult:
    """Run one migration script and record it; rolls back on failure."""
    started = time.perf_counter()

    def elapsed_ms() -> int:
        return int((time.perf_counter() - started) * 1000)

    try:
        await conn.executescript(migration.path.read_text(encoding="utf-8"))
        await conn.execute(
            "INSERT OR REPLACE INTO schema_migrations (version, name, checksum, execution_time_ms) "
            "VALUES (?, ?, ?, ?)",
            (migration.version, migration.name, migration.checksum, elapsed_ms()),
        )
        await conn.commit()
    except aiosqlite.Error as e:
        await conn.rollback()
        logger.error("migration_failed", version=migration.version, error=str(e))
        return MigrationResult(migration.version, migration.name, False, elapsed_ms(), str(e))

    logger.info("migration_applied", version=migration.version, name=migration.name)
    return MigrationResult(migration.version, migration.name, True, elapsed_ms())


async def _foreign_key_violations(conn: aiosqlite.Connection) -> int:
    cursor = await conn.execute("PRAGMA foreign_key_check")
    return len(await cursor.fetchall())


def create_backup(db_path: Path) -> Path:
    """Copy the database aside before migrating it."""
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    backup_path = db_path.with_name(f"{db_path.stem}.backup_{stamp}{db_path.suffix}")
    shutil.copy2(db_path, backup_path)
    logger.info("database_backup_created", backup_path=str(backup_path))
    return backup_path


def restore_backup(db_path: Path, backup_path: Path) -> None:
    shutil.copy2(backup_path, db_path)
    logger.warning("database_restored_from_backup", backup_path=str(backup_path))


async def initialize_database(
    db_path: Path | None = None,
    create_backup_before: bool = True,
    migrations_dir: Path | None = None,
) -> list[MigrationResult]:
    """
    Apply every pending migration.

    An existing database is backed up first and restored if the run raises;
    the backup is removed once all attempted migrations succeed. Stops at the
    first failed migration or one that leaves foreign key violations.

    Returns:
        Results for the migrations attempted in this run (empty when up to date)
    """
    db_path = db_path or get_settings().storage.db_path
    db_path.parent.mkdir(parents=True, exist_ok=True)
    backup_path = create_backup(db_path) if create_backup_before and db_path.exists() else None

    results: list[MigrationResult] = []
    try:
        async with aiosqlite.connect(db_path) as conn:
            await conn.execute("PRAGMA journal_mode=WAL")
            await conn.execute("PRAGMA foreign_keys=ON")
            applied = await _applied_checksums(conn)

            for migration in discover_migrations(migrations_dir):
                if migration.version in applied:
                    if applied[migration.version] != migration.checksum:
                        logger.warning("migration_checksum_changed", version=migration.version)
                    continue

                result = await apply_migration(conn, migration)
                results.append(result)
                if not result.success:
                    break
                if violations := await _foreign_key_violations(conn):
                    logger.error(
                        "migration_left_foreign_key_violations",
                        version=migration.version,
                        violations=violations,
                    )
                    break
    except Exception as e:
        logger.error("database_initialization_failed", db_path=str(db_path), error=str(e))
        if backup_path is not None:
            restore_backup(db_path, backup_path)
        raise

    if backup_path is not None and all(r.success for r in results):
        backup_path.unlink()

    logger.info("database_initialized", db_path=str(db_path), applied=len(results))
    return results


# Name used by the application lifespan
run_migrations = initialize_database


async def get_migration_status(db_path: Path | None = None) -> dict:
    """Current version plus applied and pending migration versions."""
    db_path = db_path or get_settings().storage.db_path
    known = [m.version for m in discover_migrations()]

    if not db_path.exists():
        return {
            "exists": False,
            "current_version": None,
            "applied_migrations": [],
            "pending_migrations": known,
        }

    async with aiosqlite.connect(db_path) as conn:
        applied = sorted(await _applied_checksums(conn))

    return {
        "exists": True,
        "current_version": applied[-1] if applied else None,
        "applied_migrations": applied,
        "pending_migrations": [v for v in known if v not in applied],
        "total_migrations": len(known),
    }


async def verify_schema_integrity(db_path: Path | None = None) -> list[dict]:
    """Foreign key, page integrity and required-table checks."""
    db_path = db_path or get_settings().storage.db_path

    async with aiosqlite.connect(db_path) as conn:
        violations = await _foreign_key_violations(conn)

        cursor = await conn.execute("PRAGMA integrity_check")
        (integrity,) = await cursor.fetchone()

        cursor = await conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
        tables = {name for (name,) in await cursor.fetchall()}

    missing = [t for t in REQUIRED_TABLES if t not in tables]
    return [
        {"check": "foreign_keys", "status": "FAIL" if violations else "PASS", "violations": violations},
        {"check": "integrity", "status": "PASS" if integrity == "ok" else "FAIL", "result": integrity},
        {"check": "required_tables", "status": "FAIL" if missing else "PASS", "missing": missing},
    ]
