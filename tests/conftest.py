"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Iterator
from pathlib import Path

import pytest

from src.config import reset_settings
from src.core.entities.user import Role, User


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point every file the app writes at the test's temp directory."""
    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("RECEIPT_RECEIPTS_DIR", str(tmp_path / "receipts"))
    monkeypatch.setenv("RECEIPT_SETTINGS_FILE", str(tmp_path / "data" / "receipt-settings.json"))
    monkeypatch.setenv("RECEIPT_SETTLE_DELAY", "0")
    monkeypatch.setenv("RECEIPT_TEARDOWN_DELAY", "0")
    monkeypatch.setenv("POS_MAX_RETRIES", "1")
    monkeypatch.setenv("POS_RETRY_DELAY", "0")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
async def initialized_db(temp_db_path: Path) -> AsyncGenerator[Path, None]:
    """Migrated temporary database bound to the global pool."""
    from src.infrastructure.storage.sqlite import close_pool, configure_pool
    from src.infrastructure.storage.sqlite.migrations import initialize_database

    await initialize_database(temp_db_path, create_backup_before=False)
    configure_pool(temp_db_path)
    yield temp_db_path
    await close_pool()


@pytest.fixture
def admin_user() -> User:
    return User(id="admin-1", name="Ana Admin", username="admin", role=Role.ADMIN)


@pytest.fixture
def seller_user() -> User:
    return User(id="seller-1", name="Sérgio Vendedor", username="sergio", role=Role.SELLER)


@pytest.fixture
def manager_user() -> User:
    return User(id="manager-1", name="Marta Gerente", username="marta", role=Role.MANAGER)
