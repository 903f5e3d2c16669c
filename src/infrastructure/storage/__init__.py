"""Storage infrastructure implementations."""

from src.infrastructure.storage.sqlite import (
    SQLiteAuditLogStore,
    SQLiteNotificationStore,
    SQLiteProductStore,
    SQLiteSaleStore,
    SQLiteTaskStore,
    SQLiteUserStore,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)

__all__ = [
    # SQLite stores
    "SQLiteAuditLogStore",
    "SQLiteNotificationStore",
    "SQLiteProductStore",
    "SQLiteSaleStore",
    "SQLiteTaskStore",
    "SQLiteUserStore",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
