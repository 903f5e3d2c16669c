"""SQLite storage implementations."""

from src.infrastructure.storage.sqlite.audit_log_store import SQLiteAuditLogStore
from src.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    configure_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from src.infrastructure.storage.sqlite.notification_store import SQLiteNotificationStore
from src.infrastructure.storage.sqlite.product_store import SQLiteProductStore
from src.infrastructure.storage.sqlite.sale_store import SQLiteSaleStore
from src.infrastructure.storage.sqlite.task_store import SQLiteTaskStore
from src.infrastructure.storage.sqlite.user_store import SQLiteUserStore

# Singleton instances
_sale_store: SQLiteSaleStore | None = None
_user_store: SQLiteUserStore | None = None
_product_store: SQLiteProductStore | None = None
_task_store: SQLiteTaskStore | None = None
_audit_log_store: SQLiteAuditLogStore | None = None
_notification_store: SQLiteNotificationStore | None = None


async def get_sale_store() -> SQLiteSaleStore:
    """Get singleton sale store instance."""
    global _sale_store
    if _sale_store is None:
        _sale_store = SQLiteSaleStore()
    return _sale_store


async def get_user_store() -> SQLiteUserStore:
    """Get singleton user store instance."""
    global _user_store
    if _user_store is None:
        _user_store = SQLiteUserStore()
    return _user_store


async def get_product_store() -> SQLiteProductStore:
    """Get singleton product store instance."""
    global _product_store
    if _product_store is None:
        _product_store = SQLiteProductStore()
    return _product_store


async def get_task_store() -> SQLiteTaskStore:
    """Get singleton task store instance."""
    global _task_store
    if _task_store is None:
        _task_store = SQLiteTaskStore()
    return _task_store


async def get_audit_log_store() -> SQLiteAuditLogStore:
    """Get singleton audit log store instance."""
    global _audit_log_store
    if _audit_log_store is None:
        _audit_log_store = SQLiteAuditLogStore()
    return _audit_log_store


async def get_notification_store() -> SQLiteNotificationStore:
    """Get singleton notification store instance."""
    global _notification_store
    if _notification_store is None:
        _notification_store = SQLiteNotificationStore()
    return _notification_store


__all__ = [
    # Connection
    "ConnectionPool",
    "configure_pool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Store classes
    "SQLiteAuditLogStore",
    "SQLiteNotificationStore",
    "SQLiteProductStore",
    "SQLiteSaleStore",
    "SQLiteTaskStore",
    "SQLiteUserStore",
    # Factory functions
    "get_audit_log_store",
    "get_notification_store",
    "get_product_store",
    "get_sale_store",
    "get_task_store",
    "get_user_store",
]
