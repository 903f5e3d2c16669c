"""SQLite implementation of in-app notifications."""

import aiosqlite

from src.config import get_logger
from src.core.entities.audit import Notification, NotificationType
from src.core.interfaces.storage import INotificationStore
from src.infrastructure.storage.sqlite.connection import (
    from_json,
    get_connection,
    get_transaction,
    parse_timestamp,
    to_json,
)

logger = get_logger(__name__)


class SQLiteNotificationStore(INotificationStore):
    """SQLite implementation of notification storage."""

    async def create_notification(self, notification: Notification) -> Notification:
        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO notifications (id, user_id, type, message, read, metadata, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    notification.id,
                    notification.user_id,
                    notification.type.value,
                    notification.message,
                    int(notification.read),
                    to_json(notification.metadata),
                    notification.created_at.isoformat(),
                ),
            )
        logger.debug(
            "notification_created",
            notification_id=notification.id,
            user_id=notification.user_id,
        )
        return notification

    async def list_for_user(self, user_id: str, limit: int = 50) -> list[Notification]:
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM notifications
                WHERE user_id = ? OR user_id IS NULL
                ORDER BY created_at DESC, rowid DESC
                LIMIT ?
                """,
                (user_id, limit),
            )
            rows = await cursor.fetchall()
            return [self._row_to_notification(r) for r in rows]

    @staticmethod
    def _row_to_notification(row: aiosqlite.Row) -> Notification:
        return Notification(
            id=row["id"],
            user_id=row["user_id"],
            type=NotificationType(row["type"]),
            message=row["message"],
            read=bool(row["read"]),
            metadata=from_json(row["metadata"], {}),
            created_at=parse_timestamp(row["created_at"]),
        )
