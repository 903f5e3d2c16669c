"""SQLite implementation of the audit trail."""

import aiosqlite

from src.config import get_logger
from src.core.entities.audit import AuditLog
from src.core.interfaces.storage import IAuditLogStore
from src.infrastructure.storage.sqlite.connection import (
    from_json,
    get_connection,
    get_transaction,
    parse_timestamp,
    to_json,
)

logger = get_logger(__name__)


class SQLiteAuditLogStore(IAuditLogStore):
    """Append-only audit log."""

    async def create_log(self, log: AuditLog) -> AuditLog:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO audit_logs (
                    user_id, action, entity_type, entity_id, details,
                    previous_snapshot, ip_address, user_agent, risk_flags, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    log.user_id,
                    log.action,
                    log.entity_type,
                    log.entity_id,
                    to_json(log.details),
                    to_json(log.previous_snapshot),
                    log.ip_address,
                    log.user_agent,
                    to_json(log.risk_flags),
                    log.created_at.isoformat(),
                ),
            )
            log.id = cursor.lastrowid

        logger.debug("audit_log_created", action=log.action, entity_id=log.entity_id)
        return log

    async def list_logs(self, limit: int = 100, action: str | None = None) -> list[AuditLog]:
        query = "SELECT * FROM audit_logs"
        params: list = []
        if action:
            query += " WHERE action = ?"
            params.append(action)
        query += " ORDER BY id DESC LIMIT ?"
        params.append(limit)

        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            return [self._row_to_log(r) for r in rows]

    @staticmethod
    def _row_to_log(row: aiosqlite.Row) -> AuditLog:
        return AuditLog(
            id=row["id"],
            user_id=row["user_id"],
            action=row["action"],
            entity_type=row["entity_type"],
            entity_id=row["entity_id"],
            details=from_json(row["details"], {}),
            previous_snapshot=from_json(row["previous_snapshot"]),
            ip_address=row["ip_address"],
            user_agent=row["user_agent"],
            risk_flags=from_json(row["risk_flags"], []),
            created_at=parse_timestamp(row["created_at"]),
        )
