"""SQLite implementation of staff account storage."""

import aiosqlite

from src.config import get_logger
from src.core.entities.user import Role, User
from src.core.interfaces.storage import IUserStore
from src.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
    parse_timestamp,
)

logger = get_logger(__name__)


class SQLiteUserStore(IUserStore):
    """SQLite implementation of user storage."""

    async def create_user(self, user: User) -> User:
        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO users (id, name, username, password, role, avatar, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    user.id,
                    user.name,
                    user.username,
                    user.password_hash,
                    user.role.value,
                    user.avatar,
                    user.created_at.isoformat(),
                ),
            )
        logger.info("user_created", user_id=user.id, username=user.username, role=user.role.value)
        return user

    async def get_user(self, user_id: str) -> User | None:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM users WHERE id = ?", (user_id,))
            row = await cursor.fetchone()
            return self._row_to_user(row) if row else None

    async def list_users(self) -> list[User]:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM users ORDER BY name")
            rows = await cursor.fetchall()
            return [self._row_to_user(r) for r in rows]

    async def count_users(self) -> int:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT COUNT(*) FROM users")
            row = await cursor.fetchone()
            return row[0] if row else 0

    @staticmethod
    def _row_to_user(row: aiosqlite.Row) -> User:
        return User(
            id=row["id"],
            name=row["name"],
            username=row["username"],
            password_hash=row["password"],
            role=Role(row["role"]),
            avatar=row["avatar"],
            created_at=parse_timestamp(row["created_at"]),
        )
