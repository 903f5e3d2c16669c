"""SQLite implementation of sale storage."""

import aiosqlite

from src.config import get_logger
from src.core.entities.sale import Sale, SaleItem, SalePreview
from src.core.interfaces.storage import ISaleStore
from src.infrastructure.storage.sqlite.connection import (
    from_json,
    get_connection,
    get_transaction,
    parse_timestamp,
    to_json,
)

logger = get_logger(__name__)


class SQLiteSaleStore(ISaleStore):
    """Sales with their cart lines and checkout snapshot stored as JSON columns."""

    async def create_sale(self, sale: Sale) -> Sale:
        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO sales (
                    id, user_id, total, amount_received, change,
                    payment_method, items, preview, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    sale.id,
                    sale.user_id,
                    sale.total,
                    sale.amount_received,
                    sale.change,
                    sale.payment_method,
                    to_json([item.model_dump() for item in sale.items]),
                    to_json(sale.preview.model_dump()) if sale.preview else None,
                    sale.created_at.isoformat(),
                ),
            )

        logger.info(
            "sale_created",
            sale_id=sale.id,
            items=len(sale.items),
            total=sale.total,
        )
        return sale

    async def get_sale(self, sale_id: str) -> Sale | None:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM sales WHERE id = ?", (sale_id,))
            row = await cursor.fetchone()
            return self._row_to_sale(row) if row else None

    async def list_sales(
        self,
        limit: int = 100,
        offset: int = 0,
        user_id: str | None = None,
    ) -> list[Sale]:
        """List sales with pagination, newest first, optionally for one seller."""
        where = "WHERE user_id = ?" if user_id else ""
        params: tuple = (user_id, limit, offset) if user_id else (limit, offset)
        async with get_connection() as conn:
            cursor = await conn.execute(
                f"""
                SELECT * FROM sales
                {where}
                ORDER BY created_at DESC, rowid DESC
                LIMIT ? OFFSET ?
                """,
                params,
            )
            rows = await cursor.fetchall()
            return [self._row_to_sale(r) for r in rows]

    @staticmethod
    def _row_to_sale(row: aiosqlite.Row) -> Sale:
        preview = from_json(row["preview"])
        return Sale(
            id=row["id"],
            user_id=row["user_id"],
            total=row["total"],
            amount_received=row["amount_received"],
            change=row["change"],
            payment_method=row["payment_method"],
            items=[SaleItem(**item) for item in from_json(row["items"], [])],
            preview=SalePreview(**preview) if isinstance(preview, dict) else None,
            created_at=parse_timestamp(row["created_at"]),
        )
