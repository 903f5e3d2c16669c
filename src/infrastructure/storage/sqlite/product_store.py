"""SQLite implementation of catalog storage."""

import aiosqlite

from src.config import get_logger
from src.core.entities.product import Category, Product
from src.core.interfaces.storage import IProductStore
from src.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
    parse_timestamp,
)

logger = get_logger(__name__)


class SQLiteProductStore(IProductStore):
    """SQLite implementation of category and product storage."""

    async def create_category(self, category: Category) -> Category:
        async with get_transaction() as conn:
            await conn.execute(
                "INSERT INTO categories (id, name, color, created_at) VALUES (?, ?, ?, ?)",
                (category.id, category.name, category.color, category.created_at.isoformat()),
            )
        logger.debug("category_created", category_id=category.id, name=category.name)
        return category

    async def create_product(self, product: Product) -> Product:
        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO products (
                    id, sku, barcode, name, category_id, price, cost_price,
                    stock, min_stock, unit, image, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    product.id,
                    product.sku,
                    product.barcode,
                    product.name,
                    product.category_id,
                    product.price,
                    product.cost_price,
                    product.stock,
                    product.min_stock,
                    product.unit,
                    product.image,
                    product.created_at.isoformat(),
                    product.updated_at.isoformat(),
                ),
            )
        logger.debug("product_created", product_id=product.id, sku=product.sku)
        return product

    async def get_product(self, product_id: str) -> Product | None:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM products WHERE id = ?", (product_id,))
            row = await cursor.fetchone()
            return self._row_to_product(row) if row else None

    async def list_products(self) -> list[Product]:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM products ORDER BY name")
            rows = await cursor.fetchall()
            return [self._row_to_product(r) for r in rows]

    @staticmethod
    def _row_to_product(row: aiosqlite.Row) -> Product:
        return Product(
            id=row["id"],
            sku=row["sku"],
            barcode=row["barcode"],
            name=row["name"],
            category_id=row["category_id"],
            price=row["price"],
            cost_price=row["cost_price"] or 0.0,
            stock=row["stock"],
            min_stock=row["min_stock"] if row["min_stock"] is not None else 5.0,
            unit=row["unit"],
            image=row["image"],
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )
