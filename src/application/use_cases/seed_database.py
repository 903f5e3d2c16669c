"""
Seed Database Use Case.

First-run initialisation of an empty database: one administrator account,
the default product categories and a handful of sample products. Refuses to
run once any user exists.
"""

import asyncio
from dataclasses import dataclass

import bcrypt

from src.config import get_logger, get_settings
from src.core.entities.product import Category, Product
from src.core.entities.user import Role, User
from src.core.exceptions import DatabaseNotEmptyError
from src.core.interfaces.storage import IProductStore, IUserStore

logger = get_logger(__name__)

SEED_CATEGORIES: list[tuple[str, str]] = [
    ("Frutas", "bg-orange-100 text-orange-800 border-orange-200"),
    ("Verduras", "bg-green-100 text-green-800 border-green-200"),
    ("Grãos", "bg-amber-100 text-amber-800 border-amber-200"),
    ("Bebidas", "bg-blue-100 text-blue-800 border-blue-200"),
    ("Laticínios", "bg-purple-100 text-purple-800 border-purple-200"),
]

# (category, sku, name, price, cost_price, stock, min_stock, unit)
SEED_PRODUCTS: list[tuple[str, str, str, float, float, float, float, str]] = [
    ("Frutas", "FRUTA001", "Banana Prata", 6.50, 4.00, 50, 10, "kg"),
    ("Frutas", "FRUTA002", "Maçã Fuji", 8.90, 5.50, 30, 10, "kg"),
    ("Frutas", "FRUTA003", "Laranja Pera", 5.50, 3.20, 45, 15, "kg"),
    ("Verduras", "VERD001", "Alface Americana", 4.50, 2.50, 25, 10, "un"),
    ("Verduras", "VERD002", "Tomate", 7.90, 5.00, 40, 15, "kg"),
    ("Grãos", "GRAO001", "Arroz Integral 1kg", 8.90, 5.50, 100, 20, "pack"),
    ("Grãos", "GRAO002", "Feijão Preto 1kg", 9.50, 6.00, 80, 20, "pack"),
    ("Bebidas", "BEB001", "Água Mineral 500ml", 2.50, 1.20, 200, 50, "un"),
    ("Laticínios", "LAT001", "Leite Integral 1L", 5.90, 4.00, 60, 20, "un"),
    ("Laticínios", "LAT002", "Queijo Minas Frescal", 28.90, 18.00, 15, 5, "kg"),
]


def hash_password(password: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


@dataclass
class SeedResult:
    """What the seed created."""

    admin: User
    categories: int
    products: int

    @property
    def message(self) -> str:
        settings = get_settings().seed
        return (
            "Banco de dados inicializado com sucesso! Você pode fazer login com: "
            f"{settings.admin_username}/{settings.admin_password}"
        )


class SeedDatabaseUseCase:
    """Populate an empty database with the default admin and catalog."""

    def __init__(
        self,
        user_store: IUserStore | None = None,
        product_store: IProductStore | None = None,
    ):
        self._user_store = user_store
        self._product_store = product_store

    async def _get_user_store(self) -> IUserStore:
        if self._user_store is None:
            from src.infrastructure.storage.sqlite import get_user_store

            self._user_store = await get_user_store()
        return self._user_store

    async def _get_product_store(self) -> IProductStore:
        if self._product_store is None:
            from src.infrastructure.storage.sqlite import get_product_store

            self._product_store = await get_product_store()
        return self._product_store

    async def is_empty(self) -> bool:
        """True when no user exists; any storage error counts as not empty."""
        try:
            return await (await self._get_user_store()).count_users() == 0
        except Exception as e:
            logger.warning("check_empty_failed", error=str(e))
            return False

    async def execute(self) -> SeedResult:
        """
        Raises:
            DatabaseNotEmptyError: Users already exist
        """
        user_store = await self._get_user_store()
        product_store = await self._get_product_store()

        user_count = await user_store.count_users()
        if user_count > 0:
            logger.warning("force_seed_refused", user_count=user_count)
            raise DatabaseNotEmptyError(user_count)

        seed = get_settings().seed
        logger.info("seeding_database")

        password_hash = await asyncio.to_thread(
            hash_password, seed.admin_password, seed.bcrypt_rounds
        )
        admin = await user_store.create_user(
            User(
                name=seed.admin_name,
                username=seed.admin_username,
                password_hash=password_hash,
                role=Role.ADMIN,
                avatar="A",
            )
        )

        category_ids: dict[str, str] = {}
        for name, color in SEED_CATEGORIES:
            category = await product_store.create_category(Category(name=name, color=color))
            category_ids[name] = category.id

        for category, sku, name, price, cost, stock, min_stock, unit in SEED_PRODUCTS:
            await product_store.create_product(
                Product(
                    sku=sku,
                    name=name,
                    category_id=category_ids[category],
                    price=price,
                    cost_price=cost,
                    stock=stock,
                    min_stock=min_stock,
                    unit=unit,
                )
            )

        logger.info(
            "database_seeded",
            admin=admin.username,
            categories=len(SEED_CATEGORIES),
            products=len(SEED_PRODUCTS),
        )
        return SeedResult(admin=admin, categories=len(SEED_CATEGORIES), products=len(SEED_PRODUCTS))
