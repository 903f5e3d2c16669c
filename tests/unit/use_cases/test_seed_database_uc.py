"""Tests for SeedDatabaseUseCase."""

from unittest.mock import AsyncMock

import pytest

from src.application.use_cases.seed_database import (
    SEED_CATEGORIES,
    SEED_PRODUCTS,
    SeedDatabaseUseCase,
    hash_password,
    verify_password,
)
from src.config import reset_settings
from src.core.entities.user import Role
from src.core.exceptions import DatabaseNotEmptyError


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setenv("SEED_BCRYPT_ROUNDS", "4")
    reset_settings()


@pytest.fixture
def user_store():
    store = AsyncMock()
    store.count_users.return_value = 0
    store.create_user.side_effect = lambda user: user
    return store


@pytest.fixture
def product_store():
    store = AsyncMock()
    store.create_category.side_effect = lambda category: category
    store.create_product.side_effect = lambda product: product
    return store


@pytest.fixture
def use_case(user_store, product_store):
    return SeedDatabaseUseCase(user_store=user_store, product_store=product_store)


class TestPasswordHashing:
    def test_hash_verifies(self):
        hashed = hash_password("senha123", rounds=4)
        assert hashed.startswith("$2")
        assert verify_password("senha123", hashed)
        assert not verify_password("errada", hashed)


class TestSeedDatabaseUseCase:
    async def test_seeds_admin_and_catalog(self, use_case, user_store, product_store):
        result = await use_case.execute()

        admin = user_store.create_user.call_args[0][0]
        assert admin.username == "admin"
        assert admin.role == Role.ADMIN
        assert verify_password("senha123", admin.password_hash)

        assert result.categories == len(SEED_CATEGORIES) == 5
        assert result.products == len(SEED_PRODUCTS)
        assert product_store.create_product.await_count == len(SEED_PRODUCTS)
        assert "admin/senha123" in result.message

    async def test_products_link_to_seeded_categories(self, use_case, product_store):
        await use_case.execute()

        category_ids = {c[0][0].id for c in product_store.create_category.call_args_list}
        for call in product_store.create_product.call_args_list:
            assert call[0][0].category_id in category_ids

    async def test_refuses_when_users_exist(self, use_case, user_store, product_store):
        user_store.count_users.return_value = 2

        with pytest.raises(DatabaseNotEmptyError) as exc_info:
            await use_case.execute()

        assert exc_info.value.details["user_count"] == 2
        user_store.create_user.assert_not_awaited()
        product_store.create_category.assert_not_awaited()

    async def test_is_empty(self, use_case, user_store):
        assert await use_case.is_empty() is True
        user_store.count_users.return_value = 1
        assert await use_case.is_empty() is False

    async def test_is_empty_false_on_error(self, use_case, user_store):
        user_store.count_users.side_effect = RuntimeError("database locked")
        assert await use_case.is_empty() is False
