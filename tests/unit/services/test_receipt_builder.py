"""Tests for ReceiptBuilder."""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from src.core.entities.product import Product
from src.core.entities.sale import Sale, SaleItem, SalePreview, SalePreviewItem
from src.core.entities.user import User
from src.core.services.receipt_builder import ReceiptBuilder


@pytest.fixture
def user_store():
    store = AsyncMock()
    store.get_user.return_value = User(id="u1", name="Carla", username="carla")
    return store


@pytest.fixture
def product_store():
    store = AsyncMock()
    store.get_product.return_value = Product(
        id="p1", sku="ARZ-1", name="Arroz 1kg", price=80.0, unit="kg"
    )
    return store


@pytest.fixture
def builder(user_store, product_store):
    return ReceiptBuilder(user_store, product_store)


def _sale(**kwargs) -> Sale:
    defaults = dict(
        id="sale-1",
        user_id="u1",
        total=160.0,
        items=[SaleItem(product_id="p1", quantity=2, price_at_sale=80.0)],
        created_at=datetime(2024, 6, 1, 12, 30),
    )
    defaults.update(kwargs)
    return Sale(**defaults)


class TestReceiptBuilder:
    async def test_lines_from_catalog(self, builder, product_store):
        data = await builder.build(_sale())

        product_store.get_product.assert_awaited_once_with("p1")
        assert data.seller_name == "Carla"
        assert len(data.lines) == 1
        assert data.lines[0].name == "Arroz 1kg"
        assert data.lines[0].unit == "kg"
        assert data.lines[0].total == 160.0
        assert data.subtotal == 160.0
        assert data.discount_amount == 0.0

    async def test_preview_wins_over_catalog(self, builder, product_store):
        preview = SalePreview(
            items=[
                SalePreviewItem(product_name="Arroz (promo)", product_unit="kg", quantity=2, price_at_sale=80.0)
            ],
            subtotal=160.0,
            discount_amount=10.0,
            payment_method="mpesa",
            amount_received=200.0,
            change=50.0,
        )
        data = await builder.build(_sale(total=150.0, preview=preview))

        product_store.get_product.assert_not_awaited()
        assert data.lines[0].name == "Arroz (promo)"
        assert data.subtotal == 160.0
        assert data.discount_amount == 10.0
        assert data.total == 150.0
        assert data.payment_method == "mpesa"
        assert data.amount_received == 200.0
        assert data.change == 50.0

    async def test_blank_preview_names_use_defaults(self, builder):
        preview = SalePreview(items=[SalePreviewItem(product_name="  ", quantity=1, price_at_sale=5)])
        data = await builder.build(_sale(preview=preview))
        assert data.lines[0].name == "Produto"
        assert data.lines[0].unit == "un"

    async def test_unknown_product_and_seller(self, builder, user_store, product_store):
        user_store.get_user.return_value = None
        product_store.get_product.return_value = None

        data = await builder.build(_sale())

        assert data.seller_name == "Desconhecido"
        assert data.lines[0].name == "Produto"
        assert data.lines[0].unit == "un"

    async def test_zero_received_is_omitted(self, builder):
        data = await builder.build(_sale(amount_received=0, change=0))
        assert data.amount_received is None
        assert data.change is None
