"""Fixtures for receipt rendering tests."""

from datetime import datetime

import pytest

from src.core.entities.receipt import ReceiptData, ReceiptLine


@pytest.fixture
def receipt_data() -> ReceiptData:
    return ReceiptData(
        sale_id="a1b2c3d4e5f6",
        created_at=datetime(2024, 6, 1, 12, 30, 15),
        seller_name="Carla",
        lines=[
            ReceiptLine(name="Banana Prata", quantity=1.25, unit="kg", price=6.5),
            ReceiptLine(name="Água Mineral 500ml", quantity=2, unit="un", price=2.5),
        ],
        subtotal=13.13,
        discount_amount=1.13,
        total=12.0,
        payment_method="cash",
        amount_received=20.0,
        change=8.0,
    )
