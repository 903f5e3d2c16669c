"""Tests for receipt text formatting."""

from datetime import datetime

import pytest

from src.core.services.receipt_format import (
    format_currency,
    format_quantity,
    format_receipt_date,
    payment_label,
)


def test_format_currency():
    assert format_currency(12.5) == "MT 12.50"
    assert format_currency(0) == "MT 0.00"
    assert format_currency(3, symbol="R$") == "R$ 3.00"


@pytest.mark.parametrize(
    "quantity,unit,expected",
    [(1.25, "kg", "1.250"), (2, "un", "2"), (3.0, "cx", "3")],
)
def test_format_quantity(quantity, unit, expected):
    assert format_quantity(quantity, unit) == expected


@pytest.mark.parametrize(
    "method,label",
    [
        ("cash", "Dinheiro"),
        ("card", "Cartão"),
        ("pix", "PIX"),
        ("mpesa", "M-Pesa"),
        ("emola", "e-Mola"),
        ("pos", "POS"),
        ("bank", "Transferência"),
        ("CASH", "Dinheiro"),
        ("voucher", "voucher"),
    ],
)
def test_payment_label(method, label):
    assert payment_label(method) == label


def test_format_receipt_date():
    assert format_receipt_date(datetime(2024, 3, 5, 9, 7)) == "05/03/2024 às 09:07"
