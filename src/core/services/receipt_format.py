"""Text formatting shared by the receipt renderers."""

from datetime import datetime

PAYMENT_LABELS: dict[str, str] = {
    "cash": "Dinheiro",
    "card": "Cartão",
    "pix": "PIX",
    "mpesa": "M-Pesa",
    "emola": "e-Mola",
    "pos": "POS",
    "bank": "Transferência",
}


def format_currency(value: float, symbol: str = "MT") -> str:
    """``12.5`` -> ``MT 12.50``."""
    return f"{symbol} {value:.2f}"


def format_quantity(quantity: float, unit: str) -> str:
    """Weighed goods keep three decimals; counted goods none."""
    decimals = 3 if unit == "kg" else 0
    return f"{quantity:.{decimals}f}"


def payment_label(method: str) -> str:
    """Human label for a payment method, or the method itself if unknown."""
    return PAYMENT_LABELS.get((method or "").lower(), method)


def format_receipt_date(value: datetime) -> str:
    return value.strftime("%d/%m/%Y às %H:%M")
