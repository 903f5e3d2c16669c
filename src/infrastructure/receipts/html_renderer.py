"""
Thermal-printer HTML receipt renderer.

The document is self-contained: a ``@page`` rule sized to the configured
paper plus inline monospace styles, so it prints the same from a browser,
from ``lp`` or from the archive. Markup lives in ``templates/receipt.html``.
"""

from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape

from src.config import get_settings
from src.config.settings import ReceiptSettingsConfig
from src.core.entities.receipt import PaperSize, ReceiptData
from src.core.interfaces.receipts import IReceiptRenderer
from src.core.services.receipt_format import (
    format_currency,
    format_quantity,
    format_receipt_date,
    payment_label,
)

TEMPLATE_NAME = "receipt.html"

_env = Environment(
    loader=PackageLoader("src.infrastructure.receipts", "templates"),
    autoescape=select_autoescape(["html", "htm"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


class HtmlReceiptRenderer(IReceiptRenderer):
    """Renders ``ReceiptData`` to a printable HTML page."""

    def __init__(self, receipt_settings: ReceiptSettingsConfig | None = None):
        if receipt_settings is None:
            receipt_settings = get_settings().receipt
        self._settings = receipt_settings
        self._template = _env.get_template(TEMPLATE_NAME)

    def render(self, data: ReceiptData, paper_size: PaperSize) -> str:
        return self._template.render(**self.context(data, paper_size))

    def context(self, data: ReceiptData, paper_size: PaperSize) -> dict[str, Any]:
        """Template variables with every amount already formatted."""
        width, height = paper_size.dimensions_mm
        return {
            "width": width,
            "height": height,
            "brand_name": self._settings.brand_name,
            "footer_text": self._settings.footer_text,
            "sale_id": data.sale_id,
            "created_at": format_receipt_date(data.created_at),
            "seller_name": data.seller_name,
            "items": [
                {
                    "name": line.name,
                    "quantity": format_quantity(line.quantity, line.unit),
                    "unit": line.unit,
                    "price": self._money(line.price),
                    "total": self._money(line.total),
                }
                for line in data.lines
            ],
            "subtotal": self._money(data.subtotal),
            "discount": self._money(data.discount_amount) if data.discount_amount > 0 else None,
            "total": self._money(data.total),
            "payment_method": payment_label(data.payment_method),
            "amount_received": self._optional_money(data.amount_received),
            "change": self._optional_money(data.change),
        }

    def _money(self, value: float) -> str:
        return format_currency(value, self._settings.currency_symbol)

    def _optional_money(self, value: float | None) -> str | None:
        return None if value is None else self._money(value)
