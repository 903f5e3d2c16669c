"""Sale domain entities."""

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, Field


def new_id() -> str:
    """Generate an opaque identifier for a new record."""
    return uuid4().hex


class SaleItem(BaseModel):
    """A cart line as recorded on the sale."""

    product_id: str | None = None
    quantity: float = 0.0
    price_at_sale: float = 0.0


class SalePreviewItem(BaseModel):
    """A line of the snapshot taken at checkout, with names already resolved."""

    product_name: str | None = None
    product_unit: str | None = None
    quantity: float = 0.0
    price_at_sale: float = 0.0


class SalePreview(BaseModel):
    """Checkout snapshot used to reproduce the receipt exactly as shown at the till."""

    items: list[SalePreviewItem] = Field(default_factory=list)
    subtotal: float | None = None
    discount_amount: float | None = None
    total: float | None = None
    payment_method: str | None = None
    amount_received: float | None = None
    change: float | None = None


class Sale(BaseModel):
    """A completed transaction."""

    id: str = Field(default_factory=new_id)
    user_id: str
    total: float
    amount_received: float | None = None
    change: float | None = None
    payment_method: str = "cash"
    items: list[SaleItem] = Field(default_factory=list)
    preview: SalePreview | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
