"""Catalog entities."""

from datetime import datetime

from pydantic import BaseModel, Field

from src.core.entities.sale import new_id


class Category(BaseModel):
    """Product category."""

    id: str = Field(default_factory=new_id)
    name: str
    color: str = ""
    created_at: datetime = Field(default_factory=datetime.utcnow)


class Product(BaseModel):
    """A sellable product."""

    id: str = Field(default_factory=new_id)
    sku: str
    barcode: str | None = None
    name: str
    category_id: str | None = None
    price: float
    cost_price: float = 0.0
    stock: float = 0.0
    min_stock: float = 5.0
    unit: str = "un"
    image: str | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
