"""Receipt domain entities."""

from datetime import datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class PaperSize(str, Enum):
    """Supported receipt paper formats."""

    THERMAL_80X60 = "80x60"
    THERMAL_80X70 = "80x70"
    THERMAL_80X80 = "80x80"
    A6 = "a6"

    @property
    def dimensions_mm(self) -> tuple[int, int]:
        """Return (width, height) in millimetres."""
        return PAPER_DIMENSIONS_MM[self]


PAPER_DIMENSIONS_MM: dict[PaperSize, tuple[int, int]] = {
    PaperSize.THERMAL_80X60: (80, 60),
    PaperSize.THERMAL_80X70: (80, 70),
    PaperSize.THERMAL_80X80: (80, 80),
    PaperSize.A6: (105, 148),
}


class ReceiptSettings(BaseModel):
    """Operator-editable receipt preferences."""

    paper_size: PaperSize = PaperSize.THERMAL_80X80
    print_on_confirm: bool = False


class ReceiptLine(BaseModel):
    """A printable receipt line."""

    name: str = "Produto"
    quantity: float = 0.0
    unit: str = "un"
    price: float = 0.0
    total: float = 0.0

    @model_validator(mode="after")
    def compute_total(self) -> "ReceiptLine":
        """Line total is always quantity times price."""
        self.total = self.quantity * self.price
        return self


class ReceiptData(BaseModel):
    """Everything needed to render one receipt."""

    sale_id: str
    created_at: datetime
    seller_name: str = "Desconhecido"
    lines: list[ReceiptLine] = Field(default_factory=list)
    subtotal: float = 0.0
    discount_amount: float = 0.0
    total: float = 0.0
    payment_method: str = "cash"
    amount_received: float | None = None
    change: float | None = None


class ReceiptFile(BaseModel):
    """An archived receipt on disk."""

    path: Path
    relative_path: str
    year: str
    month: str
    week: str
    size: int
    modified_at: datetime
