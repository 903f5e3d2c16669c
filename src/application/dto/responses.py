"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from src.core.entities.receipt import ReceiptFile, ReceiptSettings
from src.core.entities.sale import Sale
from src.core.entities.task import Task


class ProviderHealthResponse(BaseModel):
    """Dependency health status."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: ProviderHealthResponse | None = None
    printer: ProviderHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. SALE_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)


# --- Receipts ---


class SaveReceiptResponse(BaseModel):
    success: bool = True
    path: str = Field(..., description="Where the receipt was written")


class ReceiptSettingsResponse(BaseModel):
    """Current receipt preferences."""

    paper_size: str
    print_on_confirm: bool
    width_mm: int
    height_mm: int

    @classmethod
    def from_entity(cls, settings: ReceiptSettings) -> "ReceiptSettingsResponse":
        width, height = settings.paper_size.dimensions_mm
        return cls(
            paper_size=settings.paper_size.value,
            print_on_confirm=settings.print_on_confirm,
            width_mm=width,
            height_mm=height,
        )


class ReceiptFileResponse(BaseModel):
    """Archived receipt listing entry."""

    relative_path: str
    year: str
    month: str
    week: str
    size: int
    modified_at: datetime

    @classmethod
    def from_entity(cls, file: ReceiptFile) -> "ReceiptFileResponse":
        return cls(**file.model_dump(exclude={"path"}))


# --- Setup ---


class CheckEmptyResponse(BaseModel):
    is_empty: bool = Field(..., serialization_alias="isEmpty")


class ForceSeedResponse(BaseModel):
    success: bool = True
    message: str
    categories: int = 0
    products: int = 0


# --- Tasks ---


class TaskResponse(BaseModel):
    """Team task."""

    id: str
    title: str
    completed: bool
    completion_comment: str | None = None
    assigned_to: str
    assigned_to_id: str | None = None
    created_by: str
    created_at: datetime

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            completed=task.completed,
            completion_comment=task.completion_comment,
            assigned_to=task.assigned_to.value,
            assigned_to_id=task.assigned_to_id,
            created_by=task.created_by,
            created_at=task.created_at,
        )


class SuccessResponse(BaseModel):
    success: bool = True


# --- Sales ---


class SaleItemResponse(BaseModel):
    product_id: str | None = None
    quantity: float
    price_at_sale: float


class SaleResponse(BaseModel):
    """Recorded sale."""

    id: str
    user_id: str
    total: float
    amount_received: float | None = None
    change: float | None = None
    payment_method: str
    items: list[SaleItemResponse] = Field(default_factory=list)
    created_at: datetime

    @classmethod
    def from_entity(cls, sale: Sale) -> "SaleResponse":
        return cls(
            id=sale.id,
            user_id=sale.user_id,
            total=sale.total,
            amount_received=sale.amount_received,
            change=sale.change,
            payment_method=sale.payment_method,
            items=[SaleItemResponse(**item.model_dump()) for item in sale.items],
            created_at=sale.created_at,
        )
