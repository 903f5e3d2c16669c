"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.
"""

from pydantic import AliasChoices, BaseModel, Field, field_validator


class SaveReceiptRequest(BaseModel):
    """Request to archive a sale's receipt.

    Accepts both ``saleId`` and ``sale_id``. A missing id is reported by the
    route with a 400 rather than a validation error.
    """

    sale_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("saleId", "sale_id"),
        description="Sale identifier",
    )

    @field_validator("sale_id", mode="before")
    @classmethod
    def non_string_id_is_missing(cls, v):
        return v if isinstance(v, str) else None


class UpdateReceiptSettingsRequest(BaseModel):
    """Partial update of receipt preferences; omitted fields keep their value."""

    paper_size: str | None = Field(
        default=None,
        validation_alias=AliasChoices("paperSize", "paper_size"),
        examples=["80x80", "a6"],
    )
    print_on_confirm: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("printOnConfirm", "print_on_confirm"),
    )


class CreateTaskRequest(BaseModel):
    """Request to add a team task."""

    title: str = Field(default="", description="Task text; trimmed, must not be blank")
    assigned_to: str | None = Field(
        default="all",
        validation_alias=AliasChoices("assignedTo", "assigned_to"),
        description="all, admin, manager, seller or user; anything else means all",
    )
    assigned_to_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("assignedToId", "assigned_to_id"),
        description="Target user when assigned_to is 'user'",
    )


class UpdateTaskRequest(BaseModel):
    """Request to change a task's completion state or comment."""

    completed: bool | None = None
    completion_comment: str | None = Field(
        default=None,
        validation_alias=AliasChoices("completionComment", "completion_comment"),
    )


class SaleItemRequest(BaseModel):
    """Cart line in a new sale."""

    product_id: str | None = Field(
        default=None, validation_alias=AliasChoices("productId", "product_id")
    )
    quantity: float = Field(..., gt=0)
    price_at_sale: float = Field(
        ..., ge=0, validation_alias=AliasChoices("priceAtSale", "price_at_sale")
    )


class SalePreviewItemRequest(BaseModel):
    product_name: str | None = Field(
        default=None, validation_alias=AliasChoices("productName", "product_name")
    )
    product_unit: str | None = Field(
        default=None, validation_alias=AliasChoices("productUnit", "product_unit")
    )
    quantity: float = 0.0
    price_at_sale: float = Field(
        default=0.0, validation_alias=AliasChoices("priceAtSale", "price_at_sale")
    )


class SalePreviewRequest(BaseModel):
    """Checkout snapshot as shown on the till screen."""

    items: list[SalePreviewItemRequest] = Field(default_factory=list)
    subtotal: float | None = None
    discount_amount: float | None = Field(
        default=None, validation_alias=AliasChoices("discountAmount", "discount_amount")
    )
    total: float | None = None
    payment_method: str | None = Field(
        default=None, validation_alias=AliasChoices("paymentMethod", "payment_method")
    )
    amount_received: float | None = Field(
        default=None, validation_alias=AliasChoices("amountReceived", "amount_received")
    )
    change: float | None = None


class CreateSaleRequest(BaseModel):
    """Request to record a completed sale."""

    items: list[SaleItemRequest] = Field(..., min_length=1)
    total: float | None = Field(
        default=None, ge=0, description="Defaults to the sum of the line totals"
    )
    payment_method: str = Field(
        default="cash", validation_alias=AliasChoices("paymentMethod", "payment_method")
    )
    amount_received: float | None = Field(
        default=None, validation_alias=AliasChoices("amountReceived", "amount_received")
    )
    change: float | None = None
    preview: SalePreviewRequest | None = None
