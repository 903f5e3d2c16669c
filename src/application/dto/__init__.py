"""Data Transfer Objects for API contracts."""

from src.application.dto.requests import (
    CreateSaleRequest,
    CreateTaskRequest,
    SaleItemRequest,
    SalePreviewItemRequest,
    SalePreviewRequest,
    SaveReceiptRequest,
    UpdateReceiptSettingsRequest,
    UpdateTaskRequest,
)
from src.application.dto.responses import (
    CheckEmptyResponse,
    ErrorResponse,
    ForceSeedResponse,
    HealthResponse,
    ProviderHealthResponse,
    ReceiptFileResponse,
    ReceiptSettingsResponse,
    SaleItemResponse,
    SaleResponse,
    SaveReceiptResponse,
    SuccessResponse,
    TaskResponse,
)

__all__ = [
    # Requests
    "CreateSaleRequest",
    "CreateTaskRequest",
    "SaleItemRequest",
    "SalePreviewItemRequest",
    "SalePreviewRequest",
    "SaveReceiptRequest",
    "UpdateReceiptSettingsRequest",
    "UpdateTaskRequest",
    # Responses
    "CheckEmptyResponse",
    "ErrorResponse",
    "ForceSeedResponse",
    "HealthResponse",
    "ProviderHealthResponse",
    "ReceiptFileResponse",
    "ReceiptSettingsResponse",
    "SaleItemResponse",
    "SaleResponse",
    "SaveReceiptResponse",
    "SuccessResponse",
    "TaskResponse",
]
