"""Core domain entities."""

from src.core.entities.audit import (
    AuditContext,
    AuditLog,
    Notification,
    NotificationType,
)
from src.core.entities.product import Category, Product
from src.core.entities.receipt import (
    PAPER_DIMENSIONS_MM,
    PaperSize,
    ReceiptData,
    ReceiptFile,
    ReceiptLine,
    ReceiptSettings,
)
from src.core.entities.sale import (
    Sale,
    SaleItem,
    SalePreview,
    SalePreviewItem,
    new_id,
)
from src.core.entities.task import AssignTarget, Task
from src.core.entities.user import Role, User

__all__ = [
    # Sale entities
    "Sale",
    "SaleItem",
    "SalePreview",
    "SalePreviewItem",
    "new_id",
    # Catalogue entities
    "Category",
    "Product",
    # Receipt entities
    "PaperSize",
    "PAPER_DIMENSIONS_MM",
    "ReceiptSettings",
    "ReceiptLine",
    "ReceiptData",
    "ReceiptFile",
    # Staff entities
    "User",
    "Role",
    # Task entities
    "Task",
    "AssignTarget",
    # Audit entities
    "AuditLog",
    "AuditContext",
    "Notification",
    "NotificationType",
]
