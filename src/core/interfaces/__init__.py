"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.receipts import (
    IPrinter,
    IPrintSurface,
    IReceiptArchive,
    IReceiptGateway,
    IReceiptPdfRenderer,
    IReceiptRenderer,
    IReceiptSettingsStore,
)
from src.core.interfaces.storage import (
    IAuditLogStore,
    INotificationStore,
    IProductStore,
    ISaleStore,
    ITaskStore,
    IUserStore,
)

__all__ = [
    # Storage interfaces
    "ISaleStore",
    "IUserStore",
    "IProductStore",
    "ITaskStore",
    "IAuditLogStore",
    "INotificationStore",
    # Receipt interfaces
    "IReceiptGateway",
    "IPrintSurface",
    "IPrinter",
    "IReceiptRenderer",
    "IReceiptPdfRenderer",
    "IReceiptSettingsStore",
    "IReceiptArchive",
]
