"""Receipt rendering and archiving."""

from src.infrastructure.receipts.archive import ReceiptArchive
from src.infrastructure.receipts.html_renderer import HtmlReceiptRenderer
from src.infrastructure.receipts.settings_store import JsonReceiptSettingsStore

__all__ = [
    "HtmlReceiptRenderer",
    "JsonReceiptSettingsStore",
    "ReceiptArchive",
]
