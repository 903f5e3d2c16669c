"""Core business services."""

from src.core.services.receipt_builder import ReceiptBuilder
from src.core.services.receipt_format import (
    format_currency,
    format_quantity,
    format_receipt_date,
    payment_label,
)
from src.core.services.task_board import TaskBoard, is_visible_to

__all__ = [
    "ReceiptBuilder",
    "format_currency",
    "format_quantity",
    "format_receipt_date",
    "payment_label",
    "TaskBoard",
    "is_visible_to",
]
