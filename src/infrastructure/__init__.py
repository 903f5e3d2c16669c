"""Infrastructure layer implementations."""

from src.infrastructure import client, pdf, printing, receipts, storage

__all__ = ["storage", "receipts", "pdf", "printing", "client"]
