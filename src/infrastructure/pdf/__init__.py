"""PDF generation infrastructure."""

from src.infrastructure.pdf.receipt_pdf_renderer import Fpdf2ReceiptRenderer

__all__ = [
    "Fpdf2ReceiptRenderer",
]
