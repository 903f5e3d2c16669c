"""
Receipt PDF renderer using fpdf2.

Lays the receipt out on the configured paper size (thermal rolls or A6)
with the core Helvetica font, so every string is reduced to latin-1 before
it is drawn.
"""

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from src.config import get_settings
from src.config.settings import ReceiptSettingsConfig
from src.core.entities.receipt import PaperSize, ReceiptData
from src.core.interfaces.receipts import IReceiptPdfRenderer
from src.core.services.receipt_format import (
    format_currency,
    format_quantity,
    format_receipt_date,
    payment_label,
)

MARGIN_MM = 4


def _latin1(text: str) -> str:
    """Replace characters the core fonts cannot encode."""
    return text.encode("latin-1", errors="replace").decode("latin-1")


class Fpdf2ReceiptRenderer(IReceiptPdfRenderer):
    """Renders receipts as single-column PDFs."""

    def __init__(self, receipt_settings: ReceiptSettingsConfig | None = None) -> None:
        if receipt_settings is None:
            receipt_settings = get_settings().receipt
        self._settings = receipt_settings

    def render(self, data: ReceiptData, paper_size: PaperSize) -> bytes:
        """Render ``data`` into PDF bytes."""
        width, height = paper_size.dimensions_mm
        pdf = FPDF(unit="mm", format=(width, height))
        pdf.set_margins(MARGIN_MM, MARGIN_MM, MARGIN_MM)
        pdf.set_auto_page_break(auto=True, margin=MARGIN_MM)
        pdf.add_page()

        self._render_header(pdf, data)
        self._render_separator(pdf)
        self._render_lines(pdf, data)
        self._render_separator(pdf)
        self._render_totals(pdf, data)
        self._render_footer(pdf, data)

        return bytes(pdf.output())

    def _money(self, value: float) -> str:
        return format_currency(value, self._settings.currency_symbol)

    def _render_header(self, pdf: FPDF, data: ReceiptData) -> None:
        pdf.set_font("Helvetica", "B", 11)
        pdf.cell(
            0, 5, _latin1(self._settings.brand_name), align="C",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        pdf.set_font("Helvetica", "B", 9)
        pdf.cell(
            0, 5, _latin1(f"# {data.sale_id}"), align="C",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        pdf.set_font("Helvetica", "", 7)
        pdf.cell(
            0, 4, _latin1(format_receipt_date(data.created_at)), align="C",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        pdf.cell(
            0, 4, _latin1(f"Atendente: {data.seller_name}"), align="C",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )

    @staticmethod
    def _render_separator(pdf: FPDF) -> None:
        y = pdf.get_y() + 1
        pdf.set_draw_color(100, 100, 100)
        with pdf.local_context(dash_pattern=dict(dash=1, gap=1)):
            pdf.line(pdf.l_margin, y, pdf.w - pdf.r_margin, y)
        pdf.set_draw_color(0, 0, 0)
        pdf.ln(2)

    def _render_lines(self, pdf: FPDF, data: ReceiptData) -> None:
        for line in data.lines:
            pdf.set_font("Helvetica", "B", 8)
            pdf.multi_cell(0, 4, _latin1(line.name), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            pdf.set_font("Helvetica", "", 7)
            detail = (
                f"{format_quantity(line.quantity, line.unit)} {line.unit} x "
                f"{self._money(line.price)}"
            )
            pdf.cell(pdf.epw / 2, 4, _latin1(detail))
            pdf.cell(
                0, 4, self._money(line.total), align="R",
                new_x=XPos.LMARGIN, new_y=YPos.NEXT,
            )

    def _render_totals(self, pdf: FPDF, data: ReceiptData) -> None:
        rows: list[tuple[str, str, str]] = [("Subtotal", self._money(data.subtotal), "")]
        if data.discount_amount > 0:
            rows.append(("Desconto", f"-{self._money(data.discount_amount)}", ""))
        rows.append(("TOTAL", self._money(data.total), "B"))
        rows.append(("Pagamento", payment_label(data.payment_method), ""))
        if data.amount_received is not None:
            rows.append(("Recebido", self._money(data.amount_received), ""))
        if data.change is not None:
            rows.append(("Troco", self._money(data.change), ""))

        for label, value, style in rows:
            pdf.set_font("Helvetica", style, 9 if style else 8)
            pdf.cell(pdf.epw / 2, 5, _latin1(label))
            pdf.cell(
                0, 5, _latin1(value), align="R",
                new_x=XPos.LMARGIN, new_y=YPos.NEXT,
            )

    def _render_footer(self, pdf: FPDF, data: ReceiptData) -> None:
        pdf.ln(2)
        pdf.set_font("Helvetica", "I", 7)
        pdf.cell(
            0, 4, _latin1(self._settings.footer_text), align="C",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        pdf.cell(
            0, 4, _latin1(f"ID: {data.sale_id}"), align="C",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
