"""Assembles printable receipt data from a stored sale."""

from src.core.entities.receipt import ReceiptData, ReceiptLine
from src.core.entities.sale import Sale, SalePreviewItem
from src.core.interfaces.storage import IProductStore, IUserStore

DEFAULT_ITEM_NAME = "Produto"
DEFAULT_UNIT = "un"
UNKNOWN_SELLER = "Desconhecido"


class ReceiptBuilder:
    """
    Builds ``ReceiptData`` for a sale.

    The checkout snapshot wins when it has lines, because it records names and
    units as they were at the moment of sale. Older sales without a snapshot
    fall back to the current catalog.
    """

    def __init__(self, user_store: IUserStore, product_store: IProductStore):
        self._user_store = user_store
        self._product_store = product_store

    async def build(self, sale: Sale) -> ReceiptData:
        user = await self._user_store.get_user(sale.user_id)
        preview = sale.preview

        if preview is not None and preview.items:
            lines = [self._line_from_preview(item) for item in preview.items]
        else:
            lines = await self._lines_from_catalog(sale)

        subtotal = sale.total
        discount = 0.0
        payment_method = sale.payment_method or "cash"
        amount_received = sale.amount_received or None
        change = sale.change or None

        if preview is not None:
            if preview.subtotal is not None:
                subtotal = preview.subtotal
            discount = preview.discount_amount or 0.0
            payment_method = preview.payment_method or payment_method
            if preview.amount_received is not None:
                amount_received = preview.amount_received
            if preview.change is not None:
                change = preview.change

        return ReceiptData(
            sale_id=sale.id,
            created_at=sale.created_at,
            seller_name=user.name if user else UNKNOWN_SELLER,
            lines=lines,
            subtotal=subtotal,
            discount_amount=discount,
            total=sale.total,
            payment_method=payment_method,
            amount_received=amount_received,
            change=change,
        )

    @staticmethod
    def _line_from_preview(item: SalePreviewItem) -> ReceiptLine:
        return ReceiptLine(
            name=(item.product_name or "").strip() or DEFAULT_ITEM_NAME,
            quantity=item.quantity,
            unit=(item.product_unit or "").strip() or DEFAULT_UNIT,
            price=item.price_at_sale,
        )

    async def _lines_from_catalog(self, sale: Sale) -> list[ReceiptLine]:
        lines = []
        for item in sale.items:
            product = None
            if item.product_id:
                product = await self._product_store.get_product(item.product_id)
            lines.append(
                ReceiptLine(
                    name=product.name if product else DEFAULT_ITEM_NAME,
                    quantity=item.quantity,
                    unit=product.unit if product else DEFAULT_UNIT,
                    price=item.price_at_sale,
                )
            )
        return lines
