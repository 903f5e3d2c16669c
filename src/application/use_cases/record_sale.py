"""Record Sale Use Case."""

from dataclasses import dataclass

from src.application.dto.requests import CreateSaleRequest
from src.config import get_logger
from src.core.entities.sale import Sale, SaleItem, SalePreview
from src.core.entities.user import User
from src.core.interfaces.storage import ISaleStore

logger = get_logger(__name__)


@dataclass
class RecordSaleResult:
    """Result of recording a sale."""

    sale: Sale


class RecordSaleUseCase:
    """Persist a completed sale for the acting user."""

    def __init__(self, sale_store: ISaleStore | None = None):
        self._sale_store = sale_store

    async def _get_sale_store(self) -> ISaleStore:
        if self._sale_store is None:
            from src.infrastructure.storage.sqlite import get_sale_store

            self._sale_store = await get_sale_store()
        return self._sale_store

    async def execute(self, request: CreateSaleRequest, user: User) -> RecordSaleResult:
        items = [
            SaleItem(
                product_id=item.product_id,
                quantity=item.quantity,
                price_at_sale=item.price_at_sale,
            )
            for item in request.items
        ]
        total = request.total
        if total is None:
            total = round(sum(i.quantity * i.price_at_sale for i in items), 2)

        preview = None
        if request.preview is not None:
            preview = SalePreview.model_validate(request.preview.model_dump())

        sale = Sale(
            user_id=user.id,
            total=total,
            amount_received=request.amount_received,
            change=request.change,
            payment_method=request.payment_method,
            items=items,
            preview=preview,
        )
        sale = await (await self._get_sale_store()).create_sale(sale)
        logger.info("sale_recorded", sale_id=sale.id, user_id=user.id, total=sale.total)
        return RecordSaleResult(sale=sale)
