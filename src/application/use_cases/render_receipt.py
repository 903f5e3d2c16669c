"""Render Receipt Use Case - builds receipt data for a sale and renders it."""

from src.config import get_logger
from src.core.entities.receipt import ReceiptData, ReceiptSettings
from src.core.exceptions import SaleNotFoundError
from src.core.interfaces.receipts import (
    IReceiptPdfRenderer,
    IReceiptRenderer,
    IReceiptSettingsStore,
)
from src.core.interfaces.storage import IProductStore, ISaleStore, IUserStore
from src.core.services.receipt_builder import ReceiptBuilder

logger = get_logger(__name__)


class RenderReceiptUseCase:
    """Produce the HTML or PDF receipt of a stored sale."""

    def __init__(
        self,
        sale_store: ISaleStore | None = None,
        user_store: IUserStore | None = None,
        product_store: IProductStore | None = None,
        settings_store: IReceiptSettingsStore | None = None,
        renderer: IReceiptRenderer | None = None,
        pdf_renderer: IReceiptPdfRenderer | None = None,
    ):
        self._sale_store = sale_store
        self._user_store = user_store
        self._product_store = product_store
        self._settings_store = settings_store
        self._renderer = renderer
        self._pdf_renderer = pdf_renderer

    async def _get_sale_store(self) -> ISaleStore:
        if self._sale_store is None:
            from src.infrastructure.storage.sqlite import get_sale_store

            self._sale_store = await get_sale_store()
        return self._sale_store

    async def _get_builder(self) -> ReceiptBuilder:
        if self._user_store is None:
            from src.infrastructure.storage.sqlite import get_user_store

            self._user_store = await get_user_store()
        if self._product_store is None:
            from src.infrastructure.storage.sqlite import get_product_store

            self._product_store = await get_product_store()
        return ReceiptBuilder(self._user_store, self._product_store)

    def _get_settings(self) -> ReceiptSettings:
        if self._settings_store is None:
            from src.infrastructure.receipts import JsonReceiptSettingsStore

            self._settings_store = JsonReceiptSettingsStore()
        return self._settings_store.load()

    def _get_renderer(self) -> IReceiptRenderer:
        if self._renderer is None:
            from src.infrastructure.receipts import HtmlReceiptRenderer

            self._renderer = HtmlReceiptRenderer()
        return self._renderer

    def _get_pdf_renderer(self) -> IReceiptPdfRenderer:
        if self._pdf_renderer is None:
            from src.infrastructure.pdf import Fpdf2ReceiptRenderer

            self._pdf_renderer = Fpdf2ReceiptRenderer()
        return self._pdf_renderer

    async def build(self, sale_id: str) -> ReceiptData:
        """
        Load a sale and assemble its receipt.

        Raises:
            SaleNotFoundError: No sale with this id
        """
        sale = await (await self._get_sale_store()).get_sale(sale_id)
        if sale is None:
            raise SaleNotFoundError(sale_id)
        builder = await self._get_builder()
        return await builder.build(sale)

    def render_document(self, data: ReceiptData) -> str:
        """Render already-built receipt data to HTML on the configured paper."""
        settings = self._get_settings()
        html = self._get_renderer().render(data, settings.paper_size)
        logger.debug("receipt_rendered", sale_id=data.sale_id, paper_size=settings.paper_size.value)
        return html

    async def render_html(self, sale_id: str) -> str:
        return self.render_document(await self.build(sale_id))

    async def render_pdf(self, sale_id: str) -> bytes:
        data = await self.build(sale_id)
        settings = self._get_settings()
        pdf_bytes = self._get_pdf_renderer().render(data, settings.paper_size)
        logger.info("receipt_pdf_rendered", sale_id=sale_id, size=len(pdf_bytes))
        return pdf_bytes

