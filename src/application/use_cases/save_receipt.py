"""Save Receipt Use Case - renders a sale's receipt and writes it to the archive."""

from dataclasses import dataclass
from pathlib import Path

from src.application.use_cases.render_receipt import RenderReceiptUseCase
from src.config import get_logger
from src.core.interfaces.receipts import IReceiptArchive

logger = get_logger(__name__)


@dataclass
class SaveReceiptResult:
    """Result of archiving a receipt."""

    sale_id: str
    path: Path


class SaveReceiptUseCase:
    """Archive the HTML receipt of a sale under its year/month/week folder."""

    def __init__(
        self,
        render_use_case: RenderReceiptUseCase | None = None,
        archive: IReceiptArchive | None = None,
    ):
        self._render = render_use_case or RenderReceiptUseCase()
        self._archive = archive

    def _get_archive(self) -> IReceiptArchive:
        if self._archive is None:
            from src.infrastructure.receipts import ReceiptArchive

            self._archive = ReceiptArchive()
        return self._archive

    async def execute(self, sale_id: str) -> SaveReceiptResult:
        """
        Raises:
            SaleNotFoundError: No sale with this id
        """
        data = await self._render.build(sale_id)
        document = self._render.render_document(data)
        path = self._get_archive().save(data, document)
        return SaveReceiptResult(sale_id=sale_id, path=path)
