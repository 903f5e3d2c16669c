"""Receipt File Use Cases - audited access to archived receipts."""

from pathlib import Path

from src.config import get_logger
from src.core.entities.audit import AuditContext
from src.core.entities.receipt import ReceiptFile
from src.core.exceptions import ReceiptFileNotFoundError, SaleNotFoundError
from src.core.interfaces.receipts import IReceiptArchive
from src.core.interfaces.storage import IAuditLogStore, ISaleStore

logger = get_logger(__name__)

RECEIPT_VIEWED = "RECEIPT_VIEWED"
RECEIPT_ACCESS_DENIED = "RECEIPT_ACCESS_DENIED"


class GetReceiptFileUseCase:
    """
    Locate the archived receipt of a sale.

    Every lookup of an existing sale is audited: RECEIPT_VIEWED when the file
    is there, RECEIPT_ACCESS_DENIED when it is missing.
    """

    def __init__(
        self,
        sale_store: ISaleStore | None = None,
        audit_store: IAuditLogStore | None = None,
        archive: IReceiptArchive | None = None,
    ):
        self._sale_store = sale_store
        self._audit_store = audit_store
        self._archive = archive

    async def _get_sale_store(self) -> ISaleStore:
        if self._sale_store is None:
            from src.infrastructure.storage.sqlite import get_sale_store

            self._sale_store = await get_sale_store()
        return self._sale_store

    async def _get_audit_store(self) -> IAuditLogStore:
        if self._audit_store is None:
            from src.infrastructure.storage.sqlite import get_audit_log_store

            self._audit_store = await get_audit_log_store()
        return self._audit_store

    def _get_archive(self) -> IReceiptArchive:
        if self._archive is None:
            from src.infrastructure.receipts import ReceiptArchive

            self._archive = ReceiptArchive()
        return self._archive

    async def execute(self, sale_id: str, context: AuditContext) -> Path:
        """
        Raises:
            SaleNotFoundError: No sale with this id
            ReceiptFileNotFoundError: The sale has no archived receipt
        """
        sale = await (await self._get_sale_store()).get_sale(sale_id)
        if sale is None:
            raise SaleNotFoundError(sale_id)

        archive = self._get_archive()
        audit_store = await self._get_audit_store()

        if not archive.exists(sale.created_at):
            await audit_store.create_log(
                context.log(
                    RECEIPT_ACCESS_DENIED,
                    "receipt",
                    sale.id,
                    details={"reason": "file_not_found"},
                )
            )
            logger.warning("receipt_file_missing", sale_id=sale.id)
            raise ReceiptFileNotFoundError(sale.id)

        await audit_store.create_log(context.log(RECEIPT_VIEWED, "receipt", sale.id))
        return archive.path_for(sale.created_at)


class ListReceiptFilesUseCase:
    """List every archived receipt."""

    def __init__(self, archive: IReceiptArchive | None = None):
        self._archive = archive

    def execute(self) -> list[ReceiptFile]:
        if self._archive is None:
            from src.infrastructure.receipts import ReceiptArchive

            self._archive = ReceiptArchive()
        return self._archive.list_files()
