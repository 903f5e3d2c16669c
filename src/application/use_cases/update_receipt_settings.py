"""Update Receipt Settings Use Case."""

from src.application.dto.requests import UpdateReceiptSettingsRequest
from src.config import get_logger
from src.core.entities.audit import AuditContext
from src.core.entities.receipt import PaperSize, ReceiptSettings
from src.core.exceptions import InvalidPaperSizeError
from src.core.interfaces.receipts import IReceiptSettingsStore
from src.core.interfaces.storage import IAuditLogStore

logger = get_logger(__name__)

RECEIPT_SETTINGS_UPDATED = "RECEIPT_SETTINGS_UPDATED"


class UpdateReceiptSettingsUseCase:
    """Merge a partial update into the stored receipt settings and audit it."""

    def __init__(
        self,
        settings_store: IReceiptSettingsStore | None = None,
        audit_store: IAuditLogStore | None = None,
    ):
        self._settings_store = settings_store
        self._audit_store = audit_store

    def _get_settings_store(self) -> IReceiptSettingsStore:
        if self._settings_store is None:
            from src.infrastructure.receipts import JsonReceiptSettingsStore

            self._settings_store = JsonReceiptSettingsStore()
        return self._settings_store

    async def _get_audit_store(self) -> IAuditLogStore:
        if self._audit_store is None:
            from src.infrastructure.storage.sqlite import get_audit_log_store

            self._audit_store = await get_audit_log_store()
        return self._audit_store

    def current(self) -> ReceiptSettings:
        return self._get_settings_store().load()

    async def execute(
        self,
        request: UpdateReceiptSettingsRequest,
        context: AuditContext,
    ) -> ReceiptSettings:
        """
        Raises:
            InvalidPaperSizeError: paper_size is not a supported format
        """
        store = self._get_settings_store()
        previous = store.load()

        paper_size = previous.paper_size
        if request.paper_size:
            try:
                paper_size = PaperSize(request.paper_size)
            except ValueError:
                raise InvalidPaperSizeError(request.paper_size) from None

        updated = ReceiptSettings(
            paper_size=paper_size,
            print_on_confirm=(
                previous.print_on_confirm
                if request.print_on_confirm is None
                else request.print_on_confirm
            ),
        )
        store.save(updated)

        audit_store = await self._get_audit_store()
        await audit_store.create_log(
            context.log(
                RECEIPT_SETTINGS_UPDATED,
                "settings",
                details={
                    "previous": previous.model_dump(mode="json"),
                    "updated": updated.model_dump(mode="json"),
                },
            )
        )
        logger.info("receipt_settings_updated", paper_size=updated.paper_size.value)
        return updated
