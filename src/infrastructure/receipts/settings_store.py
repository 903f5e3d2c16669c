"""JSON file store for receipt preferences."""

import json
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from src.config import get_logger, get_settings
from src.core.entities.receipt import PaperSize, ReceiptSettings
from src.core.interfaces.receipts import IReceiptSettingsStore

logger = get_logger(__name__)


class JsonReceiptSettingsStore(IReceiptSettingsStore):
    """
    Keeps ``ReceiptSettings`` in a small JSON file.

    A missing or unreadable file yields the defaults, with the paper size
    taken from ``RECEIPT_DEFAULT_PAPER_SIZE``.
    """

    def __init__(self, path: Path | None = None):
        settings = get_settings()
        self.path = Path(path or settings.receipt.settings_file)
        self._default_paper = PaperSize(settings.receipt.default_paper_size)

    def defaults(self) -> ReceiptSettings:
        return ReceiptSettings(paper_size=self._default_paper)

    def load(self) -> ReceiptSettings:
        if not self.path.exists():
            return self.defaults()
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return self.defaults().model_copy(update=ReceiptSettings(**raw).model_dump(exclude_unset=True))
        except (OSError, ValueError, TypeError, PydanticValidationError) as e:
            logger.warning("receipt_settings_unreadable", path=str(self.path), error=str(e))
            return self.defaults()

    def save(self, settings: ReceiptSettings) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
        logger.info("receipt_settings_saved", paper_size=settings.paper_size.value)
