"""
Ports used by the receipt flows.

The till-side orchestrator talks to the server through ``IReceiptGateway``
and prints through ``IPrintSurface``. The server side renders through
``IReceiptRenderer`` and archives through ``IReceiptArchive``.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path

from src.core.entities.receipt import PaperSize, ReceiptData, ReceiptFile, ReceiptSettings


class IReceiptGateway(ABC):
    """Remote receipt operations exposed by the POS server."""

    @abstractmethod
    async def fetch_receipt_document(self, sale_id: str) -> str:
        """
        Retrieve the renderable receipt document for a sale.

        Raises:
            ReceiptNotFoundError: The sale does not exist.
            ReceiptRenderError: Any other failure.
        """
        pass

    @abstractmethod
    async def save_receipt(self, sale_id: str) -> str:
        """Ask the server to archive the receipt; returns the stored path."""
        pass


class IPrintSurface(ABC):
    """Isolated rendering surface that hands a document to the printer."""

    @abstractmethod
    async def render_and_print(self, document: str) -> None:
        """
        Stage, settle, print and schedule teardown.

        Raises:
            PrintUnavailableError: No surface could be obtained.
        """
        pass


class IPrinter(ABC):
    """Sends a staged file to a physical or virtual printer."""

    @abstractmethod
    async def print_file(self, path: Path) -> None:
        pass

    @abstractmethod
    def is_available(self) -> bool:
        pass


class IReceiptRenderer(ABC):
    """Renders receipt data as a printable HTML document."""

    @abstractmethod
    def render(self, data: ReceiptData, paper_size: PaperSize) -> str:
        pass


class IReceiptPdfRenderer(ABC):
    """Renders receipt data as PDF bytes."""

    @abstractmethod
    def render(self, data: ReceiptData, paper_size: PaperSize) -> bytes:
        pass


class IReceiptSettingsStore(ABC):
    """Persistence for operator receipt preferences."""

    @abstractmethod
    def load(self) -> ReceiptSettings:
        """Return stored settings, or defaults when none are readable."""
        pass

    @abstractmethod
    def save(self, settings: ReceiptSettings) -> None:
        pass


class IReceiptArchive(ABC):
    """On-disk store of issued receipts."""

    @abstractmethod
    def save(self, data: ReceiptData, document: str) -> Path:
        pass

    @abstractmethod
    def path_for(self, created_at: datetime) -> Path:
        pass

    @abstractmethod
    def exists(self, created_at: datetime) -> bool:
        pass

    @abstractmethod
    def list_files(self) -> list[ReceiptFile]:
        pass
