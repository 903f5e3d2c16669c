"""
Print And Save Receipt Use Case.

Given a sale id, prints the receipt on the till and archives it on the
server. The two sides are independent: both run concurrently, neither is
cancelled when the other fails, and the call only succeeds when both did.
"""

import asyncio
from dataclasses import dataclass

from src.config import get_logger
from src.core.exceptions import PrintAndSaveError
from src.core.interfaces.receipts import IPrintSurface, IReceiptGateway

logger = get_logger(__name__)

SAVE_SIDE = "guardar"
PRINT_SIDE = "imprimir"


@dataclass
class PrintAndSaveResult:
    """Result of a successful print-and-save."""

    sale_id: str
    saved_path: str


class PrintAndSaveReceiptUseCase:
    """
    Use case for issuing a receipt from the till.

    Orchestrates:
    1. Persisting the receipt through the server
    2. Fetching the receipt document, rendering it and printing it

    Failures on either side are collected into one PrintAndSaveError.
    A POSClient the use case creates itself is closed by ``aclose``;
    an injected gateway belongs to the caller.
    """

    def __init__(
        self,
        gateway: IReceiptGateway | None = None,
        print_surface: IPrintSurface | None = None,
    ):
        self._gateway = gateway
        self._owns_gateway = False
        self._print_surface = print_surface

    def _get_gateway(self) -> IReceiptGateway:
        if self._gateway is None:
            from src.infrastructure.client import POSClient

            self._gateway = POSClient()
            self._owns_gateway = True
        return self._gateway

    async def aclose(self) -> None:
        if self._owns_gateway:
            await self._gateway.close()
            self._gateway = None
            self._owns_gateway = False

    async def __aenter__(self) -> "PrintAndSaveReceiptUseCase":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def _get_print_surface(self) -> IPrintSurface:
        if self._print_surface is None:
            from src.infrastructure.printing import CommandPrinter, SpoolPrintSurface

            self._print_surface = SpoolPrintSurface(CommandPrinter())
        return self._print_surface

    async def print_receipt(self, sale_id: str) -> None:
        """Fetch the server-rendered receipt and print it."""
        document = await self._get_gateway().fetch_receipt_document(sale_id)
        await self._get_print_surface().render_and_print(document)
        logger.info("receipt_printed", sale_id=sale_id)

    async def save_receipt(self, sale_id: str) -> str:
        """Archive the receipt on the server; returns the stored path."""
        path = await self._get_gateway().save_receipt(sale_id)
        logger.info("receipt_persisted", sale_id=sale_id, path=path)
        return path

    async def execute(self, sale_id: str) -> PrintAndSaveResult:
        """
        Print and save concurrently.

        Raises:
            PrintAndSaveError: ``failed`` lists "guardar" and/or "imprimir"
        """
        logger.info("print_and_save_started", sale_id=sale_id)

        saved, printed = await asyncio.gather(
            self.save_receipt(sale_id),
            self.print_receipt(sale_id),
            return_exceptions=True,
        )

        errors: dict[str, BaseException] = {}
        if isinstance(saved, BaseException):
            errors[SAVE_SIDE] = saved
        if isinstance(printed, BaseException):
            errors[PRINT_SIDE] = printed

        if errors:
            logger.error(
                "print_and_save_failed",
                sale_id=sale_id,
                failed=list(errors),
                reasons={side: str(err) for side, err in errors.items()},
            )
            raise PrintAndSaveError(sale_id, errors)

        logger.info("print_and_save_completed", sale_id=sale_id)
        return PrintAndSaveResult(sale_id=sale_id, saved_path=saved)
