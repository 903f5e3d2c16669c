"""
Isolated print surface.

Each print gets its own private spool directory holding the staged
document. The directory is owned by the call that created it and removed
``teardown_delay`` seconds after the print command was invoked, whether the
command succeeded or not. The call itself returns right after invoking the
print command; teardown runs later on the event loop.
"""

import asyncio
import shutil
import tempfile
from pathlib import Path

from src.config import get_logger, get_settings
from src.core.exceptions import PrintUnavailableError
from src.core.interfaces.receipts import IPrinter, IPrintSurface

logger = get_logger(__name__)

DOCUMENT_NAME = "recibo.html"


class SpoolPrintSurface(IPrintSurface):
    """Stages receipts in temporary spool directories and prints them."""

    def __init__(
        self,
        printer: IPrinter,
        settle_delay: float | None = None,
        teardown_delay: float | None = None,
        spool_root: Path | None = None,
    ):
        settings = get_settings().receipt
        self._printer = printer
        self.settle_delay = settings.settle_delay if settle_delay is None else settle_delay
        self.teardown_delay = settings.teardown_delay if teardown_delay is None else teardown_delay
        self.spool_root = spool_root or settings.spool_dir
        self._pending: dict[Path, asyncio.TimerHandle] = {}

    @property
    def active_surfaces(self) -> list[Path]:
        """Spool directories not yet torn down."""
        return list(self._pending)

    async def render_and_print(self, document: str) -> None:
        if not self._printer.is_available():
            raise PrintUnavailableError("no print command available")

        spool_dir = self._create_surface()
        loop = asyncio.get_running_loop()

        try:
            path = spool_dir / DOCUMENT_NAME
            try:
                path.write_text(document, encoding="utf-8")
            except OSError as e:
                raise PrintUnavailableError(str(e)) from e

            # Let the staged document settle before handing it over
            await asyncio.sleep(self.settle_delay)
            await self._printer.print_file(path)
            logger.info("receipt_sent_to_printer", spool_dir=str(spool_dir))
        finally:
            self._pending[spool_dir] = loop.call_later(
                self.teardown_delay, self._teardown, spool_dir
            )

    def _create_surface(self) -> Path:
        try:
            if self.spool_root is not None:
                Path(self.spool_root).mkdir(parents=True, exist_ok=True)
            return Path(tempfile.mkdtemp(prefix="recibo-", dir=self.spool_root))
        except OSError as e:
            logger.error("print_surface_unavailable", error=str(e))
            raise PrintUnavailableError(str(e)) from e

    def _teardown(self, spool_dir: Path) -> None:
        self._pending.pop(spool_dir, None)
        shutil.rmtree(spool_dir, ignore_errors=True)
        logger.debug("print_surface_removed", spool_dir=str(spool_dir))

    def close(self) -> None:
        """Tear down every pending surface immediately."""
        for spool_dir, handle in list(self._pending.items()):
            handle.cancel()
            self._teardown(spool_dir)
