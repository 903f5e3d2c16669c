"""Tests for the spool print surface and the command printer."""

import asyncio
import sys
from pathlib import Path

import pytest

from src.core.exceptions import PrintUnavailableError, ReceiptError
from src.core.interfaces.receipts import IPrinter
from src.infrastructure.printing import CommandPrinter, SpoolPrintSurface


class FakePrinter(IPrinter):
    def __init__(self, available: bool = True, fail: bool = False):
        self.available = available
        self.fail = fail
        self.printed: list[tuple[Path, str]] = []

    def is_available(self) -> bool:
        return self.available

    async def print_file(self, path: Path) -> None:
        self.printed.append((path, path.read_text(encoding="utf-8")))
        if self.fail:
            raise ReceiptError("Erro ao imprimir recibo", code="PRINT_COMMAND_FAILED")


@pytest.fixture
def spool_root(tmp_path: Path) -> Path:
    return tmp_path / "spool"


class TestSpoolPrintSurface:
    async def test_prints_staged_document(self, spool_root):
        printer = FakePrinter()
        surface = SpoolPrintSurface(printer, settle_delay=0, teardown_delay=10, spool_root=spool_root)

        await surface.render_and_print("<html>recibo</html>")

        path, content = printer.printed[0]
        assert content == "<html>recibo</html>"
        assert path.parent.parent == spool_root
        assert path.parent.name.startswith("recibo-")
        surface.close()

    async def test_surface_removed_after_teardown_delay(self, spool_root):
        printer = FakePrinter()
        surface = SpoolPrintSurface(printer, settle_delay=0, teardown_delay=0.01, spool_root=spool_root)

        await surface.render_and_print("<html></html>")
        spool_dir = printer.printed[0][0].parent
        assert surface.active_surfaces == [spool_dir]

        await asyncio.sleep(0.05)

        assert not spool_dir.exists()
        assert surface.active_surfaces == []

    async def test_surface_removed_when_printing_fails(self, spool_root):
        printer = FakePrinter(fail=True)
        surface = SpoolPrintSurface(printer, settle_delay=0, teardown_delay=0, spool_root=spool_root)

        with pytest.raises(ReceiptError):
            await surface.render_and_print("<html></html>")

        await asyncio.sleep(0.01)
        assert list(spool_root.iterdir()) == []

    async def test_unavailable_printer(self, spool_root):
        surface = SpoolPrintSurface(FakePrinter(available=False), spool_root=spool_root)

        with pytest.raises(PrintUnavailableError) as exc_info:
            await surface.render_and_print("<html></html>")

        assert exc_info.value.message == "Não foi possível criar janela de impressão"
        assert not spool_root.exists()

    async def test_uncreatable_surface(self, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("x")
        surface = SpoolPrintSurface(FakePrinter(), spool_root=blocker / "spool")

        with pytest.raises(PrintUnavailableError):
            await surface.render_and_print("<html></html>")

    async def test_close_tears_down_pending(self, spool_root):
        printer = FakePrinter()
        surface = SpoolPrintSurface(printer, settle_delay=0, teardown_delay=60, spool_root=spool_root)

        await surface.render_and_print("a")
        await surface.render_and_print("b")
        assert len(surface.active_surfaces) == 2

        surface.close()

        assert surface.active_surfaces == []
        assert list(spool_root.iterdir()) == []

    def test_delays_default_to_settings(self):
        surface = SpoolPrintSurface(FakePrinter())
        assert surface.settle_delay == 0
        assert surface.teardown_delay == 0


class TestCommandPrinter:
    def test_missing_command_is_unavailable(self):
        assert not CommandPrinter(["definitely-not-a-print-command-xyz"]).is_available()

    def test_available_command(self):
        assert CommandPrinter([sys.executable]).is_available()

    async def test_successful_print(self, tmp_path):
        document = tmp_path / "recibo.html"
        document.write_text("x")
        printer = CommandPrinter([sys.executable, "-c", "import sys; sys.exit(0)"])
        await printer.print_file(document)

    async def test_failed_print_raises(self, tmp_path):
        document = tmp_path / "recibo.html"
        document.write_text("x")
        printer = CommandPrinter([sys.executable, "-c", "import sys; sys.exit(3)"])

        with pytest.raises(ReceiptError) as exc_info:
            await printer.print_file(document)

        assert exc_info.value.code == "PRINT_COMMAND_FAILED"
        assert exc_info.value.details["returncode"] == 3
