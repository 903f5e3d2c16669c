"""Printer that shells out to the platform print command (``lp`` by default)."""

import asyncio
import shutil
from pathlib import Path

from src.config import get_logger, get_settings
from src.core.exceptions import ReceiptError
from src.core.interfaces.receipts import IPrinter

logger = get_logger(__name__)


class CommandPrinter(IPrinter):
    """Runs ``<print_command> <file>`` as a subprocess."""

    def __init__(self, command: list[str] | None = None):
        self.command = list(command or get_settings().receipt.print_command)

    def is_available(self) -> bool:
        return bool(self.command) and shutil.which(self.command[0]) is not None

    async def print_file(self, path: Path) -> None:
        process = await asyncio.create_subprocess_exec(
            *self.command,
            str(path),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        _, stderr = await process.communicate()

        if process.returncode != 0:
            error = stderr.decode(errors="replace").strip()
            logger.error(
                "print_command_failed",
                command=self.command[0],
                returncode=process.returncode,
                error=error,
            )
            raise ReceiptError(
                "Erro ao imprimir recibo",
                code="PRINT_COMMAND_FAILED",
                details={"returncode": process.returncode, "stderr": error},
            )

        logger.info("print_job_submitted", command=self.command[0], path=str(path))
