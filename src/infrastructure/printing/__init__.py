"""Receipt printing infrastructure."""

from src.infrastructure.printing.command_printer import CommandPrinter
from src.infrastructure.printing.print_surface import SpoolPrintSurface

__all__ = [
    "CommandPrinter",
    "SpoolPrintSurface",
]
