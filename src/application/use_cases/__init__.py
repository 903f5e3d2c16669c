"""Application use cases."""

from src.application.use_cases.initialize_system import InitializeSystemUseCase, SetupResult
from src.application.use_cases.manage_tasks import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
)
from src.application.use_cases.print_and_save_receipt import (
    PrintAndSaveReceiptUseCase,
    PrintAndSaveResult,
)
from src.application.use_cases.receipt_files import (
    GetReceiptFileUseCase,
    ListReceiptFilesUseCase,
)
from src.application.use_cases.record_sale import RecordSaleResult, RecordSaleUseCase
from src.application.use_cases.render_receipt import RenderReceiptUseCase
from src.application.use_cases.save_receipt import SaveReceiptResult, SaveReceiptUseCase
from src.application.use_cases.seed_database import SeedDatabaseUseCase, SeedResult
from src.application.use_cases.update_receipt_settings import UpdateReceiptSettingsUseCase

__all__ = [
    "CreateTaskUseCase",
    "DeleteTaskUseCase",
    "GetReceiptFileUseCase",
    "InitializeSystemUseCase",
    "ListReceiptFilesUseCase",
    "ListTasksUseCase",
    "PrintAndSaveReceiptUseCase",
    "PrintAndSaveResult",
    "RecordSaleResult",
    "RecordSaleUseCase",
    "RenderReceiptUseCase",
    "SaveReceiptResult",
    "SaveReceiptUseCase",
    "SeedDatabaseUseCase",
    "SeedResult",
    "SetupResult",
    "UpdateReceiptSettingsUseCase",
    "UpdateTaskUseCase",
]
