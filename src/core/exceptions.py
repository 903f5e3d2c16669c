"""
Domain exceptions for the POS application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class POSError(Exception):
    """Base exception for all POS errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(POSError):
    """Base exception for storage operations."""

    pass


class SaleNotFoundError(StorageError):
    """Sale not found in storage."""

    def __init__(self, sale_id: str):
        super().__init__(
            "Venda não encontrada",
            code="SALE_NOT_FOUND",
            details={"sale_id": sale_id},
        )


class TaskNotFoundError(StorageError):
    """Task not found in storage."""

    def __init__(self, task_id: str):
        super().__init__(
            "Tarefa não encontrada",
            code="TASK_NOT_FOUND",
            details={"task_id": task_id},
        )


class UserNotFoundError(StorageError):
    """User not found in storage."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Receipt Exceptions
class ReceiptError(POSError):
    """Base exception for receipt operations."""

    pass


class ReceiptNotFoundError(ReceiptError):
    """The sale behind a receipt does not exist on the server."""

    def __init__(self, sale_id: str):
        super().__init__(
            "Venda não encontrada",
            code="RECEIPT_SALE_NOT_FOUND",
            details={"sale_id": sale_id},
        )


class ReceiptRenderError(ReceiptError):
    """The server could not produce the receipt document."""

    def __init__(self, sale_id: str, status_code: int | None = None):
        super().__init__(
            "Erro ao gerar recibo",
            code="RECEIPT_RENDER_ERROR",
            details={"sale_id": sale_id, "status_code": status_code},
        )


class PrintUnavailableError(ReceiptError):
    """No rendering surface could be obtained for printing."""

    def __init__(self, reason: str | None = None):
        super().__init__(
            "Não foi possível criar janela de impressão",
            code="PRINT_UNAVAILABLE",
            details={"reason": reason},
        )


class ReceiptSaveError(ReceiptError):
    """Persisting the receipt failed."""

    def __init__(self, sale_id: str, reason: str | None = None):
        super().__init__(
            "Erro ao guardar recibo",
            code="RECEIPT_SAVE_ERROR",
            details={"sale_id": sale_id, "reason": reason},
        )


class PrintAndSaveError(ReceiptError):
    """One or both sides of print-and-save failed."""

    def __init__(self, sale_id: str, errors: dict[str, BaseException]):
        self.failed = list(errors)
        self.errors = errors
        super().__init__(
            f"Erro ao {' e '.join(self.failed)} recibo",
            code="PRINT_AND_SAVE_FAILED",
            details={
                "sale_id": sale_id,
                "failed": self.failed,
                "reasons": {side: str(err) for side, err in errors.items()},
            },
        )


class ReceiptFileNotFoundError(ReceiptError):
    """The sale exists but its archived receipt file does not."""

    def __init__(self, sale_id: str):
        super().__init__(
            "Recibo não encontrado. O ficheiro pode ter sido removido.",
            code="RECEIPT_FILE_NOT_FOUND",
            details={"sale_id": sale_id},
        )


class InvalidPaperSizeError(ReceiptError):
    """Receipt paper size is not one of the supported formats."""

    def __init__(self, paper_size: str):
        super().__init__(
            "Tamanho de papel inválido",
            code="INVALID_PAPER_SIZE",
            details={"paper_size": paper_size},
        )


# Setup Exceptions
class SetupError(POSError):
    """First-run initialisation failed."""

    pass


class DatabaseNotEmptyError(SetupError):
    """Seeding refused because the database already has users."""

    def __init__(self, user_count: int):
        super().__init__(
            "Banco de dados já contém usuários",
            code="DATABASE_NOT_EMPTY",
            details={"user_count": user_count},
        )


# Schema Exceptions
class SchemaRepairError(POSError):
    """A column fix hit an unexpected database error."""

    def __init__(self, table: str, column: str, error: str):
        super().__init__(
            f"Schema repair failed on {table}.{column}: {error}",
            code="SCHEMA_REPAIR_FAILED",
            details={"table": table, "column": column, "error": error},
        )


# Client Exceptions
class RemoteAPIError(POSError):
    """The POS server answered with an error or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None, path: str | None = None):
        super().__init__(
            message,
            code="REMOTE_API_ERROR",
            details={"status_code": status_code, "path": path},
        )
        self.status_code = status_code


# Validation Exceptions
class ValidationError(POSError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            message,
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value else None,
            },
        )


class ConfigurationError(POSError):
    """Configuration error."""

    pass
