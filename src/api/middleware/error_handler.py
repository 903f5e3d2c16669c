"""
Error handling middleware.

Standardizes all API error responses to include:
- error_code: machine-readable identifier
- message: human-readable description
- hint: suggested recovery action
"""

import traceback
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from src.application.dto.responses import ErrorResponse
from src.config import get_logger
from src.core.exceptions import (
    ConfigurationError,
    DatabaseNotEmptyError,
    InvalidPaperSizeError,
    POSError,
    PrintUnavailableError,
    ReceiptError,
    ReceiptFileNotFoundError,
    ReceiptNotFoundError,
    RemoteAPIError,
    SaleNotFoundError,
    SchemaRepairError,
    SetupError,
    StorageError,
    TaskNotFoundError,
    UserNotFoundError,
    ValidationError,
)

logger = get_logger(__name__)


# Map exceptions to HTTP status codes; first match wins
EXCEPTION_STATUS_MAP: dict[type[Exception], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidPaperSizeError: status.HTTP_400_BAD_REQUEST,
    DatabaseNotEmptyError: status.HTTP_400_BAD_REQUEST,
    SaleNotFoundError: status.HTTP_404_NOT_FOUND,
    TaskNotFoundError: status.HTTP_404_NOT_FOUND,
    UserNotFoundError: status.HTTP_404_NOT_FOUND,
    ReceiptNotFoundError: status.HTTP_404_NOT_FOUND,
    ReceiptFileNotFoundError: status.HTTP_404_NOT_FOUND,
    PrintUnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
    RemoteAPIError: status.HTTP_502_BAD_GATEWAY,
    ReceiptError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    SetupError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    SchemaRepairError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    FileNotFoundError: status.HTTP_404_NOT_FOUND,
    ValueError: status.HTTP_400_BAD_REQUEST,
    KeyError: status.HTTP_404_NOT_FOUND,
}

# Hint messages per error code / exception type
HINT_MAP: dict[str, str] = {
    "SALE_NOT_FOUND": "Check the sale ID and try GET /api/sales to list recorded sales.",
    "TASK_NOT_FOUND": "Check the task ID and try GET /api/tasks to list visible tasks.",
    "USER_NOT_FOUND": "Send a valid user ID in the X-User-Id header.",
    "RECEIPT_SALE_NOT_FOUND": "The sale behind this receipt does not exist.",
    "RECEIPT_FILE_NOT_FOUND": "Save the receipt again with POST /api/receipts/save.",
    "RECEIPT_RENDER_ERROR": "The receipt could not be generated. Check server logs.",
    "INVALID_PAPER_SIZE": "Use one of 80x60, 80x70, 80x80 or a6.",
    "PRINT_UNAVAILABLE": "Check that a printer is configured on this machine.",
    "PRINT_COMMAND_FAILED": "The print command exited with an error. Check the printer queue.",
    "DATABASE_NOT_EMPTY": "Seeding only runs on an empty database.",
    "DATABASE_URL_MISSING": "Set DATABASE_URL before running the schema repair.",
    "SCHEMA_REPAIR_FAILED": "The column could not be added. Check database permissions.",
    "VALIDATION_ERROR": "Check the request body against the API schema.",
    "DATABASE_ERROR": "A database operation failed. Check server logs.",
    "ValidationError": "Check the request body fields and types.",
    "FileNotFoundError": "The requested file or resource was not found.",
    "ValueError": "A parameter value is invalid. Check the request.",
    "KeyError": "The requested key was not found.",
}

# Default hints by HTTP status code
STATUS_HINTS: dict[int, str] = {
    400: "Check the request parameters and body.",
    401: "Send the X-User-Id header of a registered user.",
    403: "This operation requires an administrator.",
    404: "The requested resource was not found. Verify the ID.",
    422: "The request could not be processed. Check the input format.",
    500: "An internal error occurred. Check server logs.",
    502: "The upstream POS server returned an error.",
    503: "The service is temporarily unavailable. Retry later.",
}


def _get_hint(error_code: str, status_code: int) -> str:
    """Resolve hint from error code, falling back to status-based hint."""
    return HINT_MAP.get(error_code) or STATUS_HINTS.get(status_code, "")


def status_for(exc: Exception) -> int:
    """HTTP status for an exception, 500 when unmapped."""
    for exc_type, code in EXCEPTION_STATUS_MAP.items():
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware.

    Converts exceptions to standardized JSON error responses.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Handle request with error catching."""
        try:
            return await call_next(request)

        except Exception as e:
            return self._handle_exception(request, e)

    def _handle_exception(
        self,
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Convert exception to standardized JSON response."""
        status_code = status_for(exc)

        # Get error code: prefer POSError.code, fall back to class name
        if isinstance(exc, POSError):
            error_code = exc.code
        else:
            error_code = exc.__class__.__name__

        request_id = getattr(request.state, "request_id", None)

        logger.error(
            "unhandled_exception",
            request_id=request_id,
            path=request.url.path,
            error_type=error_code,
            error=str(exc),
            traceback=traceback.format_exc() if status_code >= 500 else None,
        )

        return error_response(request, str(exc), status_code, error_code)


def error_response(
    request: Request,
    message: str,
    status_code: int,
    error_code: str,
    detail: str | None = None,
) -> JSONResponse:
    """Standard error body; the hint comes from the code, then the status."""
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        hint=_get_hint(error_code, status_code),
        detail=detail,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def setup_exception_handlers(app: FastAPI) -> None:
    """Register handlers for domain, validation and HTTP errors."""
    from fastapi.exceptions import RequestValidationError
    from starlette.exceptions import HTTPException

    @app.exception_handler(POSError)
    async def pos_exception_handler(request: Request, exc: POSError) -> JSONResponse:
        status_code = status_for(exc)
        logger.warning(
            "request_rejected",
            path=request.url.path,
            error_type=exc.code,
            error=exc.message,
            status=status_code,
        )
        return error_response(request, exc.message, status_code, exc.code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        return error_response(
            request,
            "Dados inválidos",
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "VALIDATION_ERROR",
            detail=problems,
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "Erro"
        return error_response(
            request,
            message,
            exc.status_code,
            _infer_error_code(exc.status_code, message),
        )


def _infer_error_code(status_code: int, detail: str) -> str:
    """Error code for a bare HTTPException, from its status and wording."""
    if status_code == 404:
        lowered = detail.lower()
        for word, code in (
            ("venda", "SALE_NOT_FOUND"),
            ("tarefa", "TASK_NOT_FOUND"),
            ("recibo", "RECEIPT_FILE_NOT_FOUND"),
        ):
            if word in lowered:
                return code
        return "NOT_FOUND"

    return {
        400: "BAD_REQUEST",
        401: "UNAUTHORIZED",
        403: "FORBIDDEN",
        422: "UNPROCESSABLE_ENTITY",
    }.get(status_code, "HTTP_ERROR")
