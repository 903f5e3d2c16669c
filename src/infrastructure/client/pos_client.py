"""
HTTP client for the POS server.

Used from the till: receipt preview and archiving, first-run setup and the
shared task list. Idempotent GETs are retried on transport errors; writes are
sent once.
"""

import time
from typing import Any
from urllib.parse import quote

import httpx
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from src.config import get_logger, get_settings
from src.core.entities.task import Task
from src.core.exceptions import (
    ReceiptNotFoundError,
    ReceiptRenderError,
    ReceiptSaveError,
    RemoteAPIError,
    SetupError,
)
from src.core.interfaces.receipts import IReceiptGateway

logger = get_logger(__name__)

NOT_FOUND_MARKER = "Venda não encontrada"
SETUP_FALLBACK_MESSAGE = "Falha ao inicializar"


def error_message(response: httpx.Response, default: str) -> str:
    """Pull the server's message out of an error response."""
    try:
        payload = response.json()
    except ValueError:
        return response.text.strip() or default
    if isinstance(payload, dict):
        for key in ("message", "error", "detail"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    return default


class POSClient(IReceiptGateway):
    """
    Async client for the POS REST API.

    Usage:
        async with POSClient() as client:
            html = await client.fetch_receipt_document(sale_id)
    """

    def __init__(
        self,
        base_url: str | None = None,
        user_id: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings().client
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.max_retries = settings.max_retries
        self.retry_delay = settings.retry_delay

        headers = {"Accept": "application/json, text/html"}
        user_id = user_id or settings.user_id
        if user_id:
            headers["X-User-Id"] = user_id

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout or settings.timeout,
            headers=headers,
            transport=transport,
        )

    async def __aenter__(self) -> "POSClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    def _get_retry_decorator(self) -> Any:
        return retry(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=self.retry_delay, min=self.retry_delay, max=self.retry_delay * 8),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=self._log_retry,
            reraise=True,
        )

    @staticmethod
    def _log_retry(retry_state: RetryCallState) -> None:
        logger.warning(
            "pos_client_retry",
            attempt=retry_state.attempt_number,
            error=str(retry_state.outcome.exception()) if retry_state.outcome else None,
        )

    async def _get(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self._get_retry_decorator()(self._client.get)(path, **kwargs)

    # Receipts

    async def fetch_receipt_document(self, sale_id: str) -> str:
        try:
            response = await self._get(
                f"/api/receipts/preview/{quote(sale_id, safe='')}",
                params={"t": int(time.time() * 1000)},
                headers={"Cache-Control": "no-store"},
            )
        except httpx.HTTPError as e:
            logger.error("receipt_fetch_failed", sale_id=sale_id, error=str(e))
            raise ReceiptRenderError(sale_id) from e

        if response.is_success:
            return response.text

        if NOT_FOUND_MARKER in response.text:
            raise ReceiptNotFoundError(sale_id)
        logger.error("receipt_fetch_failed", sale_id=sale_id, status_code=response.status_code)
        raise ReceiptRenderError(sale_id, response.status_code)

    async def save_receipt(self, sale_id: str) -> str:
        try:
            response = await self._client.post("/api/receipts/save", json={"saleId": sale_id})
        except httpx.HTTPError as e:
            raise ReceiptSaveError(sale_id, str(e)) from e

        if not response.is_success:
            raise ReceiptSaveError(sale_id, error_message(response, response.reason_phrase))

        path = response.json().get("path", "")
        logger.info("receipt_archived", sale_id=sale_id, path=path)
        return path

    # Setup

    async def force_seed(self) -> str:
        """Seed an empty server; returns the server's confirmation message."""
        try:
            response = await self._client.post("/api/admin/force-seed")
        except httpx.HTTPError as e:
            logger.error("force_seed_failed", error=str(e))
            raise SetupError(SETUP_FALLBACK_MESSAGE, code="SETUP_FAILED") from e

        if not response.is_success:
            message = error_message(response, SETUP_FALLBACK_MESSAGE)
            raise SetupError(message, code="SETUP_FAILED", details={"status_code": response.status_code})

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        return payload.get("message") or ""

    async def check_empty(self) -> bool:
        response = await self._get("/api/admin/check-empty")
        self._raise_for_status(response)
        return bool(response.json().get("isEmpty", False))

    # Tasks

    async def list_tasks(self) -> list[Task]:
        response = await self._get("/api/tasks")
        self._raise_for_status(response)
        return [Task.model_validate(item) for item in response.json()]

    async def create_task(
        self,
        title: str,
        assigned_to: str = "all",
        assigned_to_id: str | None = None,
    ) -> Task:
        response = await self._client.post(
            "/api/tasks",
            json={"title": title, "assigned_to": assigned_to, "assigned_to_id": assigned_to_id},
        )
        self._raise_for_status(response)
        return Task.model_validate(response.json())

    async def update_task(
        self,
        task_id: str,
        completed: bool | None = None,
        completion_comment: str | None = None,
    ) -> Task:
        body: dict[str, Any] = {}
        if completed is not None:
            body["completed"] = completed
        if completion_comment is not None:
            body["completion_comment"] = completion_comment
        response = await self._client.patch(f"/api/tasks/{quote(task_id, safe='')}", json=body)
        self._raise_for_status(response)
        return Task.model_validate(response.json())

    async def delete_task(self, task_id: str) -> None:
        response = await self._client.delete(f"/api/tasks/{quote(task_id, safe='')}")
        self._raise_for_status(response)

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.is_success:
            return
        raise RemoteAPIError(
            error_message(response, response.reason_phrase),
            status_code=response.status_code,
            path=response.request.url.path,
        )
