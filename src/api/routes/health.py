"""
Health check endpoints.
"""

import time

from fastapi import APIRouter

from src.application.dto.responses import HealthResponse, ProviderHealthResponse
from src.config import get_settings

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


async def _database_status() -> ProviderHealthResponse:
    from src.infrastructure.storage.sqlite import get_pool

    try:
        pool = await get_pool()
        start = time.time()
        async with pool.acquire() as conn:
            await conn.execute("SELECT 1")
        return ProviderHealthResponse(
            name="sqlite",
            available=True,
            latency_ms=(time.time() - start) * 1000,
        )
    except Exception as e:
        return ProviderHealthResponse(name="sqlite", available=False, error=str(e))


def _printer_status() -> ProviderHealthResponse:
    from src.infrastructure.printing import CommandPrinter

    printer = CommandPrinter()
    name = " ".join(get_settings().receipt.print_command)
    if printer.is_available():
        return ProviderHealthResponse(name=name, available=True)
    return ProviderHealthResponse(name=name, available=False, error="print command not found")


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check.

    Returns service status and uptime.
    """
    return HealthResponse(
        status="healthy",
        version=get_settings().app_version,
        uptime_seconds=time.time() - _start_time,
    )


@router.get("/full", response_model=HealthResponse)
async def full_health_check() -> HealthResponse:
    """
    Database and printer health.

    A missing printer only degrades the service; receipts can still be
    previewed and archived.
    """
    db_status = await _database_status()
    printer_status = _printer_status()

    if not db_status.available:
        status_str = "unhealthy"
    elif not printer_status.available:
        status_str = "degraded"
    else:
        status_str = "healthy"

    return HealthResponse(
        status=status_str,
        version=get_settings().app_version,
        uptime_seconds=time.time() - _start_time,
        database=db_status,
        printer=printer_status,
    )
