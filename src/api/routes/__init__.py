"""API route modules."""

from src.api.routes.admin import router as admin_router
from src.api.routes.health import router as health_router
from src.api.routes.receipts import router as receipts_router
from src.api.routes.sales import router as sales_router
from src.api.routes.settings import router as settings_router
from src.api.routes.tasks import router as tasks_router

__all__ = [
    "health_router",
    "receipts_router",
    "settings_router",
    "tasks_router",
    "admin_router",
    "sales_router",
]
