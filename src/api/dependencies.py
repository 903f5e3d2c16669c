"""
Dependency injection container for FastAPI.

Provides use cases, stores and the acting user to route handlers.
Tests replace any of these through ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends, Header, HTTPException, Request, status

from src.application.use_cases import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetReceiptFileUseCase,
    ListReceiptFilesUseCase,
    ListTasksUseCase,
    RecordSaleUseCase,
    RenderReceiptUseCase,
    SaveReceiptUseCase,
    SeedDatabaseUseCase,
    UpdateReceiptSettingsUseCase,
    UpdateTaskUseCase,
)
from src.config import Settings, get_settings
from src.core.entities.audit import AuditContext
from src.core.entities.user import User
from src.infrastructure.storage.sqlite import (
    SQLiteSaleStore,
    SQLiteUserStore,
    get_sale_store,
    get_user_store,
)


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Store dependencies
async def get_sales_store() -> SQLiteSaleStore:
    """Get sale store."""
    return await get_sale_store()


async def get_users_store() -> SQLiteUserStore:
    """Get user store."""
    return await get_user_store()


# Identity
async def get_current_user(
    x_user_id: str | None = Header(default=None),
    store: SQLiteUserStore = Depends(get_users_store),
) -> User:
    """Resolve the acting user from the X-User-Id header."""
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Não autenticado",
        )
    user = await store.get_user(x_user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Não autenticado",
        )
    return user


async def require_admin(user: User = Depends(get_current_user)) -> User:
    """Only administrators pass."""
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Acesso negado",
        )
    return user


def get_audit_context(
    request: Request,
    user: User = Depends(get_current_user),
) -> AuditContext:
    """Who did it and from where, for audit entries."""
    return AuditContext(
        user_id=user.id,
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )


# Receipt use case dependencies
def get_render_receipt_use_case() -> RenderReceiptUseCase:
    """Get render receipt use case."""
    return RenderReceiptUseCase()


def get_save_receipt_use_case() -> SaveReceiptUseCase:
    """Get save receipt use case."""
    return SaveReceiptUseCase()


def get_receipt_file_use_case() -> GetReceiptFileUseCase:
    """Get receipt file lookup use case."""
    return GetReceiptFileUseCase()


def get_list_receipt_files_use_case() -> ListReceiptFilesUseCase:
    return ListReceiptFilesUseCase()


def get_update_receipt_settings_use_case() -> UpdateReceiptSettingsUseCase:
    return UpdateReceiptSettingsUseCase()


# Setup use case dependency
def get_seed_database_use_case() -> SeedDatabaseUseCase:
    """Get seed database use case."""
    return SeedDatabaseUseCase()


# Task use case dependencies
def get_list_tasks_use_case() -> ListTasksUseCase:
    return ListTasksUseCase()


def get_create_task_use_case() -> CreateTaskUseCase:
    return CreateTaskUseCase()


def get_update_task_use_case() -> UpdateTaskUseCase:
    return UpdateTaskUseCase()


def get_delete_task_use_case() -> DeleteTaskUseCase:
    return DeleteTaskUseCase()


# Sales use case dependency
def get_record_sale_use_case() -> RecordSaleUseCase:
    """Get record sale use case."""
    return RecordSaleUseCase()
