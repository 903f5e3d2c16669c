"""
Receipt settings endpoints.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import (
    get_audit_context,
    get_current_user,
    get_update_receipt_settings_use_case,
    require_admin,
)
from src.application.dto.requests import UpdateReceiptSettingsRequest
from src.application.dto.responses import ErrorResponse, ReceiptSettingsResponse
from src.application.use_cases import UpdateReceiptSettingsUseCase
from src.core.entities.audit import AuditContext

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get(
    "/receipt",
    response_model=ReceiptSettingsResponse,
    dependencies=[Depends(get_current_user)],
)
async def get_receipt_settings(
    use_case: UpdateReceiptSettingsUseCase = Depends(get_update_receipt_settings_use_case),
) -> ReceiptSettingsResponse:
    return ReceiptSettingsResponse.from_entity(use_case.current())


@router.put(
    "/receipt",
    response_model=ReceiptSettingsResponse,
    dependencies=[Depends(require_admin)],
    responses={400: {"model": ErrorResponse}},
)
async def update_receipt_settings(
    request: UpdateReceiptSettingsRequest,
    context: AuditContext = Depends(get_audit_context),
    use_case: UpdateReceiptSettingsUseCase = Depends(get_update_receipt_settings_use_case),
) -> ReceiptSettingsResponse:
    """Change paper size or print-on-confirm; the change is audited."""
    updated = await use_case.execute(request, context)
    return ReceiptSettingsResponse.from_entity(updated)
