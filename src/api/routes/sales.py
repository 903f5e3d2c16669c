"""
Sales endpoints.
"""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_current_user, get_record_sale_use_case, get_sales_store
from src.application.dto.requests import CreateSaleRequest
from src.application.dto.responses import ErrorResponse, SaleResponse
from src.application.use_cases import RecordSaleUseCase
from src.core.entities.user import User
from src.core.exceptions import SaleNotFoundError
from src.infrastructure.storage.sqlite import SQLiteSaleStore

router = APIRouter(prefix="/api/sales", tags=["sales"])


@router.post(
    "",
    response_model=SaleResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
)
async def create_sale(
    request: CreateSaleRequest,
    user: User = Depends(get_current_user),
    use_case: RecordSaleUseCase = Depends(get_record_sale_use_case),
) -> SaleResponse:
    """Record a completed sale for the acting user."""
    result = await use_case.execute(request, user)
    return SaleResponse.from_entity(result.sale)


@router.get("", response_model=list[SaleResponse])
async def list_sales(
    limit: int = 100,
    offset: int = 0,
    user: User = Depends(get_current_user),
    store: SQLiteSaleStore = Depends(get_sales_store),
) -> list[SaleResponse]:
    """Recent sales; sellers only see their own."""
    sales = await store.list_sales(
        limit=limit,
        offset=offset,
        user_id=None if user.can_manage else user.id,
    )
    return [SaleResponse.from_entity(s) for s in sales]


@router.get(
    "/{sale_id}",
    response_model=SaleResponse,
    dependencies=[Depends(get_current_user)],
    responses={404: {"model": ErrorResponse}},
)
async def get_sale(
    sale_id: str,
    store: SQLiteSaleStore = Depends(get_sales_store),
) -> SaleResponse:
    sale = await store.get_sale(sale_id)
    if sale is None:
        raise SaleNotFoundError(sale_id)
    return SaleResponse.from_entity(sale)
