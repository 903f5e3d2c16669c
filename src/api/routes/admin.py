"""
First-run setup endpoints.

Both are reachable without a user: they exist for an empty database.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_seed_database_use_case
from src.application.dto.responses import CheckEmptyResponse, ForceSeedResponse
from src.application.use_cases import SeedDatabaseUseCase
from src.config import get_logger
from src.core.exceptions import DatabaseNotEmptyError

logger = get_logger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])

NOT_EMPTY_MESSAGE = (
    "Para segurança, esta operação só pode ser executada em um banco vazio. "
    "Use a interface de administração para gerenciar usuários."
)


@router.get("/check-empty", response_model=CheckEmptyResponse, response_model_by_alias=True)
async def check_empty(
    use_case: SeedDatabaseUseCase = Depends(get_seed_database_use_case),
) -> CheckEmptyResponse:
    """Whether the database has no users yet; false if it cannot be read."""
    return CheckEmptyResponse(is_empty=await use_case.is_empty())


@router.post("/force-seed", response_model=ForceSeedResponse)
async def force_seed(
    use_case: SeedDatabaseUseCase = Depends(get_seed_database_use_case),
) -> ForceSeedResponse | JSONResponse:
    """Seed the admin account and sample catalogue into an empty database."""
    try:
        result = await use_case.execute()
    except DatabaseNotEmptyError as e:
        logger.warning("force_seed_refused", user_count=e.details["user_count"])
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": e.message,
                "message": NOT_EMPTY_MESSAGE,
                "userCount": e.details["user_count"],
            },
        )

    return ForceSeedResponse(
        message=result.message,
        categories=result.categories,
        products=result.products,
    )
