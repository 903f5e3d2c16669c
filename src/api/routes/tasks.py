"""
Team task endpoints.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import (
    get_create_task_use_case,
    get_current_user,
    get_delete_task_use_case,
    get_list_tasks_use_case,
    get_update_task_use_case,
)
from src.application.dto.requests import CreateTaskRequest, UpdateTaskRequest
from src.application.dto.responses import ErrorResponse, SuccessResponse, TaskResponse
from src.application.use_cases import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
)
from src.core.entities.user import User

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    user: User = Depends(get_current_user),
    use_case: ListTasksUseCase = Depends(get_list_tasks_use_case),
) -> list[TaskResponse]:
    """Tasks visible to the acting user, newest first."""
    tasks = await use_case.execute(user)
    return [TaskResponse.from_entity(t) for t in tasks]


@router.post(
    "",
    response_model=TaskResponse,
    responses={400: {"model": ErrorResponse}},
)
async def create_task(
    request: CreateTaskRequest,
    user: User = Depends(get_current_user),
    use_case: CreateTaskUseCase = Depends(get_create_task_use_case),
) -> TaskResponse:
    task = await use_case.execute(request, user)
    return TaskResponse.from_entity(task)


@router.patch(
    "/{task_id}",
    response_model=TaskResponse,
    dependencies=[Depends(get_current_user)],
    responses={404: {"model": ErrorResponse}},
)
async def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    use_case: UpdateTaskUseCase = Depends(get_update_task_use_case),
) -> TaskResponse:
    task = await use_case.execute(task_id, request)
    return TaskResponse.from_entity(task)


@router.delete(
    "/{task_id}",
    response_model=SuccessResponse,
    dependencies=[Depends(get_current_user)],
)
async def delete_task(
    task_id: str,
    use_case: DeleteTaskUseCase = Depends(get_delete_task_use_case),
) -> SuccessResponse:
    await use_case.execute(task_id)
    return SuccessResponse()
