"""Task Use Cases - list, create, update and delete team tasks."""

from src.application.dto.requests import CreateTaskRequest, UpdateTaskRequest
from src.config import get_logger
from src.core.entities.audit import Notification, NotificationType
from src.core.entities.task import AssignTarget, Task
from src.core.entities.user import User
from src.core.exceptions import TaskNotFoundError, ValidationError
from src.core.interfaces.storage import INotificationStore, ITaskStore, IUserStore
from src.core.services.task_board import is_visible_to

logger = get_logger(__name__)

TITLE_REQUIRED = "O título da tarefa é obrigatório."


class _TaskUseCase:
    """Shared lazy store lookup."""

    def __init__(
        self,
        task_store: ITaskStore | None = None,
        user_store: IUserStore | None = None,
        notification_store: INotificationStore | None = None,
    ):
        self._task_store = task_store
        self._user_store = user_store
        self._notification_store = notification_store

    async def _get_task_store(self) -> ITaskStore:
        if self._task_store is None:
            from src.infrastructure.storage.sqlite import get_task_store

            self._task_store = await get_task_store()
        return self._task_store

    async def _get_user_store(self) -> IUserStore:
        if self._user_store is None:
            from src.infrastructure.storage.sqlite import get_user_store

            self._user_store = await get_user_store()
        return self._user_store

    async def _get_notification_store(self) -> INotificationStore:
        if self._notification_store is None:
            from src.infrastructure.storage.sqlite import get_notification_store

            self._notification_store = await get_notification_store()
        return self._notification_store


class ListTasksUseCase(_TaskUseCase):
    async def execute(self, user: User) -> list[Task]:
        """Tasks the user may see, newest first."""
        tasks = await (await self._get_task_store()).list_tasks()
        return [t for t in tasks if is_visible_to(t, user.id, user.role)]


class CreateTaskUseCase(_TaskUseCase):
    """Create a task and notify everyone it is addressed to."""

    async def execute(self, request: CreateTaskRequest, user: User) -> Task:
        """
        Raises:
            ValidationError: Blank title
        """
        title = (request.title or "").strip()
        if not title:
            raise ValidationError("title", TITLE_REQUIRED, request.title)

        assigned_to = AssignTarget.parse(request.assigned_to)
        assigned_to_id = (
            request.assigned_to_id
            if assigned_to == AssignTarget.USER and request.assigned_to_id
            else None
        )
        if assigned_to_id and await (await self._get_user_store()).get_user(assigned_to_id) is None:
            raise ValidationError("assigned_to_id", "Usuário não encontrado", assigned_to_id)

        task = await (await self._get_task_store()).create_task(
            Task(
                title=title,
                assigned_to=assigned_to,
                assigned_to_id=assigned_to_id,
                created_by=user.id,
            )
        )

        notification_store = await self._get_notification_store()
        recipients = await self._recipients(task)
        for user_id in recipients:
            await notification_store.create_notification(
                Notification(
                    user_id=user_id,
                    type=NotificationType.INFO,
                    message=f"Nova tarefa atribuída: {task.title}",
                    metadata={"task_id": task.id},
                )
            )

        logger.info("task_assigned", task_id=task.id, recipients=len(recipients))
        return task

    async def _recipients(self, task: Task) -> list[str]:
        if task.assigned_to == AssignTarget.USER:
            return [task.assigned_to_id] if task.assigned_to_id else []

        users = await (await self._get_user_store()).list_users()
        if task.assigned_to == AssignTarget.ALL:
            return [u.id for u in users]
        return [u.id for u in users if u.role.value == task.assigned_to.value]


class UpdateTaskUseCase(_TaskUseCase):
    """Apply completion changes; completing a task broadcasts a notification."""

    async def execute(self, task_id: str, request: UpdateTaskRequest) -> Task:
        """
        Raises:
            TaskNotFoundError: Unknown task id
        """
        task = await (await self._get_task_store()).update_task(
            task_id,
            completed=request.completed,
            completion_comment=request.completion_comment,
        )
        if task is None:
            raise TaskNotFoundError(task_id)

        if request.completed and task.completed:
            await (await self._get_notification_store()).create_notification(
                Notification(
                    user_id=None,
                    type=NotificationType.SUCCESS,
                    message=f"Tarefa concluída: {task.title}",
                    metadata={"task_id": task.id},
                )
            )
        return task


class DeleteTaskUseCase(_TaskUseCase):
    async def execute(self, task_id: str) -> bool:
        """Delete a task; deleting an unknown id is not an error."""
        return await (await self._get_task_store()).delete_task(task_id)
