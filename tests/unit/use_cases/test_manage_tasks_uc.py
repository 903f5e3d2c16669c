"""Tests for the task use cases."""

from unittest.mock import AsyncMock

import pytest

from src.application.dto.requests import CreateTaskRequest, UpdateTaskRequest
from src.application.use_cases.manage_tasks import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
)
from src.core.entities.audit import NotificationType
from src.core.entities.task import AssignTarget, Task
from src.core.exceptions import TaskNotFoundError, ValidationError


@pytest.fixture
def task_store():
    store = AsyncMock()
    store.create_task.side_effect = lambda task: task
    return store


@pytest.fixture
def user_store(admin_user, manager_user, seller_user):
    store = AsyncMock()
    users = [admin_user, manager_user, seller_user]
    store.list_users.return_value = users
    store.get_user.side_effect = lambda user_id: next((u for u in users if u.id == user_id), None)
    return store


@pytest.fixture
def notification_store():
    return AsyncMock()


@pytest.fixture
def stores(task_store, user_store, notification_store):
    return dict(
        task_store=task_store,
        user_store=user_store,
        notification_store=notification_store,
    )


def _notified(notification_store) -> list:
    return [c[0][0] for c in notification_store.create_notification.call_args_list]


class TestListTasksUseCase:
    async def test_filters_by_visibility(self, stores, task_store, seller_user):
        task_store.list_tasks.return_value = [
            Task(title="todos", created_by="admin-1"),
            Task(title="gerentes", assigned_to=AssignTarget.MANAGER, created_by="admin-1"),
            Task(
                title="só para mim",
                assigned_to=AssignTarget.USER,
                assigned_to_id="seller-1",
                created_by="admin-1",
            ),
        ]

        tasks = await ListTasksUseCase(**stores).execute(seller_user)

        assert [t.title for t in tasks] == ["todos", "só para mim"]

    async def test_admin_sees_all(self, stores, task_store, admin_user):
        task_store.list_tasks.return_value = [
            Task(title="a", assigned_to=AssignTarget.SELLER, created_by="x"),
            Task(title="b", assigned_to=AssignTarget.USER, assigned_to_id="other", created_by="x"),
        ]
        assert len(await ListTasksUseCase(**stores).execute(admin_user)) == 2


class TestCreateTaskUseCase:
    async def test_trims_title(self, stores, admin_user):
        task = await CreateTaskUseCase(**stores).execute(
            CreateTaskRequest(title="  Repor bebidas  "), admin_user
        )
        assert task.title == "Repor bebidas"
        assert task.created_by == admin_user.id

    @pytest.mark.parametrize("title", ["", "   "])
    async def test_blank_title_rejected(self, stores, task_store, admin_user, title):
        with pytest.raises(ValidationError) as exc_info:
            await CreateTaskUseCase(**stores).execute(CreateTaskRequest(title=title), admin_user)

        assert exc_info.value.message == "O título da tarefa é obrigatório."
        task_store.create_task.assert_not_awaited()

    async def test_unknown_assignment_becomes_all(self, stores, admin_user):
        task = await CreateTaskUseCase(**stores).execute(
            CreateTaskRequest(title="x", assigned_to="gerência"), admin_user
        )
        assert task.assigned_to == AssignTarget.ALL

    async def test_assigned_to_id_only_kept_for_user(self, stores, admin_user):
        task = await CreateTaskUseCase(**stores).execute(
            CreateTaskRequest(title="x", assigned_to="seller", assigned_to_id="seller-1"),
            admin_user,
        )
        assert task.assigned_to == AssignTarget.SELLER
        assert task.assigned_to_id is None

    async def test_unknown_assigned_user_rejected(self, stores, admin_user):
        with pytest.raises(ValidationError):
            await CreateTaskUseCase(**stores).execute(
                CreateTaskRequest(title="x", assigned_to="user", assigned_to_id="ghost"),
                admin_user,
            )

    async def test_notifies_everyone_for_all(self, stores, notification_store, admin_user):
        await CreateTaskUseCase(**stores).execute(CreateTaskRequest(title="Inventário"), admin_user)

        notes = _notified(notification_store)
        assert {n.user_id for n in notes} == {"admin-1", "manager-1", "seller-1"}
        assert all(n.message == "Nova tarefa atribuída: Inventário" for n in notes)
        assert all(n.type == NotificationType.INFO for n in notes)

    async def test_notifies_role(self, stores, notification_store, admin_user):
        await CreateTaskUseCase(**stores).execute(
            CreateTaskRequest(title="Preços", assigned_to="manager"), admin_user
        )
        assert [n.user_id for n in _notified(notification_store)] == ["manager-1"]

    async def test_notifies_single_user(self, stores, notification_store, admin_user):
        task = await CreateTaskUseCase(**stores).execute(
            CreateTaskRequest(title="Ligar", assigned_to="user", assigned_to_id="seller-1"),
            admin_user,
        )
        notes = _notified(notification_store)
        assert [n.user_id for n in notes] == ["seller-1"]
        assert notes[0].metadata == {"task_id": task.id}


class TestUpdateTaskUseCase:
    async def test_unknown_task(self, stores, task_store):
        task_store.update_task.return_value = None
        with pytest.raises(TaskNotFoundError):
            await UpdateTaskUseCase(**stores).execute("nope", UpdateTaskRequest(completed=True))

    async def test_completion_broadcasts(self, stores, task_store, notification_store):
        task_store.update_task.return_value = Task(
            id="t1", title="Fechar caixa", completed=True, created_by="admin-1"
        )

        await UpdateTaskUseCase(**stores).execute(
            "t1", UpdateTaskRequest(completed=True, completion_comment="feito")
        )

        task_store.update_task.assert_awaited_once_with(
            "t1", completed=True, completion_comment="feito"
        )
        note = _notified(notification_store)[0]
        assert note.user_id is None
        assert note.type == NotificationType.SUCCESS
        assert note.message == "Tarefa concluída: Fechar caixa"

    async def test_reopening_does_not_broadcast(self, stores, task_store, notification_store):
        task_store.update_task.return_value = Task(id="t1", title="x", created_by="a")

        await UpdateTaskUseCase(**stores).execute("t1", UpdateTaskRequest(completed=False))

        notification_store.create_notification.assert_not_awaited()


class TestDeleteTaskUseCase:
    async def test_delete(self, stores, task_store):
        task_store.delete_task.return_value = True
        assert await DeleteTaskUseCase(**stores).execute("t1") is True

    async def test_delete_unknown_is_not_an_error(self, stores, task_store):
        task_store.delete_task.return_value = False
        assert await DeleteTaskUseCase(**stores).execute("missing") is False
