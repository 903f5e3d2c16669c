"""
Task visibility rules and the process-local task board.

The board mirrors what a till keeps in memory between refreshes: tasks are
prepended on creation, toggled and deleted in place, and there is no
persistence, ordering guarantee across processes, or conflict resolution.
"""

from __future__ import annotations

from src.core.entities.task import AssignTarget, Task
from src.core.entities.user import Role


def is_visible_to(task: Task, user_id: str, role: Role | str) -> bool:
    """
    Decide whether a task shows up in a user's list.

    Admins see everything. Everyone else sees tasks for all staff, tasks
    addressed to their role, and tasks assigned to them personally.
    """
    role_value = role.value if isinstance(role, Role) else role
    if role_value == Role.ADMIN.value:
        return True
    if task.assigned_to == AssignTarget.ALL:
        return True
    if task.assigned_to.value == role_value:
        return True
    return task.assigned_to_id is not None and task.assigned_to_id == user_id


class TaskBoard:
    """In-memory task list keyed by task id."""

    def __init__(self, tasks: list[Task] | None = None):
        self._tasks: list[Task] = list(tasks or [])

    def add(self, task: Task) -> Task:
        """Prepend a task so the newest appears first."""
        self._tasks = [task, *self._tasks]
        return task

    def toggle(self, task_id: str) -> Task | None:
        """Flip the completion flag; unknown ids are ignored."""
        toggled = None
        tasks = []
        for task in self._tasks:
            if task.id == task_id:
                task = task.toggled()
                toggled = task
            tasks.append(task)
        self._tasks = tasks
        return toggled

    def delete(self, task_id: str) -> bool:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        return len(self._tasks) != before

    def get(self, task_id: str) -> Task | None:
        return next((t for t in self._tasks if t.id == task_id), None)

    def list(self) -> list[Task]:
        return list(self._tasks)

    def visible_to(self, user_id: str, role: Role | str) -> list[Task]:
        return [t for t in self._tasks if is_visible_to(t, user_id, role)]

    def pending_count(self) -> int:
        return sum(1 for t in self._tasks if not t.completed)

    def __len__(self) -> int:
        return len(self._tasks)
