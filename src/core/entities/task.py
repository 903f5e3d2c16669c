"""Team task entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from src.core.entities.sale import new_id


class AssignTarget(str, Enum):
    """Who a task is addressed to."""

    ALL = "all"
    ADMIN = "admin"
    MANAGER = "manager"
    SELLER = "seller"
    USER = "user"

    @classmethod
    def parse(cls, value: str | None) -> "AssignTarget":
        """Coerce an arbitrary value, falling back to ALL."""
        try:
            return cls(value)
        except ValueError:
            return cls.ALL


class Task(BaseModel):
    """
    A to-do item shared within the shop team.

    ``assigned_to_id`` is only meaningful when ``assigned_to`` is USER.
    """

    id: str = Field(default_factory=new_id)
    title: str
    completed: bool = False
    completion_comment: str | None = None
    assigned_to: AssignTarget = AssignTarget.ALL
    assigned_to_id: str | None = None
    created_by: str
    created_at: datetime = Field(default_factory=datetime.utcnow)

    def toggled(self) -> "Task":
        """Return a copy with the completion flag flipped."""
        return self.model_copy(update={"completed": not self.completed})
