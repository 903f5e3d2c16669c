"""User entity."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from src.core.entities.sale import new_id


class Role(str, Enum):
    """Staff roles."""

    ADMIN = "admin"
    MANAGER = "manager"
    SELLER = "seller"


class User(BaseModel):
    """A staff account."""

    id: str = Field(default_factory=new_id)
    name: str
    username: str
    password_hash: str = Field(default="", repr=False)
    role: Role = Role.SELLER
    avatar: str | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def can_manage(self) -> bool:
        """Admins and managers can assign and delete tasks."""
        return self.role in (Role.ADMIN, Role.MANAGER)
