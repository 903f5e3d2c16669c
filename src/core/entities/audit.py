"""Audit trail and notification entities."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from src.core.entities.sale import new_id


class AuditLog(BaseModel):
    """A recorded user action."""

    id: int | None = None
    user_id: str | None = None
    action: str
    entity_type: str
    entity_id: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)
    previous_snapshot: dict[str, Any] | None = None
    ip_address: str | None = None
    user_agent: str | None = None
    risk_flags: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.utcnow)


class NotificationType(str, Enum):
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    ERROR = "error"


class Notification(BaseModel):
    """
    In-app notification.

    A null ``user_id`` is a broadcast visible to everyone.
    """

    id: str = Field(default_factory=new_id)
    user_id: str | None = None
    type: NotificationType = NotificationType.INFO
    message: str
    read: bool = False
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=datetime.utcnow)


class AuditContext(BaseModel):
    """Who performed an action and from where."""

    user_id: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None

    def log(
        self,
        action: str,
        entity_type: str,
        entity_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> AuditLog:
        """Build an audit entry attributed to this context."""
        return AuditLog(
            user_id=self.user_id,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            details=details or {},
            ip_address=self.ip_address,
            user_agent=self.user_agent,
        )
