"""
Abstract interfaces for storage providers.

Defines contracts for sale, user, catalog, task, audit and notification stores.
"""

from abc import ABC, abstractmethod

from src.core.entities.audit import AuditLog, Notification
from src.core.entities.product import Category, Product
from src.core.entities.sale import Sale
from src.core.entities.task import Task
from src.core.entities.user import User


class ISaleStore(ABC):
    """Interface for sale persistence."""

    @abstractmethod
    async def create_sale(self, sale: Sale) -> Sale:
        """Persist a new sale."""
        pass

    @abstractmethod
    async def get_sale(self, sale_id: str) -> Sale | None:
        """Get sale by ID."""
        pass

    @abstractmethod
    async def list_sales(
        self,
        limit: int = 100,
        offset: int = 0,
        user_id: str | None = None,
    ) -> list[Sale]:
        """List sales, newest first; user_id restricts to one seller."""
        pass


class IUserStore(ABC):
    """Interface for staff account persistence."""

    @abstractmethod
    async def create_user(self, user: User) -> User:
        pass

    @abstractmethod
    async def get_user(self, user_id: str) -> User | None:
        pass

    @abstractmethod
    async def list_users(self) -> list[User]:
        pass

    @abstractmethod
    async def count_users(self) -> int:
        pass


class IProductStore(ABC):
    """Interface for catalog persistence."""

    @abstractmethod
    async def create_category(self, category: Category) -> Category:
        pass

    @abstractmethod
    async def create_product(self, product: Product) -> Product:
        pass

    @abstractmethod
    async def get_product(self, product_id: str) -> Product | None:
        pass

    @abstractmethod
    async def list_products(self) -> list[Product]:
        pass


class ITaskStore(ABC):
    """Interface for team task persistence."""

    @abstractmethod
    async def create_task(self, task: Task) -> Task:
        pass

    @abstractmethod
    async def get_task(self, task_id: str) -> Task | None:
        pass

    @abstractmethod
    async def list_tasks(self) -> list[Task]:
        """All tasks, newest first."""
        pass

    @abstractmethod
    async def update_task(
        self,
        task_id: str,
        completed: bool | None = None,
        completion_comment: str | None = None,
    ) -> Task | None:
        """Apply the given changes; return None when the task does not exist."""
        pass

    @abstractmethod
    async def delete_task(self, task_id: str) -> bool:
        pass


class IAuditLogStore(ABC):
    """Interface for the audit trail."""

    @abstractmethod
    async def create_log(self, log: AuditLog) -> AuditLog:
        pass

    @abstractmethod
    async def list_logs(self, limit: int = 100, action: str | None = None) -> list[AuditLog]:
        pass


class INotificationStore(ABC):
    """Interface for in-app notifications."""

    @abstractmethod
    async def create_notification(self, notification: Notification) -> Notification:
        pass

    @abstractmethod
    async def list_for_user(self, user_id: str, limit: int = 50) -> list[Notification]:
        """Notifications addressed to the user plus broadcasts."""
        pass
