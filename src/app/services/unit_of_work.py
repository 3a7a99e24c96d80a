from abc import ABC, abstractmethod

from src.app.repositories.admin_audit_repository import IAdminAuditRepository
from src.app.repositories.authentication_event_repository import (
    IAuthenticationEventRepository,
)


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    authentication_events: IAuthenticationEventRepository
    admin_audit_logs: IAdminAuditRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc, tb):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
