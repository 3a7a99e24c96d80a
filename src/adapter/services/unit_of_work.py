from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.admin_audit_repository import AdminAuditRepository
from src.adapter.repositories.authentication_event_repository import (
    AuthenticationEventRepository,
)
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.authentication_events = AuthenticationEventRepository(self.session)
        self.admin_audit_logs = AdminAuditRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        # Roll back only on error; a clean exit keeps loaded instances usable
        if exc_type is not None:
            await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
