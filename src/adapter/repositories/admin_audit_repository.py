from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.admin_audit_repository import IAdminAuditRepository
from src.domain.entities import AdminAuditLog


class AdminAuditRepository(IAdminAuditRepository):
    """AdminAuditLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def add(self, audit_log: AdminAuditLog) -> AdminAuditLog:
        """Add a new admin audit log (immutable)"""
        self.session.add(audit_log)
        await self.session.flush()
        await self.session.refresh(audit_log)
        return audit_log

    async def get_filtered(
        self,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        admin_user_id: Optional[str] = None,
        entity_type: Optional[str] = None,
        action: Optional[str] = None,
        entity_id: Optional[str] = None,
        is_success: Optional[bool] = None,
        max_results: int = 100,
    ) -> List[AdminAuditLog]:
        """Get logs matching every filter that is not None, newest first"""
        stmt = select(AdminAuditLog)

        if start_date is not None:
            stmt = stmt.where(col(AdminAuditLog.timestamp) >= start_date)
        if end_date is not None:
            stmt = stmt.where(col(AdminAuditLog.timestamp) <= end_date)
        if admin_user_id is not None:
            stmt = stmt.where(AdminAuditLog.admin_user_id == admin_user_id)
        if entity_type is not None:
            stmt = stmt.where(AdminAuditLog.entity_type == entity_type)
        if action is not None:
            stmt = stmt.where(AdminAuditLog.action == action)
        if entity_id is not None:
            stmt = stmt.where(AdminAuditLog.entity_id == entity_id)
        if is_success is not None:
            stmt = stmt.where(AdminAuditLog.is_success == is_success)

        stmt = stmt.order_by(col(AdminAuditLog.timestamp).desc()).limit(max_results)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_entity(self, entity_type: str, entity_id: str) -> List[AdminAuditLog]:
        """Get the full history of one resource, oldest first"""
        stmt = (
            select(AdminAuditLog)
            .where(AdminAuditLog.entity_type == entity_type)
            .where(AdminAuditLog.entity_id == entity_id)
            .order_by(col(AdminAuditLog.timestamp).asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def delete_older_than(self, cutoff: datetime) -> int:
        """Delete logs with timestamp < cutoff"""
        stmt = delete(AdminAuditLog).where(col(AdminAuditLog.timestamp) < cutoff)
        result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def get_for_archival(self, cutoff: datetime, batch_size: int) -> List[AdminAuditLog]:
        """Get up to batch_size logs with timestamp < cutoff, oldest first"""
        stmt = (
            select(AdminAuditLog)
            .where(col(AdminAuditLog.timestamp) < cutoff)
            .order_by(col(AdminAuditLog.timestamp).asc())
            .limit(batch_size)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
