from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from src.domain.entities import AdminAuditLog


class IAdminAuditRepository(ABC):
    """AdminAuditLog repository interface - application layer"""

    @abstractmethod
    async def add(self, audit_log: AdminAuditLog) -> AdminAuditLog:
        """Add a new admin audit log (immutable)"""
        pass

    @abstractmethod
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
        pass

    @abstractmethod
    async def get_by_entity(self, entity_type: str, entity_id: str) -> List[AdminAuditLog]:
        """Get the full history of one resource, oldest first"""
        pass

    @abstractmethod
    async def delete_older_than(self, cutoff: datetime) -> int:
        """Delete logs with timestamp < cutoff, returning the number deleted"""
        pass

    @abstractmethod
    async def get_for_archival(self, cutoff: datetime, batch_size: int) -> List[AdminAuditLog]:
        """Get up to batch_size logs with timestamp < cutoff, oldest first"""
        pass
