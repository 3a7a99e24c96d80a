"""
Get Resource Audit Trail Use Case

Full history of admin actions against one resource, for incident timelines.
"""

from typing import List

from src.app.errors import require
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AdminAuditLog


class GetResourceAuditTrailUseCase:
    """Unbounded audit history of one resource, oldest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = require(uow, "uow")

    async def execute(self, entity_type: str, entity_id: str) -> List[AdminAuditLog]:
        async with self.uow:
            return await self.uow.admin_audit_logs.get_by_entity(entity_type, entity_id)
