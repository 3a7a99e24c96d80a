"""
Get Audit Logs For Archival Use Case

Pages out admin audit logs past retention so they can be archived before purge.
"""

import logging
from typing import List

from src.app.errors import require
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AdminAuditLog

from .purge_audit_logs_use_case import retention_cutoff

logger = logging.getLogger(__name__)


class GetAuditLogsForArchivalUseCase:
    """Batch of logs older than the retention cutoff, oldest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = require(uow, "uow")

    async def execute(self, retention_days: int, batch_size: int) -> List[AdminAuditLog]:
        cutoff = retention_cutoff(retention_days)

        async with self.uow:
            logs = await self.uow.admin_audit_logs.get_for_archival(cutoff, batch_size)

        logger.info(f"Selected {len(logs)} admin audit logs for archival (cutoff {cutoff.isoformat()})")
        return logs
