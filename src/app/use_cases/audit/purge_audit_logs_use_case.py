"""
Purge Audit Logs Use Case

Deletes admin audit logs that fell out of the retention window.
"""

import logging
from datetime import datetime, timedelta

from src.app.errors import require
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now

logger = logging.getLogger(__name__)


def retention_cutoff(retention_days: int) -> datetime:
    """Instant before which logs are out of retention: now - retention_days"""
    return utc_now() - timedelta(days=retention_days)


class PurgeAuditLogsUseCase:
    """
    Use case for the retention purge.

    Business Rules:
    - Cutoff is now - retention_days, computed at call time
    - Storage owns the comparison (timestamp < cutoff)
    - Returns whatever count storage reports
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = require(uow, "uow")

    async def execute(self, retention_days: int) -> int:
        cutoff = retention_cutoff(retention_days)

        async with self.uow:
            deleted = await self.uow.admin_audit_logs.delete_older_than(cutoff)
            await self.uow.commit()

        logger.info(
            f"Purged {deleted} admin audit logs older than {cutoff.isoformat()} "
            f"({retention_days} day retention)"
        )
        return deleted
