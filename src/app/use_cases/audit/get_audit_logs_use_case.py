"""
Get Audit Logs Use Case

Filtered retrieval of admin audit logs for compliance and investigation.
"""

import logging
from datetime import datetime
from typing import List, Optional

from src.app.errors import require
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AdminAuditLog

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 100


class GetAuditLogsUseCase:
    """
    Use case for querying admin audit logs.

    Business Rules:
    - Every filter is optional; None means "not applied"
      (an empty string is still a filter value)
    - max_results is always forwarded to storage (default 100)
    - Results ordered newest first
    - Storage errors propagate, a failed read is never reported as empty
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = require(uow, "uow")

    async def execute(
        self,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        admin_user_id: Optional[str] = None,
        entity_type: Optional[str] = None,
        action: Optional[str] = None,
        entity_id: Optional[str] = None,
        is_success: Optional[bool] = None,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> List[AdminAuditLog]:
        async with self.uow:
            logs = await self.uow.admin_audit_logs.get_filtered(
                start_date=start_date,
                end_date=end_date,
                admin_user_id=admin_user_id,
                entity_type=entity_type,
                action=action,
                entity_id=entity_id,
                is_success=is_success,
                max_results=max_results,
            )

        logger.info(f"Retrieved {len(logs)} admin audit logs (max {max_results})")
        return logs
