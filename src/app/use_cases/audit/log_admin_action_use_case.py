"""
Log Admin Action Use Case

Records a privileged administrative action in the compliance audit trail.
"""

import logging
from typing import Optional

from src.app.errors import require
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.recording import new_admin_audit_log
from src.domain.entities import AdminAuditLog

logger = logging.getLogger(__name__)


class LogAdminActionUseCase:
    """
    Use case for recording an admin action.

    Business Rules:
    - Compliance write: a persistence failure is logged and re-raised,
      the audit trail must never be lost silently
    - failure_reason is dropped when is_success is True
    - Every record gets a fresh id and a call-time timestamp
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = require(uow, "uow")

    async def execute(
        self,
        admin_user_id: str,
        action: str,
        entity_type: str,
        entity_id: str,
        is_success: bool,
        details: Optional[str] = None,
        failure_reason: Optional[str] = None,
        ip_address: Optional[str] = None,
    ) -> AdminAuditLog:
        """
        Execute log admin action use case.

        Args:
            admin_user_id: Acting admin user identifier
            action: Short action code, e.g. "ViewCustomerProfile"
            entity_type: Type of the target entity
            entity_id: Identifier of the target entity
            is_success: Whether the action succeeded
            details: Optional human-readable details
            failure_reason: Reason for failure (ignored when is_success is True)
            ip_address: Raw source IP of the admin

        Returns:
            The persisted AdminAuditLog

        Raises:
            Any persistence error, unchanged
        """
        audit_log = new_admin_audit_log(
            admin_user_id=admin_user_id,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            is_success=is_success,
            details=details,
            failure_reason=failure_reason,
            ip_address=ip_address,
        )

        try:
            async with self.uow:
                saved = await self.uow.admin_audit_logs.add(audit_log)
                await self.uow.commit()
        except Exception:
            logger.error(
                f"Failed to log admin action: admin {admin_user_id} performed "
                f"{action} on {entity_type} {entity_id}",
                exc_info=True,
            )
            raise

        logger.info(
            f"Admin action logged: admin {admin_user_id} performed {action} "
            f"on {entity_type} {entity_id}, success: {is_success}"
        )
        return saved
