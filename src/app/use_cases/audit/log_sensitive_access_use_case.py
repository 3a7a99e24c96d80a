"""
Log Sensitive Access Use Case

Audits admin access to sensitive customer and seller data.
"""

from typing import Optional
from uuid import UUID

from src.app.errors import require
from src.domain.entities import AdminAuditLog

from .log_admin_action_use_case import LogAdminActionUseCase


class LogSensitiveAccessUseCase:
    """
    Audit trail for views of sensitive resources.

    Business Rules:
    - One fixed action/entity type pair per resource category
    - details always contains the resource identifier verbatim
      (compliance tooling searches details by substring)
    - Failures from the admin-action write propagate unchanged
    """

    def __init__(self, log_admin_action: LogAdminActionUseCase):
        self.log_admin_action = require(log_admin_action, "log_admin_action")

    async def log_customer_profile_access(
        self, admin_user_id: str, customer_id: str, ip_address: Optional[str] = None
    ) -> AdminAuditLog:
        return await self._log_access(
            admin_user_id,
            action="ViewCustomerProfile",
            entity_type="Customer",
            entity_id=customer_id,
            details=f"Admin accessed customer profile for customer {customer_id}",
            ip_address=ip_address,
        )

    async def log_payout_details_access(
        self, admin_user_id: str, seller_id: str, ip_address: Optional[str] = None
    ) -> AdminAuditLog:
        return await self._log_access(
            admin_user_id,
            action="ViewPayoutDetails",
            entity_type="Seller",
            entity_id=seller_id,
            details=f"Admin accessed payout details for seller {seller_id}",
            ip_address=ip_address,
        )

    async def log_kyc_document_access(
        self, admin_user_id: str, submission_id: UUID, ip_address: Optional[str] = None
    ) -> AdminAuditLog:
        return await self._log_access(
            admin_user_id,
            action="ViewKycDocument",
            entity_type="KycSubmission",
            entity_id=str(submission_id),
            details=f"Admin accessed KYC document for submission {submission_id}",
            ip_address=ip_address,
        )

    async def log_store_details_access(
        self, admin_user_id: str, store_id: UUID, ip_address: Optional[str] = None
    ) -> AdminAuditLog:
        return await self._log_access(
            admin_user_id,
            action="ViewStoreDetails",
            entity_type="Store",
            entity_id=str(store_id),
            details=f"Admin accessed store details for store {store_id}",
            ip_address=ip_address,
        )

    async def _log_access(
        self,
        admin_user_id: str,
        action: str,
        entity_type: str,
        entity_id: str,
        details: str,
        ip_address: Optional[str],
    ) -> AdminAuditLog:
        return await self.log_admin_action.execute(
            admin_user_id=admin_user_id,
            action=action,
            entity_type=entity_type,
            entity_id=str(entity_id),
            is_success=True,
            details=details,
            ip_address=ip_address,
        )
