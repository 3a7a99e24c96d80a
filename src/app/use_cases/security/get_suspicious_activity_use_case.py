"""
Get Suspicious Activity Use Case

Classifies aggregate authentication counts into ranked alerts.
"""

import logging
from datetime import datetime
from typing import List

from src.app.errors import require
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import mask_email, utc_now
from src.domain.entities import SuspiciousActivityType

from .dtos import SuspiciousActivityAlert
from .severity import (
    BRUTE_FORCE_THRESHOLD,
    RAPID_ATTEMPTS_THRESHOLD,
    classify_severity,
    rank_alerts,
)

logger = logging.getLogger(__name__)


class GetSuspiciousActivityUseCase:
    """
    Use case for suspicious authentication activity detection.

    Business Rules:
    - Brute force: >= 5 failed logins from one hashed IP in the window
    - Rapid attempts: >= 10 logins (any outcome) against one account
    - Severity from the per-activity band tables in severity.py
    - Ranked by severity, then count, both descending
    - Read-only and stateless; storage errors propagate (a failed read must
      never look like "nothing suspicious")
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = require(uow, "uow")

    async def execute(self, start_date: datetime, end_date: datetime) -> List[SuspiciousActivityAlert]:
        async with self.uow:
            failed_by_ip = await self.uow.authentication_events.get_failed_attempts_by_ip(
                start_date, end_date, BRUTE_FORCE_THRESHOLD
            )
            rapid_attempts = await self.uow.authentication_events.get_rapid_login_attempts(
                start_date, end_date, RAPID_ATTEMPTS_THRESHOLD
            )

        detected_at = utc_now()
        alerts = []

        for ip_hash, count in failed_by_ip.items():
            alerts.append(
                SuspiciousActivityAlert(
                    activity_type=SuspiciousActivityType.brute_force,
                    count=count,
                    severity=classify_severity(SuspiciousActivityType.brute_force, count),
                    identifier=ip_hash,
                    description=f"Multiple failed login attempts ({count}) from the same IP address",
                    detected_at=detected_at,
                )
            )

        for email, count in rapid_attempts.items():
            alerts.append(
                SuspiciousActivityAlert(
                    activity_type=SuspiciousActivityType.rapid_attempts,
                    count=count,
                    severity=classify_severity(SuspiciousActivityType.rapid_attempts, count),
                    identifier=email,
                    description=(
                        f"Unusually high number of login attempts ({count}) "
                        f"for account {mask_email(email)}"
                    ),
                    detected_at=detected_at,
                )
            )

        logger.info(
            f"Detected {len(alerts)} suspicious activities between "
            f"{start_date.isoformat()} and {end_date.isoformat()}"
        )
        return rank_alerts(alerts)
