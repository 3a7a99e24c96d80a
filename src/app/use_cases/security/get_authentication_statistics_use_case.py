"""
Get Authentication Statistics Use Case

Summarises authentication activity over a time window.
"""

import logging
from datetime import datetime

from src.app.errors import require
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuthenticationEventType

from .dtos import AuthenticationStatistics

logger = logging.getLogger(__name__)


class GetAuthenticationStatisticsUseCase:
    """
    Use case for the authentication statistics summary.

    Business Rules:
    - Successful/failed logins are folded from login events by success flag
    - Lockouts and password resets come from the per-type counts
    - Window bounds are echoed unchanged
    - Storage errors propagate
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = require(uow, "uow")

    async def execute(self, start_date: datetime, end_date: datetime) -> AuthenticationStatistics:
        async with self.uow:
            event_counts = await self.uow.authentication_events.get_event_counts_by_type(
                start_date, end_date
            )
            events = await self.uow.authentication_events.get_by_date_range(start_date, end_date)

            successful_logins = 0
            failed_logins = 0
            for event in events:
                if event.event_type != AuthenticationEventType.login:
                    continue
                if event.is_successful:
                    successful_logins += 1
                else:
                    failed_logins += 1

        statistics = AuthenticationStatistics(
            start_date=start_date,
            end_date=end_date,
            total_successful_logins=successful_logins,
            total_failed_logins=failed_logins,
            total_lockouts=event_counts.get(AuthenticationEventType.lockout, 0),
            total_password_resets=event_counts.get(AuthenticationEventType.password_reset, 0),
            events_by_type=dict(event_counts),
        )

        logger.info(
            f"Generated authentication statistics from {start_date.isoformat()} to "
            f"{end_date.isoformat()}: {successful_logins} successful logins, "
            f"{failed_logins} failed logins"
        )
        return statistics
