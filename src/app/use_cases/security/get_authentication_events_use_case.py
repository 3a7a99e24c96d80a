"""
Get Authentication Events Use Case

Filtered listing of raw authentication events for the security dashboard.
"""

from datetime import datetime
from typing import List, Optional

from src.app.errors import require
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuthenticationEvent, AuthenticationEventType


class GetAuthenticationEventsUseCase:
    """Optional-filter search over authentication events, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = require(uow, "uow")

    async def execute(
        self,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        event_type: Optional[AuthenticationEventType] = None,
        user_role: Optional[str] = None,
        user_id: Optional[str] = None,
        is_successful: Optional[bool] = None,
        max_results: int = 100,
    ) -> List[AuthenticationEvent]:
        async with self.uow:
            return await self.uow.authentication_events.get_filtered(
                start_date=start_date,
                end_date=end_date,
                event_type=event_type,
                user_role=user_role,
                user_id=user_id,
                is_successful=is_successful,
                max_results=max_results,
            )
