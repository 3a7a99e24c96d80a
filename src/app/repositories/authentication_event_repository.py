from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional

from src.domain.entities import AuthenticationEvent, AuthenticationEventType


class IAuthenticationEventRepository(ABC):
    """AuthenticationEvent repository interface - application layer"""

    @abstractmethod
    async def add(self, event: AuthenticationEvent) -> None:
        """Add a new authentication event (immutable)"""
        pass

    @abstractmethod
    async def get_by_date_range(
        self, start_date: datetime, end_date: datetime
    ) -> List[AuthenticationEvent]:
        """Get all events with start_date <= occurred_at <= end_date, newest first"""
        pass

    @abstractmethod
    async def get_event_counts_by_type(
        self, start_date: datetime, end_date: datetime
    ) -> Dict[AuthenticationEventType, int]:
        """Count events in the window grouped by event type"""
        pass

    @abstractmethod
    async def get_failed_attempts_by_ip(
        self, start_date: datetime, end_date: datetime, min_count: int = 5
    ) -> Dict[str, int]:
        """
        Count failed logins per hashed IP in the window.

        Only IPs with at least min_count failures are returned.
        """
        pass

    @abstractmethod
    async def get_rapid_login_attempts(
        self, start_date: datetime, end_date: datetime, min_count: int = 10
    ) -> Dict[str, int]:
        """
        Count login attempts (any outcome) per account email in the window.

        Only accounts with at least min_count attempts are returned.
        """
        pass

    @abstractmethod
    async def get_filtered(
        self,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        event_type: Optional[AuthenticationEventType] = None,
        user_role: Optional[str] = None,
        user_id: Optional[str] = None,
        is_successful: Optional[bool] = None,
        max_results: int = 100,
    ) -> List[AuthenticationEvent]:
        """Get events matching every filter that is not None, newest first"""
        pass
