from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.authentication_event_repository import (
    IAuthenticationEventRepository,
)
from src.domain.entities import AuthenticationEvent, AuthenticationEventType


def _in_window(start_date: datetime, end_date: datetime):
    return (
        col(AuthenticationEvent.occurred_at) >= start_date,
        col(AuthenticationEvent.occurred_at) <= end_date,
    )


class AuthenticationEventRepository(IAuthenticationEventRepository):
    """AuthenticationEvent repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def add(self, event: AuthenticationEvent) -> None:
        """Add a new authentication event (immutable)"""
        self.session.add(event)
        await self.session.flush()

    async def get_by_date_range(
        self, start_date: datetime, end_date: datetime
    ) -> List[AuthenticationEvent]:
        """Get all events in the window (inclusive), newest first"""
        stmt = (
            select(AuthenticationEvent)
            .where(*_in_window(start_date, end_date))
            .order_by(col(AuthenticationEvent.occurred_at).desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_event_counts_by_type(
        self, start_date: datetime, end_date: datetime
    ) -> Dict[AuthenticationEventType, int]:
        """Count events in the window grouped by event type"""
        stmt = (
            select(AuthenticationEvent.event_type, func.count(col(AuthenticationEvent.id)))
            .where(*_in_window(start_date, end_date))
            .group_by(AuthenticationEvent.event_type)
        )
        result = await self.session.exec(stmt)
        return {AuthenticationEventType(event_type): count for event_type, count in result.all()}

    async def get_failed_attempts_by_ip(
        self, start_date: datetime, end_date: datetime, min_count: int = 5
    ) -> Dict[str, int]:
        """Failed logins per hashed IP, keeping IPs with at least min_count failures"""
        failures = func.count(col(AuthenticationEvent.id))
        stmt = (
            select(AuthenticationEvent.ip_address_hash, failures)
            .where(*_in_window(start_date, end_date))
            .where(AuthenticationEvent.event_type == AuthenticationEventType.login)
            .where(col(AuthenticationEvent.is_successful).is_(False))
            .where(col(AuthenticationEvent.ip_address_hash).is_not(None))
            .group_by(AuthenticationEvent.ip_address_hash)
            .having(failures >= min_count)
        )
        result = await self.session.exec(stmt)
        return {ip_hash: count for ip_hash, count in result.all()}

    async def get_rapid_login_attempts(
        self, start_date: datetime, end_date: datetime, min_count: int = 10
    ) -> Dict[str, int]:
        """Login attempts per email, keeping accounts with at least min_count attempts"""
        attempts = func.count(col(AuthenticationEvent.id))
        stmt = (
            select(AuthenticationEvent.email, attempts)
            .where(*_in_window(start_date, end_date))
            .where(AuthenticationEvent.event_type == AuthenticationEventType.login)
            .group_by(AuthenticationEvent.email)
            .having(attempts >= min_count)
        )
        result = await self.session.exec(stmt)
        return {email: count for email, count in result.all()}

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
        stmt = select(AuthenticationEvent)

        if start_date is not None:
            stmt = stmt.where(col(AuthenticationEvent.occurred_at) >= start_date)
        if end_date is not None:
            stmt = stmt.where(col(AuthenticationEvent.occurred_at) <= end_date)
        if event_type is not None:
            stmt = stmt.where(AuthenticationEvent.event_type == event_type)
        if user_role is not None:
            stmt = stmt.where(AuthenticationEvent.user_role == user_role)
        if user_id is not None:
            stmt = stmt.where(AuthenticationEvent.user_id == user_id)
        if is_successful is not None:
            stmt = stmt.where(AuthenticationEvent.is_successful == is_successful)

        stmt = stmt.order_by(col(AuthenticationEvent.occurred_at).desc()).limit(max_results)
        result = await self.session.exec(stmt)
        return list(result.all())
