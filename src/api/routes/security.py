"""
Security API Routes

Authentication statistics, suspicious activity and event search for the
admin security dashboard and alerting jobs.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from config import ApplicationConfig
from src.api.utils.admin_auth import verify_admin_api_key
from src.api.utils.date_range import utc_window
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.security import (
    AuthenticationStatistics,
    GetAuthenticationEventsUseCase,
    GetAuthenticationStatisticsUseCase,
    GetSuspiciousActivityUseCase,
    SuspiciousActivityAlert,
)
from src.depends import get_unit_of_work
from src.domain.entities import AuthenticationEvent, AuthenticationEventType

router = APIRouter(
    prefix="/security",
    tags=["Security"],
    dependencies=[Depends(verify_admin_api_key)],
)


class SuspiciousActivityResponse(BaseModel):
    """GET /security/suspicious-activity response payload"""

    alerts: List[SuspiciousActivityAlert]


class AuthenticationEventsResponse(BaseModel):
    """GET /security/events response payload"""

    events: List[AuthenticationEvent]


@router.get(
    "/statistics",
    status_code=status.HTTP_200_OK,
    response_model=AuthenticationStatistics,
)
async def get_statistics(
    start_date: datetime = Query(..., description="Window start (inclusive)"),
    end_date: datetime = Query(..., description="Window end (inclusive)"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Authentication Statistics

    Successful/failed logins, lockouts and password resets in the window.
    Bounds are echoed back as naive UTC, whatever offset they were sent with.

    Raises:
        - 400 Bad Request: INVALID_DATE_RANGE
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: storage failure
    """
    start, end = utc_window(start_date, end_date)
    return await GetAuthenticationStatisticsUseCase(uow).execute(start, end)


@router.get(
    "/suspicious-activity",
    status_code=status.HTTP_200_OK,
    response_model=SuspiciousActivityResponse,
)
async def get_suspicious_activity(
    start_date: datetime = Query(..., description="Window start (inclusive)"),
    end_date: datetime = Query(..., description="Window end (inclusive)"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Suspicious Activity

    Brute-force and rapid-attempt alerts, most severe first.

    Raises:
        - 400 Bad Request: INVALID_DATE_RANGE
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: storage failure
    """
    start, end = utc_window(start_date, end_date)
    alerts = await GetSuspiciousActivityUseCase(uow).execute(start, end)
    return SuspiciousActivityResponse(alerts=alerts)


@router.get(
    "/events",
    status_code=status.HTTP_200_OK,
    response_model=AuthenticationEventsResponse,
)
async def get_events(
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
    event_type: Optional[AuthenticationEventType] = Query(None),
    user_role: Optional[str] = Query(None),
    user_id: Optional[str] = Query(None),
    is_successful: Optional[bool] = Query(None),
    max_results: int = Query(ApplicationConfig.DEFAULT_MAX_RESULTS, ge=1, le=1000),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Authentication Events

    Recent authentication events, newest first. Unset filters are not applied.
    """
    start, end = utc_window(start_date, end_date)
    events = await GetAuthenticationEventsUseCase(uow).execute(
        start_date=start,
        end_date=end,
        event_type=event_type,
        user_role=user_role,
        user_id=user_id,
        is_successful=is_successful,
        max_results=max_results,
    )
    return AuthenticationEventsResponse(events=events)
