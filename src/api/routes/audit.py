"""
Audit API Routes

Admin audit log search, per-resource timelines and retention operations.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from config import ApplicationConfig
from src.api.utils.admin_auth import verify_admin_api_key
from src.api.utils.date_range import utc_window
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import (
    GetAuditLogsForArchivalUseCase,
    GetAuditLogsUseCase,
    GetResourceAuditTrailUseCase,
    PurgeAuditLogsUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import AdminAuditLog

router = APIRouter(
    prefix="/audit",
    tags=["Audit"],
    dependencies=[Depends(verify_admin_api_key)],
)


class AuditLogsResponse(BaseModel):
    """Admin audit log listing"""

    logs: List[AdminAuditLog]
    count: int


class PurgeResponse(BaseModel):
    """POST /audit/retention/purge response payload"""

    deleted_count: int
    retention_days: int


@router.get("/logs", status_code=status.HTTP_200_OK, response_model=AuditLogsResponse)
async def get_audit_logs(
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
    admin_user_id: Optional[str] = Query(None),
    entity_type: Optional[str] = Query(None),
    action: Optional[str] = Query(None),
    entity_id: Optional[str] = Query(None),
    is_success: Optional[bool] = Query(None),
    max_results: int = Query(ApplicationConfig.DEFAULT_MAX_RESULTS, ge=1, le=1000),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Search Admin Audit Logs

    Unset filters are not applied. Results ordered newest first, capped at max_results.

    Raises:
        - 400 Bad Request: INVALID_DATE_RANGE
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: storage failure
    """
    start, end = utc_window(start_date, end_date)
    logs = await GetAuditLogsUseCase(uow).execute(
        start_date=start,
        end_date=end,
        admin_user_id=admin_user_id,
        entity_type=entity_type,
        action=action,
        entity_id=entity_id,
        is_success=is_success,
        max_results=max_results,
    )
    return AuditLogsResponse(logs=logs, count=len(logs))


@router.get(
    "/logs/{entity_type}/{entity_id}",
    status_code=status.HTTP_200_OK,
    response_model=AuditLogsResponse,
)
async def get_resource_audit_trail(
    entity_type: str,
    entity_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Resource Audit Trail

    Complete history of one resource, oldest first (incident timelines).
    """
    logs = await GetResourceAuditTrailUseCase(uow).execute(entity_type, entity_id)
    return AuditLogsResponse(logs=logs, count=len(logs))


@router.post(
    "/retention/purge",
    status_code=status.HTTP_200_OK,
    response_model=PurgeResponse,
)
async def purge_audit_logs(
    retention_days: int = Query(ApplicationConfig.AUDIT_RETENTION_DAYS, ge=1),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Purge Expired Audit Logs

    Deletes logs older than now - retention_days.
    """
    deleted = await PurgeAuditLogsUseCase(uow).execute(retention_days)
    return PurgeResponse(deleted_count=deleted, retention_days=retention_days)


@router.get(
    "/retention/archival",
    status_code=status.HTTP_200_OK,
    response_model=AuditLogsResponse,
)
async def get_audit_logs_for_archival(
    retention_days: int = Query(ApplicationConfig.AUDIT_RETENTION_DAYS, ge=1),
    batch_size: int = Query(ApplicationConfig.ARCHIVAL_BATCH_SIZE, ge=1, le=5000),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Audit Logs Due For Archival

    Next batch of logs past retention, oldest first.
    """
    logs = await GetAuditLogsForArchivalUseCase(uow).execute(retention_days, batch_size)
    return AuditLogsResponse(logs=logs, count=len(logs))
