"""
AdminAuditLog Entity

Immutable record of one privileged administrative action.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now


class AdminAuditLog(SQLModel, table=True):
    """
    AdminAuditLog entity - compliance trail of admin actions.

    Business Rules:
    - Immutable; removed only by the retention purge
    - failure_reason is set only when is_success is False
    - For sensitive-access logs, details contains entity_id verbatim
      (compliance search relies on substring matching)
    - ip_address is stored raw (internal actor trail)
    """

    __tablename__ = "admin_audit_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    admin_user_id: str = Field(max_length=450)
    action: str = Field(max_length=100)  # e.g., "ViewCustomerProfile"
    entity_type: str = Field(max_length=100)
    entity_id: str = Field(max_length=450)
    is_success: bool = Field(default=True)

    details: Optional[str] = Field(default=None, max_length=2000)
    failure_reason: Optional[str] = Field(default=None, max_length=500)
    ip_address: Optional[str] = Field(default=None, max_length=45)

    timestamp: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_admin_audit_admin_user", "admin_user_id"),
        Index("idx_admin_audit_timestamp", "timestamp"),
        Index("idx_admin_audit_entity", "entity_type", "entity_id"),
    )
