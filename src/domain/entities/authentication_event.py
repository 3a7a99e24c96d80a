"""
AuthenticationEvent Entity

Immutable record of one authentication attempt or lifecycle transition.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now

from .enums import AuthenticationEventType


class AuthenticationEvent(SQLModel, table=True):
    """
    AuthenticationEvent entity - one login, logout, lockout, reset, etc.

    Business Rules:
    - Immutable (never updated; the repository has no update method)
    - The client IP is stored only as a one-way hash, never raw
    - user_agent is truncated to 500 characters
    - occurred_at is the naive UTC instant the record was built
    """

    __tablename__ = "authentication_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_type: AuthenticationEventType
    email: str = Field(default="", max_length=256)
    is_successful: bool

    user_id: Optional[str] = Field(default=None, max_length=450)
    user_role: Optional[str] = Field(default=None, max_length=50)
    ip_address_hash: Optional[str] = Field(default=None, max_length=64)
    user_agent: Optional[str] = Field(default=None, max_length=500)
    failure_reason: Optional[str] = Field(default=None, max_length=500)

    occurred_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_auth_event_occurred_at", "occurred_at"),
        Index("idx_auth_event_type", "event_type"),
        Index("idx_auth_event_email", "email"),
        Index("idx_auth_event_ip_hash", "ip_address_hash"),
        Index("idx_auth_event_success", "is_successful"),
    )
