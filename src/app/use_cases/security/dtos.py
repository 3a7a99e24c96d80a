"""
Security Use Case DTOs (Data Transfer Objects)

Derived reports; never persisted, recomputed on every call.
"""

from datetime import datetime
from typing import Dict

from pydantic import BaseModel, Field

from src.domain.entities import (
    AlertSeverity,
    AuthenticationEventType,
    SuspiciousActivityType,
)


class SuspiciousActivityAlert(BaseModel):
    """One detected suspicious authentication pattern"""

    activity_type: SuspiciousActivityType
    count: int
    severity: AlertSeverity
    identifier: str  # hashed IP for brute force, account email for rapid attempts
    description: str
    detected_at: datetime


class AuthenticationStatistics(BaseModel):
    """Authentication summary over a time window"""

    start_date: datetime
    end_date: datetime
    total_successful_logins: int = 0
    total_failed_logins: int = 0
    total_lockouts: int = 0
    total_password_resets: int = 0
    events_by_type: Dict[AuthenticationEventType, int] = Field(default_factory=dict)
