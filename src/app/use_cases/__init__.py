"""
Use Cases

Organized into domain folders:
- audit/: Admin audit trail (recording, querying, retention)
- security/: Authentication events, statistics, suspicious activity
"""

from .audit import (
    GetAuditLogsForArchivalUseCase,
    GetAuditLogsUseCase,
    GetResourceAuditTrailUseCase,
    LogAdminActionUseCase,
    LogSensitiveAccessUseCase,
    PurgeAuditLogsUseCase,
)
from .security import (
    GetAuthenticationEventsUseCase,
    GetAuthenticationStatisticsUseCase,
    GetSuspiciousActivityUseCase,
    LogAuthenticationEventUseCase,
)

__all__ = [
    # Audit
    "GetAuditLogsForArchivalUseCase",
    "GetAuditLogsUseCase",
    "GetResourceAuditTrailUseCase",
    "LogAdminActionUseCase",
    "LogSensitiveAccessUseCase",
    "PurgeAuditLogsUseCase",
    # Security
    "GetAuthenticationEventsUseCase",
    "GetAuthenticationStatisticsUseCase",
    "GetSuspiciousActivityUseCase",
    "LogAuthenticationEventUseCase",
]
