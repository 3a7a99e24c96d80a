"""
Audit Use Cases

Admin audit trail: recording, querying and retention.
"""

from .get_audit_logs_for_archival_use_case import GetAuditLogsForArchivalUseCase
from .get_audit_logs_use_case import DEFAULT_MAX_RESULTS, GetAuditLogsUseCase
from .get_resource_audit_trail_use_case import GetResourceAuditTrailUseCase
from .log_admin_action_use_case import LogAdminActionUseCase
from .log_sensitive_access_use_case import LogSensitiveAccessUseCase
from .purge_audit_logs_use_case import PurgeAuditLogsUseCase, retention_cutoff

__all__ = [
    "DEFAULT_MAX_RESULTS",
    "GetAuditLogsForArchivalUseCase",
    "GetAuditLogsUseCase",
    "GetResourceAuditTrailUseCase",
    "LogAdminActionUseCase",
    "LogSensitiveAccessUseCase",
    "PurgeAuditLogsUseCase",
    "retention_cutoff",
]
