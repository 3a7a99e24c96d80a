"""
Audit Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AlertSeverity,
    AuthenticationEventType,
    SuspiciousActivityType,
)

# Export all entities
from .admin_audit_log import AdminAuditLog
from .authentication_event import AuthenticationEvent

__all__ = [
    # Enums
    "AlertSeverity",
    "AuthenticationEventType",
    "SuspiciousActivityType",
    # Entities
    "AdminAuditLog",
    "AuthenticationEvent",
]
