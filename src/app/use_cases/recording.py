"""
Record construction shared by the authentication-event and admin-audit write paths.

Both builders assign a fresh UUID and take the timestamp at call time.
Persistence and error policy stay with the callers.
"""

from typing import Callable, Optional

from src.domain.base import truncate, utc_now
from src.domain.entities import AdminAuditLog, AuthenticationEvent, AuthenticationEventType

USER_AGENT_MAX_LENGTH = 500

IpHasher = Callable[[Optional[str]], Optional[str]]


def new_authentication_event(
    event_type: AuthenticationEventType,
    email: Optional[str],
    is_successful: bool,
    ip_hasher: IpHasher,
    user_id: Optional[str] = None,
    user_role: Optional[str] = None,
    ip_address: Optional[str] = None,
    user_agent: Optional[str] = None,
    failure_reason: Optional[str] = None,
) -> AuthenticationEvent:
    return AuthenticationEvent(
        event_type=AuthenticationEventType(event_type),
        email=email or "",
        is_successful=is_successful,
        user_id=user_id,
        user_role=user_role,
        ip_address_hash=ip_hasher(ip_address),
        user_agent=truncate(user_agent, USER_AGENT_MAX_LENGTH),
        failure_reason=failure_reason,
        occurred_at=utc_now(),
    )


def new_admin_audit_log(
    admin_user_id: str,
    action: str,
    entity_type: str,
    entity_id: str,
    is_success: bool,
    details: Optional[str] = None,
    failure_reason: Optional[str] = None,
    ip_address: Optional[str] = None,
) -> AdminAuditLog:
    return AdminAuditLog(
        admin_user_id=admin_user_id,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        is_success=is_success,
        details=details,
        # A successful action never carries a failure reason
        failure_reason=None if is_success else failure_reason,
        ip_address=ip_address,
        timestamp=utc_now(),
    )
