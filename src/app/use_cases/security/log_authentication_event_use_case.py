"""
Log Authentication Event Use Case

Best-effort recording of authentication attempts and lifecycle transitions.
"""

import logging
from typing import Optional

from src.app.errors import require
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.recording import IpHasher, new_authentication_event
from src.domain.base import hash_ip_address, mask_email
from src.domain.entities import AuthenticationEventType

logger = logging.getLogger(__name__)


class LogAuthenticationEventUseCase:
    """
    Use case for recording an authentication event.

    Business Rules:
    - Best-effort: storage failures are logged as warnings and swallowed,
      authentication must never fail because auditing failed
    - Task cancellation is not a storage failure and still propagates
    - The raw IP is hashed before the record is built
    - User agent truncated to 500 characters
    - event_type may be given as the enum or its string value
    """

    def __init__(self, uow: UnitOfWork, ip_hasher: IpHasher = hash_ip_address):
        self.uow = require(uow, "uow")
        self.ip_hasher = require(ip_hasher, "ip_hasher")

    async def execute(
        self,
        event_type: AuthenticationEventType,
        email: str,
        is_successful: bool,
        user_id: Optional[str] = None,
        user_role: Optional[str] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
        failure_reason: Optional[str] = None,
    ) -> None:
        """
        Execute log authentication event use case.

        Args:
            event_type: Kind of event (login, lockout, ...)
            email: Subject email
            is_successful: Outcome of the attempt
            user_id: Authenticated user id, if known
            user_role: Role of the user, if known
            ip_address: Raw client IP (only its hash is stored)
            user_agent: Client user agent
            failure_reason: Why the attempt failed, if it did
        """
        try:
            event = new_authentication_event(
                event_type=event_type,
                email=email,
                is_successful=is_successful,
                ip_hasher=self.ip_hasher,
                user_id=user_id,
                user_role=user_role,
                ip_address=ip_address,
                user_agent=user_agent,
                failure_reason=failure_reason,
            )
            async with self.uow:
                await self.uow.authentication_events.add(event)
                await self.uow.commit()
        except Exception:
            # Don't fail the authentication flow if logging fails
            logger.warning(
                f"Failed to log authentication event {getattr(event_type, 'value', event_type)} "
                f"for {mask_email(email or '')}",
                exc_info=True,
            )
            return

        logger.info(
            f"Logged authentication event: {event.event_type.value} for "
            f"{mask_email(event.email)}, success: {is_successful}"
        )
