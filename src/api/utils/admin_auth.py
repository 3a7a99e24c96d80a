"""
Audit API Key Guard

Every audit and security route is called by trusted back-office clients
(admin dashboard, compliance exports, alerting jobs) holding the shared key.
"""

import hmac
from typing import Optional

from fastapi import Security, status
from fastapi.security import APIKeyHeader

from config import ApplicationConfig
from src.api.error import ClientError, Error

ADMIN_API_KEY_HEADER = "X-Admin-API-Key"

admin_api_key_header = APIKeyHeader(name=ADMIN_API_KEY_HEADER, auto_error=False)


def _keys_match(provided: str, expected: str) -> bool:
    return hmac.compare_digest(provided.encode(), expected.encode())


async def verify_admin_api_key(api_key: Optional[str] = Security(admin_api_key_header)) -> bool:
    """
    Reject audit requests without the configured admin API key.

    Raises:
        ClientError: 401 UNAUTHORIZED when the header is absent,
            401 INVALID_API_KEY when it does not match ADMIN_API_KEY
    """
    if not api_key:
        raise ClientError(
            Error(
                code="UNAUTHORIZED",
                message=f"Audit endpoints require the {ADMIN_API_KEY_HEADER} header",
            ),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if not _keys_match(api_key, ApplicationConfig.ADMIN_API_KEY):
        raise ClientError(
            Error(code="INVALID_API_KEY", message="Audit API key not recognised"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True
