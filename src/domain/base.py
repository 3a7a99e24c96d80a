import base64
import hashlib
from datetime import UTC, datetime
from typing import Optional

IP_HASH_LENGTH = 16


def utc_now() -> datetime:
    """Current UTC instant as a naive datetime (storage columns are naive UTC)"""
    return datetime.now(UTC).replace(tzinfo=None)


def hash_ip_address(ip_address: Optional[str]) -> Optional[str]:
    """
    One-way hash of a client IP address.

    SHA-256 of the UTF-8 address, base64 encoded, first 16 characters.
    Empty or missing addresses hash to None.
    """
    if not ip_address:
        return None

    digest = hashlib.sha256(ip_address.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")[:IP_HASH_LENGTH]


def truncate(value: Optional[str], max_length: int) -> Optional[str]:
    if not value:
        return None
    return value[:max_length]


def mask_email(email: str) -> str:
    """Mask an email for display: jane.doe@example.com -> j***e@example.com"""
    if not email:
        return ""

    at_index = email.find("@")
    if at_index <= 1:
        domain = email[at_index + 1 :] if at_index >= 0 else "***"
        return "***@" + domain

    return email[0] + "***" + email[at_index - 1 :]


def as_utc_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC; naive values are taken as UTC already"""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)
