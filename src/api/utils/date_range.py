from datetime import datetime
from typing import Optional, Tuple

from src.api.error import ClientError, Error
from src.domain.base import as_utc_naive


def utc_window(
    start_date: Optional[datetime], end_date: Optional[datetime]
) -> Tuple[Optional[datetime], Optional[datetime]]:
    """Convert query bounds to naive UTC and reject start_date > end_date"""
    start, end = as_utc_naive(start_date), as_utc_naive(end_date)
    if start is not None and end is not None and start > end:
        raise ClientError(
            Error(code="INVALID_DATE_RANGE", message="start_date must not be after end_date")
        )
    return start, end
