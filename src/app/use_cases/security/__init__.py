"""
Security Use Cases

Authentication event recording, statistics and suspicious activity detection.
"""

from .dtos import AuthenticationStatistics, SuspiciousActivityAlert
from .get_authentication_events_use_case import GetAuthenticationEventsUseCase
from .get_authentication_statistics_use_case import GetAuthenticationStatisticsUseCase
from .get_suspicious_activity_use_case import GetSuspiciousActivityUseCase
from .log_authentication_event_use_case import LogAuthenticationEventUseCase

__all__ = [
    # Use Cases
    "GetAuthenticationEventsUseCase",
    "GetAuthenticationStatisticsUseCase",
    "GetSuspiciousActivityUseCase",
    "LogAuthenticationEventUseCase",
    # DTOs
    "AuthenticationStatistics",
    "SuspiciousActivityAlert",
]
