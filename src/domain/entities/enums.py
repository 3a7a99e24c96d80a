"""
Audit Service Domain Enums

All enumeration types used across domain entities and reports.
"""

from enum import Enum


class AuthenticationEventType(str, Enum):
    """Kind of authentication occurrence"""

    login = "login"
    logout = "logout"
    lockout = "lockout"
    password_reset = "password_reset"
    password_change = "password_change"
    two_factor_authentication = "two_factor_authentication"
    mfa_challenge = "mfa_challenge"


class SuspiciousActivityType(str, Enum):
    """Detected authentication attack pattern"""

    brute_force = "brute_force"
    rapid_attempts = "rapid_attempts"


class AlertSeverity(str, Enum):
    """Alert severity, declared from least to most severe"""

    low = "low"
    medium = "medium"
    high = "high"
    critical = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {severity: index for index, severity in enumerate(AlertSeverity)}
