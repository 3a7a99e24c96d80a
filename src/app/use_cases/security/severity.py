"""
Suspicious activity policy: detection thresholds and severity bands.

Bands are ordered (threshold, severity) pairs, highest threshold first;
the first band whose threshold the count reaches wins, otherwise low.
Brute force and rapid attempts deliberately band the same counts differently.
"""

from typing import Dict, Iterable, List, Tuple

from src.domain.entities import AlertSeverity, SuspiciousActivityType

from .dtos import SuspiciousActivityAlert

# Minimum failed logins from one hashed IP before it is reported
BRUTE_FORCE_THRESHOLD = 5
# Minimum login attempts against one account before it is reported
RAPID_ATTEMPTS_THRESHOLD = 10

SeverityBands = Tuple[Tuple[int, AlertSeverity], ...]

BRUTE_FORCE_BANDS: SeverityBands = (
    (50, AlertSeverity.critical),
    (10, AlertSeverity.medium),
)

RAPID_ATTEMPTS_BANDS: SeverityBands = (
    (50, AlertSeverity.critical),
    (10, AlertSeverity.high),
)

SEVERITY_BANDS: Dict[SuspiciousActivityType, SeverityBands] = {
    SuspiciousActivityType.brute_force: BRUTE_FORCE_BANDS,
    SuspiciousActivityType.rapid_attempts: RAPID_ATTEMPTS_BANDS,
}


def classify_severity(activity_type: SuspiciousActivityType, count: int) -> AlertSeverity:
    for threshold, severity in SEVERITY_BANDS[activity_type]:
        if count >= threshold:
            return severity
    return AlertSeverity.low


def rank_alerts(alerts: Iterable[SuspiciousActivityAlert]) -> List[SuspiciousActivityAlert]:
    """Order by severity descending, then count descending; ties keep input order"""
    return sorted(alerts, key=lambda alert: (alert.severity.rank, alert.count), reverse=True)
