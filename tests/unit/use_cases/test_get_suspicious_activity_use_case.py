from datetime import timedelta

import pytest

from src.app.errors import AuditConfigurationError
from src.app.use_cases.security import GetSuspiciousActivityUseCase
from src.domain.base import utc_now
from src.domain.entities import AlertSeverity, SuspiciousActivityType


@pytest.fixture
def window():
    return utc_now() - timedelta(hours=24), utc_now()


@pytest.mark.asyncio
async def test_queries_use_detection_thresholds(mock_uow, window):
    start_date, end_date = window

    await GetSuspiciousActivityUseCase(mock_uow).execute(start_date, end_date)

    mock_uow.authentication_events.get_failed_attempts_by_ip.assert_called_once_with(
        start_date, end_date, 5
    )
    mock_uow.authentication_events.get_rapid_login_attempts.assert_called_once_with(
        start_date, end_date, 10
    )


@pytest.mark.asyncio
async def test_brute_force_fifty_is_critical(mock_uow, window):
    mock_uow.authentication_events.get_failed_attempts_by_ip.return_value = {"A": 50}

    alerts = await GetSuspiciousActivityUseCase(mock_uow).execute(*window)

    assert len(alerts) == 1
    assert alerts[0].activity_type == SuspiciousActivityType.brute_force
    assert alerts[0].count == 50
    assert alerts[0].severity == AlertSeverity.critical
    assert alerts[0].identifier == "A"


@pytest.mark.asyncio
async def test_brute_force_fifteen_is_medium(mock_uow, window):
    mock_uow.authentication_events.get_failed_attempts_by_ip.return_value = {"A": 15}

    alerts = await GetSuspiciousActivityUseCase(mock_uow).execute(*window)

    assert len(alerts) == 1
    assert alerts[0].severity == AlertSeverity.medium
    assert alerts[0].count == 15


@pytest.mark.asyncio
async def test_brute_force_alerts_ranked_by_severity(mock_uow, window):
    mock_uow.authentication_events.get_failed_attempts_by_ip.return_value = {
        "h3": 5,
        "h1": 50,
        "h2": 10,
    }

    alerts = await GetSuspiciousActivityUseCase(mock_uow).execute(*window)

    assert [(a.identifier, a.severity, a.count) for a in alerts] == [
        ("h1", AlertSeverity.critical, 50),
        ("h2", AlertSeverity.medium, 10),
        ("h3", AlertSeverity.low, 5),
    ]


@pytest.mark.asyncio
async def test_rapid_attempts_fifty_is_critical(mock_uow, window):
    mock_uow.authentication_events.get_rapid_login_attempts.return_value = {"u@example.com": 50}

    alerts = await GetSuspiciousActivityUseCase(mock_uow).execute(*window)

    assert len(alerts) == 1
    assert alerts[0].activity_type == SuspiciousActivityType.rapid_attempts
    assert alerts[0].severity == AlertSeverity.critical
    assert alerts[0].identifier == "u@example.com"
    assert "u@example.com" not in alerts[0].description


@pytest.mark.asyncio
async def test_same_count_bands_differently_per_activity(mock_uow, window):
    mock_uow.authentication_events.get_failed_attempts_by_ip.return_value = {"ip-hash": 15}
    mock_uow.authentication_events.get_rapid_login_attempts.return_value = {"u@example.com": 15}

    alerts = await GetSuspiciousActivityUseCase(mock_uow).execute(*window)

    assert [(a.activity_type, a.severity) for a in alerts] == [
        (SuspiciousActivityType.rapid_attempts, AlertSeverity.high),
        (SuspiciousActivityType.brute_force, AlertSeverity.medium),
    ]


@pytest.mark.asyncio
async def test_mixed_alerts_rank_by_severity_then_count(mock_uow, window):
    mock_uow.authentication_events.get_failed_attempts_by_ip.return_value = {
        "ip-a": 60,
        "ip-b": 7,
        "ip-c": 12,
    }
    mock_uow.authentication_events.get_rapid_login_attempts.return_value = {
        "a@example.com": 80,
        "b@example.com": 11,
    }

    alerts = await GetSuspiciousActivityUseCase(mock_uow).execute(*window)

    assert [(a.identifier, a.severity) for a in alerts] == [
        ("a@example.com", AlertSeverity.critical),
        ("ip-a", AlertSeverity.critical),
        ("b@example.com", AlertSeverity.high),
        ("ip-c", AlertSeverity.medium),
        ("ip-b", AlertSeverity.low),
    ]


@pytest.mark.asyncio
async def test_no_activity_yields_no_alerts(mock_uow, window):
    alerts = await GetSuspiciousActivityUseCase(mock_uow).execute(*window)

    assert alerts == []


@pytest.mark.asyncio
async def test_repeated_calls_recompute(mock_uow, window):
    use_case = GetSuspiciousActivityUseCase(mock_uow)
    mock_uow.authentication_events.get_failed_attempts_by_ip.return_value = {"A": 50}
    first = await use_case.execute(*window)

    mock_uow.authentication_events.get_failed_attempts_by_ip.return_value = {}
    second = await use_case.execute(*window)

    assert len(first) == 1
    assert second == []


@pytest.mark.asyncio
async def test_read_failure_propagates(mock_uow, window):
    """A failed read must never look like "nothing suspicious" """
    mock_uow.authentication_events.get_rapid_login_attempts.side_effect = RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await GetSuspiciousActivityUseCase(mock_uow).execute(*window)


def test_constructor_requires_uow():
    with pytest.raises(AuditConfigurationError):
        GetSuspiciousActivityUseCase(None)
