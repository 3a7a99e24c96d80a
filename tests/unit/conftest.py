import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with both audit repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.authentication_events = MagicMock()
    uow.authentication_events.add = AsyncMock()
    uow.authentication_events.get_by_date_range = AsyncMock(return_value=[])
    uow.authentication_events.get_event_counts_by_type = AsyncMock(return_value={})
    uow.authentication_events.get_failed_attempts_by_ip = AsyncMock(return_value={})
    uow.authentication_events.get_rapid_login_attempts = AsyncMock(return_value={})
    uow.authentication_events.get_filtered = AsyncMock(return_value=[])

    uow.admin_audit_logs = MagicMock()
    # Echo the record back like the SQL repository does after refresh
    uow.admin_audit_logs.add = AsyncMock(side_effect=lambda audit_log: audit_log)
    uow.admin_audit_logs.get_filtered = AsyncMock(return_value=[])
    uow.admin_audit_logs.get_by_entity = AsyncMock(return_value=[])
    uow.admin_audit_logs.delete_older_than = AsyncMock(return_value=0)
    uow.admin_audit_logs.get_for_archival = AsyncMock(return_value=[])

    return uow
