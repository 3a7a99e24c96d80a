from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.errors import AuditConfigurationError
from src.app.use_cases.audit import GetAuditLogsForArchivalUseCase, PurgeAuditLogsUseCase
from src.domain.base import utc_now
from src.domain.entities import AdminAuditLog


@pytest.mark.asyncio
async def test_purge_forwards_cutoff_and_returns_port_count(mock_uow):
    mock_uow.admin_audit_logs.delete_older_than.return_value = 150

    before = utc_now()
    result = await PurgeAuditLogsUseCase(mock_uow).execute(90)
    after = utc_now()

    assert result == 150
    mock_uow.admin_audit_logs.delete_older_than.assert_called_once()
    mock_uow.commit.assert_called_once()

    cutoff = mock_uow.admin_audit_logs.delete_older_than.call_args.args[0]
    assert cutoff < before
    assert before - timedelta(days=90) <= cutoff <= after - timedelta(days=90)


@pytest.mark.asyncio
async def test_purge_failure_propagates(mock_uow):
    mock_uow.admin_audit_logs.delete_older_than.side_effect = RuntimeError("database unavailable")

    with pytest.raises(RuntimeError):
        await PurgeAuditLogsUseCase(mock_uow).execute(90)

    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_archival_forwards_cutoff_and_batch_size(mock_uow):
    logs = [
        AdminAuditLog(
            id=uuid4(),
            admin_user_id="admin1",
            action="Login",
            entity_type="User",
            entity_id="user1",
            is_success=True,
            timestamp=utc_now() - timedelta(days=100),
        ),
        AdminAuditLog(
            id=uuid4(),
            admin_user_id="admin2",
            action="RoleChange",
            entity_type="User",
            entity_id="user2",
            is_success=True,
            timestamp=utc_now() - timedelta(days=95),
        ),
    ]
    mock_uow.admin_audit_logs.get_for_archival.return_value = logs

    result = await GetAuditLogsForArchivalUseCase(mock_uow).execute(90, 500)

    assert result == logs
    cutoff, batch_size = mock_uow.admin_audit_logs.get_for_archival.call_args.args
    assert cutoff < utc_now() - timedelta(days=89)
    assert batch_size == 500
    mock_uow.commit.assert_not_called()


def test_constructors_require_uow():
    with pytest.raises(AuditConfigurationError):
        PurgeAuditLogsUseCase(None)
    with pytest.raises(AuditConfigurationError):
        GetAuditLogsForArchivalUseCase(None)
