import pytest

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.entities import AdminAuditLog, AuthenticationEvent, AuthenticationEventType


@pytest.mark.asyncio
async def test_commit_persists_both_repositories(uow, session_factory):
    async with uow:
        await uow.admin_audit_logs.add(
            AdminAuditLog(admin_user_id="admin-1", action="Create", entity_type="User", entity_id="u-1")
        )
        await uow.authentication_events.add(
            AuthenticationEvent(
                event_type=AuthenticationEventType.login, email="a@example.com", is_successful=True
            )
        )
        await uow.commit()

    async with session_factory() as session:
        async with SqlAlchemyUnitOfWork(session) as fresh:
            logs = await fresh.admin_audit_logs.get_by_entity("User", "u-1")
            events = await fresh.authentication_events.get_filtered()

    assert len(logs) == 1
    assert len(events) == 1


@pytest.mark.asyncio
async def test_error_inside_block_rolls_back(uow):
    with pytest.raises(RuntimeError):
        async with uow:
            await uow.admin_audit_logs.add(
                AdminAuditLog(admin_user_id="admin-1", action="Create", entity_type="User", entity_id="u-2")
            )
            raise RuntimeError("boom")

    async with uow:
        logs = await uow.admin_audit_logs.get_by_entity("User", "u-2")

    assert logs == []


@pytest.mark.asyncio
async def test_uncommitted_work_is_discarded_with_the_session(session_factory):
    async with session_factory() as session:
        async with SqlAlchemyUnitOfWork(session) as uow:
            await uow.admin_audit_logs.add(
                AdminAuditLog(admin_user_id="admin-1", action="Create", entity_type="User", entity_id="u-3")
            )

    async with session_factory() as session:
        async with SqlAlchemyUnitOfWork(session) as uow:
            logs = await uow.admin_audit_logs.get_by_entity("User", "u-3")

    assert logs == []


@pytest.mark.asyncio
async def test_clean_exit_keeps_loaded_instances_readable(uow):
    async with uow:
        await uow.admin_audit_logs.add(
            AdminAuditLog(admin_user_id="admin-1", action="Create", entity_type="User", entity_id="u-4")
        )
        await uow.commit()

    async with uow:
        logs = await uow.admin_audit_logs.get_by_entity("User", "u-4")

    assert logs[0].model_dump()["entity_id"] == "u-4"
    assert logs[0].admin_user_id == "admin-1"
