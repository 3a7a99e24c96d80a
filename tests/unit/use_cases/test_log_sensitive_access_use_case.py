from uuid import uuid4

import pytest

from src.app.errors import AuditConfigurationError
from src.app.use_cases.audit import LogAdminActionUseCase, LogSensitiveAccessUseCase


@pytest.fixture
def use_case(mock_uow):
    return LogSensitiveAccessUseCase(LogAdminActionUseCase(mock_uow))


@pytest.mark.asyncio
async def test_customer_profile_access(use_case, mock_uow):
    log = await use_case.log_customer_profile_access("admin-1", "customer-42", "10.0.0.5")

    assert log.action == "ViewCustomerProfile"
    assert log.entity_type == "Customer"
    assert log.entity_id == "customer-42"
    assert "customer-42" in log.details
    assert log.ip_address == "10.0.0.5"
    assert log.is_success is True
    assert log.failure_reason is None
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_payout_details_access(use_case):
    log = await use_case.log_payout_details_access("admin-1", "seller-7")

    assert log.action == "ViewPayoutDetails"
    assert log.entity_type == "Seller"
    assert log.entity_id == "seller-7"
    assert "seller-7" in log.details
    assert log.ip_address is None


@pytest.mark.asyncio
async def test_kyc_document_access_stringifies_id(use_case):
    submission_id = uuid4()

    log = await use_case.log_kyc_document_access("admin-1", submission_id)

    assert log.action == "ViewKycDocument"
    assert log.entity_type == "KycSubmission"
    assert log.entity_id == str(submission_id)
    assert str(submission_id) in log.details


@pytest.mark.asyncio
async def test_store_details_access_stringifies_id(use_case):
    store_id = uuid4()

    log = await use_case.log_store_details_access("admin-1", store_id)

    assert log.action == "ViewStoreDetails"
    assert log.entity_type == "Store"
    assert log.entity_id == str(store_id)
    assert str(store_id) in log.details


@pytest.mark.asyncio
async def test_repeated_access_creates_distinct_records(use_case):
    first = await use_case.log_customer_profile_access("admin-1", "customer-42")
    second = await use_case.log_customer_profile_access("admin-1", "customer-42")

    assert first.id != second.id
    assert "customer-42" in first.details
    assert "customer-42" in second.details


@pytest.mark.asyncio
async def test_storage_failure_propagates(use_case, mock_uow):
    mock_uow.admin_audit_logs.add.side_effect = RuntimeError("database unavailable")

    with pytest.raises(RuntimeError):
        await use_case.log_payout_details_access("admin-1", "seller-7")


def test_constructor_requires_admin_action_logger():
    with pytest.raises(AuditConfigurationError):
        LogSensitiveAccessUseCase(None)
