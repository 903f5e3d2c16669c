"""Tests for UpdateReceiptSettingsUseCase."""

from unittest.mock import AsyncMock, Mock

import pytest

from src.application.dto.requests import UpdateReceiptSettingsRequest
from src.application.use_cases.update_receipt_settings import (
    RECEIPT_SETTINGS_UPDATED,
    UpdateReceiptSettingsUseCase,
)
from src.core.entities.audit import AuditContext
from src.core.entities.receipt import PaperSize, ReceiptSettings
from src.core.exceptions import InvalidPaperSizeError


@pytest.fixture
def settings_store():
    store = Mock()
    store.load.return_value = ReceiptSettings(paper_size=PaperSize.THERMAL_80X80, print_on_confirm=True)
    return store


@pytest.fixture
def audit_store():
    return AsyncMock()


@pytest.fixture
def use_case(settings_store, audit_store):
    return UpdateReceiptSettingsUseCase(settings_store=settings_store, audit_store=audit_store)


class TestUpdateReceiptSettingsUseCase:
    async def test_partial_update_keeps_other_fields(self, use_case, settings_store):
        updated = await use_case.execute(
            UpdateReceiptSettingsRequest(paperSize="a6"), AuditContext(user_id="admin-1")
        )

        assert updated.paper_size == PaperSize.A6
        assert updated.print_on_confirm is True
        settings_store.save.assert_called_once_with(updated)

    async def test_writes_audit_with_before_and_after(self, use_case, audit_store):
        await use_case.execute(
            UpdateReceiptSettingsRequest(print_on_confirm=False), AuditContext(user_id="admin-1")
        )

        log = audit_store.create_log.call_args[0][0]
        assert log.action == RECEIPT_SETTINGS_UPDATED
        assert log.user_id == "admin-1"
        assert log.details["previous"]["print_on_confirm"] is True
        assert log.details["updated"]["print_on_confirm"] is False

    async def test_invalid_paper_size(self, use_case, settings_store, audit_store):
        with pytest.raises(InvalidPaperSizeError):
            await use_case.execute(
                UpdateReceiptSettingsRequest(paper_size="a4"), AuditContext()
            )

        settings_store.save.assert_not_called()
        audit_store.create_log.assert_not_awaited()

    def test_current(self, use_case):
        assert use_case.current().paper_size == PaperSize.THERMAL_80X80
