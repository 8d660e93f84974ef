"""Author notification dispatch and email composition."""

import logging
from datetime import UTC, datetime
from unittest.mock import AsyncMock

from cardfile.application.dtos.caller import NotificationRecipient
from cardfile.application.dtos.text_material import TextMaterialResult
from cardfile.application.use_cases.text_materials import AuthorNotificationDispatcher
from cardfile.domain.enums import ApprovalStatus
from cardfile.infrastructure.services import (
    EmailTextMaterialNotifier,
    LogOnlyNotificationService,
)

ALICE = NotificationRecipient(user_id="u1", username="alice", email="alice@example.com")


def _material() -> TextMaterialResult:
    return TextMaterialResult(
        id=1,
        title="Autumn Leaves",
        content="",
        author_id="u1",
        author_name="alice",
        category_id=None,
        category_title=None,
        approval_status=ApprovalStatus.APPROVED,
        date_published=datetime(2024, 1, 1, tzinfo=UTC),
    )


class TestDispatcher:
    async def test_sends_to_author(self) -> None:
        directory = AsyncMock()
        directory.get_recipient = AsyncMock(return_value=ALICE)
        notifier = AsyncMock()
        sent = await AuthorNotificationDispatcher(directory, notifier).approved(_material())
        assert sent is True
        directory.get_recipient.assert_awaited_once_with("u1")
        notifier.notify_approved.assert_awaited_once_with(ALICE, _material())

    async def test_missing_author_logged_not_raised(self, caplog) -> None:
        directory = AsyncMock()
        directory.get_recipient = AsyncMock(return_value=None)
        notifier = AsyncMock()
        with caplog.at_level(logging.WARNING):
            sent = await AuthorNotificationDispatcher(directory, notifier).deleted(_material())
        assert sent is False
        notifier.notify_deleted.assert_not_awaited()
        assert "author u1 not found" in caplog.text

    async def test_directory_failure_swallowed(self) -> None:
        directory = AsyncMock()
        directory.get_recipient = AsyncMock(side_effect=ConnectionError("down"))
        sent = await AuthorNotificationDispatcher(directory, AsyncMock()).created(_material())
        assert sent is False

    async def test_transport_failure_swallowed_and_logged(self, caplog) -> None:
        directory = AsyncMock()
        directory.get_recipient = AsyncMock(return_value=ALICE)
        notifier = AsyncMock()
        notifier.notify_rejected.side_effect = RuntimeError("smtp down")
        with caplog.at_level(logging.ERROR):
            sent = await AuthorNotificationDispatcher(directory, notifier).rejected(
                _material(), "reason"
            )
        assert sent is False
        assert "Failed to send rejected notification" in caplog.text

    async def test_opted_out_skipped(self) -> None:
        directory = AsyncMock()
        directory.get_recipient = AsyncMock(
            return_value=NotificationRecipient("u1", "alice", "a@x", receive_notifications=False)
        )
        notifier = AsyncMock()
        sent = await AuthorNotificationDispatcher(directory, notifier).approved(_material())
        assert sent is False
        notifier.notify_approved.assert_not_awaited()


class TestEmailNotifier:
    async def test_rejected_email_includes_reason(self) -> None:
        transport = AsyncMock()
        await EmailTextMaterialNotifier(transport).notify_rejected(ALICE, _material(), "Typos")
        to_emails, subject, body = transport.send.await_args.args
        assert to_emails == ["alice@example.com"]
        assert subject == "Text material rejected"
        assert "Autumn Leaves" in body
        assert "Reason: Typos" in body

    async def test_rejected_email_without_reason(self) -> None:
        transport = AsyncMock()
        await EmailTextMaterialNotifier(transport).notify_rejected(ALICE, _material(), None)
        assert "not specified" in transport.send.await_args.args[2]

    async def test_created_email_mentions_pending(self) -> None:
        transport = AsyncMock()
        await EmailTextMaterialNotifier(transport).notify_created(ALICE, _material())
        subject, body = transport.send.await_args.args[1:]
        assert subject == "Text material created"
        assert "PENDING" in body
        assert body.startswith("Hello alice.")

    async def test_approved_and_deleted_subjects(self) -> None:
        transport = AsyncMock()
        notifier = EmailTextMaterialNotifier(transport)
        await notifier.notify_approved(ALICE, _material())
        await notifier.notify_deleted(ALICE, _material())
        subjects = [call.args[1] for call in transport.send.await_args_list]
        assert subjects == ["Text material approved", "Text material deleted"]


async def test_log_only_transport_logs(caplog) -> None:
    with caplog.at_level(logging.INFO):
        await LogOnlyNotificationService().send(["a@x"], "Subject", "Body")
        await LogOnlyNotificationService().send([], "Nobody", "Body")
    assert "would send to 1 recipients" in caplog.text
    assert "no recipients" in caplog.text
