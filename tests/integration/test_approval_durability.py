"""Approval over Postgres: the change is committed before the author is notified.

Require Postgres. Rows are really committed here, so the fixture deletes them afterwards.
"""

import uuid

import pytest
from sqlalchemy import select

from cardfile.application.use_cases.text_materials import (
    AuthorNotificationDispatcher,
    TextMaterialApprovalService,
)
from cardfile.core.config import get_settings
from cardfile.domain.enums import ApprovalStatus
from cardfile.infrastructure.persistence import database
from cardfile.infrastructure.persistence.models import AppUser, TextMaterial
from cardfile.infrastructure.persistence.repositories import (
    SqlUnitOfWork,
    TextMaterialRepository,
    UserDirectory,
)


class _StatusRecordingNotifier:
    """Reads the material's status on a separate session when notified."""

    def __init__(self) -> None:
        self.seen: list[int] = []

    async def _record(self, material_id: int) -> None:
        async with database.session_scope() as other:
            result = await other.execute(
                select(TextMaterial.approval_status).where(TextMaterial.id == material_id)
            )
            self.seen.append(result.scalar_one())

    async def notify_approved(self, recipient, material) -> None:
        await self._record(material.id)

    async def notify_rejected(self, recipient, material, reason) -> None:
        await self._record(material.id)


@pytest.fixture
async def committed_material():
    if get_settings().database_backend != "postgres":
        pytest.skip("Postgres not configured: set DATABASE_BACKEND=postgres and DATABASE_URL")
    await database.create_all()
    suffix = uuid.uuid4().hex[:8]
    user_id = f"u-{suffix}"
    async with database.session_scope(transactional=True) as session:
        session.add(AppUser(id=user_id, username=f"user-{suffix}", email=f"{suffix}@example.com"))
        await session.flush()
        created = await TextMaterialRepository(session).create("Durable", "", user_id, None)
    yield created
    async with database.session_scope(transactional=True) as session:
        await TextMaterialRepository(session).delete(created.id)
        user = await session.get(AppUser, user_id)
        if user is not None:
            await session.delete(user)


async def _review(notifier: _StatusRecordingNotifier, material_id: int, approve: bool) -> None:
    async with database.session_scope(transactional=True) as session:
        service = TextMaterialApprovalService(
            TextMaterialRepository(session),
            notifications=AuthorNotificationDispatcher(UserDirectory(session), notifier),
            unit_of_work=SqlUnitOfWork(session),
        )
        if approve:
            await service.approve(material_id)
        else:
            await service.reject(material_id, "Needs work")


@pytest.mark.requires_db
async def test_approval_is_committed_when_author_is_notified(committed_material) -> None:
    notifier = _StatusRecordingNotifier()
    await _review(notifier, committed_material.id, approve=True)
    assert notifier.seen == [ApprovalStatus.APPROVED]


@pytest.mark.requires_db
async def test_rejection_is_committed_when_author_is_notified(committed_material) -> None:
    notifier = _StatusRecordingNotifier()
    await _review(notifier, committed_material.id, approve=False)
    assert notifier.seen == [ApprovalStatus.REJECTED]
