"""TextMaterialService (create / update / delete) tests over the in-memory catalog."""

from unittest.mock import AsyncMock

import pytest

from cardfile.application.dtos.caller import CallerContext
from cardfile.application.dtos.text_material import (
    TextMaterialCreate,
    TextMaterialCriteria,
    TextMaterialUpdate,
)
from cardfile.application.use_cases.text_materials import (
    AuthorNotificationDispatcher,
    TextMaterialService,
)
from cardfile.domain.enums import ApprovalStatus, Role
from cardfile.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)

ALICE = CallerContext(user_id="u-alice")
BOB = CallerContext(user_id="u-bob")
MANAGER = CallerContext(user_id="u-manager", roles=frozenset({Role.MANAGER}))


@pytest.fixture
def notifier() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def svc(seeded_catalog, notifier) -> TextMaterialService:
    return TextMaterialService(
        seeded_catalog,
        seeded_catalog,
        notifications=AuthorNotificationDispatcher(seeded_catalog, notifier),
    )


class TestCreate:
    async def test_created_pending_with_category(self, svc, notifier) -> None:
        created = await svc.create(
            ALICE,
            TextMaterialCreate(
                title="  New piece ", content="body", author_id="u-alice",
                category_title="Essays",
            ),
        )
        assert created.id == 5
        assert created.title == "New piece"
        assert created.approval_status == ApprovalStatus.PENDING
        assert created.category_title == "Essays"
        assert created.author_name == "alice"
        notifier.notify_created.assert_awaited_once()

    async def test_anonymous_rejected(self, svc) -> None:
        with pytest.raises(AuthenticationException):
            await svc.create(
                CallerContext(), TextMaterialCreate(title="x", content="", author_id="u-alice")
            )

    async def test_user_cannot_author_for_someone_else(self, svc) -> None:
        with pytest.raises(AuthorizationException):
            await svc.create(
                ALICE, TextMaterialCreate(title="x", content="", author_id="u-bob")
            )

    async def test_manager_may_author_for_someone_else(self, svc) -> None:
        created = await svc.create(
            MANAGER, TextMaterialCreate(title="x", content="", author_id="u-bob")
        )
        assert created.author_id == "u-bob"

    async def test_blank_title_rejected(self, svc) -> None:
        with pytest.raises(ValidationException) as exc_info:
            await svc.create(
                ALICE, TextMaterialCreate(title="   ", content="", author_id="u-alice")
            )
        assert exc_info.value.details == {"field": "title"}

    async def test_unknown_category_rejected(self, svc, seeded_catalog) -> None:
        with pytest.raises(ValidationException):
            await svc.create(
                ALICE,
                TextMaterialCreate(
                    title="x", content="", author_id="u-alice", category_title="Nope"
                ),
            )
        assert len(await seeded_catalog.fetch(TextMaterialCriteria())) == 4


class TestUpdate:
    async def test_author_updates_and_status_is_kept(self, svc) -> None:
        updated = await svc.update(
            ALICE, 3, TextMaterialUpdate(title="Comet Tales II", category_title="Essays")
        )
        assert updated.title == "Comet Tales II"
        assert updated.category_title == "Essays"
        assert updated.approval_status == ApprovalStatus.PENDING
        assert updated.version == 2

    async def test_other_user_forbidden(self, svc) -> None:
        with pytest.raises(AuthorizationException):
            await svc.update(BOB, 3, TextMaterialUpdate(content="hijack"))

    async def test_manager_may_edit(self, svc) -> None:
        updated = await svc.update(MANAGER, 3, TextMaterialUpdate(content="edited"))
        assert updated.content == "edited"

    async def test_missing_material(self, svc) -> None:
        with pytest.raises(ResourceNotFoundException):
            await svc.update(ALICE, 99, TextMaterialUpdate(title="x"))

    async def test_blank_title_rejected(self, svc) -> None:
        with pytest.raises(ValidationException):
            await svc.update(ALICE, 3, TextMaterialUpdate(title="  "))


class TestDelete:
    async def test_author_deletes_and_is_notified(self, svc, notifier, seeded_catalog) -> None:
        await svc.delete(ALICE, 1)
        assert await seeded_catalog.get_by_id(1) is None
        notifier.notify_deleted.assert_awaited_once()

    async def test_other_user_forbidden(self, svc, seeded_catalog) -> None:
        with pytest.raises(AuthorizationException):
            await svc.delete(BOB, 1)
        assert await seeded_catalog.get_by_id(1) is not None

    async def test_missing_material(self, svc) -> None:
        with pytest.raises(ResourceNotFoundException):
            await svc.delete(MANAGER, 99)


class TestUnitOfWork:
    @pytest.fixture
    def events(self) -> list[str]:
        return []

    @pytest.fixture
    def ordered_svc(self, seeded_catalog, events) -> TextMaterialService:
        unit_of_work = AsyncMock()
        unit_of_work.commit.side_effect = lambda: events.append("commit")
        notifier = AsyncMock()
        notifier.notify_created.side_effect = lambda *args: events.append("notify")
        notifier.notify_deleted.side_effect = lambda *args: events.append("notify")
        return TextMaterialService(
            seeded_catalog,
            seeded_catalog,
            notifications=AuthorNotificationDispatcher(seeded_catalog, notifier),
            unit_of_work=unit_of_work,
        )

    async def test_create_commits_before_notifying(self, ordered_svc, events) -> None:
        await ordered_svc.create(
            ALICE, TextMaterialCreate(title="Fresh", content="", author_id="u-alice")
        )
        assert events == ["commit", "notify"]

    async def test_update_commits(self, ordered_svc, events) -> None:
        await ordered_svc.update(ALICE, 3, TextMaterialUpdate(content="edited"))
        assert events == ["commit"]

    async def test_delete_commits_before_notifying(self, ordered_svc, events) -> None:
        await ordered_svc.delete(ALICE, 1)
        assert events == ["commit", "notify"]
