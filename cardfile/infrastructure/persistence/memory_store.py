"""Process-local store for the 'memory' backend (development and tests).

Implements the text material, category and user-directory ports over plain
dicts. Writes are serialized by an asyncio.Lock and guarded by the same
version token the Postgres repository uses, so conflicting commits fail
the same way.
"""

import asyncio
from dataclasses import dataclass, replace
from datetime import datetime

from cardfile.application.dtos.caller import NotificationRecipient
from cardfile.application.dtos.text_material import (
    CategoryResult,
    TextMaterialCriteria,
    TextMaterialResult,
)
from cardfile.domain.entities.text_material import TextMaterialEntity
from cardfile.domain.enums import ApprovalStatus
from cardfile.domain.exceptions import (
    ConcurrencyConflictException,
    ResourceNotFoundException,
    ValidationException,
)
from cardfile.shared.utils.datetime import ensure_utc, utc_now


@dataclass(frozen=True)
class _StoredMaterial:
    id: int
    title: str
    content: str
    author_id: str
    category_id: int | None
    approval_status: ApprovalStatus
    date_published: datetime
    reject_message: str | None
    version: int


class InMemoryCatalog:
    """In-memory text materials, categories and users.

    Related references are resolved on every read, so removing a user or
    category leaves materials with author_name / category_title None.
    """

    def __init__(self) -> None:
        self._materials: dict[int, _StoredMaterial] = {}
        self._categories: dict[int, str] = {}
        self._users: dict[str, NotificationRecipient] = {}
        self._next_material_id = 1
        self._next_category_id = 1
        self._lock = asyncio.Lock()

    # ---- Seeding (users and categories are owned by external services) ----

    def add_user(
        self,
        user_id: str,
        username: str,
        email: str,
        *,
        receive_notifications: bool = True,
    ) -> NotificationRecipient:
        recipient = NotificationRecipient(
            user_id=user_id,
            username=username,
            email=email,
            receive_notifications=receive_notifications,
        )
        self._users[user_id] = recipient
        return recipient

    def remove_user(self, user_id: str) -> None:
        self._users.pop(user_id, None)

    def add_category(self, title: str) -> CategoryResult:
        if any(t == title for t in self._categories.values()):
            raise ValidationException(f"Category already exists: {title}", field="title")
        category_id = self._next_category_id
        self._next_category_id += 1
        self._categories[category_id] = title
        return CategoryResult(id=category_id, title=title)

    def remove_category(self, category_id: int) -> None:
        self._categories.pop(category_id, None)

    def add_material(
        self,
        title: str,
        author_id: str,
        *,
        content: str = "",
        category_id: int | None = None,
        approval_status: ApprovalStatus = ApprovalStatus.PENDING,
        date_published: datetime | None = None,
        reject_message: str | None = None,
    ) -> TextMaterialResult:
        """Insert a material directly in any status (fixtures and seeding)."""
        material_id = self._next_material_id
        self._next_material_id += 1
        stored = _StoredMaterial(
            id=material_id,
            title=title,
            content=content,
            author_id=author_id,
            category_id=category_id,
            approval_status=approval_status,
            date_published=ensure_utc(date_published) or utc_now(),
            reject_message=reject_message,
            version=1,
        )
        self._materials[material_id] = stored
        return self._resolve(stored)

    # ---- ITextMaterialRepository ----

    async def fetch(self, criteria: TextMaterialCriteria) -> list[TextMaterialResult]:
        rows = sorted(self._materials.values(), key=lambda m: m.id)
        if criteria.author_id is not None:
            rows = [m for m in rows if m.author_id == criteria.author_id]
        if criteria.approval_statuses is not None:
            rows = [m for m in rows if m.approval_status in criteria.approval_statuses]
        return [self._resolve(m) for m in rows]

    async def get_by_id(self, material_id: int) -> TextMaterialResult | None:
        stored = self._materials.get(material_id)
        return self._resolve(stored) if stored else None

    async def commit(self, entity: TextMaterialEntity) -> TextMaterialResult:
        async with self._lock:
            stored = self._materials.get(entity.id)
            if stored is None:
                raise ResourceNotFoundException("text_material", entity.id)
            if stored.version != entity.version:
                raise ConcurrencyConflictException("text_material", entity.id)
            updated = replace(
                stored,
                title=entity.title,
                content=entity.content,
                category_id=entity.category_id,
                approval_status=entity.approval_status,
                reject_message=entity.reject_message,
                version=stored.version + 1,
            )
            self._materials[entity.id] = updated
        return self._resolve(updated)

    async def create(
        self,
        title: str,
        content: str,
        author_id: str,
        category_id: int | None,
    ) -> TextMaterialResult:
        async with self._lock:
            return self.add_material(
                title, author_id, content=content, category_id=category_id
            )

    async def delete(self, material_id: int) -> bool:
        async with self._lock:
            return self._materials.pop(material_id, None) is not None

    # ---- ICategoryRepository ----

    async def get_by_title(self, title: str) -> CategoryResult | None:
        for category_id, category_title in self._categories.items():
            if category_title == title:
                return CategoryResult(id=category_id, title=category_title)
        return None

    # ---- IUserDirectory ----

    async def get_recipient(self, user_id: str) -> NotificationRecipient | None:
        return self._users.get(user_id)

    def _resolve(self, stored: _StoredMaterial) -> TextMaterialResult:
        author = self._users.get(stored.author_id)
        category_title = (
            self._categories.get(stored.category_id)
            if stored.category_id is not None
            else None
        )
        return TextMaterialResult(
            id=stored.id,
            title=stored.title,
            content=stored.content,
            author_id=stored.author_id,
            author_name=author.username if author else None,
            category_id=stored.category_id,
            category_title=category_title,
            approval_status=stored.approval_status,
            date_published=stored.date_published,
            reject_message=stored.reject_message,
            version=stored.version,
        )


class InMemoryUnitOfWork:
    """Catalog writes are durable as soon as they return; commit has nothing to do."""

    async def commit(self) -> None:
        return None
