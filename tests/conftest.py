"""Pytest configuration and fixtures for cardfile.

HTTP tests run against cardfile.main:app with the in-memory backend; each
test gets a fresh InMemoryCatalog on app.state. All imports use cardfile.*.
"""

import os
from datetime import UTC, datetime

os.environ.setdefault("DATABASE_BACKEND", "memory")

import pytest
from httpx import ASGITransport, AsyncClient

from cardfile.core.config import get_settings

get_settings.cache_clear()

from cardfile.core.limiter import limiter  # noqa: E402
from cardfile.domain.enums import ApprovalStatus  # noqa: E402
from cardfile.infrastructure.persistence.memory_store import InMemoryCatalog  # noqa: E402
from cardfile.infrastructure.security.jwt import create_access_token  # noqa: E402
from cardfile.main import app  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    limiter.reset()
    yield


@pytest.fixture
def catalog() -> InMemoryCatalog:
    """Fresh in-memory catalog installed on the app for this test."""
    store = InMemoryCatalog()
    app.state.catalog = store
    return store


@pytest.fixture
def seeded_catalog(catalog: InMemoryCatalog) -> InMemoryCatalog:
    """Catalog with two authors, two categories and one material per status.

    ids: 1 "Autumn Leaves" (approved), 2 "Bridges" (approved),
    3 "Comet Tales" (pending), 4 "Dusk" (rejected).
    """
    catalog.add_user("u-alice", "alice", "alice@example.com")
    catalog.add_user("u-bob", "bob", "bob@example.com", receive_notifications=False)
    poetry = catalog.add_category("Poetry")
    essays = catalog.add_category("Essays")
    catalog.add_material(
        "Autumn Leaves",
        "u-alice",
        content="...",
        category_id=poetry.id,
        approval_status=ApprovalStatus.APPROVED,
        date_published=datetime(2024, 1, 10, tzinfo=UTC),
    )
    catalog.add_material(
        "Bridges",
        "u-bob",
        content="...",
        category_id=essays.id,
        approval_status=ApprovalStatus.APPROVED,
        date_published=datetime(2024, 2, 10, tzinfo=UTC),
    )
    catalog.add_material(
        "Comet Tales",
        "u-alice",
        content="...",
        category_id=poetry.id,
        approval_status=ApprovalStatus.PENDING,
        date_published=datetime(2024, 3, 10, tzinfo=UTC),
    )
    catalog.add_material(
        "Dusk",
        "u-bob",
        content="...",
        approval_status=ApprovalStatus.REJECTED,
        date_published=datetime(2024, 4, 10, tzinfo=UTC),
        reject_message="Too short",
    )
    return catalog


@pytest.fixture
async def client(catalog: InMemoryCatalog) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers():
    """Factory: bearer headers for a caller with the given roles (as the auth service would issue)."""

    def _headers(user_id: str, *roles: str) -> dict[str, str]:
        token = create_access_token({"sub": user_id, "roles": list(roles) or ["User"]})
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
async def db_session():
    """Database session for repository tests. Rolls back after the test.

    Requires DATABASE_BACKEND=postgres and DATABASE_URL. Skips (pytest.skip)
    when Postgres is not configured. Use @pytest.mark.requires_db to mark
    tests that need this fixture; run without DB via: pytest -m 'not requires_db'.
    """
    from cardfile.infrastructure.persistence import database

    if get_settings().database_backend != "postgres":
        pytest.skip("Postgres not configured: set DATABASE_BACKEND=postgres and DATABASE_URL")
    await database.create_all()
    async with database.session_scope() as session:
        yield session
        await session.rollback()
