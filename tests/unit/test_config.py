"""Settings validation (backend and page size bounds)."""

import pytest
from pydantic import ValidationError

from cardfile.core.config import Settings


def test_defaults_use_memory_backend() -> None:
    settings = Settings(_env_file=None, database_backend="memory")
    assert settings.default_page_size == 10
    assert settings.max_page_size == 50
    assert settings.pagination_header == "X-Pagination"


def test_postgres_requires_database_url() -> None:
    with pytest.raises(ValidationError, match="DATABASE_URL is required"):
        Settings(_env_file=None, database_backend="postgres", database_url="")


def test_unknown_backend_rejected() -> None:
    with pytest.raises(ValidationError, match="database_backend must be"):
        Settings(_env_file=None, database_backend="firestore")


def test_default_page_size_must_not_exceed_max() -> None:
    with pytest.raises(ValidationError, match="DEFAULT_PAGE_SIZE"):
        Settings(_env_file=None, database_backend="memory", default_page_size=60)


def test_postgres_with_url_accepted() -> None:
    settings = Settings(
        _env_file=None,
        database_backend="postgres",
        database_url="postgresql+asyncpg://u:p@localhost:5432/cardfile",
    )
    assert settings.database_backend == "postgres"
