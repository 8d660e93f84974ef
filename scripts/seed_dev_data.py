"""Seed dev data from scripts/seed-data.json into Postgres.

Creates users and categories (skipped when they already exist) and text
materials, moved to their seeded approval status through the same entity
transitions the API uses.

Usage:
    python -m scripts.seed_dev_data [path/to/seed-data.json]

Requires: DATABASE_BACKEND=postgres and DATABASE_URL. Tables are created if missing.
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import select

from cardfile.application.use_cases.text_materials.mapping import to_entity
from cardfile.core.config import get_settings
from cardfile.domain.enums import ApprovalStatus
from cardfile.infrastructure.persistence import database as db_mod
from cardfile.infrastructure.persistence.models import (
    AppUser,
    TextMaterial,
    TextMaterialCategory,
)
from cardfile.infrastructure.persistence.repositories import (
    TextMaterialCategoryRepository,
    TextMaterialRepository,
)


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_* when run as script."""
    load_dotenv(_project_root() / ".env", override=True)
    get_settings.cache_clear()


async def run(path: Path) -> None:
    _load_env()
    if not path.exists():
        print(f"Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with path.open() as f:
        data = json.load(f)

    if get_settings().database_backend != "postgres":
        print("DATABASE_BACKEND must be 'postgres' to seed.", file=sys.stderr)
        sys.exit(1)
    await db_mod.create_all()

    async with db_mod.session_scope(transactional=True) as session:
        user_ids: dict[str, str] = {}
        for u in data.get("users", []):
            existing = await session.get(AppUser, u["id"])
            if existing is None:
                session.add(
                    AppUser(
                        id=u["id"],
                        username=u["username"],
                        email=u["email"],
                        receive_notifications=u.get("receive_notifications", True),
                    )
                )
                print(f"User {u['username']} -> {u['id']}")
            else:
                print(f"  User {u['username']} already exists, skip")
            user_ids[u["username"]] = u["id"]
        await session.flush()

        category_repo = TextMaterialCategoryRepository(session)
        category_ids: dict[str, int] = {}
        for title in data.get("categories", []):
            category = await category_repo.get_by_title(title)
            if category is None:
                row = await category_repo.create(TextMaterialCategory(title=title))
                category_ids[title] = row.id
                print(f"Category {title} -> {row.id}")
            else:
                category_ids[title] = category.id
                print(f"  Category {title} already exists, skip")

        material_repo = TextMaterialRepository(session)
        for m in data.get("text_materials", []):
            author_id = user_ids.get(m["author"])
            if author_id is None:
                print(f"  Skip {m['title']}: unknown author {m['author']}", file=sys.stderr)
                continue
            taken = await session.execute(
                select(TextMaterial.id).where(TextMaterial.title == m["title"])
            )
            if taken.first() is not None:
                print(f"  Text material {m['title']} already exists, skip")
                continue
            created = await material_repo.create(
                title=m["title"],
                content=m.get("content", ""),
                author_id=author_id,
                category_id=category_ids.get(m["category"]) if m.get("category") else None,
            )
            status = ApprovalStatus(m.get("status", ApprovalStatus.PENDING))
            if status != ApprovalStatus.PENDING:
                entity = to_entity(created)
                if status == ApprovalStatus.APPROVED:
                    entity.approve()
                else:
                    entity.reject(m.get("reject_message"))
                created = await material_repo.commit(entity)
            print(f"Text material {created.title} ({status.name}) -> {created.id}")

    print("Seed completed.")


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "scripts" / "seed-data.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
