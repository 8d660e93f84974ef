"""SQLAlchemy unit of work: commits the request session before side effects run."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cardfile.domain.exceptions import StorageException


class SqlUnitOfWork:
    """Commits the shared request session.

    The session starts a new transaction on next use, so the enclosing
    session_scope commit afterwards is a no-op for already committed work.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def commit(self) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageException(f"Commit failed: {e.__class__.__name__}") from e
