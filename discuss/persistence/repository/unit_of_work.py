"""SQLAlchemy session unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.repository import UnitOfWork


class SessionUnitOfWork(UnitOfWork):
    """Commits the request session.

    The request-scoped provider still commits on exit; that final commit
    is a no-op when nothing was written after this one.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        """Commit the request session."""
        await self.session.commit()
        logfire.debug("Unit of work committed")
