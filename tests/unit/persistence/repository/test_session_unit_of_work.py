"""Unit tests for SessionUnitOfWork."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.persistence.repository import SessionUnitOfWork


class TestSessionUnitOfWork:
    """Tests for SessionUnitOfWork."""

    @pytest.mark.asyncio
    async def test_commit_commits_request_session(self):
        session = AsyncMock(spec=AsyncSession)
        unit_of_work = SessionUnitOfWork(session)

        await unit_of_work.commit()

        session.commit.assert_awaited_once()
