"""Unit tests for the post detail and summary use cases."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from discuss.application.usecase.post import (
    GetPostRequest,
    GetPostSummaryRequest,
    GetPostSummaryUseCase,
    GetPostUseCase,
)
from discuss.domain.error import AggregationError, InvalidIdentifierError, NotFoundError
from discuss.domain.model import Vote
from discuss.domain.repository import CommentRepository, PostRepository, VoteRepository
from discuss.domain.service import Summarizer
from discuss.domain.value import PostId, UserId, VoteTargetType, VoteValue
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetPostUseCase:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_detail_includes_votes_and_full_tree(self, unit_env):
        """Post detail carries its score, the viewer's vote and every comment."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        await post_repo.save(make_post(1))
        for i in range(1, 8):
            comment_repo.add(make_comment(i, minutes=i))
        comment_repo.add(make_comment(20, parent_comment_id=1, minutes=30))
        await vote_repo.upsert(
            Vote(
                user_id=UserId("u1"),
                target_type=VoteTargetType.POST,
                target_id=1,
                value=VoteValue.UP,
            )
        )
        use_case = await unit_env.get(GetPostUseCase)

        # Act
        detail = await use_case.execute(GetPostRequest(post_id="1", viewer_id="u1"))

        # Assert
        assert detail.vote_count == 1
        assert detail.user_vote == 1
        assert detail.comment_count == 8
        assert len(detail.comments) == 7
        assert detail.comments[-1].id == 1
        assert [r.id for r in detail.comments[-1].replies] == [20]

    @pytest.mark.asyncio
    async def test_post_votes_go_through_vote_aggregator(self, unit_env):
        """Post score and viewer vote come from one batched aggregation."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post(1))
        use_case = await unit_env.get(GetPostUseCase)
        failing = AsyncMock(spec=VoteRepository)
        failing.sum_by_targets.side_effect = RuntimeError("connection reset")
        failing.find_values_by_user.return_value = {}
        use_case.vote_aggregator.vote_repository = failing

        # Act / Assert
        with pytest.raises(AggregationError):
            await use_case.execute(GetPostRequest(post_id="1", viewer_id="u1"))
        failing.sum_by_targets.assert_awaited_once_with(VoteTargetType.POST, [1])

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetPostRequest(post_id="3"))

    @pytest.mark.asyncio
    async def test_invalid_post_id(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(InvalidIdentifierError):
            await use_case.execute(GetPostRequest(post_id="0"))


class TestGetPostSummaryUseCase:
    """Tests for GetPostSummaryUseCase."""

    @pytest.mark.asyncio
    async def test_stale_summary_is_regenerated(self, unit_env):
        """Three new comments since generation yield a new stored summary."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        await post_repo.save(
            make_post(
                1,
                ai_summary="Old",
                ai_summary_generated_at=datetime.now(timezone.utc),
                ai_summary_comment_count=0,
            )
        )
        for i in range(1, 4):
            comment_repo.add(make_comment(i, minutes=i))
        use_case = await unit_env.get(GetPostSummaryUseCase)

        # Act
        detail = await use_case.execute(GetPostSummaryRequest(post_id="1"))

        # Assert
        assert detail.ai_summary == "Summary of 'Test Post' (3 comments)"
        stored = await post_repo.find_by_id(PostId(1))
        assert stored.ai_summary == detail.ai_summary
        assert stored.ai_summary_comment_count == 3

    @pytest.mark.asyncio
    async def test_fresh_summary_is_reused(self, unit_env):
        """A fresh summary is returned without calling the summarizer."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(
            make_post(
                1,
                ai_summary="Still good",
                ai_summary_generated_at=datetime.now(timezone.utc),
            )
        )
        use_case = await unit_env.get(GetPostSummaryUseCase)
        summarizer = await unit_env.get(Summarizer)

        # Act
        detail = await use_case.execute(GetPostSummaryRequest(post_id="1"))

        # Assert
        assert detail.ai_summary == "Still good"
        assert summarizer.calls == []
