"""Unit tests for SearchCommentsUseCase."""

from unittest.mock import AsyncMock

import pytest

from discuss.application.usecase.comment import (
    SearchCommentsRequest,
    SearchCommentsUseCase,
)
from discuss.domain.error import ValidationError
from discuss.domain.model import Vote
from discuss.domain.repository import CommentRepository, PostRepository, VoteRepository
from discuss.domain.value import UserId, VoteTargetType, VoteValue
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(unit_env):
    post_repo = await unit_env.get(PostRepository)
    comment_repo = await unit_env.get(CommentRepository)
    await post_repo.save(make_post(1, title="Protein folding"))
    await post_repo.save(make_post(2, title="Dark matter"))
    comment_repo.add(make_comment(1, post_id=1, minutes=0, body="Nice dataset"))
    comment_repo.add(make_comment(2, post_id=1, parent_comment_id=1, minutes=1, body="Agreed"))
    comment_repo.add(make_comment(3, post_id=2, minutes=2, body="Which DATASET?"))
    comment_repo.add(make_comment(4, post_id=2, minutes=3, body="Off topic"))


class TestSearchCommentsUseCase:
    """Tests for SearchCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_matches_carry_post_votes_and_reply_counts(self, unit_env):
        """Matches come newest first with post title, votes and reply count."""
        # Arrange
        await _seed(unit_env)
        vote_repo = await unit_env.get(VoteRepository)
        for user, value in (("u1", VoteValue.UP), ("u2", VoteValue.UP)):
            await vote_repo.upsert(
                Vote(
                    user_id=UserId(user),
                    target_type=VoteTargetType.COMMENT,
                    target_id=1,
                    value=value,
                )
            )
        use_case = await unit_env.get(SearchCommentsUseCase)

        # Act
        response = await use_case.execute(
            SearchCommentsRequest(query="dataset", viewer_id="u1")
        )

        # Assert
        assert [c.id for c in response.comments] == [3, 1]
        newest, oldest = response.comments
        assert newest.post_title == "Dark matter"
        assert (newest.vote_count, newest.user_vote, newest.reply_count) == (0, None, 0)
        assert oldest.post_title == "Protein folding"
        assert (oldest.vote_count, oldest.user_vote, oldest.reply_count) == (2, 1, 1)
        assert response.pagination.total == 2
        assert response.pagination.total_pages == 1
        assert response.pagination.limit == 20

    @pytest.mark.asyncio
    async def test_votes_are_aggregated_in_one_batch(self, unit_env):
        """All matches share one vote-sum query and one caller-vote query."""
        # Arrange
        await _seed(unit_env)
        use_case = await unit_env.get(SearchCommentsUseCase)
        votes = AsyncMock(spec=VoteRepository)
        votes.sum_by_targets.return_value = {}
        votes.find_values_by_user.return_value = {}
        use_case.vote_aggregator.vote_repository = votes

        # Act
        await use_case.execute(SearchCommentsRequest(query="a", viewer_id="u1"))

        # Assert
        votes.sum_by_targets.assert_awaited_once()
        votes.find_values_by_user.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_pages_through_matches(self, unit_env):
        # Arrange
        await _seed(unit_env)
        use_case = await unit_env.get(SearchCommentsUseCase)

        # Act
        response = await use_case.execute(
            SearchCommentsRequest(query="dataset", page=2, limit=1)
        )

        # Assert
        assert [c.id for c in response.comments] == [1]
        assert response.pagination.total_pages == 2

    @pytest.mark.asyncio
    async def test_limit_is_capped(self, unit_env):
        use_case = await unit_env.get(SearchCommentsUseCase)

        response = await use_case.execute(SearchCommentsRequest(query="x", limit=5000))

        assert response.pagination.limit == 100
        assert response.comments == []
        assert response.pagination.total_pages == 0

    @pytest.mark.asyncio
    async def test_blank_query_is_rejected(self, unit_env):
        use_case = await unit_env.get(SearchCommentsUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(SearchCommentsRequest(query="   "))
