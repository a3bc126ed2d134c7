"""Unit tests for the in-memory repositories used by the test container."""

from datetime import timedelta

import pytest

from discuss.domain.model import Vote
from discuss.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemoryVoteRepository,
)
from discuss.domain.value import PostId, UserId, VoteTargetType, VoteValue
from discuss.domain.value.types import Username
from tests.conftest import BASE_TIME, make_comment, make_post


class TestInMemoryCommentRepository:
    """Tests for InMemoryCommentRepository."""

    @pytest.mark.asyncio
    async def test_create_assigns_increasing_ids(self):
        repo = InMemoryCommentRepository()

        first = await repo.create(PostId(1), UserId("u1"), Username("alice"), "One")
        second = await repo.create(PostId(1), UserId("u1"), Username("alice"), "Two")

        assert second.id > first.id

    @pytest.mark.asyncio
    async def test_create_skips_seeded_ids(self):
        """Generated IDs never collide with seeded comments."""
        repo = InMemoryCommentRepository()
        repo.add(make_comment(1))

        created = await repo.create(PostId(1), UserId("u1"), Username("alice"), "New")

        assert created.id == 2

    @pytest.mark.asyncio
    async def test_top_level_page_is_newest_first(self):
        repo = InMemoryCommentRepository()
        for i in range(1, 5):
            repo.add(make_comment(i, minutes=i))
        repo.add(make_comment(9, parent_comment_id=1, minutes=50))

        page = await repo.find_top_level_page(PostId(1), limit=3)

        assert [c.id for c in page] == [4, 3, 2]

    @pytest.mark.asyncio
    async def test_find_replies_of_several_parents(self):
        repo = InMemoryCommentRepository()
        repo.add(make_comment(1))
        repo.add(make_comment(2))
        repo.add(make_comment(3, parent_comment_id=1, minutes=1))
        repo.add(make_comment(4, parent_comment_id=2, minutes=2))
        repo.add(make_comment(5, parent_comment_id=3, minutes=3))

        replies = await repo.find_replies([1, 2])

        assert [c.id for c in replies] == [4, 3]


    @pytest.mark.asyncio
    async def test_count_replies_counts_direct_replies_only(self):
        repo = InMemoryCommentRepository()
        repo.add(make_comment(1))
        repo.add(make_comment(2, parent_comment_id=1))
        repo.add(make_comment(3, parent_comment_id=1))
        repo.add(make_comment(4, parent_comment_id=2))

        counts = await repo.count_replies([1, 2, 3])

        assert counts == {1: 2, 2: 1}

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_and_paged(self):
        repo = InMemoryCommentRepository()
        repo.add(make_comment(1, minutes=0, body="Great PAPER"))
        repo.add(make_comment(2, post_id=2, minutes=1, body="the paper is wrong"))
        repo.add(make_comment(3, minutes=2, body="Unrelated"))
        repo.add(make_comment(4, minutes=3, body="paperwork"))

        first_page = await repo.search("paper", offset=0, limit=2)
        second_page = await repo.search("paper", offset=2, limit=2)

        assert [c.id for c in first_page] == [4, 2]
        assert [c.id for c in second_page] == [1]
        assert await repo.count_matching("paper") == 3


class TestInMemoryPostRepository:
    """Tests for InMemoryPostRepository."""

    @pytest.mark.asyncio
    async def test_find_by_ids_skips_missing(self):
        repo = InMemoryPostRepository()
        await repo.save(make_post(1))
        await repo.save(make_post(2, title="Second"))

        posts = await repo.find_by_ids([PostId(2), PostId(9), PostId(2)])

        assert [p.title for p in posts] == ["Second"]

    @pytest.mark.asyncio
    async def test_update_summary(self):
        repo = InMemoryPostRepository()
        await repo.save(make_post(1))
        generated_at = BASE_TIME + timedelta(hours=1)

        await repo.update_summary(PostId(1), "Summary", generated_at, 4)

        post = await repo.find_by_id(PostId(1))
        assert post.summary_metadata.summary == "Summary"
        assert post.summary_metadata.generated_at == generated_at
        assert post.summary_metadata.comment_count_at_generation == 4


class TestInMemoryVoteRepository:
    """Tests for InMemoryVoteRepository."""

    @pytest.mark.asyncio
    async def test_upsert_keeps_one_vote_per_user_and_target(self):
        repo = InMemoryVoteRepository()
        for value in (VoteValue.UP, VoteValue.DOWN, VoteValue.UP):
            await repo.upsert(
                Vote(
                    user_id=UserId("u1"),
                    target_type=VoteTargetType.POST,
                    target_id=1,
                    value=value,
                )
            )

        assert await repo.sum_by_targets(VoteTargetType.POST, [1]) == {1: 1}

    @pytest.mark.asyncio
    async def test_target_types_are_separate(self):
        """A post and a comment with the same ID keep separate scores."""
        repo = InMemoryVoteRepository()
        await repo.upsert(
            Vote(
                user_id=UserId("u1"),
                target_type=VoteTargetType.POST,
                target_id=1,
                value=VoteValue.UP,
            )
        )

        sums = await repo.sum_by_targets(VoteTargetType.COMMENT, [1])
        values = await repo.find_values_by_user(UserId("u1"), VoteTargetType.COMMENT, [1])

        assert sums == {}
        assert values == {}
