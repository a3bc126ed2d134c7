"""Unit tests for CommentService."""

import pytest

from discuss.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from discuss.domain.repository import CommentRepository
from discuss.domain.service import CommentService
from discuss.domain.value import CommentId, PostId, UserId
from discuss.domain.value.types import Username
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for CommentService.create_comment."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """A comment without parent is stored as top-level."""
        # Arrange
        service = await unit_env.get(CommentService)

        # Act
        comment = await service.create_comment(
            post_id=PostId(1),
            author_id=UserId("u1"),
            author_username=Username("alice"),
            body="First!",
        )

        # Assert
        assert comment.id is not None
        assert comment.is_top_level
        assert comment.body == "First!"
        assert await service.count_for_post(PostId(1)) == 1

    @pytest.mark.asyncio
    async def test_reply_to_existing_parent(self, unit_env):
        """A reply keeps its parent's ID."""
        # Arrange
        repo = await unit_env.get(CommentRepository)
        repo.add(make_comment(1))
        service = await unit_env.get(CommentService)

        # Act
        reply = await service.create_comment(
            post_id=PostId(1),
            author_id=UserId("u2"),
            author_username=Username("bob"),
            body="Reply",
            parent_comment_id=CommentId(1),
        )

        # Assert
        assert reply.parent_comment_id == 1

    @pytest.mark.asyncio
    async def test_missing_parent(self, unit_env):
        """Replying to an unknown comment fails with NotFoundError."""
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError) as exc_info:
            await service.create_comment(
                post_id=PostId(1),
                author_id=UserId("u2"),
                author_username=Username("bob"),
                body="Reply",
                parent_comment_id=CommentId(404),
            )

        assert exc_info.value.resource == "Parent comment"

    @pytest.mark.asyncio
    async def test_parent_on_another_post(self, unit_env):
        """A parent must belong to the same post."""
        # Arrange
        repo = await unit_env.get(CommentRepository)
        repo.add(make_comment(1, post_id=2))
        service = await unit_env.get(CommentService)

        # Act / Assert
        with pytest.raises(ValidationError):
            await service.create_comment(
                post_id=PostId(1),
                author_id=UserId("u2"),
                author_username=Username("bob"),
                body="Reply",
                parent_comment_id=CommentId(1),
            )


class TestGetPage:
    """Tests for CommentService.get_page."""

    @pytest.mark.asyncio
    async def test_page_limits_top_level_only(self, unit_env):
        """The page size caps top-level comments, replies are all included."""
        # Arrange
        repo = await unit_env.get(CommentRepository)
        for i in range(1, 4):
            repo.add(make_comment(i, minutes=i))
        repo.add(make_comment(10, parent_comment_id=3, minutes=20))
        repo.add(make_comment(11, parent_comment_id=3, minutes=21))
        repo.add(make_comment(12, parent_comment_id=1, minutes=22))
        service = await unit_env.get(CommentService)

        # Act
        comments = await service.get_page(PostId(1), page_size=2)

        # Assert
        assert [c.id for c in comments] == [3, 2, 11, 10]

    @pytest.mark.asyncio
    async def test_page_of_post_without_comments(self, unit_env):
        service = await unit_env.get(CommentService)

        assert await service.get_page(PostId(1), page_size=5) == []


class TestOwnership:
    """Tests for update and delete ownership checks."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        """The author can change the body."""
        # Arrange
        repo = await unit_env.get(CommentRepository)
        repo.add(make_comment(1, author_id="u1"))
        service = await unit_env.get(CommentService)

        # Act
        updated = await service.update_body(CommentId(1), UserId("u1"), "Edited")

        # Assert
        assert updated.body == "Edited"
        assert updated.updated_at > updated.created_at

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        """Editing someone else's comment fails."""
        repo = await unit_env.get(CommentRepository)
        repo.add(make_comment(1, author_id="u1"))
        service = await unit_env.get(CommentService)

        with pytest.raises(NotAuthorizedError):
            await service.update_body(CommentId(1), UserId("u2"), "Hijacked")

    @pytest.mark.asyncio
    async def test_delete_removes_replies(self, unit_env):
        """Deleting a comment deletes its whole subtree."""
        # Arrange
        repo = await unit_env.get(CommentRepository)
        repo.add(make_comment(1, author_id="u1"))
        repo.add(make_comment(2, parent_comment_id=1, minutes=1, author_id="u2"))
        repo.add(make_comment(3, parent_comment_id=2, minutes=2, author_id="u3"))
        repo.add(make_comment(4, minutes=3))
        service = await unit_env.get(CommentService)

        # Act
        await service.delete_comment(CommentId(1), UserId("u1"))

        # Assert
        assert await service.count_for_post(PostId(1)) == 1
        assert await service.get_comment_by_id(CommentId(3)) is None

    @pytest.mark.asyncio
    async def test_delete_missing_comment(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.delete_comment(CommentId(9), UserId("u1"))
