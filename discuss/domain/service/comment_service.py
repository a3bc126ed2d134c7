"""Comment domain service."""

from typing import Optional

import logfire

from discuss.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from discuss.domain.model.comment import Comment
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId, PostId, UserId
from discuss.domain.value.types import Username

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        author_username: Username,
        body: str,
        parent_comment_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            author_id: Author user ID
            author_username: Author display name
            body: Comment text
            parent_comment_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the parent comment doesn't exist
            ValidationError: If the parent belongs to another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_comment_id=str(parent_comment_id) if parent_comment_id else None,
        ):
            if parent_comment_id is not None:
                parent = await self.comment_repository.find_by_id(parent_comment_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_comment_id=str(parent_comment_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_comment_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_comment_id=str(parent_comment_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this post"
                    )

            saved = await self.comment_repository.create(
                post_id=post_id,
                author_id=author_id,
                author_username=author_username,
                body=body,
                parent_comment_id=parent_comment_id,
            )
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                is_reply=parent_comment_id is not None,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_page(self, post_id: PostId, page_size: int) -> list[Comment]:
        """Get the newest top-level comments of a post and their direct replies.

        Args:
            post_id: Post ID
            page_size: Number of top-level comments

        Returns:
            Top-level comments followed by their replies
        """
        with logfire.span(
            "comment_service.get_page", post_id=str(post_id), page_size=page_size
        ):
            top_level = await self.comment_repository.find_top_level_page(
                post_id, page_size
            )
            replies = (
                await self.comment_repository.find_replies([c.id for c in top_level])
                if top_level
                else []
            )
            logfire.info(
                "Comments page retrieved",
                post_id=str(post_id),
                top_level=len(top_level),
                replies=len(replies),
            )
            return top_level + replies

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get every comment of a post.

        Args:
            post_id: Post ID

        Returns:
            All comments, newest first
        """
        with logfire.span("comment_service.get_comments_for_post", post_id=str(post_id)):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post", post_id=str(post_id), count=len(comments)
            )
            return comments

    async def get_with_replies(self, comment_id: CommentId) -> list[Comment]:
        """Get a comment and its direct replies.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.get_comment_by_id(comment_id)
        if not comment:
            raise NotFoundError("Comment", str(comment_id))
        replies = await self.comment_repository.find_replies([comment.id])
        return [comment, *replies]

    async def count_replies(self, comment_ids: list[CommentId]) -> dict[int, int]:
        """Number of direct replies per comment. Comments without replies are absent."""
        if not comment_ids:
            return {}
        return await self.comment_repository.count_replies(comment_ids)

    async def search_comments(
        self, query: str, page: int, limit: int
    ) -> tuple[list[Comment], int]:
        """Find comments containing ``query`` across all posts.

        Args:
            query: Search text (surrounding whitespace ignored)
            page: 1-based page number
            limit: Page size

        Returns:
            The page of matches (newest first) and the total number of matches

        Raises:
            ValidationError: If the query is blank
        """
        text = query.strip()
        if not text:
            raise ValidationError("Search query is required")

        with logfire.span(
            "comment_service.search_comments", page=page, limit=limit
        ):
            comments = await self.comment_repository.search(
                text, offset=(page - 1) * limit, limit=limit
            )
            total = await self.comment_repository.count_matching(text)
            logfire.info(
                "Comments searched", page=page, returned=len(comments), total=total
            )
            return comments, total

    async def count_for_post(self, post_id: PostId) -> int:
        """Number of comments on a post, replies included."""
        return await self.comment_repository.count_by_post(post_id)

    async def update_body(
        self, comment_id: CommentId, user_id: UserId, body: str
    ) -> Comment:
        """Update the text of a comment owned by the user.

        Args:
            comment_id: Comment ID
            user_id: Requesting user
            body: New text

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.update_body",
            comment_id=str(comment_id),
            body_length=len(body),
        ):
            comment = await self._get_owned(comment_id, user_id)
            updated = await self.comment_repository.update_body(comment.id, body)
            if not updated:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info(
                "Comment body updated",
                comment_id=str(comment_id),
                post_id=str(updated.post_id),
            )
            return updated

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> Comment:
        """Delete a comment owned by the user, together with its replies.

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            comment = await self._get_owned(comment_id, user_id)
            await self.comment_repository.delete(comment.id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                post_id=str(comment.post_id),
            )
            return comment

    async def _get_owned(self, comment_id: CommentId, user_id: UserId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        if comment.author_id != user_id:
            logfire.warn(
                "User not authorized to modify comment",
                comment_id=str(comment_id),
                user_id=str(user_id),
                author_id=str(comment.author_id),
            )
            raise NotAuthorizedError("comment", str(comment_id), str(user_id))
        return comment
