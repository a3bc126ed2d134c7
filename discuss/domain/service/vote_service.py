"""Vote domain service."""

from datetime import datetime, timezone

import logfire

from discuss.domain.error import NotFoundError
from discuss.domain.model.vote import Vote
from discuss.domain.repository import VoteRepository
from discuss.domain.value import CommentId, PostId, UserId, VoteTargetType, VoteValue

from .base import Service
from .comment_service import CommentService
from .post_service import PostService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.vote_repository = vote_repository
        self.post_service = post_service
        self.comment_service = comment_service

    async def resolve_post_id(self, target_type: VoteTargetType, target_id: int) -> PostId:
        """Check that a vote target exists and return the post it belongs to.

        Raises:
            NotFoundError: If the post or comment doesn't exist
        """
        if target_type == VoteTargetType.POST:
            post = await self.post_service.get_post_by_id(PostId(target_id))
            if not post:
                raise NotFoundError("Post", str(target_id))
            return post.id

        comment = await self.comment_service.get_comment_by_id(CommentId(target_id))
        if not comment:
            raise NotFoundError("Comment", str(target_id))
        return comment.post_id

    async def cast_vote(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_id: int,
        value: VoteValue,
    ) -> Vote:
        """Cast a vote, replacing any previous vote of the user on the target.

        Args:
            user_id: Voting user
            target_type: Post or comment
            target_id: Target ID
            value: Up or down

        Returns:
            Stored vote
        """
        with logfire.span(
            "vote_service.cast_vote",
            user_id=str(user_id),
            target_type=target_type.value,
            target_id=str(target_id),
            value=int(value),
        ):
            vote = Vote(
                user_id=user_id,
                target_type=target_type,
                target_id=target_id,
                value=value,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.vote_repository.upsert(vote)
            logfire.info(
                "Vote cast",
                user_id=str(user_id),
                target_type=target_type.value,
                target_id=str(target_id),
            )
            return saved

    async def remove_vote(
        self, user_id: UserId, target_type: VoteTargetType, target_id: int
    ) -> bool:
        """Remove the user's vote on a target.

        Returns:
            True if a vote was removed, False if no vote existed
        """
        with logfire.span(
            "vote_service.remove_vote",
            user_id=str(user_id),
            target_type=target_type.value,
            target_id=str(target_id),
        ):
            deleted = await self.vote_repository.delete_by_user_and_target(
                user_id, target_type, target_id
            )
            if deleted:
                logfire.info(
                    "Vote removed",
                    target_type=target_type.value,
                    target_id=str(target_id),
                )
            else:
                logfire.info(
                    "No vote to remove",
                    target_type=target_type.value,
                    target_id=str(target_id),
                )
            return deleted

