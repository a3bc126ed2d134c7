"""Create comment use case."""

from datetime import datetime

from pydantic import BaseModel

from discuss.domain.repository import UnitOfWork
from discuss.domain.service import CommentForestService, CommentService, PostService
from discuss.domain.value import CommentId, PostId, UserId, parse_identifier
from discuss.domain.value.types import Username


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # Raw path segment
    body: str
    author_id: str  # User ID from authenticated user
    author_username: str  # Display name from authenticated user
    parent_comment_id: str | int | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    id: int
    post_id: int
    author_id: str
    author_username: str
    body: str
    parent_comment_id: int | None
    created_at: datetime
    updated_at: datetime
    vote_count: int = 0
    user_vote: int | None = None
    replies: list = []


class CreateCommentUseCase:
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        forest_service: CommentForestService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            forest_service: Used to invalidate the post's cached forests
            unit_of_work: Commits the comment before invalidation
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.forest_service = forest_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify post exists via post service
        2. Create comment via comment service (validates parent if replying)
        3. Commit, then invalidate the post's cached forests

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            InvalidIdentifierError: If an ID is not a positive integer
            NotFoundError: If the post or parent comment doesn't exist
            ValidationError: If the parent belongs to another post
        """
        post_id = PostId(parse_identifier(request.post_id, "post"))
        parent_comment_id = (
            CommentId(parse_identifier(request.parent_comment_id, "parent comment"))
            if request.parent_comment_id is not None
            else None
        )

        await self.post_service.get_existing(post_id)

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author_id=UserId(request.author_id),
            author_username=Username(request.author_username),
            body=request.body,
            parent_comment_id=parent_comment_id,
        )

        await self.unit_of_work.commit()
        await self.forest_service.invalidate(post_id)

        return CreateCommentResponse(
            id=comment.id,
            post_id=comment.post_id,
            author_id=str(comment.author_id),
            author_username=comment.author_username.root,
            body=comment.body,
            parent_comment_id=comment.parent_comment_id,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
