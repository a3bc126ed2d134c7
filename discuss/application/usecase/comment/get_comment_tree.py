"""Get comment tree use case."""

from pydantic import BaseModel

from discuss.domain.service import CommentForestService, PostService
from discuss.domain.value import PostId, UserId, parse_identifier

from .node_item import CommentNodeItem, to_items


class GetCommentTreeRequest(BaseModel):
    """Get comment tree request."""

    post_id: str  # Raw path segment
    viewer_id: str | None = None  # Authenticated user, if any


class GetCommentTreeResponse(BaseModel):
    """Get comment tree response."""

    comments: list[CommentNodeItem]


class GetCommentTreeUseCase:
    """Use case for the comments listing of a post.

    Returns the newest top-level comments (capped page) with their direct
    replies, each carrying its vote sum and the viewer's own vote.
    """

    def __init__(
        self,
        post_service: PostService,
        forest_service: CommentForestService,
    ) -> None:
        """Initialize get comment tree use case.

        Args:
            post_service: Post domain service
            forest_service: Cached comment forest loading
        """
        self.post_service = post_service
        self.forest_service = forest_service

    async def execute(self, request: GetCommentTreeRequest) -> GetCommentTreeResponse:
        """Execute get comment tree flow.

        Args:
            request: Post ID and optional viewer

        Returns:
            Comment forest

        Raises:
            InvalidIdentifierError: If the post ID is not a positive integer
            NotFoundError: If the post doesn't exist
            AggregationError: If vote aggregation fails
        """
        post_id = PostId(parse_identifier(request.post_id, "post"))
        viewer_id = UserId(request.viewer_id) if request.viewer_id else None

        await self.post_service.get_existing(post_id)
        forest = await self.forest_service.page_forest(post_id, viewer_id)

        return GetCommentTreeResponse(comments=to_items(forest))
