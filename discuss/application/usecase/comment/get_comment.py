"""Get single comment use case."""

from pydantic import BaseModel

from discuss.domain.service import CommentForestService
from discuss.domain.value import CommentId, UserId, parse_identifier

from .node_item import CommentNodeItem


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # Raw path segment
    viewer_id: str | None = None


class GetCommentUseCase:
    """Use case for reading one comment with its direct replies."""

    def __init__(self, forest_service: CommentForestService) -> None:
        """Initialize get comment use case.

        Args:
            forest_service: Comment forest loading
        """
        self.forest_service = forest_service

    async def execute(self, request: GetCommentRequest) -> CommentNodeItem:
        """Execute get comment flow.

        Raises:
            InvalidIdentifierError: If the comment ID is not a positive integer
            NotFoundError: If the comment doesn't exist
        """
        comment_id = CommentId(parse_identifier(request.comment_id, "comment"))
        viewer_id = UserId(request.viewer_id) if request.viewer_id else None

        forest = await self.forest_service.comment_forest(comment_id, viewer_id)
        # The requested comment is the only root
        return CommentNodeItem.from_node(forest[0])
