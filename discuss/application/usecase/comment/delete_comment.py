"""Delete comment use case."""

from pydantic import BaseModel

from discuss.domain.error import NotFoundError
from discuss.domain.repository import UnitOfWork
from discuss.domain.service import CommentForestService, CommentService
from discuss.domain.value import CommentId, PostId, UserId, parse_identifier


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    post_id: str
    user_id: str  # Must be the author


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool


class DeleteCommentUseCase:
    """Use case for deleting a comment together with its replies."""

    def __init__(
        self,
        comment_service: CommentService,
        forest_service: CommentForestService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.comment_service = comment_service
        self.forest_service = forest_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            InvalidIdentifierError: If an ID is not a positive integer
            NotFoundError: If the comment doesn't exist on this post
            NotAuthorizedError: If user doesn't own the comment
        """
        comment_id = CommentId(parse_identifier(request.comment_id, "comment"))
        post_id = PostId(parse_identifier(request.post_id, "post"))

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None or comment.post_id != post_id:
            raise NotFoundError("Comment", request.comment_id)

        await self.comment_service.delete_comment(comment_id, UserId(request.user_id))
        await self.unit_of_work.commit()
        await self.forest_service.invalidate(post_id)

        return DeleteCommentResponse(success=True)
