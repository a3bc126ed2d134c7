"""Get post summary use case."""

from pydantic import BaseModel

from discuss.domain.service import PostService, SummaryService
from discuss.domain.value import PostId, UserId, parse_identifier

from .get_post import GetPostUseCase, PostDetailResponse


class GetPostSummaryRequest(BaseModel):
    """Get post summary request."""

    post_id: str
    viewer_id: str | None = None


class GetPostSummaryUseCase:
    """Use case for the post detail with an up-to-date AI summary.

    The stored summary is reused while it is fresh; otherwise it is
    regenerated. Summary failures never fail the request.
    """

    def __init__(
        self,
        post_service: PostService,
        summary_service: SummaryService,
        get_post_use_case: GetPostUseCase,
    ) -> None:
        """Initialize get post summary use case.

        Args:
            post_service: Post domain service
            summary_service: Summary freshness and regeneration
            get_post_use_case: Builds the post detail around the summary
        """
        self.post_service = post_service
        self.summary_service = summary_service
        self.get_post_use_case = get_post_use_case

    async def execute(self, request: GetPostSummaryRequest) -> PostDetailResponse:
        """Execute get post summary flow.

        Raises:
            InvalidIdentifierError: If the post ID is not a positive integer
            NotFoundError: If the post doesn't exist
            AggregationError: If vote aggregation fails
        """
        post_id = PostId(parse_identifier(request.post_id, "post"))
        viewer_id = UserId(request.viewer_id) if request.viewer_id else None

        post = await self.post_service.get_existing(post_id)
        detail = await self.get_post_use_case.build_detail(post, viewer_id)

        summary = await self.summary_service.get_fresh_summary(post, detail.vote_count)
        return detail.model_copy(update={"ai_summary": summary})
