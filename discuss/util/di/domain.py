"""Domain layer DI providers."""

from dishka import Scope, provide

from discuss.config import AuthSettings, CacheSettings, CommentSettings, SummarySettings
from discuss.domain.repository import (
    CommentRepository,
    CommentTreeCache,
    PostRepository,
    VoteRepository,
)
from discuss.domain.service import (
    CommentForestService,
    CommentService,
    JWTService,
    PostService,
    Summarizer,
    SummaryFreshnessPolicy,
    SummaryService,
    VoteAggregator,
    VoteService,
)
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_service=post_service,
            comment_service=comment_service,
        )

    @provide
    def get_vote_aggregator(self, vote_repository: VoteRepository) -> VoteAggregator:
        """Provide batched vote aggregation service."""
        return VoteAggregator(vote_repository=vote_repository)

    @provide
    def get_forest_service(
        self,
        comment_service: CommentService,
        vote_aggregator: VoteAggregator,
        cache: CommentTreeCache,
        cache_settings: CacheSettings,
        comment_settings: CommentSettings,
    ) -> CommentForestService:
        """Provide cached comment forest service."""
        return CommentForestService(
            comment_service=comment_service,
            vote_aggregator=vote_aggregator,
            cache=cache,
            cache_settings=cache_settings,
            comment_settings=comment_settings,
        )

    @provide
    def get_summary_policy(self, settings: SummarySettings) -> SummaryFreshnessPolicy:
        """Provide summary freshness policy."""
        return SummaryFreshnessPolicy(settings)

    @provide
    def get_summary_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        vote_aggregator: VoteAggregator,
        summarizer: Summarizer,
        policy: SummaryFreshnessPolicy,
        settings: SummarySettings,
    ) -> SummaryService:
        """Provide AI summary domain service."""
        return SummaryService(
            post_repository=post_repository,
            comment_repository=comment_repository,
            vote_aggregator=vote_aggregator,
            summarizer=summarizer,
            policy=policy,
            max_comments=settings.max_comments,
        )
