"""Application layer DI providers."""

from dishka import Scope, provide

from discuss.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentTreeUseCase,
    GetCommentUseCase,
    SearchCommentsUseCase,
    UpdateCommentUseCase,
)
from discuss.application.usecase.post import GetPostSummaryUseCase, GetPostUseCase
from discuss.application.usecase.vote import (
    CastVoteUseCase,
    GetCallerVoteUseCase,
    GetVoteCountUseCase,
    RemoveVoteUseCase,
)
from discuss.config import CommentSettings
from discuss.domain.repository import UnitOfWork
from discuss.domain.service import (
    CommentForestService,
    CommentService,
    PostService,
    SummaryService,
    VoteAggregator,
    VoteService,
)
from discuss.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comment_tree_use_case(
        self, post_service: PostService, forest_service: CommentForestService
    ) -> GetCommentTreeUseCase:
        """Provide comments listing use case."""
        return GetCommentTreeUseCase(
            post_service=post_service, forest_service=forest_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, forest_service: CommentForestService
    ) -> GetCommentUseCase:
        """Provide single comment use case."""
        return GetCommentUseCase(forest_service=forest_service)

    @provide(scope=Scope.REQUEST)
    def get_search_comments_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        vote_aggregator: VoteAggregator,
        settings: CommentSettings,
    ) -> SearchCommentsUseCase:
        """Provide comment search use case."""
        return SearchCommentsUseCase(
            comment_service=comment_service,
            post_service=post_service,
            vote_aggregator=vote_aggregator,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        forest_service: CommentForestService,
        unit_of_work: UnitOfWork,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            forest_service=forest_service,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        vote_aggregator: VoteAggregator,
        forest_service: CommentForestService,
        unit_of_work: UnitOfWork,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service,
            vote_aggregator=vote_aggregator,
            forest_service=forest_service,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        forest_service: CommentForestService,
        unit_of_work: UnitOfWork,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            forest_service=forest_service,
            unit_of_work=unit_of_work,
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self,
        post_service: PostService,
        comment_service: CommentService,
        vote_aggregator: VoteAggregator,
        forest_service: CommentForestService,
    ) -> GetPostUseCase:
        """Provide post detail use case."""
        return GetPostUseCase(
            post_service=post_service,
            comment_service=comment_service,
            vote_aggregator=vote_aggregator,
            forest_service=forest_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_post_summary_use_case(
        self,
        post_service: PostService,
        summary_service: SummaryService,
        get_post_use_case: GetPostUseCase,
    ) -> GetPostSummaryUseCase:
        """Provide post summary use case."""
        return GetPostSummaryUseCase(
            post_service=post_service,
            summary_service=summary_service,
            get_post_use_case=get_post_use_case,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        vote_service: VoteService,
        vote_aggregator: VoteAggregator,
        forest_service: CommentForestService,
        unit_of_work: UnitOfWork,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            vote_service=vote_service,
            vote_aggregator=vote_aggregator,
            forest_service=forest_service,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(
        self,
        vote_service: VoteService,
        vote_aggregator: VoteAggregator,
        forest_service: CommentForestService,
        unit_of_work: UnitOfWork,
    ) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(
            vote_service=vote_service,
            vote_aggregator=vote_aggregator,
            forest_service=forest_service,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_vote_count_use_case(
        self, vote_service: VoteService, vote_aggregator: VoteAggregator
    ) -> GetVoteCountUseCase:
        """Provide vote count lookup use case."""
        return GetVoteCountUseCase(
            vote_service=vote_service, vote_aggregator=vote_aggregator
        )

    @provide(scope=Scope.REQUEST)
    def get_caller_vote_use_case(
        self, vote_aggregator: VoteAggregator
    ) -> GetCallerVoteUseCase:
        """Provide caller vote lookup use case."""
        return GetCallerVoteUseCase(vote_aggregator=vote_aggregator)
