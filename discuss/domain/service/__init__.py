"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .forest_service import CommentForestService
from .jwt_service import JWTService
from .post_service import PostService
from .summary_policy import SummaryFreshnessPolicy
from .summary_service import Summarizer, SummaryService
from .vote_aggregator import VoteAggregator
from .vote_service import VoteService

__all__ = [
    "CommentForestService",
    "CommentService",
    "JWTService",
    "PostService",
    "Service",
    "Summarizer",
    "SummaryFreshnessPolicy",
    "SummaryService",
    "VoteAggregator",
    "VoteService",
]
