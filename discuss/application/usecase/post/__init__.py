"""Post use cases."""

from .get_post import GetPostRequest, GetPostUseCase, PostDetailResponse
from .get_post_summary import GetPostSummaryRequest, GetPostSummaryUseCase

__all__ = [
    "GetPostRequest",
    "GetPostUseCase",
    "GetPostSummaryRequest",
    "GetPostSummaryUseCase",
    "PostDetailResponse",
]
