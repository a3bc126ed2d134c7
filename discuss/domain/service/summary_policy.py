"""AI summary freshness policy."""

from datetime import datetime, timedelta
from typing import Optional

from discuss.config import SummarySettings

from .base import Service

DEFAULT_MAX_AGE = timedelta(hours=24)
DEFAULT_COMMENT_DELTA = 3


def needs_regeneration(
    summary: Optional[str],
    generated_at: Optional[datetime],
    comment_count_at_generation: int,
    current_comment_count: int,
    now: datetime,
    max_age: timedelta = DEFAULT_MAX_AGE,
    comment_delta_threshold: int = DEFAULT_COMMENT_DELTA,
) -> bool:
    """Decide whether a stored summary must be regenerated.

    A summary is stale when it is missing, has no timestamp, is strictly
    older than ``max_age``, or when at least ``comment_delta_threshold``
    comments were added since it was generated.
    """
    if not summary or generated_at is None:
        return True
    if now - generated_at > max_age:
        return True
    return current_comment_count - comment_count_at_generation >= comment_delta_threshold


class SummaryFreshnessPolicy(Service):
    """Freshness policy with thresholds taken from settings."""

    def __init__(self, settings: SummarySettings) -> None:
        self.max_age = timedelta(hours=settings.max_age_hours)
        self.comment_delta_threshold = settings.comment_delta_threshold

    def needs_regeneration(
        self,
        summary: Optional[str],
        generated_at: Optional[datetime],
        comment_count_at_generation: int,
        current_comment_count: int,
        now: datetime,
    ) -> bool:
        return needs_regeneration(
            summary,
            generated_at,
            comment_count_at_generation,
            current_comment_count,
            now,
            max_age=self.max_age,
            comment_delta_threshold=self.comment_delta_threshold,
        )
