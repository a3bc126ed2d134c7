"""Mock summarizer providers for testing."""

from dishka import Scope, provide

from discuss.adapter.summarizer import MockSummarizer
from discuss.domain.service import Summarizer
from discuss.util.di.infrastructure.summarizer import SummarizerProvider


class MockSummarizerProvider(SummarizerProvider):
    """Mock summarizer provider returning canned summaries."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_summarizer(self) -> Summarizer:
        """Provide mock summarizer."""
        return MockSummarizer()
