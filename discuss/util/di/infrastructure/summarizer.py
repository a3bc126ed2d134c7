"""Summarizer infrastructure providers."""

from dishka import Scope, provide

from discuss.adapter.summarizer import OpenAISummarizer
from discuss.config import SummarySettings
from discuss.domain.service import Summarizer
from discuss.util.di.base import ProviderBase
from discuss.util.observability import instrument_httpx


class SummarizerProvider(ProviderBase):
    """Summarizer component base."""

    __mock_component__ = "summarizer"


class ProdSummarizerProvider(SummarizerProvider):
    """Production summarizer provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_summarizer(self, settings: SummarySettings) -> Summarizer:
        """Provide summarizer client.

        A missing API key is reported when a summary is requested, so the
        rest of the API keeps working without one.
        """
        instrument_httpx()
        return OpenAISummarizer(settings)
