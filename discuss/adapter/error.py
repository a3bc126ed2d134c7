"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class SummarizerError(ProviderError):
    """Summarization service call failed or returned an unusable response."""

    pass


class CacheUnavailableError(AdapterError):
    """Cache backend could not be reached or returned unreadable data."""

    pass
