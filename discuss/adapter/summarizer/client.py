"""Summarizer backed by an OpenAI-compatible chat completions API."""

from typing import Any

import httpx
import logfire

from discuss.adapter.error import SummarizerError
from discuss.config import SummarySettings
from discuss.domain.service.summary_service import Summarizer

SYSTEM_PROMPT = (
    "You summarize Reddit-style posts and their discussions. Weigh the most "
    "upvoted content highest, it reflects what the community agrees with."
)


class DiscussionSummarizer(Summarizer):
    """Base class for summarizers.

    Provides type distinction for dependency injection.
    """

    pass


def build_prompt(payload: dict[str, Any]) -> str:
    """Render the summarizer payload as a user prompt.

    Args:
        payload: Post title, body, vote count and ranked comments

    Returns:
        Prompt text
    """
    vote_count = payload.get("vote_count", 0)
    reception = "positive" if vote_count > 0 else "negative"
    lines = [
        "Summarize this post and its discussion. Give me the main points and "
        "put more weight on upvoted comments.",
        "",
        f"POST TITLE: {payload['title']}",
        f"POST VOTES: {vote_count} ({reception} reception)",
        "",
    ]
    if payload.get("body"):
        lines += ["POST CONTENT:", payload["body"], ""]

    comments = payload.get("comments") or []
    if comments:
        lines += ["TOP COMMENTS (highest voted first):", ""]
        for index, comment in enumerate(comments, start=1):
            lines.append(
                f"Comment {index} ({comment['vote_count']} votes) by {comment['author']}:"
            )
            lines += [comment["body"], ""]
    else:
        lines += ["No comments yet.", ""]

    lines.append(
        "Keep it concise and cover: the main topic of the post, the most upvoted "
        "opinions, any consensus, and notable upvoted disagreements."
    )
    return "\n".join(lines)


class OpenAISummarizer(DiscussionSummarizer):
    """Chat completions client used to summarize discussions."""

    def __init__(self, settings: SummarySettings) -> None:
        """Initialize summarizer.

        Args:
            settings: Summary settings (API key, endpoint, model parameters)
        """
        self.settings = settings
        self.completions_url = f"{settings.base_url.rstrip('/')}/chat/completions"

    async def summarize(self, payload: dict[str, Any]) -> str:
        """Summarize a discussion.

        Args:
            payload: Post title, body, vote count and ranked comments

        Returns:
            Summary text

        Raises:
            SummarizerError: If no API key is configured or the call fails
        """
        if not self.settings.api_key:
            raise SummarizerError("Summary API key is not configured")

        body = {
            "model": self.settings.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_prompt(payload)},
            ],
            "temperature": self.settings.temperature,
            "max_tokens": self.settings.max_tokens,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.completions_url,
                    json=body,
                    headers={"Authorization": f"Bearer {self.settings.api_key}"},
                    timeout=self.settings.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Summary request HTTP error", error=str(e))
            raise SummarizerError(f"HTTP error during summary request: {e}") from e

        if response.status_code != 200:
            logfire.error(
                "Summary request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise SummarizerError(f"Summary request failed: {response.status_code}")

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise SummarizerError("Malformed summary response") from e

        if not content or not content.strip():
            raise SummarizerError("Empty summary response")

        logfire.info("Summary received", model=self.settings.model, length=len(content))
        return content.strip()


class MockSummarizer(DiscussionSummarizer):
    """Mock summarizer for testing.

    Returns deterministic text without making real API calls.
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    async def summarize(self, payload: dict[str, Any]) -> str:
        """Return a summary derived from the payload.

        Args:
            payload: Summarizer payload

        Returns:
            Deterministic summary text
        """
        self.calls.append(payload)
        return (
            f"Summary of '{payload['title']}' "
            f"({len(payload.get('comments') or [])} comments)"
        )
