"""Unit tests for the OpenAI-compatible summarizer client."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from httpx import Response

from discuss.adapter.error import SummarizerError
from discuss.adapter.summarizer import MockSummarizer, OpenAISummarizer, build_prompt
from discuss.config import SummarySettings

PAYLOAD = {
    "title": "Is coffee good for you?",
    "body": "Discuss.",
    "vote_count": 3,
    "comments": [
        {
            "body": "Yes, in moderation.",
            "author": "alice",
            "vote_count": 5,
            "created_at": "2025-01-01T12:00:00+00:00",
        },
        {
            "body": "No.",
            "author": "bob",
            "vote_count": -2,
            "created_at": "2025-01-01T12:05:00+00:00",
        },
    ],
}


def _settings(**overrides) -> SummarySettings:
    fields = {"api_key": "sk-test", "base_url": "https://llm.example/v1"}
    fields.update(overrides)
    return SummarySettings(**fields)


class TestBuildPrompt:
    """Tests for prompt rendering."""

    def test_includes_post_and_ranked_comments(self):
        """Title, reception and each comment with its votes are in the prompt."""
        prompt = build_prompt(PAYLOAD)

        assert "POST TITLE: Is coffee good for you?" in prompt
        assert "POST VOTES: 3 (positive reception)" in prompt
        assert "Comment 1 (5 votes) by alice:" in prompt
        assert "Comment 2 (-2 votes) by bob:" in prompt
        assert prompt.index("alice") < prompt.index("bob")

    def test_post_without_comments(self):
        """A quiet post says so instead of listing comments."""
        prompt = build_prompt({"title": "Quiet", "body": None, "vote_count": 0})

        assert "No comments yet." in prompt
        assert "POST CONTENT:" not in prompt
        assert "(negative reception)" in prompt


class TestOpenAISummarizer:
    """Tests for OpenAISummarizer."""

    @pytest.mark.asyncio
    async def test_returns_message_content(self):
        """The first choice's message content is returned, stripped."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = Response(
                200,
                json={"choices": [{"message": {"content": "  People like coffee.  "}}]},
            )

            # Act
            summary = await OpenAISummarizer(_settings()).summarize(PAYLOAD)

            # Assert
            assert summary == "People like coffee."
            args, kwargs = mock_client.post.call_args
            assert args[0] == "https://llm.example/v1/chat/completions"
            assert kwargs["headers"] == {"Authorization": "Bearer sk-test"}
            assert kwargs["json"]["model"] == "gpt-4o-mini"
            assert kwargs["json"]["max_tokens"] == 300
            assert kwargs["json"]["messages"][0]["role"] == "system"

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        """Without a key no request is made."""
        with patch("httpx.AsyncClient") as mock_client_class:
            with pytest.raises(SummarizerError):
                await OpenAISummarizer(_settings(api_key=None)).summarize(PAYLOAD)

            mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_error_status(self):
        """A non-200 response raises SummarizerError."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = Response(429, text="rate limited")

            with pytest.raises(SummarizerError):
                await OpenAISummarizer(_settings()).summarize(PAYLOAD)

    @pytest.mark.asyncio
    async def test_transport_error(self):
        """Network failures raise SummarizerError."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.side_effect = httpx.ConnectTimeout("timed out")

            with pytest.raises(SummarizerError):
                await OpenAISummarizer(_settings()).summarize(PAYLOAD)

    @pytest.mark.asyncio
    async def test_malformed_and_empty_responses(self):
        """Responses without usable content raise SummarizerError."""
        bodies = [
            {"choices": []},
            {"unexpected": True},
            {"choices": [{"message": {"content": "   "}}]},
        ]
        for body in bodies:
            with patch("httpx.AsyncClient") as mock_client_class:
                mock_client = AsyncMock()
                mock_client_class.return_value.__aenter__.return_value = mock_client
                mock_client.post.return_value = Response(200, json=body)

                with pytest.raises(SummarizerError):
                    await OpenAISummarizer(_settings()).summarize(PAYLOAD)


class TestMockSummarizer:
    """Tests for MockSummarizer."""

    @pytest.mark.asyncio
    async def test_records_calls(self):
        summarizer = MockSummarizer()

        summary = await summarizer.summarize(PAYLOAD)

        assert summary == "Summary of 'Is coffee good for you?' (2 comments)"
        assert summarizer.calls == [PAYLOAD]
