"""Discussion summarizer adapter."""

from .client import DiscussionSummarizer, MockSummarizer, OpenAISummarizer, build_prompt

__all__ = ["DiscussionSummarizer", "OpenAISummarizer", "MockSummarizer", "build_prompt"]
