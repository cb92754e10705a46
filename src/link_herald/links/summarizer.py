"""
Summarize the page behind a link.

Flow: scrape -> truncate -> one completion request. The function never raises;
every failure is reported through :class:`SummaryResult.failure` so the caller
can tell "page unavailable" apart from "model gave nothing back".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from link_herald.clients import oai
from link_herald.config import core, links
from link_herald.links import scraper

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful assistant that summarizes web content. "
    "Provide a concise summary highlighting the key points."
)

USER_PROMPT_TEMPLATE = "Please summarize the following content from {url}:\n\n{content}"

TRUNCATION_MARKER = "..."


class SummaryFailure(str, Enum):
    FETCH_FAILED = "fetch_failed"
    NO_CONTENT = "no_content"
    MISSING_API_KEY = "missing_api_key"
    MODEL_ERROR = "model_error"
    EMPTY_RESPONSE = "empty_response"


@dataclass(slots=True)
class SummaryResult:
    original_url: str
    summary: str | None = None
    failure: SummaryFailure | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.summary is not None


def truncate_content(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + TRUNCATION_MARKER


def build_messages(content: str, url: str) -> list[dict]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": USER_PROMPT_TEMPLATE.format(url=url, content=content)},
    ]


def _describe(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}"


async def summarize_url(url: str) -> SummaryResult:
    """Return a summary of ``url`` or a tagged failure; never raises."""
    try:
        scraped = await scraper.scrape_url(url)
    except Exception as exc:
        logger.error("Error scraping URL: %s (%s)", url, _describe(exc))
        return SummaryResult(original_url=url, failure=SummaryFailure.FETCH_FAILED, detail=_describe(exc))

    content = scraped.content
    if content is None:
        logger.error("Failed to scrape content from URL: %s", url)
        return SummaryResult(original_url=url, failure=SummaryFailure.FETCH_FAILED, detail=scraped.error)

    if not content:
        logger.warning("No text content found at URL: %s", url)
        return SummaryResult(original_url=url, failure=SummaryFailure.NO_CONTENT)

    if not core.AI_API_KEY:
        logger.error("AI_API_KEY is not set; cannot summarize %s", url)
        return SummaryResult(original_url=url, failure=SummaryFailure.MISSING_API_KEY)

    trimmed = truncate_content(content, links.MAX_CONTENT_LENGTH)
    try:
        summary = await oai.generate_summary(build_messages(trimmed, url))
    except Exception as exc:
        logger.error("Error generating summary for URL: %s (%s)", url, _describe(exc))
        return SummaryResult(original_url=url, failure=SummaryFailure.MODEL_ERROR, detail=_describe(exc))

    if not summary:
        logger.error("Failed to generate summary for URL: %s", url)
        return SummaryResult(original_url=url, failure=SummaryFailure.EMPTY_RESPONSE)

    return SummaryResult(original_url=url, summary=summary)


__all__ = [
    "SummaryFailure",
    "SummaryResult",
    "summarize_url",
    "truncate_content",
    "build_messages",
    "SYSTEM_PROMPT",
]
