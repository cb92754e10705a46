"""
Fetch a linked page and reduce it to plain text.

One GET per URL, no retries. Failures come back as a tagged
:class:`ScrapeResult` instead of raising:

``OK``               HTML page, ``text`` holds the extracted text (may be empty)
``UNSUPPORTED_TYPE`` non-HTML response, ``text`` holds a descriptive placeholder
``HTTP_ERROR``       non-2xx status
``TRANSPORT_ERROR``  connection error, timeout, malformed URL or undecodable body
"""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass
from enum import Enum

import aiohttp

from link_herald.config import links

logger = logging.getLogger(__name__)

_SCRIPT_RE = re.compile(r"<script\b.*?</script>", re.IGNORECASE | re.DOTALL)
_STYLE_RE = re.compile(r"<style\b.*?</style>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")

_ENTITIES = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#039;", "'"),
    ("&nbsp;", " "),
)


class ScrapeStatus(str, Enum):
    OK = "ok"
    UNSUPPORTED_TYPE = "unsupported_type"
    HTTP_ERROR = "http_error"
    TRANSPORT_ERROR = "transport_error"


@dataclass(slots=True)
class ScrapeResult:
    url: str
    status: ScrapeStatus
    text: str | None = None
    status_code: int | None = None
    content_type: str | None = None
    error: str | None = None

    @property
    def content(self) -> str | None:
        """Text to hand to the summarizer, or ``None`` when nothing was retrieved."""
        if self.status in (ScrapeStatus.OK, ScrapeStatus.UNSUPPORTED_TYPE):
            return self.text
        return None


def unsupported_placeholder(content_type: str) -> str:
    return f"[This content is in format: {content_type} and cannot be summarized]"


def extract_text_from_html(html: str) -> str:
    """Strip scripts, styles and tags, collapse whitespace, decode common entities."""
    text = _SCRIPT_RE.sub(" ", html)
    text = _STYLE_RE.sub(" ", text)
    text = _TAG_RE.sub(" ", text)
    text = _WHITESPACE_RE.sub(" ", text).strip()
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text


async def scrape_url(url: str) -> ScrapeResult:
    """Fetch ``url`` and return its text content as a :class:`ScrapeResult`."""
    logger.info("Scraping URL: %s", url)
    headers = {"User-Agent": links.USER_AGENT}
    timeout = aiohttp.ClientTimeout(total=links.FETCH_TIMEOUT_S)

    try:
        async with aiohttp.ClientSession(headers=headers, timeout=timeout) as session:
            async with session.get(url) as resp:
                if not 200 <= resp.status < 300:
                    logger.error("Error fetching URL: %s, status: %s", url, resp.status)
                    return ScrapeResult(
                        url=url,
                        status=ScrapeStatus.HTTP_ERROR,
                        status_code=resp.status,
                        error=f"HTTP {resp.status}",
                    )

                content_type = resp.headers.get("Content-Type", "")
                if "text/html" not in content_type:
                    logger.info("Skipping non-HTML content: %s for URL: %s", content_type, url)
                    return ScrapeResult(
                        url=url,
                        status=ScrapeStatus.UNSUPPORTED_TYPE,
                        text=unsupported_placeholder(content_type),
                        status_code=resp.status,
                        content_type=content_type,
                    )

                html = await resp.text(errors="replace")
    except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeError, ValueError) as exc:
        logger.error("Error scraping URL: %s (%s: %s)", url, type(exc).__name__, exc)
        return ScrapeResult(
            url=url,
            status=ScrapeStatus.TRANSPORT_ERROR,
            error=f"{type(exc).__name__}: {exc}",
        )

    return ScrapeResult(
        url=url,
        status=ScrapeStatus.OK,
        text=extract_text_from_html(html),
        status_code=resp.status,
        content_type=content_type,
    )


__all__ = [
    "ScrapeStatus",
    "ScrapeResult",
    "scrape_url",
    "extract_text_from_html",
    "unsupported_placeholder",
]
