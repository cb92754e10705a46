"""
Link forwarding pipeline.

For each link in an inbound message, in order:

1. skip it if ``(link, source room)`` is still in the dedup window
2. record it in the window (kept for the full window whatever happens next)
3. post a "processing" notice to the forwarding room
4. summarize, then post the summary, a "could not summarize" notice, or an
   error notice

Links are handled one after another so notices land in reading order. A
failure on one link is reported to the room and never stops its siblings.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from link_herald.clients.matrix_requests import send_message
from link_herald.links.dedup import DedupKey, LinkCache
from link_herald.links.extractor import extract_links
from link_herald.links.notices import (
    Notice,
    NoticeKind,
    error_body,
    no_summary_body,
    processing_body,
    summary_body,
)
from link_herald.links.summarizer import SummaryResult, summarize_url

logger = logging.getLogger(__name__)

DEFAULT_CACHE_WINDOW_S = 60 * 60

SendFn = Callable[[str, str], Awaitable[object]]
SummarizeFn = Callable[[str], Awaitable[SummaryResult | None]]


class LinkPipeline:
    """
    Owns the dedup window and the forwarding destination for one bot process.
    """

    def __init__(
        self,
        forwarding_room_id: str | None,
        *,
        cache: LinkCache | None = None,
        send: SendFn | None = None,
        summarize: SummarizeFn | None = None,
        link_timeout: float | None = None,
    ) -> None:
        self.forwarding_room_id = forwarding_room_id
        self.cache = cache if cache is not None else LinkCache(DEFAULT_CACHE_WINDOW_S)
        self._send = send or send_message
        self._summarize = summarize or summarize_url
        self.link_timeout = link_timeout

    async def process(self, message: str, sender_name: str, source_room_id: str) -> None:
        """Extract links from ``message`` and forward a summary of each new one."""
        if not self.forwarding_room_id:
            logger.error("FORWARDING_ROOM_ID not set; skipping link forwarding")
            return

        for link in extract_links(message):
            key = DedupKey(link, source_room_id)
            if not self.cache.add(key):
                logger.debug("Skipping recently forwarded link: %s", link)
                continue
            await self._process_link(link, sender_name)

    async def _process_link(self, link: str, sender_name: str) -> None:
        try:
            await self._notify(self._notice(NoticeKind.PROCESSING, processing_body(sender_name, link)))
            result = await self._summarize_with_deadline(link)
        except Exception as exc:
            logger.exception("Error processing link %s", link)
            description = str(exc) or type(exc).__name__
            await self._deliver_terminal(self._notice(NoticeKind.ERROR, error_body(link, description)))
            return

        if result is not None and result.ok:
            notice = self._notice(NoticeKind.SUMMARY, summary_body(link, result.summary))
        else:
            failure = result.failure if result is not None else None
            logger.info("Could not summarize link: %s (%s)", link, failure)
            notice = self._notice(NoticeKind.NO_SUMMARY, no_summary_body(link, failure))
        await self._deliver_terminal(notice)

    async def _summarize_with_deadline(self, link: str) -> SummaryResult | None:
        if self.link_timeout is None:
            return await self._summarize(link)
        try:
            return await asyncio.wait_for(self._summarize(link), timeout=self.link_timeout)
        except asyncio.TimeoutError as exc:
            raise TimeoutError(f"summarizing took longer than {self.link_timeout:g}s") from exc

    async def _deliver_terminal(self, notice: Notice) -> None:
        # Exactly one terminal notice per link: a failed send is logged, never followed by another
        try:
            await self._notify(notice)
        except Exception:
            logger.exception("Failed to deliver %s notice to %s", notice.kind.value, notice.room_id)

    def _notice(self, kind: NoticeKind, body: str) -> Notice:
        return Notice(room_id=self.forwarding_room_id, kind=kind, body=body)

    async def _notify(self, notice: Notice) -> None:
        await self._send(notice.room_id, notice.body)
        logger.info("Posted %s notice to %s", notice.kind.value, notice.room_id)


__all__ = ["LinkPipeline"]
