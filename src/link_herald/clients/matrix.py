"""Matrix bot bootstrap utilities."""

from __future__ import annotations

import asyncio
import logging
import time

from mautrix.client import Client, InternalEventType
from mautrix.types import EventType, MessageEvent, UserID

from link_herald.config import core, links
from link_herald.event_hooks import message_hook, ready_hook
from link_herald.links.dedup import LinkCache
from link_herald.links.pipeline import LinkPipeline

logger = logging.getLogger(__name__)


def build_pipeline() -> LinkPipeline:
    """Create the per-process pipeline context (dedup window + destination)."""
    return LinkPipeline(
        core.FORWARDING_ROOM_ID,
        cache=LinkCache(links.cache_window_s),
        link_timeout=links.LINK_TIMEOUT_S,
    )


class LinkHeraldBot:
    """Subscribes to the homeserver and feeds room messages into the pipeline."""

    def __init__(self, client: Client, pipeline: LinkPipeline) -> None:
        self.client = client
        self.pipeline = pipeline
        self.started_at = int(time.time() * 1000)
        self._ready = False

        client.add_event_handler(EventType.ROOM_MESSAGE, self.on_message)
        client.add_event_handler(InternalEventType.SYNC_SUCCESSFUL, self.on_sync)

    async def on_message(self, evt: MessageEvent) -> None:
        await message_hook.handle(self.client, evt, self.pipeline, started_at=self.started_at)

    async def on_sync(self, data: dict) -> None:
        if self._ready:
            return
        self._ready = True
        await ready_hook.handle(self.client, data)

    async def run(self) -> None:
        """Sync until cancelled, then release the HTTP session."""
        try:
            await self.client.start(None)
        finally:
            self.client.stop()
            await self.client.api.session.close()


def build_bot() -> LinkHeraldBot:
    client = Client(
        mxid=UserID(core.MATRIX_USER_ID),
        base_url=core.MATRIX_HOMESERVER_URL,
        token=core.MATRIX_ACCESS_TOKEN,
    )
    # Backlog from the first sync is history, not new messages
    client.ignore_initial_sync = True
    client.ignore_first_sync = True
    return LinkHeraldBot(client, build_pipeline())


async def _main() -> None:
    # The mautrix client opens its HTTP session on construction, so build inside the loop
    bot = build_bot()
    await bot.run()


def run() -> None:
    """Start the Matrix bot using configuration from the environment."""

    try:
        asyncio.run(_main())
    except KeyboardInterrupt:
        logger.info("Shutting down")
    except Exception as exc:  # pragma: no cover - last-resort guard
        logger.exception("Unexpected error while running client: %s", exc)
