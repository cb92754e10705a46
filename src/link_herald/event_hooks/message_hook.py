import logging

from mautrix.client import Client
from mautrix.types import MessageEvent

from link_herald.config import core
from link_herald.links.pipeline import LinkPipeline

logger = logging.getLogger(__name__)


async def resolve_sender_name(client: Client, sender: str) -> str:
    """Display name of ``sender``, falling back to the raw user id."""
    try:
        name = await client.get_displayname(sender)
    except Exception as e:
        logger.debug("Could not resolve display name for %s: %s", sender, e)
        return sender
    return name or sender


async def handle(
    client: Client,
    evt: MessageEvent,
    pipeline: LinkPipeline,
    *,
    started_at: int,
) -> None:
    """Handle incoming room messages."""

    # 1) Ignore history replayed from before startup
    if evt.timestamp < started_at:
        return

    # 2) Ignore our own notices
    if evt.sender == core.MATRIX_USER_ID:
        return

    # 3) Ignore rooms that are not monitored
    if evt.room_id != core.MONITORED_ROOM_ID:
        return

    body = getattr(evt.content, "body", None)
    if not body:
        logger.debug("Skipping message %s without a text body", evt.event_id)
        return

    logger.info("New message received in room %s from %s", evt.room_id, evt.sender)

    sender_name = await resolve_sender_name(client, evt.sender)
    await pipeline.process(body, sender_name, evt.room_id)
