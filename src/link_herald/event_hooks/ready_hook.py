import logging

from link_herald.config import core

logger = logging.getLogger(__name__)


async def handle(client, data: dict | None = None) -> None:
    """Announce the room wiring once the first sync has completed."""
    logger.info("Logged in as %s", client.mxid)
    logger.info("Listening for messages in room: %s", core.MONITORED_ROOM_ID)
    logger.info("Forwarding links to room: %s", core.FORWARDING_ROOM_ID)
