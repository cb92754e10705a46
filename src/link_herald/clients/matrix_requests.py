"""
Thin wrappers over the Matrix client-server API (v3).

Outbound path for notices. The sync loop runs through mautrix; notices go out
as plain bearer-authenticated requests and a failed delivery is logged, not raised.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import aiohttp

from link_herald.config import core, links

logger = logging.getLogger(__name__)

ROOM_MESSAGE = "m.room.message"


def _room_url(room_id: str, *parts: str) -> str:
    path = "/".join(quote(p, safe="") for p in (room_id, *parts))
    return f"{core.MATRIX_HOMESERVER_URL}/_matrix/client/v3/rooms/{path}"


def _headers() -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {core.MATRIX_ACCESS_TOKEN}",
    }


async def send_event(room_id: str, content: dict[str, Any], event_type: str) -> str | None:
    """
    POST an event into ``room_id`` and return its event id.

    Returns ``None`` when the homeserver rejects the event or cannot be reached.
    """
    url = _room_url(room_id, "send", event_type)
    timeout = aiohttp.ClientTimeout(total=links.DELIVERY_TIMEOUT_S)
    try:
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(url, json=content, headers=_headers()) as resp:
                if not 200 <= resp.status < 300:
                    logger.error("Failed to send %s to %s: HTTP %s", event_type, room_id, resp.status)
                    return None
                data = await resp.json(content_type=None)
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
        logger.error("Failed to send %s to %s: %s: %s", event_type, room_id, type(exc).__name__, exc)
        return None

    return (data or {}).get("event_id")


async def send_message(room_id: str, message: str, context: dict[str, Any] | None = None) -> str | None:
    """Post a plain-text message; ``context`` rides along in the event content."""
    return await send_event(
        room_id,
        {
            "body": message,
            "msgtype": "m.text",
            "context": context or {},
        },
        ROOM_MESSAGE,
    )


__all__ = ["send_event", "send_message", "ROOM_MESSAGE"]
