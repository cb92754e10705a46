"""Helpers for interacting with the OpenAI-compatible completion endpoint"""
from openai import AsyncOpenAI
from link_herald.config import core, links

import logging
logger = logging.getLogger(__name__)

_COMPLETIONS_SUFFIX = "/chat/completions"


def api_base_url(api_url: str) -> str:
    """
    Turn a full chat-completions endpoint into the base URL the SDK expects.

    ``https://api.openai.com/v1/chat/completions`` -> ``https://api.openai.com/v1``.
    URLs without the suffix are treated as a base URL already.
    """
    url = api_url.rstrip("/")
    if url.endswith(_COMPLETIONS_SUFFIX):
        url = url[: -len(_COMPLETIONS_SUFFIX)]
    return url


# One global async-capable client; a single attempt per request
aoai = AsyncOpenAI(
    api_key=core.AI_API_KEY,
    base_url=api_base_url(core.AI_API_URL),
    timeout=links.AI_TIMEOUT_S,
    max_retries=0,
)


async def generate_summary(
    messages: list[dict],
    *,
    model: str | None = None,
    max_tokens: int | None = None,
    temperature: float | None = None,
) -> str | None:
    """
    Send one chat completion request and return the first choice's text.

    Returns ``None`` when the response carries no usable text. The caller checks
    that an API key is configured before calling. HTTP and transport
    failures propagate as ``openai`` exceptions.

    Example message format:
    .. code-block:: python
        [
            {"role": "system", "content": "You are a helpful assistant..."},
            {"role": "user", "content": "Please summarize the following content..."},
        ]
    """
    resp = await aoai.chat.completions.create(
        model=model or core.AI_MODEL,
        messages=messages,
        max_tokens=max_tokens if max_tokens is not None else links.SUMMARY_MAX_TOKENS,
        temperature=temperature if temperature is not None else links.SUMMARY_TEMPERATURE,
    )

    choices = getattr(resp, "choices", None) or []
    if not choices:
        logger.error("Completion response contained no choices")
        return None

    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if not isinstance(content, str):
        logger.error("Completion response contained no text content")
        return None

    return content.strip()
