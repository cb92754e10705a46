"""Bodies for the notices posted to the forwarding room."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from link_herald.links.summarizer import SummaryFailure


class NoticeKind(str, Enum):
    PROCESSING = "processing"
    SUMMARY = "summary"
    NO_SUMMARY = "no_summary"
    ERROR = "error"


@dataclass(slots=True, frozen=True)
class Notice:
    room_id: str
    kind: NoticeKind
    body: str


_FAILURE_REASONS = {
    SummaryFailure.FETCH_FAILED: "The page could not be retrieved.",
    SummaryFailure.NO_CONTENT: "The page has no readable text.",
    SummaryFailure.MISSING_API_KEY: "Summarization is not configured.",
    SummaryFailure.MODEL_ERROR: "The language model request failed.",
    SummaryFailure.EMPTY_RESPONSE: "The language model returned no summary.",
}


def processing_body(sender_name: str, link: str) -> str:
    return f"Link shared by {sender_name} in another room:\n{link}\n\nGenerating summary..."


def summary_body(link: str, summary: str) -> str:
    return f"Summary of {link}:\n\n{summary}"


def no_summary_body(link: str, failure: SummaryFailure | None = None) -> str:
    body = f"Could not generate summary for {link}"
    reason = _FAILURE_REASONS.get(failure) if failure else None
    return f"{body}\n{reason}" if reason else body


def error_body(link: str, description: str) -> str:
    return f"Error occurred while processing {link}: {description}"


__all__ = [
    "NoticeKind",
    "Notice",
    "processing_body",
    "summary_body",
    "no_summary_body",
    "error_body",
]
