import asyncio
from types import SimpleNamespace

import pytest

from link_herald.event_hooks import message_hook

STARTED_AT = 1_000


class FakePipeline:
    def __init__(self):
        self.calls = []

    async def process(self, message, sender_name, source_room_id):
        self.calls.append((message, sender_name, source_room_id))


def _client(display_name="Test User", error=None):
    async def get_displayname(user_id):
        if error is not None:
            raise error
        return display_name

    return SimpleNamespace(get_displayname=get_displayname)


def _event(body="Check out this link: https://example.com", **overrides):
    fields = dict(
        event_id="$evt",
        room_id=message_hook.core.MONITORED_ROOM_ID,
        sender="@alice:matrix.test",
        timestamp=STARTED_AT + 5,
        content=SimpleNamespace(body=body),
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def _run(client, evt, pipeline):
    asyncio.run(message_hook.handle(client, evt, pipeline, started_at=STARTED_AT))


def test_forwards_body_sender_name_and_room():
    pipeline = FakePipeline()

    _run(_client(), _event(), pipeline)

    assert pipeline.calls == [
        ("Check out this link: https://example.com", "Test User", message_hook.core.MONITORED_ROOM_ID)
    ]


def test_falls_back_to_sender_id_without_display_name():
    pipeline = FakePipeline()

    _run(_client(display_name=None), _event(), pipeline)

    assert pipeline.calls[0][1] == "@alice:matrix.test"


def test_falls_back_to_sender_id_when_lookup_fails():
    pipeline = FakePipeline()

    _run(_client(error=RuntimeError("404")), _event(), pipeline)

    assert pipeline.calls[0][1] == "@alice:matrix.test"


def test_messages_without_links_still_reach_pipeline():
    pipeline = FakePipeline()

    _run(_client(), _event(body="This is a message without any links"), pipeline)

    assert len(pipeline.calls) == 1


@pytest.mark.parametrize(
    "overrides",
    [
        {"timestamp": STARTED_AT - 1},
        {"sender": message_hook.core.MATRIX_USER_ID},
        {"room_id": "!elsewhere:matrix.test"},
        {"content": SimpleNamespace(body=None)},
        {"content": SimpleNamespace()},
    ],
)
def test_filtered_events_never_reach_pipeline(overrides):
    pipeline = FakePipeline()

    _run(_client(), _event(**overrides), pipeline)

    assert pipeline.calls == []
