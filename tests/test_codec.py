import json
import logging

import pytest

from chat_types import (
    DecodeError,
    FileMessage,
    MalformedField,
    TextMessage,
    UnrecognizedType,
    VideoMessage,
    decode_messages,
    dumps_message,
    loads_message,
)


def _conversation(fixtures_dir):
    return json.loads((fixtures_dir / "conversation.json").read_text(encoding="utf-8"))


def test_decode_messages_raises_by_default(fixtures_dir):
    with pytest.raises(UnrecognizedType):
        decode_messages(_conversation(fixtures_dir))


def test_decode_messages_can_skip_malformed_rows(fixtures_dir, caplog):
    with caplog.at_level(logging.WARNING, logger="chat_types.services.codec"):
        messages = decode_messages(_conversation(fixtures_dir), skip_malformed=True)

    assert [type(m) for m in messages] == [TextMessage, FileMessage, VideoMessage]
    assert messages[1].size == 11
    skipped = [r for r in caplog.records if r.getMessage() == "message_skipped"]
    assert len(skipped) == 1
    assert skipped[0].index == 2
    assert skipped[0].field == "type"


def test_decode_messages_uses_settings_default(fixtures_dir, monkeypatch):
    monkeypatch.setenv("CHAT_TYPES_SKIP_MALFORMED_MESSAGES", "true")
    assert len(decode_messages(_conversation(fixtures_dir))) == 3
    assert len(decode_messages(_conversation(fixtures_dir)[:2], skip_malformed=False)) == 2


def test_json_text_round_trip(audio_payload):
    message = loads_message(json.dumps(audio_payload))
    assert json.loads(dumps_message(message)) == audio_payload
    assert loads_message(dumps_message(message)) == message


def test_dumps_keeps_non_ascii_text():
    message = TextMessage(author_id="a", id="1", text="¿qué tal?")
    assert "¿qué tal?" in dumps_message(message)


def test_loads_rejects_invalid_json():
    with pytest.raises(MalformedField) as exc_info:
        loads_message("{not json")
    assert exc_info.value.field is None
    assert isinstance(exc_info.value, DecodeError)
