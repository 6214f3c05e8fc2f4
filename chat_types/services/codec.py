import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from chat_types.core.config import get_settings
from chat_types.core.errors import DecodeError, MalformedField
from chat_types.models.base import Message
from chat_types.models.message import AnyMessage, decode_message, encode_message

logger = logging.getLogger(__name__)


def decode_messages(payloads: Iterable[Mapping[str, Any]], skip_malformed: bool | None = None) -> list[AnyMessage]:
    if skip_malformed is None:
        skip_malformed = get_settings().skip_malformed_messages

    messages: list[AnyMessage] = []
    for index, payload in enumerate(payloads):
        try:
            messages.append(decode_message(payload))
        except DecodeError as exc:
            if not skip_malformed:
                logger.warning("message_decode_failed", extra={"index": index, "field": exc.field, "error": exc.message})
                raise
            logger.warning("message_skipped", extra={"index": index, "field": exc.field, "error": exc.message})
    return messages


def loads_message(raw: str | bytes) -> AnyMessage:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MalformedField(None, f"invalid JSON: {exc.msg}") from exc
    return decode_message(payload)


def dumps_message(message: Message) -> str:
    return json.dumps(encode_message(message), ensure_ascii=False)
