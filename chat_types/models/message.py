from collections.abc import Mapping
from typing import Any

from chat_types.core.errors import MalformedField, UnrecognizedType
from chat_types.models.audio import AudioMessage, PartialAudio
from chat_types.models.base import Message, PartialPayload
from chat_types.models.fields import Status
from chat_types.models.file import FileMessage, PartialFile
from chat_types.models.image import ImageMessage, PartialImage
from chat_types.models.text import PartialText, TextMessage
from chat_types.models.video import PartialVideo, VideoMessage

AnyMessage = FileMessage | ImageMessage | TextMessage | AudioMessage | VideoMessage
AnyPartial = PartialFile | PartialImage | PartialText | PartialAudio | PartialVideo


def decode_message(payload: Mapping[str, Any]) -> AnyMessage:
    """Build the message variant named by the ``type`` field of a decoded JSON map."""
    if not isinstance(payload, Mapping):
        raise MalformedField(None, f"expected a mapping, got {type(payload).__name__}")
    message_type = payload.get("type")
    if message_type == "file":
        return FileMessage.from_map(payload)
    if message_type == "image":
        return ImageMessage.from_map(payload)
    if message_type == "text":
        return TextMessage.from_map(payload)
    if message_type == "audio":
        return AudioMessage.from_map(payload)
    if message_type == "video":
        return VideoMessage.from_map(payload)
    raise UnrecognizedType(message_type)


def encode_message(message: Message) -> dict[str, Any]:
    return message.to_map()


def promote(
    partial: PartialPayload,
    *,
    author_id: str,
    id: str,
    metadata: Mapping[str, Any] | None = None,
    status: Status | None = None,
    timestamp: int | None = None,
) -> AnyMessage:
    """Turn a partial payload into a full message once it has an author and an id."""
    identity = {
        "author_id": author_id,
        "id": id,
        "metadata": metadata,
        "status": status,
        "timestamp": timestamp,
    }
    if isinstance(partial, PartialFile):
        return FileMessage.from_partial(partial, **identity)
    if isinstance(partial, PartialImage):
        return ImageMessage.from_partial(partial, **identity)
    if isinstance(partial, PartialText):
        return TextMessage.from_partial(partial, **identity)
    if isinstance(partial, PartialAudio):
        return AudioMessage.from_partial(partial, **identity)
    if isinstance(partial, PartialVideo):
        return VideoMessage.from_partial(partial, **identity)
    raise TypeError(f"Unsupported partial payload: {type(partial).__name__}")
