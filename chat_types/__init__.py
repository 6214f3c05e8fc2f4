from chat_types.core.errors import DecodeError, MalformedField, MissingField, UnknownStatus, UnrecognizedType
from chat_types.models import (
    UNSET,
    AnyMessage,
    AnyPartial,
    AudioMessage,
    FileMessage,
    ImageMessage,
    Message,
    MessageType,
    PartialAudio,
    PartialFile,
    PartialImage,
    PartialText,
    PartialVideo,
    PreviewData,
    PreviewDataImage,
    Status,
    TextMessage,
    VideoMessage,
    decode_message,
    encode_message,
    get_status_from_string,
    promote,
)
from chat_types.services import decode_messages, dumps_message, loads_message

__all__ = [
    "DecodeError",
    "UnrecognizedType",
    "MissingField",
    "MalformedField",
    "UnknownStatus",
    "UNSET",
    "Message",
    "MessageType",
    "Status",
    "get_status_from_string",
    "AnyMessage",
    "AnyPartial",
    "FileMessage",
    "ImageMessage",
    "TextMessage",
    "AudioMessage",
    "VideoMessage",
    "PartialFile",
    "PartialImage",
    "PartialText",
    "PartialAudio",
    "PartialVideo",
    "PreviewData",
    "PreviewDataImage",
    "decode_message",
    "encode_message",
    "promote",
    "decode_messages",
    "loads_message",
    "dumps_message",
]
