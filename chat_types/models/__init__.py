from chat_types.models.audio import AudioMessage, PartialAudio
from chat_types.models.base import UNSET, Message, MessageType
from chat_types.models.fields import Status, get_status_from_string
from chat_types.models.file import FileMessage, PartialFile
from chat_types.models.image import ImageMessage, PartialImage
from chat_types.models.message import AnyMessage, AnyPartial, decode_message, encode_message, promote
from chat_types.models.preview_data import PreviewData, PreviewDataImage
from chat_types.models.text import PartialText, TextMessage
from chat_types.models.video import PartialVideo, VideoMessage

__all__ = [
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
]
