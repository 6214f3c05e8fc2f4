from typing import Literal

from pydantic import StrictStr

from chat_types.models.base import Message, PartialPayload
from chat_types.models.fields import Duration


class PartialVideo(PartialPayload):
    length: Duration
    mime_type: StrictStr | None = None
    uri: StrictStr


class VideoMessage(Message):
    type: Literal["video"] = "video"
    length: Duration
    mime_type: StrictStr | None = None
    uri: StrictStr
