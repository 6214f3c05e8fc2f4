from typing import Literal

from pydantic import StrictStr

from chat_types.models.base import Message, PartialPayload
from chat_types.models.fields import ByteSize, Dimension


class PartialImage(PartialPayload):
    height: Dimension = None
    image_name: StrictStr
    size: ByteSize
    uri: StrictStr
    width: Dimension = None


class ImageMessage(Message):
    """An image. ``height`` and ``width`` are in pixels when known."""

    type: Literal["image"] = "image"
    height: Dimension = None
    image_name: StrictStr
    size: ByteSize
    uri: StrictStr
    width: Dimension = None
