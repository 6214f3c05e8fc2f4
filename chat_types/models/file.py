from typing import Literal

from pydantic import StrictStr

from chat_types.models.base import Message, PartialPayload
from chat_types.models.fields import ByteSize


class PartialFile(PartialPayload):
    file_name: StrictStr
    mime_type: StrictStr | None = None
    size: ByteSize
    uri: StrictStr


class FileMessage(Message):
    """A file attachment. ``size`` is in bytes; ``uri`` is a remote URL or a local resource."""

    type: Literal["file"] = "file"
    file_name: StrictStr
    mime_type: StrictStr | None = None
    size: ByteSize
    uri: StrictStr
