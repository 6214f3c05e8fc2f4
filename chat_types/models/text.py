from typing import Any, Literal

from pydantic import StrictStr

from chat_types.models.base import UNSET, Message, PartialPayload
from chat_types.models.preview_data import PreviewData


class PartialText(PartialPayload):
    text: StrictStr


class TextMessage(Message):
    type: Literal["text"] = "text"
    preview_data: PreviewData | None = None
    text: StrictStr

    def _payload_update(self, preview_data: Any) -> dict[str, Any]:
        if preview_data is UNSET:
            return {}
        if preview_data is not None and not isinstance(preview_data, PreviewData):
            preview_data = PreviewData.from_map(preview_data)
        return {"preview_data": preview_data}
