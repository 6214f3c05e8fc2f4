from pydantic import StrictStr

from chat_types.models.base import ChatModel
from chat_types.models.fields import Dimension


class PreviewDataImage(ChatModel):
    """Image shown in a link preview."""

    height: Dimension
    url: StrictStr
    width: Dimension


class PreviewData(ChatModel):
    """Link preview attached to a text message."""

    description: StrictStr | None = None
    image: PreviewDataImage | None = None
    link: StrictStr | None = None
    title: StrictStr | None = None
