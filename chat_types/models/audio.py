from typing import Literal

from pydantic import StrictStr

from chat_types.models.base import Message, PartialPayload
from chat_types.models.fields import Duration, WaveForm


class PartialAudio(PartialPayload):
    length: Duration
    mime_type: StrictStr | None = None
    uri: StrictStr
    wave_form: WaveForm = None


class AudioMessage(Message):
    """A voice or audio clip.

    ``length`` travels as whole milliseconds. ``wave_form`` holds decibel
    levels between 0 and 120, one per sample bucket.
    """

    type: Literal["audio"] = "audio"
    length: Duration
    mime_type: StrictStr | None = None
    uri: StrictStr
    wave_form: WaveForm = None
