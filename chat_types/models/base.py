from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, ValidationError
from pydantic.alias_generators import to_camel

from chat_types.core.errors import DecodeError, MalformedField, MissingField, UnknownStatus, UnrecognizedType
from chat_types.models.fields import MessageStatus, Status, get_status_from_string


class MessageType(str, Enum):
    FILE = "file"
    IMAGE = "image"
    TEXT = "text"
    AUDIO = "audio"
    VIDEO = "video"


class _Unset:
    """Marks a ``copy_with`` argument that was not passed at all."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def translate_validation_error(exc: ValidationError) -> DecodeError:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or None
    if field == "type":
        return UnrecognizedType(error.get("input"))
    if error["type"] == "unknown_status":
        return UnknownStatus(error["ctx"]["status"])
    if error["type"] == "missing" or error.get("input", UNSET) is None:
        return MissingField(field)
    return MalformedField(field, error["msg"])


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return frozenset((key, _freeze(item)) for key, item in value.items())
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


class ChatModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        validate_by_name=True,
        validate_by_alias=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    @classmethod
    def from_map(cls, payload: Mapping[str, Any]):
        if not isinstance(payload, Mapping):
            raise MalformedField(None, f"expected a mapping, got {type(payload).__name__}")
        try:
            # Wire maps only carry camelCase keys.
            return cls.model_validate(dict(payload), by_alias=True, by_name=False)
        except ValidationError as exc:
            raise translate_validation_error(exc) from exc

    def to_map(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def __hash__(self) -> int:
        return hash((type(self), _freeze(self.to_map())))


class PartialPayload(ChatModel):
    """Variant payload of a message that has no author, id or timestamp yet."""


class Message(ChatModel):
    """Fields every message variant carries.

    Variants add their payload and a literal ``type`` tag. Instances are
    immutable; use :meth:`copy_with` to derive an updated message.
    """

    author_id: StrictStr
    id: StrictStr
    metadata: dict[str, Any] | None = None
    status: MessageStatus = None
    timestamp: StrictInt | None = None

    @property
    def message_type(self) -> MessageType:
        return MessageType(self.type)

    @classmethod
    def from_partial(
        cls,
        partial: PartialPayload,
        *,
        author_id: str,
        id: str,
        metadata: Mapping[str, Any] | None = None,
        status: Status | None = None,
        timestamp: int | None = None,
    ):
        return cls(
            **dict(partial),
            author_id=author_id,
            id=id,
            metadata=metadata,
            status=status,
            timestamp=timestamp,
        )

    def copy_with(
        self,
        *,
        metadata: Mapping[str, Any] | None = UNSET,
        preview_data: Any = UNSET,
        status: Status | str | None = None,
    ) -> "Message":
        """Return a copy of the message with updated data.

        ``metadata=None`` clears the existing metadata; a mapping is merged
        over the existing one, its keys winning. Leaving ``metadata`` out keeps
        it as is. ``status=None`` keeps the previous status. ``preview_data``
        only applies to text messages and is ignored by other variants.
        """
        update: dict[str, Any] = {}
        if metadata is UNSET:
            update["metadata"] = None if self.metadata is None else dict(self.metadata)
        elif metadata is None:
            update["metadata"] = None
        else:
            update["metadata"] = {**(self.metadata or {}), **metadata}

        if status is not None:
            update["status"] = status if isinstance(status, Status) else get_status_from_string(status)

        update.update(self._payload_update(preview_data))
        return self.model_copy(update=update)

    def _payload_update(self, preview_data: Any) -> dict[str, Any]:
        return {}
