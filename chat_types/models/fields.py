"""Wire conversions shared by the message variants and their partials.

Every converter here runs before pydantic's own validation, so it receives the
raw JSON value and either normalises it or raises ``ValueError``, which the
decode boundary reports as a malformed field.
"""
import math
from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Annotated

from pydantic import BeforeValidator, PlainSerializer
from pydantic_core import PydanticCustomError

from chat_types.core.errors import UnknownStatus


class Status(str, Enum):
    DELIVERED = "delivered"
    ERROR = "error"
    READ = "read"
    SENDING = "sending"


def get_status_from_string(value: str | None) -> Status | None:
    if value is None:
        return None
    for status in Status:
        if status.value == value:
            return status
    raise UnknownStatus(value)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def round_half_away_from_zero(value: float) -> int:
    if not math.isfinite(value):
        raise ValueError("expected a finite number")
    # ROUND_HALF_UP on the exact binary value rounds halves away from zero.
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def _coerce_byte_size(value: object) -> int:
    if not _is_number(value):
        raise ValueError("expected a number")
    if isinstance(value, int):
        return value
    return round_half_away_from_zero(value)


def _coerce_dimension(value: object) -> float | None:
    if value is None:
        return None
    if not _is_number(value):
        raise ValueError("expected a number")
    return float(value)


def _coerce_duration(value: object) -> timedelta:
    if isinstance(value, timedelta):
        return value
    if not _is_number(value):
        raise ValueError("expected a duration in milliseconds")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError("expected a whole number of milliseconds")
    return timedelta(milliseconds=int(value))


def duration_to_milliseconds(value: timedelta) -> int:
    return value // timedelta(milliseconds=1)


def _coerce_wave_form(value: object) -> list[float] | None:
    if value is None:
        return None
    if not isinstance(value, (list, tuple)) or not all(_is_number(level) for level in value):
        raise ValueError("expected a list of decibel levels")
    return [float(level) for level in value]


def _coerce_status(value: object) -> Status | None:
    if value is None or isinstance(value, Status):
        return value
    if not isinstance(value, str):
        raise ValueError("expected a status name")
    try:
        return get_status_from_string(value)
    except UnknownStatus as exc:
        raise PydanticCustomError("unknown_status", "Unknown message status {status}", {"status": value}) from exc


ByteSize = Annotated[int, BeforeValidator(_coerce_byte_size)]
Dimension = Annotated[float | None, BeforeValidator(_coerce_dimension)]
Duration = Annotated[
    timedelta,
    BeforeValidator(_coerce_duration),
    PlainSerializer(duration_to_milliseconds, return_type=int),
]
# Decibel levels, each expected within [0, 120]; the range is not enforced.
WaveForm = Annotated[list[float] | None, BeforeValidator(_coerce_wave_form)]
MessageStatus = Annotated[Status | None, BeforeValidator(_coerce_status)]
