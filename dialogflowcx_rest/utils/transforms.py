"""
Field transformers between the in-memory and wire shapes of API records.

Each transformable field is declared once on its model with one of the
annotated types below. ``serialize`` and ``deserialize`` then apply those
declarations to any record type, recursing into nested records and lists.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any, Dict, Type, TypeVar

from dateutil.parser import isoparse
from pydantic import BaseModel, BeforeValidator, PlainSerializer

from . import codec

ModelT = TypeVar("ModelT", bound=BaseModel)

_DURATION_REGEX = re.compile(r"^(-)?(\d+)(?:\.(\d{1,9}))?s$")


def _bytes_from_wire(value: Any) -> Any:
    if isinstance(value, str):
        return codec.decode(value)
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    return value


def _fraction(microseconds: int) -> str:
    """Fractional seconds with 0, 3 or 6 digits, as protobuf JSON prints them."""
    if microseconds == 0:
        return ""
    if microseconds % 1000 == 0:
        return f".{microseconds // 1000:03d}"
    return f".{microseconds:06d}"


def parse_timestamp(value: Any) -> Any:
    """Parse an RFC 3339 timestamp. Digits past microseconds are truncated."""
    if isinstance(value, str):
        return isoparse(value)
    return value


def format_timestamp(value: datetime) -> str:
    """Format a datetime as a UTC RFC 3339 string. Naive values are taken as UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    # strftime does not zero-pad years below 1000 on every platform
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f"{_fraction(value.microsecond)}Z"
    )


def parse_duration(value: Any) -> Any:
    """Parse a protobuf duration string such as ``"3.5s"``, or plain seconds."""
    if isinstance(value, str):
        match = _DURATION_REGEX.match(value.strip())
        if not match:
            raise ValueError(f"Invalid duration: {value!r}")
        sign, seconds, fraction = match.groups()
        microseconds = int((fraction or "").ljust(9, "0")[:6])
        duration = timedelta(seconds=int(seconds), microseconds=microseconds)
        return -duration if sign else duration
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return timedelta(seconds=value)
    return value


def format_duration(value: timedelta) -> str:
    """Format a timedelta as a protobuf duration string."""
    total = (value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds
    sign = "-" if total < 0 else ""
    seconds, microseconds = divmod(abs(total), 1_000_000)
    return f"{sign}{seconds}{_fraction(microseconds)}s"


# Transform kinds, applied per field by annotation
Base64Bytes = Annotated[
    bytes,
    BeforeValidator(_bytes_from_wire),
    PlainSerializer(codec.encode, return_type=str),
]
Timestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=str),
]
Duration = Annotated[
    timedelta,
    BeforeValidator(parse_duration),
    PlainSerializer(format_duration, return_type=str),
]


def serialize(record: BaseModel) -> Dict[str, Any]:
    """
    Convert a record to its wire shape.

    Only fields that were set are emitted, so absent fields stay absent.
    Unknown fields kept from a server response are emitted unchanged.

    Args:
        record: In-memory record

    Returns:
        JSON-compatible dictionary with camelCase keys
    """
    return record.model_dump(mode="json", by_alias=True, exclude_unset=True)


def deserialize(model_cls: Type[ModelT], data: Dict[str, Any]) -> ModelT:
    """
    Convert a wire-shape dictionary into a record of ``model_cls``.

    Args:
        model_cls: Record type to build
        data: Parsed JSON object

    Returns:
        In-memory record
    """
    return model_cls.model_validate(data)
