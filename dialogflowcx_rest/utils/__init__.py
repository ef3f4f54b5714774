"""Utility modules for the Dialogflow CX REST client."""

from .codec import encode, decode
from .transforms import serialize, deserialize
from .helpers import configure_logging, format_field_mask

__all__ = [
    "encode",
    "decode",
    "serialize",
    "deserialize",
    "configure_logging",
    "format_field_mask",
]
