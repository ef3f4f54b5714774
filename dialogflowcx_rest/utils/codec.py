"""
Binary codec for byte payloads carried inside JSON.

Audio, exported agent archives and CA certificates travel over the wire as
standard base64 text (RFC 4648 alphabet with ``=`` padding, not URL-safe).
"""

import base64
import binascii
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def encode(data: BytesLike) -> str:
    """
    Encode raw bytes as standard, padded base64 text.

    Args:
        data: Byte sequence of any length, including empty

    Returns:
        Base64 text whose length is a multiple of 4
    """
    return base64.b64encode(bytes(data)).decode("ascii")


def decode(text: str) -> bytes:
    """
    Decode standard base64 text back into the original bytes.

    Args:
        text: Padded base64 text using the standard alphabet

    Returns:
        Decoded byte sequence

    Raises:
        binascii.Error: If the text contains characters outside the
            standard alphabet or is incorrectly padded. Malformed input
            is rejected, never repaired.
    """
    try:
        return base64.b64decode(text, validate=True)
    except ValueError as e:
        # Non-ASCII str input raises a plain ValueError
        if isinstance(e, binascii.Error):
            raise
        raise binascii.Error(str(e)) from e
