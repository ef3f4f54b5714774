"""
Unit tests for the base64 codec.
"""

import base64
import binascii

import pytest

from dialogflowcx_rest.utils import codec


class TestCodec:
    """Unit tests for encode/decode."""

    def test_encode_empty(self):
        """Test that empty input encodes to empty text."""
        assert codec.encode(b"") == ""
        assert codec.decode("") == b""

    def test_encode_known_vectors(self):
        """Test RFC 4648 vectors."""
        assert codec.encode(b"f") == "Zg=="
        assert codec.encode(b"fo") == "Zm8="
        assert codec.encode(b"foo") == "Zm9v"
        assert codec.encode(b"foobar") == "Zm9vYmFy"
        assert codec.encode(bytes([1, 2, 3])) == "AQID"

    def test_encode_uses_standard_alphabet(self):
        """Test that + and / are used, not the URL-safe alphabet."""
        assert codec.encode(b"\xfb\xff\xbf") == "+/+/"
        assert codec.encode(b"\xff\xfe") == "//4="

    def test_encode_accepts_bytearray_and_memoryview(self):
        """Test bytes-like inputs."""
        assert codec.encode(bytearray(b"\x01\x02\x03")) == "AQID"
        assert codec.encode(memoryview(b"\x01\x02\x03")) == "AQID"

    @pytest.mark.parametrize("length", [0, 1, 2, 3, 4, 5, 255, 256, 1000])
    def test_round_trip(self, length):
        """Test that every byte value survives a round trip."""
        data = bytes(i % 256 for i in range(length))
        text = codec.encode(data)

        assert len(text) % 4 == 0
        assert text == base64.b64encode(data).decode("ascii")
        assert codec.decode(text) == data

    @pytest.mark.parametrize("text", ["AQI", "A===", "-_8=", "AQ@D", "AQID!"])
    def test_decode_rejects_malformed(self, text):
        """Test that malformed text raises instead of being repaired."""
        with pytest.raises(binascii.Error):
            codec.decode(text)

    def test_decode_rejects_non_ascii(self):
        """Test non-ASCII input."""
        with pytest.raises(binascii.Error):
            codec.decode("AQIé")
