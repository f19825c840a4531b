# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for codec options."""

import dataclasses

import pytest
from oscwire.codec import decode, encode
from oscwire.errors import MalformedPacket
from oscwire.options import LENIENT, STRICT, CodecOptions
from oscwire.packets import Message


class TestCodecOptions:
    """Tests for CodecOptions dataclass."""

    def test_defaults(self):
        """Defaults are strict UTF-8."""
        options = CodecOptions()
        assert options.strict is True
        assert options.max_depth == 32
        assert options.encoding == "utf-8"
        assert options.encoding_errors == "strict"

    def test_presets(self):
        """STRICT and LENIENT differ only in strictness."""
        assert STRICT == CodecOptions()
        assert LENIENT.strict is False
        assert LENIENT.replace(strict=True) == STRICT

    def test_replace(self):
        """replace returns a modified copy."""
        options = STRICT.replace(max_depth=4)
        assert options.max_depth == 4
        assert STRICT.max_depth == 32

    def test_frozen(self):
        """Options are immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            STRICT.strict = False

    def test_invalid_depth(self):
        """max_depth must be positive."""
        with pytest.raises(ValueError, match="max_depth"):
            CodecOptions(max_depth=0)


class TestEncodingOptions:
    """Tests for text encoding options."""

    def test_latin1_roundtrip(self):
        """Other encodings apply to addresses and strings."""
        options = CodecOptions(encoding="latin-1")
        msg = Message("/\xe9", ["\xe9t\xe9"])
        data = encode(msg, options)
        assert data.startswith(b"/\xe9\x00\x00")
        assert decode(data, options) == msg

    def test_latin1_rejected_as_utf8(self):
        """Latin-1 bytes are not valid UTF-8."""
        data = encode(Message("/\xe9"), CodecOptions(encoding="latin-1"))
        with pytest.raises(MalformedPacket):
            decode(data)

    def test_replace_errors(self):
        """Undecodable bytes can be replaced instead of rejected."""
        options = CodecOptions(encoding_errors="replace")
        msg = decode(b"/\xff\x00\x00,\x00\x00\x00", options)
        assert msg.address == "/\ufffd"

    def test_type_tags_always_ascii(self):
        """The text encoding does not apply to the type tag string."""
        options = CodecOptions(encoding="cp500")
        msg = Message("/a", ["x"])
        data = encode(msg, options)
        assert data[4:8] == b",s\x00\x00"
        assert decode(data, options) == msg

    def test_non_ascii_type_tags(self):
        """Type tag bytes outside ASCII are malformed in any encoding."""
        with pytest.raises(MalformedPacket, match="Invalid string data"):
            decode(b"/a\x00\x00,\xe9\x00\x00", CodecOptions(encoding="latin-1"))
