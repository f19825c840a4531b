# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for OSC time tags."""

from datetime import datetime, timezone

import pytest
from oscwire.errors import TruncatedBuffer
from oscwire.timetag import (
    IMMEDIATE,
    NTP_UNIX_OFFSET,
    Timetag,
    as_timetag,
    decode_timetag,
    encode_timetag,
)


class TestTimetag:
    """Tests for the Timetag value."""

    def test_immediate(self):
        """The (0, 1) pair is the immediate marker."""
        assert IMMEDIATE == Timetag(0, 1)
        assert IMMEDIATE.is_immediate is True
        assert str(IMMEDIATE) == "immediate"

    def test_zero_is_not_immediate(self):
        """A genuine zero time tag is distinct from immediate."""
        zero = Timetag(0, 0)
        assert zero.is_immediate is False
        assert zero != IMMEDIATE

    def test_from_unix_epoch(self):
        """Unix epoch maps to the NTP offset."""
        assert Timetag.from_unix(0) == Timetag(NTP_UNIX_OFFSET, 0)

    def test_from_unix_fraction(self):
        """Fractional seconds become a 32-bit fixed point fraction."""
        assert Timetag.from_unix(1.5) == Timetag(NTP_UNIX_OFFSET + 1, 0x80000000)
        assert Timetag.from_unix(10.25) == Timetag(NTP_UNIX_OFFSET + 10, 0x40000000)

    def test_fraction_is_floored(self):
        """The fraction is floor(frac * 2**32)."""
        tag = Timetag.from_unix(0.1)
        assert tag.fraction == 429496729

    def test_to_unix(self):
        """Conversion back to Unix time uses the same offset."""
        assert Timetag(NTP_UNIX_OFFSET + 1, 0x80000000).to_unix() == 1.5
        assert Timetag.from_unix(1700000000.25).to_unix() == 1700000000.25

    def test_datetime_roundtrip(self):
        """Datetimes convert both ways."""
        moment = datetime(2024, 5, 17, 12, 30, 15, 500000, tzinfo=timezone.utc)
        tag = Timetag.from_datetime(moment)
        assert tag.to_datetime() == moment

    def test_epoch_datetime(self):
        """Unix epoch as a datetime."""
        tag = Timetag.from_datetime(datetime(1970, 1, 1, tzinfo=timezone.utc))
        assert tag == Timetag(NTP_UNIX_OFFSET, 0)

    def test_from_unix_non_finite(self):
        """Infinite and NaN timestamps are rejected."""
        with pytest.raises(ValueError, match="finite"):
            Timetag.from_unix(float("inf"))
        with pytest.raises(ValueError, match="finite"):
            Timetag.from_unix(float("nan"))

    def test_now(self):
        """now() returns a time after the Unix epoch."""
        assert Timetag.now().seconds > NTP_UNIX_OFFSET


class TestAsTimetag:
    """Tests for as_timetag conversion."""

    def test_none_is_immediate(self):
        """None means immediately."""
        assert as_timetag(None) is IMMEDIATE

    def test_timetag_passthrough(self):
        """Timetags are returned unchanged."""
        tag = Timetag(1, 2)
        assert as_timetag(tag) is tag

    def test_pair(self):
        """Plain (seconds, fraction) pairs are accepted."""
        assert as_timetag((5, 6)) == Timetag(5, 6)

    def test_number(self):
        """Numbers are Unix timestamps."""
        assert as_timetag(2.5) == Timetag(NTP_UNIX_OFFSET + 2, 0x80000000)

    def test_zero_is_immediate(self):
        """Numeric zero means immediately, not the Unix epoch."""
        assert as_timetag(0) is IMMEDIATE
        assert as_timetag(0.0) is IMMEDIATE
        assert Timetag.from_unix(0) == Timetag(NTP_UNIX_OFFSET, 0)

    def test_rejects_non_finite(self):
        """Infinite and NaN timestamps are not time tags."""
        for value in (float("inf"), float("-inf"), float("nan")):
            with pytest.raises(ValueError, match="finite"):
                as_timetag(value)

    def test_rejects_other_types(self):
        """Strings and booleans are not time tags."""
        with pytest.raises(TypeError):
            as_timetag("now")
        with pytest.raises(TypeError):
            as_timetag(True)


class TestTimetagCodec:
    """Tests for time tag encoding and decoding."""

    def test_encode_immediate(self):
        """Immediate encodes as seven zero bytes and a one."""
        assert encode_timetag(IMMEDIATE) == b"\x00\x00\x00\x00\x00\x00\x00\x01"

    def test_encode_zero(self):
        """Zero encodes as eight zero bytes."""
        assert encode_timetag(Timetag(0, 0)) == b"\x00" * 8

    def test_encode_big_endian(self):
        """Both halves are big-endian u32."""
        assert encode_timetag(Timetag(0x01020304, 0x05060708)) == bytes(range(1, 9))

    def test_encode_out_of_range(self):
        """Halves must fit in 32 bits."""
        with pytest.raises(ValueError, match="out of range"):
            encode_timetag(Timetag(1 << 32, 0))
        with pytest.raises(ValueError, match="out of range"):
            encode_timetag(Timetag(0, -1))

    def test_decode_immediate(self):
        """Immediate always decodes to the IMMEDIATE marker."""
        tag, offset = decode_timetag(b"\x00\x00\x00\x00\x00\x00\x00\x01")
        assert tag is IMMEDIATE
        assert offset == 8

    def test_decode_zero(self):
        """Zero decodes to a non-immediate tag."""
        tag, _ = decode_timetag(b"\x00" * 8)
        assert tag == Timetag(0, 0)
        assert not tag.is_immediate

    def test_decode_with_offset(self):
        """Decoding honors the offset."""
        data = b"\xff" * 4 + encode_timetag(Timetag(7, 9))
        assert decode_timetag(data, 4) == (Timetag(7, 9), 12)

    def test_decode_truncated(self):
        """Fewer than 8 bytes is a truncated buffer."""
        with pytest.raises(TruncatedBuffer, match="time tag"):
            decode_timetag(b"\x00" * 7)
