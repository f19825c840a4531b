# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
OSC time tags.

A time tag is a 64-bit fixed point number: 32 bits of seconds since
1900-01-01 00:00 UTC (the NTP epoch) followed by 32 bits of fractional
seconds. The pair (0, 1) is reserved and means "execute immediately".

Timetag keeps the raw wire pair so that the immediate marker and a genuine
zero time tag stay distinguishable after decoding. Conversions to and from
Python time values use the Unix epoch.
"""

import math
import numbers
import struct
import time
from datetime import datetime, timezone
from typing import NamedTuple, Optional, Tuple, Union

from .errors import TruncatedBuffer

__all__ = (
    "Timetag",
    "IMMEDIATE",
    "NTP_UNIX_OFFSET",
    "as_timetag",
    "encode_timetag",
    "decode_timetag",
)

#: Seconds between 1900-01-01 (NTP epoch) and 1970-01-01 (Unix epoch)
NTP_UNIX_OFFSET = 2208988800

_FRACTION_SCALE = 1 << 32
_UINT32_MAX = (1 << 32) - 1

_TIMETAG = struct.Struct(">II")


class Timetag(NamedTuple):
    """Raw OSC time tag as a (seconds, fraction) pair."""

    #: Whole seconds since 1900-01-01 00:00 UTC
    seconds: int

    #: Fractional part of the second, in units of 2**-32 seconds
    fraction: int

    @classmethod
    def from_unix(cls, timestamp: float) -> "Timetag":
        """
        Create a time tag from a Unix timestamp in seconds.

        Raises:
            ValueError: If timestamp is infinite or NaN
        """
        if not math.isfinite(timestamp):
            raise ValueError(f"Time tag must be a finite number, got {timestamp!r}")
        whole = math.floor(timestamp)
        fraction = math.floor((timestamp - whole) * _FRACTION_SCALE)
        return cls(int(whole) + NTP_UNIX_OFFSET, int(fraction))

    @classmethod
    def from_datetime(cls, value: datetime) -> "Timetag":
        """Create a time tag from a datetime.

        Naive datetimes are interpreted as local time, like
        ``datetime.timestamp()`` does.
        """
        return cls.from_unix(value.timestamp())

    @classmethod
    def now(cls) -> "Timetag":
        """Time tag for the current system time."""
        return cls.from_unix(time.time())

    @property
    def is_immediate(self) -> bool:
        return self.seconds == 0 and self.fraction == 1

    def to_unix(self) -> float:
        """Convert the time tag to a Unix timestamp in seconds.

        The immediate marker has no meaningful wall-clock time; check
        ``is_immediate`` first.
        """
        return self.seconds - NTP_UNIX_OFFSET + self.fraction / _FRACTION_SCALE

    def to_datetime(self, tz: Optional[timezone] = timezone.utc) -> datetime:
        return datetime.fromtimestamp(self.to_unix(), tz)

    def __str__(self) -> str:
        if self.is_immediate:
            return "immediate"
        return f"{self.seconds}.{self.fraction:08x}"


#: The time tag meaning "execute immediately"
IMMEDIATE = Timetag(0, 1)


def as_timetag(value: Union[Timetag, Tuple[int, int], float, datetime, None]) -> Timetag:
    """
    Convert the accepted representations of a bundle time to a Timetag.

    Args:
        value: None or 0 (immediately), a Timetag or (seconds, fraction)
            pair, a Unix timestamp, or a datetime

    Raises:
        TypeError: If value is none of the above
        ValueError: If value is an infinite or NaN timestamp
    """
    if value is None:
        return IMMEDIATE
    if isinstance(value, Timetag):
        return value
    if isinstance(value, tuple) and len(value) == 2:
        return Timetag(*value)
    if isinstance(value, datetime):
        return Timetag.from_datetime(value)
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        if value == 0:
            return IMMEDIATE
        return Timetag.from_unix(value)
    raise TypeError(f"Cannot use {value!r} as a time tag")


def encode_timetag(value: Timetag) -> bytes:
    """
    Encode a time tag into 8 bytes.

    Raises:
        ValueError: If either half does not fit in an unsigned 32-bit integer
    """
    seconds, fraction = value
    if not (0 <= seconds <= _UINT32_MAX and 0 <= fraction <= _UINT32_MAX):
        raise ValueError(f"Time tag out of range: {seconds}, {fraction}")
    return _TIMETAG.pack(seconds, fraction)


def decode_timetag(data: bytes, offset: int = 0) -> Tuple[Timetag, int]:
    """
    Decode a time tag from 8 bytes.

    Returns:
        Tuple of (time tag, new offset). The immediate pair always decodes
        to the IMMEDIATE constant.
    """
    if offset + 8 > len(data):
        raise TruncatedBuffer("time tag", offset, 8, max(len(data) - offset, 0))

    seconds, fraction = _TIMETAG.unpack_from(data, offset)
    value = Timetag(seconds, fraction)
    if value.is_immediate:
        value = IMMEDIATE

    return value, offset + 8
