# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Exceptions raised by the OSC codec.

All of them derive from OSCError, which is itself a ValueError, so callers
that only care about "bad input" can catch ValueError.
"""

from typing import Optional


class OSCError(ValueError):
    """Base exception for OSC codec errors."""
    pass


class MalformedPacket(OSCError):
    """Structural violation in an OSC packet."""

    def __init__(self, message: str, offset: Optional[int] = None):
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)
        self.offset = offset


class TruncatedBuffer(MalformedPacket):
    """A declared length or fixed-width field runs past the end of the buffer."""

    def __init__(self, what: str, offset: int, needed: int, available: int):
        super().__init__(
            f"Not enough bytes for {what}: need {needed}, have {available}",
            offset,
        )
        self.needed = needed
        self.available = available


class UnsupportedTypeTag(MalformedPacket):
    """Decoder found a type tag character it does not understand."""

    def __init__(self, tag: str, offset: Optional[int] = None):
        super().__init__(f"Unsupported type tag: {tag!r}", offset)
        self.tag = tag


class UnknownArgumentType(OSCError):
    """Encoder was given a value or explicit type it cannot serialize."""

    def __init__(self, type_, reason: Optional[str] = None):
        message = f"Unknown argument type: {type_!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.type = type_
