# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
OSC string padding.

OSC strings are NUL-terminated and padded with further NULs so that the
total length is a multiple of 4 bytes. The length is always measured on the
encoded bytes, never on the number of characters.
"""

from typing import Tuple

from .errors import MalformedPacket, TruncatedBuffer


def pad_length(size: int) -> int:
    """
    Return the number of zero bytes needed to align size to 4 bytes.

    Args:
        size: Length of a field in bytes

    Returns:
        Padding length in the range 0-3
    """
    return (4 - size % 4) % 4


def pad_string(value: str, encoding: str = "utf-8", errors: str = "strict") -> bytes:
    """
    Encode a string as an OSC string.

    Args:
        value: String to encode
        encoding: Text encoding (default UTF-8)
        errors: Error handler for str.encode()

    Returns:
        Encoded bytes with terminator and padding

    Raises:
        ValueError: If the string contains a NUL character
    """
    data = value.encode(encoding, errors)
    if b"\x00" in data:
        raise ValueError("OSC strings cannot contain NUL characters")

    # The terminator always takes at least one byte, hence the + 1
    return data + b"\x00" * (1 + pad_length(len(data) + 1))


def read_string(
    data: bytes, offset: int = 0, encoding: str = "utf-8", errors: str = "strict"
) -> Tuple[str, int]:
    """
    Read an OSC string from bytes.

    Args:
        data: Bytes containing the string
        offset: Starting offset in data
        encoding: Text encoding (default UTF-8)
        errors: Error handler for bytes.decode()

    Returns:
        Tuple of (decoded string, offset of the next 4-byte aligned field)

    Raises:
        MalformedPacket: If there is no terminator or the bytes do not decode
        TruncatedBuffer: If the padding runs past the end of data
    """
    end = data.find(b"\x00", offset)
    if end < 0:
        raise MalformedPacket("Missing NUL terminator for string", offset)

    try:
        value = data[offset:end].decode(encoding, errors)
    except UnicodeDecodeError as ex:
        raise MalformedPacket(f"Invalid string data: {ex.reason}", offset) from ex

    size = end - offset + 1
    next_offset = offset + size + pad_length(size)
    if next_offset > len(data):
        raise TruncatedBuffer("string padding", offset, next_offset - offset, len(data) - offset)

    return value, next_offset
