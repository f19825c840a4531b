# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Fixed-width and length-prefixed OSC argument encodings.

All numbers are big-endian. Decoders take the buffer and an offset and
return a tuple of (value, new offset), like the string reader.
"""

import struct
from typing import Sequence, Tuple, Union

from .errors import MalformedPacket, TruncatedBuffer
from .padding import pad_length

_INT32 = struct.Struct(">i")
_FLOAT32 = struct.Struct(">f")

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1


def _require(data: bytes, offset: int, size: int, what: str) -> None:
    """Raise TruncatedBuffer unless size bytes are available at offset."""
    if offset + size > len(data):
        raise TruncatedBuffer(what, offset, size, max(len(data) - offset, 0))


def encode_int32(value: int) -> bytes:
    """
    Encode a signed 32-bit integer.

    Raises:
        ValueError: If value does not fit in 32 bits
    """
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f"Integer out of int32 range: {value}")
    return _INT32.pack(value)


def decode_int32(data: bytes, offset: int = 0) -> Tuple[int, int]:
    _require(data, offset, 4, "int32")
    return _INT32.unpack_from(data, offset)[0], offset + 4


def encode_float32(value: float) -> bytes:
    """
    Encode a single precision float.

    Python floats are doubles; the value is rounded to single precision.

    Raises:
        ValueError: If value is finite but too large for a float32
    """
    try:
        return _FLOAT32.pack(value)
    except OverflowError as ex:
        raise ValueError(f"Float out of float32 range: {value}") from ex


def decode_float32(data: bytes, offset: int = 0) -> Tuple[float, int]:
    _require(data, offset, 4, "float32")
    return _FLOAT32.unpack_from(data, offset)[0], offset + 4


def encode_blob(value: bytes) -> bytes:
    """
    Encode a blob: length prefix, raw bytes, zero padding to 4 bytes.

    Args:
        value: Raw bytes (bytes, bytearray or memoryview)

    Returns:
        Framed blob
    """
    value = bytes(value)
    return encode_int32(len(value)) + value + b"\x00" * pad_length(len(value))


def decode_blob(data: bytes, offset: int = 0) -> Tuple[bytes, int]:
    """
    Decode a blob.

    Raises:
        MalformedPacket: If the length prefix is negative
        TruncatedBuffer: If the blob or its padding runs past the buffer end
    """
    length, start = decode_int32(data, offset)
    if length < 0:
        raise MalformedPacket(f"Invalid blob length: {length}", offset)

    _require(data, start, length, "blob")
    end = start + length
    _require(data, end, pad_length(length), "blob padding")

    return bytes(data[start:end]), end + pad_length(length)


def encode_midi(value: Union[bytes, Sequence[int]]) -> bytes:
    """
    Encode a MIDI message (port id, status byte, data1, data2).

    Raises:
        ValueError: If value is not exactly 4 bytes long
    """
    if isinstance(value, (int, str)):
        raise ValueError(f"MIDI message must be 4 bytes, got {type(value).__name__}")
    try:
        raw = bytes(value)
    except (TypeError, ValueError) as ex:
        raise ValueError(f"MIDI message must be 4 bytes: {ex}") from ex
    if len(raw) != 4:
        raise ValueError(f"MIDI message must be exactly 4 bytes, got {len(raw)}")
    return raw


def decode_midi(data: bytes, offset: int = 0) -> Tuple[bytes, int]:
    _require(data, offset, 4, "MIDI message")
    return bytes(data[offset:offset + 4]), offset + 4
