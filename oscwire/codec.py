# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
OSC 1.0 packet encoding and decoding.

Wire format:
    Message := String(address) String("," + tags) Argument*
    Bundle  := String("#bundle") Timetag (Int32(size) Element)*

All functions here are pure: they work only on their arguments and may be
called concurrently from any number of threads.
"""

import logging
import numbers
import operator
from typing import Any, Callable, Dict, List, Tuple

from .errors import MalformedPacket, TruncatedBuffer, UnknownArgumentType, UnsupportedTypeTag
from .inference import to_argument
from .model import Argument, MidiMessage, TypeTag
from .options import STRICT, CodecOptions
from .packets import Bundle, Message, Packet
from .padding import pad_string, read_string
from .scalars import (
    decode_blob,
    decode_float32,
    decode_int32,
    decode_midi,
    encode_blob,
    encode_float32,
    encode_int32,
    encode_midi,
)
from .timetag import as_timetag, decode_timetag, encode_timetag
from .utils import hexdump

__all__ = (
    "BUNDLE_MARKER",
    "encode",
    "encode_message",
    "encode_bundle",
    "encode_argument",
    "decode",
    "decode_message",
    "decode_bundle",
)

log = logging.getLogger(__name__)

#: Padded "#bundle" string that starts every bundle
BUNDLE_MARKER = b"#bundle\x00"


# --- Encoding ---------------------------------------------------------------


def encode(packet: Packet, options: CodecOptions = STRICT) -> bytes:
    """
    Encode a message or bundle.

    Args:
        packet: Message or Bundle to encode
        options: Codec options; pass LENIENT to encode arguments of unknown
            type as null instead of failing

    Returns:
        Encoded packet, ready to be sent as a single datagram

    Raises:
        UnknownArgumentType: If packet or one of its arguments cannot be
            encoded (strict mode only for arguments)
        MalformedPacket: If the address or time tag is invalid, or bundles
            are nested deeper than options.max_depth
    """
    return _encode_packet(packet, options, 0)


def encode_message(message: Message, options: CodecOptions = STRICT) -> bytes:
    """Encode a single message."""
    address = message.address
    if not isinstance(address, str):
        raise MalformedPacket(f"Address must be a string, got {type(address).__name__}")
    try:
        chunks = [pad_string(address, options.encoding, options.encoding_errors)]
    except ValueError as ex:
        raise MalformedPacket(f"Invalid address {address!r}: {ex}") from ex

    tags = [","]
    payloads = []
    for arg in message.args:
        tag, payload = encode_argument(arg, options)
        tags.append(tag.value)
        payloads.append(payload)

    chunks.append(pad_string("".join(tags), "ascii"))
    chunks.extend(payloads)
    return b"".join(chunks)


def encode_bundle(bundle: Bundle, options: CodecOptions = STRICT) -> bytes:
    """Encode a bundle and, recursively, all of its elements."""
    return _encode_bundle(bundle, options, 1)


def encode_argument(arg: Any, options: CodecOptions = STRICT) -> Tuple[TypeTag, bytes]:
    """
    Encode a single argument.

    Args:
        arg: Argument instance or native value
        options: Codec options

    Returns:
        Tuple of (type tag, encoded payload)

    Raises:
        UnknownArgumentType: If the argument cannot be encoded and
            options.strict is set
    """
    try:
        return _encode_argument(arg, options)
    except UnknownArgumentType as ex:
        if options.strict:
            raise
        log.warning("Encoding argument %r as null: %s", arg, ex)
        return TypeTag.NULL, b""


def _encode_packet(packet: Any, options: CodecOptions, depth: int) -> bytes:
    if isinstance(packet, Bundle):
        return _encode_bundle(packet, options, depth + 1)
    if isinstance(packet, Message):
        return encode_message(packet, options)
    raise UnknownArgumentType(type(packet).__name__, "not a Message or Bundle")


def _encode_bundle(bundle: Bundle, options: CodecOptions, depth: int) -> bytes:
    if depth > options.max_depth:
        raise MalformedPacket(f"Bundles nested deeper than {options.max_depth} levels")

    try:
        timetag = encode_timetag(as_timetag(bundle.timetag))
    except (TypeError, ValueError) as ex:
        raise MalformedPacket(f"Invalid time tag: {ex}") from ex

    chunks = [BUNDLE_MARKER, timetag]
    for element in bundle.elements:
        data = _encode_packet(element, options, depth)
        chunks.append(encode_int32(len(data)))
        chunks.append(data)

    return b"".join(chunks)


def _encode_argument(arg: Any, options: CodecOptions) -> Tuple[TypeTag, bytes]:
    argument = to_argument(arg)
    tag = TypeTag.parse(argument.type, argument.value)
    try:
        return tag, _ENCODERS[tag](argument.value, options)
    except (TypeError, ValueError) as ex:
        raise UnknownArgumentType(argument.type, str(ex)) from ex


def _encode_int(value: Any, options: CodecOptions) -> bytes:
    return encode_int32(operator.index(value))


def _encode_float(value: Any, options: CodecOptions) -> bytes:
    if not isinstance(value, numbers.Real):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return encode_float32(float(value))


def _encode_string(value: Any, options: CodecOptions) -> bytes:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return pad_string(value, options.encoding, options.encoding_errors)


def _encode_blob(value: Any, options: CodecOptions) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected bytes, got {type(value).__name__}")
    return encode_blob(value)


def _encode_midi(value: Any, options: CodecOptions) -> bytes:
    if isinstance(value, MidiMessage):
        return value.to_bytes()
    return encode_midi(value)


def _encode_nothing(value: Any, options: CodecOptions) -> bytes:
    return b""


_ENCODERS: Dict[TypeTag, Callable[[Any, CodecOptions], bytes]] = {
    TypeTag.INTEGER: _encode_int,
    TypeTag.FLOAT: _encode_float,
    TypeTag.STRING: _encode_string,
    TypeTag.BLOB: _encode_blob,
    TypeTag.TRUE: _encode_nothing,
    TypeTag.FALSE: _encode_nothing,
    TypeTag.NULL: _encode_nothing,
    TypeTag.MIDI: _encode_midi,
}


# --- Decoding ---------------------------------------------------------------


def decode(data: bytes, options: CodecOptions = STRICT) -> Packet:
    """
    Decode a message or bundle.

    Args:
        data: Raw bytes of a single datagram
        options: Codec options

    Returns:
        Decoded Message or Bundle

    Raises:
        MalformedPacket: If the packet is structurally invalid
        TruncatedBuffer: If a field runs past the end of the buffer
        UnsupportedTypeTag: If a message uses a type tag that is not supported
    """
    data = bytes(data)
    try:
        return _decode_packet(data, options, 0)
    except MalformedPacket as ex:
        if log.isEnabledFor(logging.DEBUG):
            log.debug("Failed to decode packet: %s\n%s", ex, hexdump(data[:64]))
        raise


def decode_message(data: bytes, options: CodecOptions = STRICT) -> Message:
    """Decode a buffer that holds a single message."""
    data = bytes(data)
    encoding, errors = options.encoding, options.encoding_errors

    address, offset = read_string(data, 0, encoding, errors)

    tags_offset = offset
    tags, offset = read_string(data, offset, "ascii")
    if not tags.startswith(","):
        raise MalformedPacket("Type tag string must start with ','", tags_offset)

    args: List[Argument] = []
    for char in tags[1:]:
        if char not in _TAG_CHARS:
            raise UnsupportedTypeTag(char, offset)
        tag = TypeTag(char)
        value, offset = _DECODERS[tag](data, offset, options)
        args.append(Argument(tag, value))

    if offset < len(data):
        log.debug("Ignoring %d trailing bytes after message %s", len(data) - offset, address)

    return Message(address, args)


def decode_bundle(data: bytes, options: CodecOptions = STRICT) -> Bundle:
    """Decode a buffer that holds a bundle."""
    data = bytes(data)
    if not data.startswith(BUNDLE_MARKER):
        raise MalformedPacket("Missing #bundle marker", 0)
    return _decode_bundle(data, options, 1)


def _decode_packet(data: bytes, options: CodecOptions, depth: int) -> Packet:
    if not data:
        raise MalformedPacket("Empty packet")
    if data.startswith(BUNDLE_MARKER):
        return _decode_bundle(data, options, depth + 1)
    return decode_message(data, options)


def _decode_bundle(data: bytes, options: CodecOptions, depth: int) -> Bundle:
    if depth > options.max_depth:
        raise MalformedPacket(f"Bundles nested deeper than {options.max_depth} levels", 0)

    timetag, offset = decode_timetag(data, len(BUNDLE_MARKER))

    elements = []
    while offset < len(data):
        size, start = decode_int32(data, offset)
        if size <= 0:
            raise MalformedPacket(f"Invalid bundle element size: {size}", offset)
        if start + size > len(data):
            raise TruncatedBuffer("bundle element", start, size, len(data) - start)

        elements.append(_decode_packet(data[start:start + size], options, depth))
        offset = start + size

    return Bundle(timetag, elements)


def _decode_string(data: bytes, offset: int, options: CodecOptions) -> Tuple[str, int]:
    return read_string(data, offset, options.encoding, options.encoding_errors)


def _decode_midi(data: bytes, offset: int, options: CodecOptions) -> Tuple[MidiMessage, int]:
    raw, offset = decode_midi(data, offset)
    return MidiMessage.from_bytes(raw), offset


_DECODERS: Dict[TypeTag, Callable[[bytes, int, CodecOptions], Tuple[Any, int]]] = {
    TypeTag.INTEGER: lambda data, offset, options: decode_int32(data, offset),
    TypeTag.FLOAT: lambda data, offset, options: decode_float32(data, offset),
    TypeTag.STRING: _decode_string,
    TypeTag.BLOB: lambda data, offset, options: decode_blob(data, offset),
    TypeTag.TRUE: lambda data, offset, options: (True, offset),
    TypeTag.FALSE: lambda data, offset, options: (False, offset),
    TypeTag.NULL: lambda data, offset, options: (None, offset),
    TypeTag.MIDI: _decode_midi,
}

#: Single-character tags accepted in a type tag string
_TAG_CHARS = frozenset(tag.value for tag in TypeTag)
