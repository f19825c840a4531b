# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
oscwire - Open Sound Control 1.0 encoder/decoder.

This package converts OSC messages and bundles to and from their binary
wire format. It does not open sockets; hand it the bytes of a received
datagram and send the bytes it produces.

Example usage:
    from oscwire import Bundle, Message, decode, encode

    data = encode(Message("/synth/freq", [440, 0.5, "sine"]))
    packet = decode(data)
    print(packet.address, packet.values)

    # Bundles carry a time tag and nest freely
    data = encode(Bundle(elements=[("/a", 1), ("/b", 2)]))

    # Encode arguments of unknown type as null instead of failing
    from oscwire import LENIENT
    data = encode(Message("/x", [object()]), LENIENT)
"""

from .codec import (
    BUNDLE_MARKER,
    decode,
    decode_bundle,
    decode_message,
    encode,
    encode_argument,
    encode_bundle,
    encode_message,
)
from .errors import (
    MalformedPacket,
    OSCError,
    TruncatedBuffer,
    UnknownArgumentType,
    UnsupportedTypeTag,
)
from .inference import coerce_argument, infer_tag, to_argument
from .model import Argument, MidiMessage, TypeTag
from .options import LENIENT, STRICT, CodecOptions
from .packets import Bundle, Message, Packet
from .padding import pad_length, pad_string, read_string
from .timetag import IMMEDIATE, NTP_UNIX_OFFSET, Timetag
from .utils import hexdump

__version__ = "0.1.0"

__all__ = [
    # Codec
    "encode",
    "encode_message",
    "encode_bundle",
    "encode_argument",
    "decode",
    "decode_message",
    "decode_bundle",
    "BUNDLE_MARKER",
    # Options
    "CodecOptions",
    "STRICT",
    "LENIENT",
    # Values
    "Message",
    "Bundle",
    "Packet",
    "Argument",
    "TypeTag",
    "MidiMessage",
    "Timetag",
    "IMMEDIATE",
    "NTP_UNIX_OFFSET",
    # Type inference
    "infer_tag",
    "to_argument",
    "coerce_argument",
    # Padding
    "pad_length",
    "pad_string",
    "read_string",
    # Errors
    "OSCError",
    "MalformedPacket",
    "TruncatedBuffer",
    "UnsupportedTypeTag",
    "UnknownArgumentType",
    # Debugging
    "hexdump",
]
