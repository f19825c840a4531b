# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
OSC argument types.

This module defines the supported type tags and the typed argument wrapper
that messages are made of.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple, Optional, Union

from .errors import UnknownArgumentType

__all__ = ("TypeTag", "Argument", "MidiMessage")


class TypeTag(str, Enum):
    """Type tags understood by the codec."""
    INTEGER = "i"
    FLOAT = "f"
    STRING = "s"
    BLOB = "b"
    TRUE = "T"
    FALSE = "F"
    NULL = "N"
    MIDI = "m"

    def __str__(self) -> str:
        return self.value

    @property
    def has_payload(self) -> bool:
        """Whether arguments of this type carry bytes after the type tags."""
        return self not in (TypeTag.TRUE, TypeTag.FALSE, TypeTag.NULL)

    @classmethod
    def lookup(cls, name: Any, value: Any = None) -> Optional["TypeTag"]:
        """
        Resolve a type tag or one of its aliases.

        Args:
            name: Single-letter tag or long-form name (e.g. "i" or "integer")
            value: Argument value; only consulted for the "boolean" alias

        Returns:
            The matching TypeTag, or None if the name is not recognized
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            return None

        tag = _ALIASES.get(name)
        if tag is None and len(name) > 1:
            key = name.lower()
            if key in _BOOLEAN_ALIASES:
                return cls.TRUE if value else cls.FALSE
            tag = _ALIASES.get(key)
        return tag

    @classmethod
    def parse(cls, name: Any, value: Any = None) -> "TypeTag":
        """
        Like lookup(), but raises for names that are not recognized.

        Raises:
            UnknownArgumentType: If name is not a supported tag or alias
        """
        tag = cls.lookup(name, value)
        if tag is None:
            raise UnknownArgumentType(name)
        return tag


_ALIASES = {
    "i": TypeTag.INTEGER,
    "integer": TypeTag.INTEGER,
    "int": TypeTag.INTEGER,
    "int32": TypeTag.INTEGER,
    "f": TypeTag.FLOAT,
    "float": TypeTag.FLOAT,
    "float32": TypeTag.FLOAT,
    # OSC 1.0 has no double; doubles are sent with single precision
    "d": TypeTag.FLOAT,
    "double": TypeTag.FLOAT,
    "s": TypeTag.STRING,
    "string": TypeTag.STRING,
    "str": TypeTag.STRING,
    "b": TypeTag.BLOB,
    "blob": TypeTag.BLOB,
    "bytes": TypeTag.BLOB,
    "T": TypeTag.TRUE,
    "true": TypeTag.TRUE,
    "F": TypeTag.FALSE,
    "false": TypeTag.FALSE,
    "N": TypeTag.NULL,
    "null": TypeTag.NULL,
    "nil": TypeTag.NULL,
    "none": TypeTag.NULL,
    "m": TypeTag.MIDI,
    "midi": TypeTag.MIDI,
}

_BOOLEAN_ALIASES = frozenset(("boolean", "bool"))


class MidiMessage(NamedTuple):
    """4-byte MIDI message carried by the 'm' type."""
    port: int = 0
    status: int = 0
    data1: int = 0
    data2: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "MidiMessage":
        """
        Create a MIDI message from its 4-byte wire form.

        Raises:
            ValueError: If data is not exactly 4 bytes long
        """
        if len(data) != 4:
            raise ValueError(f"MIDI message must be exactly 4 bytes, got {len(data)}")
        return cls(*bytes(data))

    def to_bytes(self) -> bytes:
        return bytes(self)


@dataclass(frozen=True)
class Argument:
    """
    A single OSC argument with an explicit type.

    Recognized aliases of the type are normalized to a TypeTag on
    construction. Unrecognized types are kept as given; the encoder decides
    whether to reject them or encode them as null.
    """
    type: Union[TypeTag, str]
    value: Any = None

    def __post_init__(self):
        tag = TypeTag.lookup(self.type, self.value)
        if tag is None:
            return

        value = self.value
        if tag is TypeTag.TRUE:
            value = True
        elif tag is TypeTag.FALSE:
            value = False
        elif tag is TypeTag.NULL:
            value = None
        elif tag is TypeTag.BLOB and isinstance(value, (bytearray, memoryview)):
            value = bytes(value)
        elif tag is TypeTag.MIDI:
            value = _to_midi(value)

        object.__setattr__(self, "type", tag)
        object.__setattr__(self, "value", value)

    @property
    def tag(self) -> Optional[TypeTag]:
        """The normalized type tag, or None if the type is not supported."""
        return self.type if isinstance(self.type, TypeTag) else None


def _to_midi(value: Any) -> Any:
    """Normalize 4-byte sequences to MidiMessage; leave anything else alone."""
    if isinstance(value, MidiMessage):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)) and len(value) == 4:
        return MidiMessage.from_bytes(value)
    if (
        isinstance(value, (tuple, list))
        and len(value) == 4
        and all(isinstance(x, int) and 0 <= x <= 255 for x in value)
    ):
        return MidiMessage(*value)
    return value
