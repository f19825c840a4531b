# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Type inference for native Python values.

Maps plain Python values to OSC type tags so that callers can build
messages without wrapping every value in an Argument. Inference is kept
separate from serialization: nothing here produces bytes.
"""

import numbers
from typing import Any, Optional

from .errors import UnknownArgumentType
from .model import Argument, MidiMessage, TypeTag

__all__ = ("infer_tag", "to_argument", "coerce_argument")


def infer_tag(value: Any) -> Optional[TypeTag]:
    """
    Infer the OSC type tag of a native value.

    Args:
        value: Python value

    Returns:
        The inferred TypeTag, or None if the value has no OSC equivalent.
        None itself is not inferred as null; use Argument("N") for that.
    """
    # bool is a subclass of int, so it has to come first
    if isinstance(value, bool):
        return TypeTag.TRUE if value else TypeTag.FALSE
    if isinstance(value, numbers.Integral):
        return TypeTag.INTEGER
    if isinstance(value, numbers.Real):
        return TypeTag.FLOAT
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, (bytes, bytearray, memoryview)):
        return TypeTag.BLOB
    if isinstance(value, MidiMessage):
        return TypeTag.MIDI
    return None


def to_argument(value: Any) -> Argument:
    """
    Convert a value to a typed Argument.

    Argument instances are returned as they are; other values go through
    infer_tag().

    Raises:
        UnknownArgumentType: If the type of the value cannot be inferred
    """
    if isinstance(value, Argument):
        return value

    tag = infer_tag(value)
    if tag is None:
        raise UnknownArgumentType(type(value).__name__)

    if tag is TypeTag.INTEGER:
        value = int(value)
    elif tag is TypeTag.FLOAT:
        value = float(value)
    return Argument(tag, value)


def coerce_argument(value: Any) -> Any:
    """
    Like to_argument(), but returns values that cannot be typed unchanged.

    Used when building messages, so that the decision about untyped values
    is made at encoding time.
    """
    if isinstance(value, Argument) or infer_tag(value) is None:
        return value
    return to_argument(value)
