# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
OSC messages and bundles.
"""

from dataclasses import dataclass, field
from typing import Any, List, Sequence, Union

from .inference import coerce_argument
from .model import Argument, MidiMessage
from .timetag import IMMEDIATE, Timetag, as_timetag

__all__ = ("Message", "Bundle", "Packet")


@dataclass
class Message:
    """
    OSC message: an address and an ordered list of arguments.

    Native values passed as arguments are converted to typed Arguments when
    their type can be inferred. Values that cannot be typed are kept as they
    are; encoding then either rejects them or encodes them as null,
    depending on the codec options.

    Example:
        Message("/mixer/fader", [1, 0.5, "master"])
    """
    address: str
    args: List[Any] = field(default_factory=list)

    def __post_init__(self):
        args = self.args
        if args is None:
            args = []
        elif not isinstance(args, (list, tuple)) or isinstance(args, MidiMessage):
            args = [args]
        self.args = []
        for arg in args:
            self.append(arg)

    def append(self, arg: Any) -> None:
        """Append an argument. Lists and tuples append each of their items."""
        if isinstance(arg, (list, tuple)) and not isinstance(arg, MidiMessage):
            for item in arg:
                self.append(item)
        else:
            self.args.append(coerce_argument(arg))

    @property
    def values(self) -> List[Any]:
        """The plain values of the arguments, without type information."""
        return [arg.value if isinstance(arg, Argument) else arg for arg in self.args]


@dataclass
class Bundle:
    """
    OSC bundle: a time tag and an ordered list of messages or bundles.

    The time tag may be given as a Timetag, a Unix timestamp, a datetime, or
    None or 0 for "immediately". A time tag that cannot be converted raises
    TypeError, and an infinite or NaN timestamp raises ValueError.

    Elements may be given as Message or Bundle instances, or as
    ("/address", arg1, arg2, ...) shorthand.

    Example:
        Bundle(elements=[("/one", 1), Message("/two", [2])])
    """
    timetag: Union[Timetag, float, None] = IMMEDIATE
    elements: List["Packet"] = field(default_factory=list)

    def __post_init__(self):
        self.timetag = as_timetag(self.timetag)
        elements = self.elements
        self.elements = []
        for element in elements:
            self.append(element)

    def append(self, element: Union["Packet", Sequence[Any]]) -> None:
        """
        Append a message or a nested bundle.

        Raises:
            TypeError: If element is neither a packet nor message shorthand
        """
        self.elements.append(_to_element(element))

    @property
    def is_immediate(self) -> bool:
        return self.timetag.is_immediate


#: Anything the codec can encode or decode
Packet = Union[Message, Bundle]


def _to_element(element: Any) -> Packet:
    """Convert bundle element shorthand to a Message."""
    if isinstance(element, (Message, Bundle)):
        return element
    if isinstance(element, (list, tuple)) and element and isinstance(element[0], str):
        return Message(element[0], list(element[1:]))
    raise TypeError(f"Bundle elements must be messages or bundles, got {element!r}")
