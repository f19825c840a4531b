# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Shared fixtures for codec tests."""

import pytest

from oscwire.model import Argument, MidiMessage
from oscwire.packets import Bundle, Message
from oscwire.timetag import Timetag


def build_nested_bundle(depth: int) -> Bundle:
    """Build depth bundles nested inside each other around one message."""
    packet = Bundle(elements=[Message("/leaf", [depth])])
    for _ in range(depth - 1):
        packet = Bundle(elements=[packet])
    return packet


@pytest.fixture
def nested_bundle():
    """Factory for bundles nested to a given depth."""
    return build_nested_bundle


@pytest.fixture
def all_types_message():
    """Message using every supported argument type."""
    return Message(
        "/all/types",
        [
            123,
            -1,
            0.5,
            "",
            "hello",
            "héllo wörld",
            "\U0001F600",
            b"",
            b"\x01\x02\x03",
            b"\x01\x02\x03\x04",
            True,
            False,
            Argument("N"),
            Argument("midi", b"\x00\x90\x3c\x7f"),
            MidiMessage(1, 0xB0, 7, 100),
        ],
    )


@pytest.fixture
def three_level_bundle():
    """Bundle containing a bundle containing a message, plus siblings."""
    inner = Bundle(
        timetag=Timetag(3900000000, 0x80000000),
        elements=[Message("/deep", [1, "x"]), Message("/deep/2", [2.5])],
    )
    return Bundle(
        timetag=Timetag(3900000000, 0),
        elements=[Message("/first", [True]), inner, Message("/last", [])],
    )
