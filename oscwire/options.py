# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Codec configuration.

Every encode/decode call takes a CodecOptions value explicitly; there is no
module-level state that changes how the codec behaves.
"""

from dataclasses import dataclass, replace

__all__ = ("CodecOptions", "STRICT", "LENIENT")


@dataclass(frozen=True)
class CodecOptions:
    """Options controlling a single encode or decode call."""

    #: Raise UnknownArgumentType for arguments that cannot be serialized.
    #: When False, such arguments are encoded as null ('N') instead.
    strict: bool = True

    #: Maximum nesting level of bundles accepted on encode and decode
    max_depth: int = 32

    #: Text encoding used for addresses and string arguments
    encoding: str = "utf-8"

    #: Error handler passed to str.encode() / bytes.decode()
    encoding_errors: str = "strict"

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")

    def replace(self, **changes) -> "CodecOptions":
        """Return a copy of these options with the given fields changed."""
        return replace(self, **changes)


STRICT = CodecOptions()
LENIENT = CodecOptions(strict=False)
