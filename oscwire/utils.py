# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Debugging helpers."""


def hexdump(data: bytes, width: int = 16) -> str:
    """
    Format bytes as hex, grouped by 4 so that OSC fields line up.

    Args:
        data: Bytes to format
        width: Number of bytes per line (should be a multiple of 4)

    Returns:
        Multi-line string: offset, hex codes, printable characters
    """
    lines = []
    for start in range(0, len(data), width):
        chunk = data[start:start + width]
        groups = [chunk[i:i + 4].hex() for i in range(0, len(chunk), 4)]
        text = "".join(chr(b) if 32 <= b <= 126 else "." for b in chunk)
        hex_width = width * 2 + width // 4 - 1
        lines.append(f"{start:04x}: {' '.join(groups):<{hex_width}}  {text}")
    return "\n".join(lines)
