"""Hex encodings and the ``||``-delimited framing of handshake messages."""

from __future__ import annotations

import re
from collections.abc import Iterable

DELIMITER = "||"
_HEX = re.compile(r"[0-9a-fA-F]+")


def itoh(big_int: int) -> str:
    """Return lowercase hex of a number, at least two digits wide."""
    return format(big_int, "02x")


def htoi(h_str: str) -> int:
    """Return the number written in hex by ``h_str``.

    Raises ValueError if the string is empty or not hex.
    """
    if not _HEX.fullmatch(h_str):
        raise ValueError(f"not a hex number: {h_str!r}")
    return int(h_str, 16)


def stoh(data: bytes) -> str:
    """Return the bytes as lowercase hex, two digits per byte."""
    return bytes(data).hex()


def htos(data_hex: str, length: int) -> bytes:
    """Decode the first ``length`` bytes from a string made by :func:`stoh`.

    Raises ValueError if the string is too short or not hex.
    """
    wanted = data_hex[: 2 * length]
    if len(wanted) < 2 * length:
        raise ValueError(f"hex string too short for {length} bytes")
    if length and not _HEX.fullmatch(wanted):
        raise ValueError(f"not a hex string: {wanted!r}")
    return bytes.fromhex(wanted)


def format_message(parts: Iterable[str]) -> str:
    """Join the parts with ``||``."""
    return DELIMITER.join(parts)


def parse_message(formatted: str) -> list[str]:
    """Split a string made by :func:`format_message` back into its parts."""
    return formatted.split(DELIMITER)