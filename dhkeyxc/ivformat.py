"""Conversion between the integer nonce and the bytes handed to AES-GCM."""

from __future__ import annotations

IV_LENGTH = 12


def form_iv(current_iv: int, iv_len: int = IV_LENGTH) -> bytes:
    """Return ``iv_len`` bytes holding ``current_iv``.

    The big-endian bytes of the number, with no leading zero bytes, are
    placed at the start and the rest is zero-filled.  Raises ValueError if
    the number is negative or needs more than ``iv_len`` bytes.
    """
    if current_iv < 0:
        raise ValueError("IV must not be negative")
    size = max(1, (current_iv.bit_length() + 7) // 8)
    if size > iv_len:
        raise ValueError(f"IV does not fit in {iv_len} bytes")
    return current_iv.to_bytes(size, "big").ljust(iv_len, b"\x00")


def form_int(src: bytes) -> int:
    """Return the number whose big-endian bytes are ``src``."""
    return int.from_bytes(src, "big")