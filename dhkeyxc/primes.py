"""The MODP primes of RFC 3526 and their generator."""

from __future__ import annotations

from functools import lru_cache

GENERATOR = 2

# Each prime is 2^n - 2^(n-64) - 1 + 2^64 * (floor(2^(n-130) * pi) + offset).
_OFFSETS = {
    1536: 741804,
    2048: 124476,
    3072: 1690314,
    4096: 240904,
    6144: 929484,
    8192: 4743158,
}

SUPPORTED_BITS = tuple(sorted(_OFFSETS))

_GUARD_BITS = 64
_MAX_SHIFT = max(SUPPORTED_BITS) - 130


def _arctan_inv(x: int, one: int) -> int:
    """Fixed-point arctan(1/x) scaled by ``one``."""
    total = term = one // x
    x_squared = x * x
    divisor = 1
    sign = -1
    while term:
        term //= x_squared
        divisor += 2
        total += sign * (term // divisor)
        sign = -sign
    return total


@lru_cache(maxsize=1)
def _scaled_pi() -> int:
    """pi scaled by 2^(_MAX_SHIFT + _GUARD_BITS), from Machin's formula."""
    one = 1 << (_MAX_SHIFT + _GUARD_BITS)
    return 16 * _arctan_inv(5, one) - 4 * _arctan_inv(239, one)


def _floor_pi_times_power(shift: int) -> int:
    """floor(2^shift * pi) for shift up to the largest supported size."""
    return _scaled_pi() >> (_GUARD_BITS + _MAX_SHIFT - shift)


@lru_cache(maxsize=None)
def vetted_p(bits: int) -> int:
    """Return the RFC 3526 prime of the given size.

    Raises ValueError unless ``bits`` is one of 1536, 2048, 3072, 4096,
    6144 or 8192.
    """
    try:
        offset = _OFFSETS[bits]
    except KeyError:
        raise ValueError(
            f"no vetted prime of {bits} bits; choose one of {SUPPORTED_BITS}"
        ) from None
    middle = _floor_pi_times_power(bits - 130) + offset
    return (1 << bits) - (1 << (bits - 64)) - 1 + (middle << 64)


def vetted_g() -> int:
    """Return the generator used with every RFC 3526 prime."""
    return GENERATOR