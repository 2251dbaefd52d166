"""Diffie-Hellman arithmetic: public parameters, secret exponent and shared key."""

from __future__ import annotations

import secrets

from dhkeyxc.logger import get_logger
from dhkeyxc.params import ConfigParams, DHParams, ExchangeError
from dhkeyxc.primes import vetted_g, vetted_p


def rand_between(lower: int, upper: int) -> int:
    """Return a cryptographically random integer strictly between the bounds.

    Raises ValueError if no integer lies strictly between them.
    """
    span = upper - lower - 1
    if span < 1:
        raise ValueError(f"no integer lies strictly between {lower} and {upper}")
    return lower + 1 + secrets.randbelow(span)


def private_a(dh: DHParams) -> None:
    """Pick the secret exponent ``a`` with ``1 < a < p - 1`` and store it."""
    if dh.p is None or dh.p < 0:
        get_logger().err("Prime p is not initialized.")
        raise ExchangeError("Prime p is not initialized.")
    dh.a = rand_between(1, dh.p - 1)


def public_a(dh: DHParams) -> None:
    """Compute ``A = g^a mod p`` and store it."""
    log = get_logger()
    if any(value is None or value < 0 for value in (dh.p, dh.g, dh.a)):
        log.err("Param p or g or a is missing.")
        raise ExchangeError("Param p or g or a is missing.")
    dh.A = pow(dh.g, dh.a, dh.p)
    log.log(f"Using A={dh.A}")


def dh_key(dh: DHParams) -> None:
    """Compute the shared key ``B^a mod p`` and store it."""
    if any(value is None or value < 0 for value in (dh.p, dh.a, dh.B)):
        get_logger().err("Param p or a or B is missing.")
        raise ExchangeError("Param p or a or B is missing.")
    dh.dh_key = pow(dh.B, dh.a, dh.p)


def select_public_dh_params(config: ConfigParams, dh: DHParams) -> None:
    """Store the vetted prime of ``config.bits`` bits and its generator.

    Raises ExchangeError if no prime of that size is available or the
    selected prime is not exactly that size.
    """
    try:
        prime = vetted_p(config.bits)
    except ValueError as exc:
        raise ExchangeError(str(exc)) from exc
    dh.p = prime
    dh.g = vetted_g()
    if prime.bit_length() != config.bits:
        raise ExchangeError(
            f"selected prime has {prime.bit_length()} bits, expected {config.bits}"
        )