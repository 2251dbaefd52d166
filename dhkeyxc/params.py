"""Configuration and key-material containers shared across the exchange."""

from __future__ import annotations

from dataclasses import dataclass


class ExchangeError(Exception):
    """Raised when a step of the key exchange or messaging fails."""


@dataclass
class ConfigParams:
    """Settings taken from the command line.

    ``debug`` turns on logging to ``log_path``; ``quiet`` hides warnings and
    status messages; ``verbose`` prints every message.  ``bits`` is the size
    of the prime p (1536, 2048, 3072, 4096, 6144 or 8192).
    """

    debug: bool = False
    quiet: bool = False
    verbose: bool = False
    log_path: str = "log"

    server: bool = False
    bits: int = 2048
    ip_addr: str = "127.0.0.1"
    port: int = 65000


@dataclass
class DHParams:
    """Values of one side of a Diffie-Hellman agreement.

    ``p`` and ``g`` are public, ``a`` is the secret exponent, ``A`` is
    ``g^a mod p``, ``B`` is the other side's public value and ``dh_key`` is
    ``B^a mod p``.  ``None`` marks a value that is not yet known.
    """

    p: int | None = None
    g: int | None = None
    a: int | None = None
    A: int | None = None
    B: int | None = None
    dh_key: int | None = None


@dataclass
class AESParams:
    """AES-256-GCM key and running nonce derived from the shared key."""

    aes_key: bytes = bytes(32)
    aes_iv: int | None = None