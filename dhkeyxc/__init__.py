"""Diffie-Hellman key exchange and an AES-256-GCM encrypted chat over TCP."""

__version__ = "0.1.0"