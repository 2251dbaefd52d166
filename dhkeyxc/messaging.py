"""Encrypted messages, refused when the AES parameters are not set up."""

from __future__ import annotations

import socket

from dhkeyxc.logger import get_logger
from dhkeyxc.params import AESParams, ExchangeError
from dhkeyxc.transport import recv_message, send_message


def cannot_encrypt(aes: AESParams) -> bool:
    """Return True if the key is all zeros or the nonce is unset or negative."""
    if not any(aes.aes_key):
        return True
    return aes.aes_iv is None or aes.aes_iv < 0


def send_encrypted_message(sock: socket.socket, message: str, aes: AESParams) -> None:
    """Encrypt and send a message.  The nonce is not advanced.

    Raises ExchangeError if the AES parameters are not initialised.
    """
    if cannot_encrypt(aes):
        text = "AES parameters were not initialized properly. Cannot encrypt."
        get_logger().err(text)
        raise ExchangeError(text)
    send_message(sock, message, aes)


def recv_encrypted_message(sock: socket.socket, aes: AESParams) -> str:
    """Receive and decrypt a message.  The nonce is not advanced.

    Raises ExchangeError if the AES parameters are not initialised or the
    message cannot be received or decrypted.
    """
    if cannot_encrypt(aes):
        text = "AES parameters were not initialized properly. Cannot decrypt."
        get_logger().err(text)
        raise ExchangeError(text)
    return recv_message(sock, aes)