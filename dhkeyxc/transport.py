"""TCP sockets and the plain or encrypted messages sent over them."""

from __future__ import annotations

import socket

from dhkeyxc.aes import TAG_LENGTH, aes_decrypt, aes_encrypt
from dhkeyxc.formatting import format_message, htos, parse_message, stoh
from dhkeyxc.framing import recv_frame, send_frame
from dhkeyxc.logger import get_logger
from dhkeyxc.params import AESParams, ConfigParams, ExchangeError


def server_address(config: ConfigParams) -> tuple[str, int]:
    """Return the server's IPv4 address and port from the configuration."""
    return config.ip_addr, config.port


def create_socket(config: ConfigParams) -> socket.socket:
    """Open a TCP socket; a server's socket is also bound to its address.

    Raises ExchangeError if a server socket cannot be bound.
    """
    log = get_logger()
    log.log("Creating socket...")
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    if config.server:
        try:
            sock.bind(server_address(config))
        except OSError as exc:
            sock.close()
            log.err("Could not bind socket.")
            raise ExchangeError("Could not bind socket.") from exc
    return sock


def close_socket(sock: socket.socket) -> None:
    """Close the socket."""
    get_logger().log("Closing socket...")
    sock.close()


def init_connection(sock: socket.socket, config: ConfigParams) -> socket.socket:
    """Connect to the other side and return the connected socket.

    A server listens on ``sock`` and returns the accepted client socket; a
    client connects ``sock`` to the server and returns it.  Raises
    ExchangeError on failure.
    """
    log = get_logger()
    if config.server:
        try:
            sock.listen(1)
            log.log("Listening for client.")
            client, _ = sock.accept()
        except OSError as exc:
            raise ExchangeError("Could not accept a client.") from exc
        log.log("Found client.")
        return client

    log.log("Attempting to connect to server.")
    try:
        sock.connect(server_address(config))
    except OSError as exc:
        log.err("Could not connect to server.")
        raise ExchangeError("Could not connect to server.") from exc
    log.log("Connected to server.")
    return sock


def send_message(
    sock: socket.socket, message: str, aes: AESParams | None = None
) -> None:
    """Send a message, encrypted as ``tag||ciphertext`` in hex if ``aes`` is given.

    Without ``aes`` the message is sent as it is.  The nonce is not advanced.
    """
    if aes is not None:
        ciphertext, tag = aes_encrypt(message.encode("utf-8"), aes)
        payload = format_message([stoh(tag), stoh(ciphertext)])
    else:
        payload = message
    send_frame(sock, payload.encode("utf-8"))


def recv_message(sock: socket.socket, aes: AESParams | None = None) -> str:
    """Receive a message, decrypting it with ``aes`` if given.

    Raises ExchangeError if nothing valid arrives or decryption fails.  The
    nonce is not advanced.
    """
    text = recv_frame(sock).decode("utf-8", errors="replace")
    if aes is None:
        return text

    parts = parse_message(text)
    if len(parts) != 2:
        get_logger().err("Message receieved does not appear to be tag||ciphertext.")
        raise ExchangeError("Message received does not appear to be tag||ciphertext.")
    tag_hex, ciphertext_hex = parts
    try:
        tag = htos(tag_hex, TAG_LENGTH)
        ciphertext = htos(ciphertext_hex, len(ciphertext_hex) // 2)
    except ValueError as exc:
        get_logger().err("Message received is not valid hex.")
        raise ExchangeError("Message received is not valid hex.") from exc
    return aes_decrypt(ciphertext, tag, aes).decode("utf-8", errors="replace")