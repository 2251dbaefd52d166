"""The conversation: connect, agree on a key, then exchange encrypted messages."""

from __future__ import annotations

import re
import socket
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from dhkeyxc.handshake import (
    accept_new_client,
    client_handshake,
    client_teardown,
    connect_to_server,
    do_keygen,
    new_socket,
    server_handshake,
    server_teardown,
)
from dhkeyxc.logger import get_logger
from dhkeyxc.messaging import recv_encrypted_message, send_encrypted_message
from dhkeyxc.params import AESParams, ConfigParams, ExchangeError

_PRINTABLE = re.compile(r"[ -~]+")
PROMPT = ">> "
INPUT_HINT = "Please only provide printable ASCII chars (32-126)."


@contextmanager
def _reported(message: str) -> Iterator[None]:
    """Log ``message`` as an error if the block fails, then re-raise."""
    try:
        yield
    except ExchangeError:
        get_logger().err(message)
        raise


def get_input(stdin: TextIO | None = None, stdout: TextIO | None = None) -> str:
    """Prompt until a line of printable ASCII is entered and return it.

    Raises EOFError if the input ends first.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            raise EOFError("input ended before a message was entered")
        message = line.rstrip("\n")
        if _PRINTABLE.fullmatch(message):
            return message
        stdout.write(INPUT_HINT + "\n")


def send_reply_loop(sock: socket.socket, aes: AESParams) -> None:
    """Receive a message, print it, send a reply, and repeat.

    The nonce is advanced after every message in either direction.  Returns
    when the peer goes away, a message fails, or the input ends.
    """
    log = get_logger()
    while True:
        log.status("Waiting for message...")
        try:
            message = recv_encrypted_message(sock, aes)
        except ExchangeError:
            return
        print(message, flush=True)
        aes.aes_iv += 1

        log.status("Enter reply...")
        try:
            reply = get_input()
        except EOFError:
            return
        try:
            send_encrypted_message(sock, reply, aes)
        except ExchangeError:
            return
        aes.aes_iv += 1


def run_client(config: ConfigParams) -> None:
    """Connect to the server, agree on a key, send the first message and talk.

    Raises ExchangeError if the connection, handshake, key derivation or the
    first message fails.  The socket is always closed.
    """
    log = get_logger()
    server = new_socket(config)
    try:
        log.status("Connecting to server.")
        connect_to_server(server, config)

        log.status("Connected.")
        log.status("Doing DH handshake...")
        with _reported("Failed DH handshake."):
            dh = client_handshake(server)

        log.status("Generating AES key...")
        with _reported("Failed to generate AES key."):
            aes = do_keygen(dh)

        log.status("Enter message...")
        try:
            message = get_input()
        except EOFError as exc:
            log.err("Could not send any message.")
            raise ExchangeError("Could not send any message.") from exc
        with _reported("Could not send any message."):
            send_encrypted_message(server, message, aes)
        aes.aes_iv += 1

        send_reply_loop(server, aes)
        log.status("Connection terminated.")
    finally:
        client_teardown(server)


def run_server(config: ConfigParams) -> None:
    """Wait for a client, agree on a key and talk, the client speaking first.

    Raises ExchangeError if accepting, the handshake or key derivation
    fails.  Both sockets are always closed.
    """
    log = get_logger()
    listener = new_socket(config)
    client: socket.socket | None = None
    try:
        log.status("Waiting for client.")
        client = accept_new_client(listener, config)

        log.status("Client connected.")
        log.status("Doing DH handshake...")
        with _reported("Failed DH handshake."):
            dh = server_handshake(client, config)

        log.status("Generating AES key...")
        with _reported("Failed to generate AES key."):
            aes = do_keygen(dh)

        send_reply_loop(client, aes)
        log.status("Connection terminated.")
    finally:
        server_teardown(listener, client)


def dh_aes_kxc(config: ConfigParams) -> None:
    """Run as the server or the client, as the configuration says."""
    if config.server:
        run_server(config)
    else:
        run_client(config)