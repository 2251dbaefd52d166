"""Socket set-up and the Diffie-Hellman handshake from either side."""

from __future__ import annotations

import socket
from collections.abc import Iterator
from contextlib import contextmanager

from dhkeyxc.aes import aes_keygen
from dhkeyxc.dhmath import dh_key, private_a, public_a, select_public_dh_params
from dhkeyxc.formatting import format_message, htoi, itoh, parse_message
from dhkeyxc.logger import get_logger
from dhkeyxc.params import AESParams, ConfigParams, DHParams, ExchangeError
from dhkeyxc.transport import (
    close_socket,
    create_socket,
    init_connection,
    recv_message,
    send_message,
)


@contextmanager
def _step(message: str) -> Iterator[None]:
    """Turn a failure inside the block into a logged ExchangeError."""
    try:
        yield
    except (ExchangeError, ValueError) as exc:
        get_logger().err(message)
        raise ExchangeError(message) from exc


def _fail(message: str) -> ExchangeError:
    get_logger().err(message)
    return ExchangeError(message)


def new_socket(config: ConfigParams) -> socket.socket:
    """Open a socket for this side; a server's socket is bound as well."""
    return create_socket(config)


def do_keygen(dh: DHParams) -> AESParams:
    """Derive the AES key and nonce from the agreed Diffie-Hellman key.

    Raises ExchangeError if the shared key is missing or derivation fails.
    """
    if dh.dh_key is None or dh.dh_key < 0:
        raise _fail("DH key was not derived properly.")
    return aes_keygen(dh)


def client_teardown(server: socket.socket) -> None:
    """Close the client's socket to the server."""
    close_socket(server)


def connect_to_server(sock: socket.socket, config: ConfigParams) -> socket.socket:
    """Connect ``sock`` to the server named in the configuration."""
    return init_connection(sock, config)


def client_handshake(server: socket.socket) -> DHParams:
    """Run the client side of the handshake and return the filled parameters.

    Receives ``p||g``, sends ``A``, receives ``B`` and computes the shared
    key.  The socket is left open on failure, which raises ExchangeError.
    """
    dh = DHParams()

    with _step("An error occurred receiving prime p & generator g."):
        received = recv_message(server)

    parts = parse_message(received)
    if len(parts) != 2:
        raise _fail("Received message does not appear to be p||g")
    with _step("Received message does not appear to be p||g"):
        dh.p = htoi(parts[0])
        dh.g = htoi(parts[1])

    with _step("Failed while picking private exponent."):
        private_a(dh)
    with _step("Failed while calculating public A for server."):
        public_a(dh)
    with _step("Failed while sending A to server."):
        send_message(server, itoh(dh.A))

    with _step("An error occurred receiving B from the server."):
        dh.B = htoi(recv_message(server))

    with _step("Failed while calculating shared key."):
        dh_key(dh)
    return dh


def server_teardown(
    listener: socket.socket, client: socket.socket | None = None
) -> None:
    """Close the client connection, if any, then the listening socket."""
    if client is not None:
        close_socket(client)
    close_socket(listener)


def accept_new_client(listener: socket.socket, config: ConfigParams) -> socket.socket:
    """Wait for a client on the listening socket and return its connection."""
    return init_connection(listener, config)


def server_handshake(client: socket.socket, config: ConfigParams) -> DHParams:
    """Run the server side of the handshake and return the filled parameters.

    Picks ``p`` and ``g`` for ``config.bits``, sends ``p||g``, receives the
    client's public value, sends its own and computes the shared key.  The
    client socket is left open on failure, which raises ExchangeError.
    """
    dh = DHParams()

    with _step("Failed while selecting p&g."):
        select_public_dh_params(config, dh)

    with _step("Failed while sending p&g to client."):
        send_message(client, format_message([itoh(dh.p), itoh(dh.g)]))

    # B holds the other side's public value.
    with _step("Failed while receiving A from the client."):
        dh.B = htoi(recv_message(client))

    with _step("Failed while picking private exponent."):
        private_a(dh)
    with _step("Failed while calculating public B for client."):
        public_a(dh)
    with _step("Failed while sending B to client."):
        send_message(client, itoh(dh.A))

    with _step("Failed while calculating shared key."):
        dh_key(dh)
    return dh