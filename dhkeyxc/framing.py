"""Length-prefixed frames over a stream socket."""

from __future__ import annotations

import socket
import struct

from dhkeyxc.logger import get_logger
from dhkeyxc.params import ExchangeError

_HEADER = struct.Struct("!I")
MAX_FRAME = 0xFFFFFFFF


def _recv_up_to(sock: socket.socket, size: int) -> bytes:
    """Read ``size`` bytes, or fewer if the peer closes the stream first."""
    chunks: list[bytes] = []
    remaining = size
    while remaining > 0:
        chunk = sock.recv(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def send_frame(sock: socket.socket, message: bytes) -> int:
    """Send ``message`` preceded by its length as four big-endian bytes.

    Returns the number of bytes put on the wire.  Raises ExchangeError if
    the message is too long or the socket cannot send.
    """
    log = get_logger()
    log.log("Sending message...")
    payload = bytes(message)
    if len(payload) > MAX_FRAME:
        log.err("Message is too long to send.")
        raise ExchangeError("Message is too long to send.")
    frame = _HEADER.pack(len(payload)) + payload
    try:
        sock.sendall(frame)
    except OSError as exc:
        log.err("Could not send message.")
        raise ExchangeError("Could not send message.") from exc
    log.log(f"Sent {len(frame)} bytes.")
    return len(frame)


def recv_frame(sock: socket.socket) -> bytes:
    """Receive one frame sent by :func:`send_frame` and return its payload.

    Raises ExchangeError if the length header cannot be read.  If the peer
    closes the stream part way through the payload, what arrived is returned.
    """
    log = get_logger()
    log.log("Receiving message...")
    try:
        header = _recv_up_to(sock, _HEADER.size)
    except OSError as exc:
        log.err("Did not receive a valid message len.")
        raise ExchangeError("Did not receive a valid message len.") from exc
    if len(header) != _HEADER.size:
        log.err("Did not receive a valid message len.")
        raise ExchangeError("Did not receive a valid message len.")
    (length,) = _HEADER.unpack(header)
    try:
        return _recv_up_to(sock, length)
    except OSError as exc:
        raise ExchangeError("Could not receive message.") from exc