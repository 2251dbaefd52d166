"""Buffered logger that prints to the console and optionally to a file."""

from __future__ import annotations

import atexit
import functools
import sys
import time
from typing import TextIO


class Logger:
    """Formats messages by kind, prints them and, in debug mode, logs them.

    Errors always go to stderr.  Warnings and status messages go to stdout
    unless quiet is set.  Verbose mode prints every message.  In debug mode
    every message is buffered and appended to the log file.
    """

    BUFFER_SIZE = 4096

    def __init__(self) -> None:
        self._buffer: list[str] = []
        self._buffered = 0
        self._file: TextIO | None = None
        self._setup = False
        self._debug = False
        self._quiet = False
        self._verbose = False

    def initialize(self, path: str, debug: bool, quiet: bool, verbose: bool) -> None:
        """Set the flags and, in debug mode, open the log file for appending.

        Only the first call has any effect.  Raises OSError if the log file
        cannot be opened.
        """
        if self._setup:
            return
        self._setup = True
        self._debug = debug
        self._quiet = quiet
        self._verbose = verbose

        if not self._debug:
            return

        try:
            self._file = open(path, "a", encoding="utf-8")
        except OSError as exc:
            raise OSError(f"Could not open log file: {path}") from exc

        self._append(f"[{time.ctime()}]")

    def _append(self, message: str) -> None:
        if "[ERR]" in message:
            print(message, file=sys.stderr)
        elif (
            ("[WARN]" in message and not self._quiet)
            or ("[INFO]" in message and not self._quiet)
            or self._verbose
        ):
            print(message, file=sys.stdout)

        if not self._debug:
            return

        if len(message) + 1 > self.BUFFER_SIZE - self._buffered:
            self.flush()

        self._buffer.append(message + "\n")
        self._buffered += len(message) + 1

    def flush(self) -> None:
        """Write buffered messages to the log file.

        Raises ValueError if no log file is open.
        """
        if self._file is None:
            raise ValueError("log file is not open")
        if self._buffer:
            self._file.write("".join(self._buffer))
            self._file.flush()
            self._buffer.clear()
            self._buffered = 0

    def close(self) -> None:
        """Flush what is buffered and close the log file, if one is open."""
        if self._file is None:
            return
        self.flush()
        self._file.close()
        self._file = None
        self._debug = False

    def log(self, message: str) -> None:
        """Record a debugging message, printed only in verbose mode."""
        self._append(f"[LOG] {message}")

    def err(self, message: str) -> None:
        """Record an error, always printed to stderr."""
        self._append(f"[ERR] {message}")

    def warn(self, message: str) -> None:
        """Record a warning, printed unless quiet."""
        self._append(f"[WARN] {message}")

    def status(self, message: str) -> None:
        """Record a status message, printed unless quiet."""
        self._append(f"[INFO] {message}")


@functools.lru_cache(maxsize=None)
def get_logger() -> Logger:
    """Return the process-wide logger, closed automatically at exit."""
    logger = Logger()
    atexit.register(logger.close)
    return logger