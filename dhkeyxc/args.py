"""Command-line parsing into a ConfigParams."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Sequence

from dhkeyxc.logger import Logger, get_logger
from dhkeyxc.params import ConfigParams

# Unix paths may hold any character but NUL.
_UNIX_PATH = re.compile(r"[^\0]*")
# The path must end in an alphanumeric character so a file name is given.
_FILE_NAME = re.compile(r".*[a-zA-Z0-9]")
_IPV4 = re.compile(r"((25[0-5]|(2[0-4]|1\d|[1-9]|)\d)\.?\b){4}", re.ASCII)

VALID_BITS = frozenset({1536, 2048, 3072, 4096, 6144, 8192})

HELP_MSG = (
    "USAGE: dhkeyxc <args>\n"
    "  -s, --server       run as the server\n"
    "  -c, --client       run as the client\n"
    "  --ip <addr>        IPv4 address of the server\n"
    "  --port <number>    port to bind or connect to\n"
    "  --bits <number>    size of prime p: 1536, 2048, 3072, 4096, 6144, 8192\n"
    "  -d, --debug        write messages to the log file\n"
    "  --log <path>       path of the log file\n"
    "  -q, --quiet        hide warnings and status messages\n"
    "  -v, --verbose      print every message\n"
    "  -h, --help         show this help\n"
    "MIN SERVER USAGE: dhkeyxc -s\n"
    "MIN CLIENT USAGE: dhkeyxc -c"
)


class HelpRequested(Exception):
    """Raised after the help text is printed, to signal the program to stop."""


def _is_combined_flags(arg: str) -> bool:
    return "--" not in arg and "-" in arg


def validate_log_path(path: str, log: Logger) -> bool:
    """Return True if ``path`` names a usable log file, warning otherwise."""
    if not path:
        log.warn("No file name supplied. Using default log name and location.")
        return False

    abs_path = os.path.join(os.getcwd(), path)

    if not _UNIX_PATH.fullmatch(abs_path):
        log.warn(
            "Your supplied log file path doesn't appear to be a valid unix path? "
            "Using default log name and location."
        )

    result = _FILE_NAME.fullmatch(abs_path) is not None
    if not result:
        log.warn(
            "Can't parse a valid file name for the log. "
            "Using default log name and location."
        )
    return result


def validate_ip(ip: str, log: Logger) -> bool:
    """Return True if ``ip`` is a dotted IPv4 address, warning otherwise."""
    if not ip:
        log.warn("No IP address supplied. Using localhost.")
        return False
    result = _IPV4.fullmatch(ip) is not None
    if not result:
        log.warn(
            "IP Address supplied doesn't appear to be valid IPv4 address. "
            "Using localhost."
        )
    return result


def parse_general_fields(argv: Sequence[str], config: ConfigParams) -> None:
    """Read --debug, --quiet, --verbose, --log and --help into ``config``.

    ``argv`` holds the arguments without the program name.  Prints the help
    text and raises HelpRequested when help is asked for.
    """
    log = get_logger()
    args = iter(argv)
    for arg in args:
        if arg == "--debug":
            config.debug = True
        elif arg == "--quiet":
            config.quiet = True
        elif arg == "--verbose":
            config.verbose = True
        elif arg == "--log":
            path = next(args, None)
            if path is None:
                log.warn("No log path supplied. USAGE: --log <path>")
            elif validate_log_path(path, log):
                config.log_path = path
        elif arg == "--help":
            print(HELP_MSG)
            raise HelpRequested(HELP_MSG)
        elif _is_combined_flags(arg):
            if "q" in arg:
                config.quiet = True
            if "d" in arg:
                config.debug = True
            if "v" in arg:
                config.verbose = True
            if "h" in arg:
                print(HELP_MSG)
                raise HelpRequested(HELP_MSG)


def _parse_number(text: str, option: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ValueError(f"{option} expects a number, got {text!r}") from None


def parse_networking_fields(argv: Sequence[str], config: ConfigParams) -> None:
    """Read --server, --client, --ip, --bits and --port into ``config``.

    ``argv`` holds the arguments without the program name.  Bad values for
    the ip, bits and port options leave the defaults in place with a
    warning.  Raises ValueError if this side is named both client and
    server, or neither.
    """
    log = get_logger()
    server_flag: bool | None = None

    args = iter(argv)
    for arg in args:
        if arg == "--server":
            server_flag = True
        elif arg == "--client":
            server_flag = False
        elif arg == "--bits":
            value = next(args, None)
            if value is not None:
                bits = _parse_number(value, "--bits")
                if bits in VALID_BITS:
                    config.bits = bits
                else:
                    log.warn(
                        "Supplied bit amount for prime p is not one of "
                        "{1536, 2048, 3072, 4096, 6144, 8192}.\n"
                        f"Supplied bit value: {bits}\n"
                        "Default (2048) will be used."
                    )
        elif arg == "--ip":
            addr = next(args, None)
            if addr is not None and validate_ip(addr, log):
                config.ip_addr = addr
        elif arg == "--port":
            value = next(args, None)
            if value is not None:
                port = _parse_number(value, "--port")
                if port < 1024:
                    log.warn(
                        "Supplied port number is probably in use by the system, "
                        "using default of 65000.\n"
                        "Recommended port range: 49152-65535."
                    )
                elif port > 65535:
                    log.warn(
                        "Supplied port number is too high! Using default of 65000.\n"
                        "Recommended port range: 49152-65535."
                    )
                else:
                    config.port = port
        elif _is_combined_flags(arg):
            if "s" in arg:
                server_flag = True
            if "c" in arg:
                server_flag = False
            if "s" in arg and "c" in arg:
                message = "Specified as both client and server."
                log.err(message)
                raise ValueError(message)

    if server_flag is None:
        message = (
            "Specified as neither client nor server. What am I?\n"
            "USAGE: -c or --client for client, -s or --server for server."
        )
        log.err(message)
        raise ValueError(message)
    config.server = server_flag


def parse_args(argv: Sequence[str] | None = None) -> ConfigParams:
    """Build the configuration from the arguments (default: ``sys.argv[1:]``).

    Raises HelpRequested if help was asked for and ValueError if the
    arguments do not say whether this is the client or the server.
    """
    if argv is None:
        argv = sys.argv[1:]
    config = ConfigParams()
    parse_general_fields(argv, config)
    parse_networking_fields(argv, config)
    return config