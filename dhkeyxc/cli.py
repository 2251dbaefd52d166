"""Command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from dhkeyxc.args import HelpRequested, parse_args
from dhkeyxc.logger import get_logger
from dhkeyxc.params import ExchangeError
from dhkeyxc.run import dh_aes_kxc


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, set up logging and run the exchange.

    Returns 0 on success and 1 on any failure or when help was shown.
    """
    try:
        config = parse_args(argv)
    except HelpRequested:
        return 1
    except ValueError as exc:
        if "client" not in str(exc):
            print(f"[ERR] {exc}", file=sys.stderr)
        return 1

    log = get_logger()
    if config.log_path:
        try:
            log.initialize(config.log_path, config.debug, config.quiet, config.verbose)
        except OSError:
            print("[ERR] Could not open log file.", file=sys.stderr)

    try:
        dh_aes_kxc(config)
    except ExchangeError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())