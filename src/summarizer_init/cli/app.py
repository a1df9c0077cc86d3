"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import logging
import sys

from summarizer_init.contracts.exceptions import CommitError, ConfigError


def main(argv: list[str] | None = None) -> int:
    import summarizer_init.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        config = cli.RunConfig.from_args(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3

    try:
        cli.run_wizard(config)
        return 0
    except KeyboardInterrupt:
        print("\nAborted.")
        return 2
    except CommitError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
