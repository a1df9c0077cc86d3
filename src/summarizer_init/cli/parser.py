"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from summarizer_init.contracts.config import DEFAULT_ACTION_NAME

_TRUE = {"true", "yes", "1", "on"}
_FALSE = {"false", "no", "0", "off"}


def _package_version() -> str:
    try:
        return version("gpt-summarizer-init")
    except PackageNotFoundError:
        return "0.0.0"


def parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"expected a boolean value, got {value!r}")


def _add_bool_flag(parser: argparse.ArgumentParser, *flags: str, dest: str, default: bool, help: str) -> None:
    # ``--flag`` and ``--flag=false`` are both accepted.
    parser.add_argument(
        *flags,
        dest=dest,
        type=parse_bool,
        nargs="?",
        const=True,
        default=default,
        metavar="BOOL",
        help=f"{help} (default: {str(default).lower()})",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="summarizer-init",
        description="Add AI powered summarization to your PR in your codebase",
        epilog=(
            "-s, -c, -p and -d accept an optional value (e.g. --commit=false), "
            "so put them last when bundling short flags: -ys, not -sy."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    parser.add_argument(
        "--yes",
        "-y",
        "--non-interactive",
        "--nonInteractive",
        dest="yes",
        action="store_true",
        help="Skip the prompts and use the default values",
    )
    parser.add_argument(
        "--action-name",
        "-a",
        "--actionName",
        dest="action_name",
        default=DEFAULT_ACTION_NAME,
        help=f"Name of the GitHub Action (default: {DEFAULT_ACTION_NAME})",
    )
    _add_bool_flag(
        parser, "--self-hosted", "-s", "--selfHosted", dest="self_hosted", default=False, help="Use self-hosted runners"
    )
    parser.add_argument(
        "--no-browser",
        "-n",
        "--noBrowser",
        dest="no_browser",
        action="store_true",
        help="Do not open the browser to create an OpenAI API Key",
    )

    _add_bool_flag(parser, "--commit", "-c", dest="commit", default=True, help="Commit the changes to the repository")
    parser.add_argument(
        "--no-commit", dest="commit", action="store_false", default=True, help="Do not commit the changes"
    )
    _add_bool_flag(parser, "--push", "-p", dest="push", default=False, help="Push the changes to the repository")
    parser.add_argument("--no-push", dest="push", action="store_false", default=False, help="Do not push the changes")

    _add_bool_flag(
        parser,
        "--dry-run",
        "-d",
        "--dryRun",
        dest="dry_run",
        default=False,
        help="Do not commit or push the changes to the repository",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


__all__ = ["build_parser", "parse_bool"]
