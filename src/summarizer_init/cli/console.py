"""Rich-based terminal output for the wizard."""

from __future__ import annotations

import random
import time
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.text import Text

from summarizer_init.contracts.config import RunConfig

console = Console(highlight=False)

EASTER_EGGS = [
    "Skynet initializing",
    "Summoning AI demons",
    "Initializing world takeover",
    "Summoning AI overlords",
    "Initializing mind upload",
]

TITLE = "🤖 Harness the power of AI to summarize your PRs"
_RAINBOW = ["red", "dark_orange", "yellow", "green", "cyan", "blue", "magenta"]


def success(message: str) -> None:
    console.print(Text.assemble((" SUCCESS ", "bold black on green"), " ", message))


def warn(message: str) -> None:
    console.print(Text.assemble((" WARN ", "bold black on yellow"), " ", message))


def error(message: str) -> None:
    console.print(Text.assemble((" ERROR ", "bold white on red"), " ", message))


def info(message: str) -> None:
    console.print(message, markup=False)


def pause(config: RunConfig, seconds: float = 2.0) -> None:
    """Visual pacing; skipped entirely in non-interactive mode."""
    if config.interactive and seconds > 0:
        time.sleep(seconds)


@contextmanager
def spinner(message: str) -> Iterator[None]:
    with console.status(Text(message), spinner="dots"):
        yield


def rainbow(text: str) -> Text:
    styled = Text()
    for index, char in enumerate(text):
        styled.append(char, style=f"bold {_RAINBOW[index % len(_RAINBOW)]}")
    return styled


def easter_egg() -> str:
    return random.choice(EASTER_EGGS)


def welcome(config: RunConfig) -> None:
    if config.interactive:
        console.clear()
    console.print(rainbow(TITLE))
    pause(config)


__all__ = [
    "EASTER_EGGS",
    "console",
    "easter_egg",
    "error",
    "info",
    "pause",
    "rainbow",
    "spinner",
    "success",
    "warn",
    "welcome",
]
