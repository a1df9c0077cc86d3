"""Questionary prompts, each resolved against the run configuration.

Every prompt goes through :func:`resolve`: in non-interactive mode the
configured default is returned without touching the terminal.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from summarizer_init.contracts.config import RunConfig, validate_action_name
from summarizer_init.core.guidance import API_KEYS_URL
from summarizer_init.core.remote import validate_repo_slug

T = TypeVar("T")


def resolve(config: RunConfig, question: Callable[[], Any], default: T) -> T:
    """Return *default* when not interactive, otherwise ask *question* and return the answer.

    *question* builds a questionary question; it is only called in interactive
    mode. A ``None`` answer means the user pressed Ctrl+C and raises
    :class:`KeyboardInterrupt`.
    """
    if not config.interactive:
        return default
    answer = question().ask()
    if answer is None:
        raise KeyboardInterrupt
    return answer


def _validate_action_name(value: str) -> bool | str:
    try:
        validate_action_name(value)
    except ValueError as exc:
        return str(exc)
    return True


def ask_action_name(config: RunConfig) -> str:
    import questionary

    answer = resolve(
        config,
        lambda: questionary.text(
            "How should we name the GitHub Action?",
            default=config.action_name,
            validate=_validate_action_name,
        ),
        config.action_name,
    )
    return validate_action_name(answer)


def ask_self_hosted(config: RunConfig) -> bool:
    import questionary

    return bool(
        resolve(
            config,
            lambda: questionary.confirm("Do you want to use self-hosted runners?", default=config.self_hosted),
            config.self_hosted,
        )
    )


def ask_commit(config: RunConfig) -> bool:
    import questionary

    return bool(
        resolve(
            config,
            lambda: questionary.confirm("Do you want to commit your changes?", default=config.commit),
            config.commit,
        )
    )


def ask_push(config: RunConfig) -> bool:
    import questionary

    return bool(
        resolve(
            config,
            lambda: questionary.confirm("Do you want to push the changes?", default=config.push),
            config.push,
        )
    )


def ask_add_secret(config: RunConfig, target: str) -> bool:
    import questionary

    message = (
        "Do you want to add the OpenAI API Key to your GitHub Actions repository secrets?\n"
        f" (This will open your browser at {target})"
    )
    return bool(resolve(config, lambda: questionary.confirm(message, default=config.open_browser), config.open_browser))


def ask_create_api_key(config: RunConfig) -> bool:
    import questionary

    message = f"Do you want to create an OpenAI API Key?\n (This will open your browser at {API_KEYS_URL})"
    return bool(resolve(config, lambda: questionary.confirm(message, default=config.open_browser), config.open_browser))


def ask_repo_slug() -> str:
    """Ask for ``owner/repo`` until the answer validates."""
    import questionary

    while True:
        answer = questionary.text(
            "What is the name of your GitHub repository? (e.g. some-user/fluffy-potato)",
            validate=validate_repo_slug,
        ).ask()
        if answer is None:
            raise KeyboardInterrupt
        if validate_repo_slug(answer) is True:
            return answer.strip()


__all__ = [
    "ask_action_name",
    "ask_add_secret",
    "ask_commit",
    "ask_create_api_key",
    "ask_push",
    "ask_repo_slug",
    "ask_self_hosted",
    "resolve",
]
