"""Run configuration built once from the command line.

:class:`RunConfig` is immutable and is passed explicitly to every wizard step.
Each field also supplies the default answer of the matching prompt.
"""

from __future__ import annotations

import argparse

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from summarizer_init.contracts.exceptions import ConfigError

DEFAULT_ACTION_NAME = "gpt-commit-summarizer"


class RunConfig(BaseModel):
    """Settings for a single wizard run.

    Attributes:
        interactive: When *False* no prompt is issued and every default is used.
        action_name: Name of the generated action and of its workflow file.
        self_hosted: Use ``runs-on: self-hosted`` instead of ``ubuntu-latest``.
        open_browser: Gates the secret and API key browser steps.
        commit: Commit the generated file.
        push: Push the current branch after committing.
        dry_run: Pass ``--dry-run`` to git commit and push.
        verbose: Enable debug logging.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    interactive: bool = True
    action_name: str = DEFAULT_ACTION_NAME
    self_hosted: bool = False
    open_browser: bool = True
    commit: bool = True
    push: bool = False
    dry_run: bool = False
    verbose: bool = False

    @field_validator("action_name")
    @classmethod
    def _validate_action_name(cls, value: str) -> str:
        return validate_action_name(value)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> RunConfig:
        """Build a config from the namespace produced by ``build_parser``.

        Raises :class:`ConfigError` when a value is invalid.
        """
        try:
            return cls(
                interactive=not args.yes,
                action_name=args.action_name,
                self_hosted=args.self_hosted,
                open_browser=not args.no_browser,
                commit=args.commit,
                push=args.push,
                dry_run=args.dry_run,
                verbose=args.verbose,
            )
        except ValidationError as exc:
            raise ConfigError(f"invalid options: {exc}") from exc


def validate_action_name(value: str) -> str:
    """Return the stripped action name, raising ``ValueError`` if it is not a plain file name."""
    name = value.strip()
    if not name:
        raise ValueError("action name must not be empty")
    if "/" in name or "\\" in name or name in {".", ".."}:
        raise ValueError(f"action name must be a plain file name, got {value!r}")
    return name


__all__ = ["DEFAULT_ACTION_NAME", "RunConfig", "validate_action_name"]
