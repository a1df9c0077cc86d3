"""Exception hierarchy for summarizer-init."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from summarizer_init.contracts.steps import GitResult


class SummarizerInitError(Exception):
    """Base exception for all summarizer-init errors."""


class ConfigError(SummarizerInitError):
    """Command-line options could not be turned into a run configuration."""


class WorkflowWriteError(SummarizerInitError):
    """The workflow file or its parent directories could not be written."""


class GitError(SummarizerInitError):
    """A git invocation failed or git is not available."""


class CommitError(GitError):
    """Committing the workflow file failed; the run cannot continue."""

    def __init__(self, message: str, *, result: GitResult | None = None) -> None:
        super().__init__(message)
        self.result = result


class RemoteURLError(GitError):
    """The repository remote URL could not be inferred."""
