"""Step outcomes and git results reported by the wizard."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class StepStatus(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class StepResult:
    """Outcome of one wizard step."""

    name: str
    status: StepStatus
    detail: str = ""


@dataclass(frozen=True)
class GitResult:
    """Result of a git invocation.

    Git operations report failures through ``ok`` instead of raising, so
    every step handles them the same way.
    """

    ok: bool
    command: tuple[str, ...]
    stdout: str = ""
    stderr: str = ""
    dry_run: bool = False

    @property
    def message(self) -> str:
        return (self.stderr or self.stdout).strip()


@dataclass
class WizardReport:
    """Ordered step results of a wizard run."""

    action_name: str | None = None
    workflow_path: Path | None = None
    steps: list[StepResult] = field(default_factory=list)

    def add(self, result: StepResult) -> StepResult:
        self.steps.append(result)
        return result

    def status_of(self, name: str) -> StepStatus | None:
        for step in self.steps:
            if step.name == name:
                return step.status
        return None


__all__ = ["GitResult", "StepResult", "StepStatus", "WizardReport"]
