"""Wizard orchestration: the fixed sequence of steps."""

from __future__ import annotations

import logging
from pathlib import Path

from summarizer_init.cli import console, prompts, steps
from summarizer_init.contracts.config import RunConfig
from summarizer_init.contracts.steps import StepResult, StepStatus, WizardReport
from summarizer_init.core.git import GitClient
from summarizer_init.core.workflow import workflow_path

logger = logging.getLogger(__name__)


def run_wizard(config: RunConfig, *, git: GitClient | None = None, base: Path | None = None) -> WizardReport:
    """Run every step in order against the repository at *base* (cwd by default).

    Raises :class:`CommitError` when the commit fails and
    :class:`KeyboardInterrupt` when the user cancels a prompt.
    """
    git = git or GitClient(cwd=base)
    report = WizardReport()

    console.welcome(config)
    action_name = prompts.ask_action_name(config)
    self_hosted = prompts.ask_self_hosted(config)
    report.action_name = action_name
    report.workflow_path = workflow_path(action_name, base)
    logger.debug("Resolved action_name=%s self_hosted=%s", action_name, self_hosted)

    report.add(steps.create_workflow_step(config, action_name=action_name, self_hosted=self_hosted, base=base))
    report.add(steps.commit_step(config, git, workflow_path(action_name)))
    report.add(steps.push_step(config, git))

    if config.interactive and config.open_browser:
        report.add(steps.secrets_step(config, git))
        report.add(steps.api_key_step(config))
    else:
        report.add(StepResult(steps.SECRETS_STEP, StepStatus.SKIPPED))
        report.add(StepResult(steps.API_KEY_STEP, StepStatus.SKIPPED))

    for step in report.steps:
        logger.debug("step %s: %s %s", step.name, step.status.value, step.detail)
    return report


__all__ = ["run_wizard"]
