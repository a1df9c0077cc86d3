"""Wizard steps.

Each step receives the run configuration explicitly and returns a
:class:`StepResult`. Failures are reported and the wizard moves on, except
for a failed commit, which raises :class:`CommitError`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from summarizer_init.cli import console, prompts
from summarizer_init.contracts.config import RunConfig
from summarizer_init.contracts.exceptions import CommitError, RemoteURLError, WorkflowWriteError
from summarizer_init.contracts.steps import StepResult, StepStatus
from summarizer_init.core import guidance
from summarizer_init.core.git import GitClient
from summarizer_init.core.remote import infer_repo_url, repo_url_from_slug, secrets_page_url
from summarizer_init.core.workflow import display_path, render_workflow, workflow_path, write_workflow

logger = logging.getLogger(__name__)

COMMIT_MESSAGE = "Add GitHub Action for AI PR Summarizer"

WORKFLOW_STEP = "workflow"
COMMIT_STEP = "commit"
PUSH_STEP = "push"
SECRETS_STEP = "secrets"
API_KEY_STEP = "api_key"

SECRETS_PAGE_DELAY = 10.0


def create_workflow_step(
    config: RunConfig, *, action_name: str, self_hosted: bool, base: Path | None = None
) -> StepResult:
    """Render and write the workflow file; a write failure is reported, not raised."""
    path = workflow_path(action_name, base)
    shown = display_path(action_name)
    try:
        with console.spinner(f"{console.easter_egg()} (Creating GitHub Action File.)"):
            write_workflow(path, render_workflow(self_hosted))
            console.pause(config)
    except WorkflowWriteError as exc:
        console.error(f"Failed to create GitHub Action File: {exc}")
        return StepResult(WORKFLOW_STEP, StepStatus.FAILED, str(exc))
    console.success(f"GitHub Action File Created at: {shown}")
    return StepResult(WORKFLOW_STEP, StepStatus.SUCCESS, shown)


def commit_step(config: RunConfig, git: GitClient, path: Path) -> StepResult:
    """Stage and commit *path* (relative to the git working directory).

    Raises :class:`CommitError` when git fails.
    """
    if not prompts.ask_commit(config):
        return StepResult(COMMIT_STEP, StepStatus.SKIPPED)

    with console.spinner(f"Committing changes to {path.as_posix()}"):
        console.pause(config)
        result = git.add(path)
        unchanged = result.ok and not git.has_staged_changes(path)
        if result.ok and not unchanged:
            result = git.commit(COMMIT_MESSAGE, path, dry_run=config.dry_run)

    if not result.ok:
        console.error(f"Failed to commit changes: {result.message}")
        raise CommitError(f"failed to commit {path.as_posix()}: {result.message}", result=result)
    if unchanged:
        console.warn(f"Nothing to commit: {path.as_posix()} is already up to date.")
        return StepResult(COMMIT_STEP, StepStatus.WARNING, "nothing to commit")
    if config.dry_run:
        console.warn("Dry run: Not committing changes.")
        return StepResult(COMMIT_STEP, StepStatus.WARNING, result.stdout.strip())
    console.success(f"Committed changes to {path.as_posix()}")
    return StepResult(COMMIT_STEP, StepStatus.SUCCESS)


def push_step(config: RunConfig, git: GitClient) -> StepResult:
    if not prompts.ask_push(config):
        return StepResult(PUSH_STEP, StepStatus.SKIPPED)

    with console.spinner("↗️ Pushing changes"):
        console.pause(config)
        result = git.push(dry_run=config.dry_run)

    if not result.ok:
        console.error(f"Failed to push changes: {result.message}")
        return StepResult(PUSH_STEP, StepStatus.FAILED, result.message)
    if config.dry_run:
        console.warn("Dry run: Not pushing changes.")
        return StepResult(PUSH_STEP, StepStatus.WARNING, result.message)
    console.success("Pushed changes")
    return StepResult(PUSH_STEP, StepStatus.SUCCESS)


def resolve_repo_url(git: GitClient) -> str:
    """Infer the repository web URL, asking for ``owner/repo`` when git cannot tell."""
    try:
        return infer_repo_url(git)
    except RemoteURLError as exc:
        console.warn(f"Failed to get git remote url: {exc}")
        return repo_url_from_slug(prompts.ask_repo_slug())


def secrets_step(config: RunConfig, git: GitClient) -> StepResult:
    """Copy the secret name and open the repository's new-secret page."""
    target = secrets_page_url(resolve_repo_url(git))
    logger.debug("Secrets page: %s", target)
    if not prompts.ask_add_secret(config, target):
        return StepResult(SECRETS_STEP, StepStatus.SKIPPED)

    name = guidance.SECRET_NAME
    if guidance.copy_to_clipboard(name):
        console.info(f'The secret name ("{name}") has been copied to your clipboard.')
    else:
        console.info(f'Use "{name}" as the secret name.')
    console.info(f"Please go to {target},\npaste the secret name and come back here.")
    with console.spinner("Your browser will open in a few seconds"):
        console.pause(config, SECRETS_PAGE_DELAY)
        guidance.open_in_browser(target)
    return StepResult(SECRETS_STEP, StepStatus.SUCCESS, target)


def api_key_step(config: RunConfig) -> StepResult:
    if not prompts.ask_create_api_key(config):
        return StepResult(API_KEY_STEP, StepStatus.SKIPPED)

    target = guidance.API_KEYS_URL
    with console.spinner("Opening browser to create OpenAI API Key."):
        console.pause(config)
    console.info(
        f"Please go to {target} and create a new API Key.\n"
        "Add it to the secret you're creating in your repository and save the secret."
    )
    guidance.open_in_browser(target)
    return StepResult(API_KEY_STEP, StepStatus.SUCCESS, target)


__all__ = [
    "API_KEY_STEP",
    "COMMIT_MESSAGE",
    "COMMIT_STEP",
    "PUSH_STEP",
    "SECRETS_STEP",
    "WORKFLOW_STEP",
    "api_key_step",
    "commit_step",
    "create_workflow_step",
    "push_step",
    "resolve_repo_url",
    "secrets_step",
]
