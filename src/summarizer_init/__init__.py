"""Public API surface for summarizer-init."""

__version__ = "1.0.0"

from summarizer_init.contracts.config import DEFAULT_ACTION_NAME, RunConfig
from summarizer_init.contracts.exceptions import (
    CommitError,
    ConfigError,
    GitError,
    RemoteURLError,
    SummarizerInitError,
    WorkflowWriteError,
)
from summarizer_init.contracts.steps import GitResult, StepResult, StepStatus, WizardReport
from summarizer_init.core.git import GitClient
from summarizer_init.core.remote import repo_url_from_slug, secrets_page_url, use_https, validate_repo_slug
from summarizer_init.core.workflow import render_workflow, workflow_path, write_workflow

__all__ = [
    "DEFAULT_ACTION_NAME",
    "CommitError",
    "ConfigError",
    "GitClient",
    "GitError",
    "GitResult",
    "RemoteURLError",
    "RunConfig",
    "StepResult",
    "StepStatus",
    "SummarizerInitError",
    "WizardReport",
    "WorkflowWriteError",
    "__version__",
    "render_workflow",
    "repo_url_from_slug",
    "secrets_page_url",
    "use_https",
    "validate_repo_slug",
    "workflow_path",
    "write_workflow",
]
