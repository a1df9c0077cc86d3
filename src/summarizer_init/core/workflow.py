"""GitHub Actions workflow rendering and writing."""

from __future__ import annotations

import logging
from pathlib import Path

from summarizer_init.contracts.exceptions import WorkflowWriteError

logger = logging.getLogger(__name__)

ACTION_REF = "KanHarI/gpt-commit-summarizer@master"
WORKFLOWS_DIR = Path(".github") / "workflows"

_TEMPLATE = """\
name: GPT Commits summarizer
# Summary: This action will write a comment about every commit in a pull request,
# as well as generate a summary for every file that was modified and add it to the
# review page, compile a PR summary from all commit summaries and file diff
# summaries, and delete outdated code review comments

on:
  pull_request:
    types: [opened, synchronize]

jobs:
  summarize:
    runs-on: {runs_on}
    permissions: write-all  # Some repositories need this line

    steps:
      - uses: {action_ref}
        env:
          GITHUB_TOKEN: ${{{{ secrets.GITHUB_TOKEN }}}}
          OPENAI_API_KEY: ${{{{ secrets.OPENAI_API_KEY }}}}
"""


def runs_on(self_hosted: bool) -> str:
    return "self-hosted" if self_hosted else "ubuntu-latest"


def render_workflow(self_hosted: bool) -> str:
    """Render the summarizer workflow document."""
    return _TEMPLATE.format(runs_on=runs_on(self_hosted), action_ref=ACTION_REF)


def workflow_path(action_name: str, base: Path | None = None) -> Path:
    """Return ``<base>/.github/workflows/<action_name>.yml`` (relative when *base* is None)."""
    relative = WORKFLOWS_DIR / f"{action_name}.yml"
    return base / relative if base is not None else relative


def display_path(action_name: str) -> str:
    """Path in the ``./.github/workflows/<name>.yml`` form shown to the user."""
    return f"./{WORKFLOWS_DIR.as_posix()}/{action_name}.yml"


def write_workflow(path: Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories and overwriting any existing file.

    Raises :class:`WorkflowWriteError` when the directory or file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise WorkflowWriteError(f"failed to write {path}: {exc}") from exc
    logger.debug("Wrote workflow file %s (%d bytes)", path, len(content))
    return path


__all__ = ["ACTION_REF", "display_path", "render_workflow", "runs_on", "workflow_path", "write_workflow"]
