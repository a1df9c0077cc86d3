"""Thin wrapper around the ``git`` CLI."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from summarizer_init.contracts.exceptions import RemoteURLError
from summarizer_init.contracts.steps import GitResult

logger = logging.getLogger(__name__)


class GitClient:
    """Runs git commands in *cwd* (defaults to the process working directory).

    ``add``, ``commit`` and ``push`` never raise; they return a
    :class:`GitResult` whose ``ok`` flag tells the caller what happened.
    """

    def __init__(self, cwd: Path | None = None, *, timeout: float | None = 120) -> None:
        self._cwd = cwd
        self._timeout = timeout

    def run(self, args: list[str], *, dry_run: bool = False) -> GitResult:
        cmd = ("git", *args)
        logger.debug("Running: %s", " ".join(cmd))
        try:
            completed = subprocess.run(
                cmd,
                cwd=self._cwd,
                capture_output=True,
                text=True,
                check=False,
                timeout=self._timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            logger.debug("git invocation failed: %s", exc)
            return GitResult(ok=False, command=cmd, stderr=f"failed to execute git: {exc}", dry_run=dry_run)

        if completed.returncode != 0:
            logger.debug("git stderr: %s", completed.stderr)
        return GitResult(
            ok=completed.returncode == 0,
            command=cmd,
            stdout=completed.stdout,
            stderr=completed.stderr,
            dry_run=dry_run,
        )

    def add(self, path: Path | str) -> GitResult:
        return self.run(["add", "--", str(path)])

    def has_staged_changes(self, path: Path | str) -> bool:
        """Whether the index differs from HEAD for *path*.

        Any git failure counts as a change so that ``commit`` reports the real error.
        """
        return not self.run(["diff", "--cached", "--quiet", "--", str(path)]).ok

    def commit(self, message: str, path: Path | str, *, dry_run: bool = False) -> GitResult:
        """Commit only *path* with *message*; ``dry_run`` reports what would be committed."""
        args = ["commit", "-m", message]
        if dry_run:
            args.append("--dry-run")
        args.extend(["--", str(path)])
        return self.run(args, dry_run=dry_run)

    def push(self, *, dry_run: bool = False) -> GitResult:
        args = ["push"]
        if dry_run:
            args.append("--dry-run")
        return self.run(args, dry_run=dry_run)

    def remote_url(self, remote: str = "origin") -> str:
        """Return the URL of *remote*.

        Raises :class:`RemoteURLError` when outside a repository, when git is
        missing, or when the remote is not configured.
        """
        result = self.run(["remote", "get-url", remote])
        url = result.stdout.strip()
        if not result.ok or not url:
            reason = result.message or f"remote {remote!r} is not configured"
            raise RemoteURLError(reason)
        return url


__all__ = ["GitClient"]
