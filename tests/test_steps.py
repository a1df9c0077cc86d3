"""Tests for the individual wizard steps."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest

from summarizer_init.cli import steps
from summarizer_init.contracts.config import RunConfig
from summarizer_init.contracts.exceptions import CommitError
from summarizer_init.contracts.steps import StepStatus
from tests.fakes.git import FakeGit

_WORKFLOW = Path(".github/workflows/gpt-commit-summarizer.yml")


def _config(**overrides: Any) -> RunConfig:
    return RunConfig(interactive=False, **overrides)


# ---------------------------------------------------------------------------
# workflow file
# ---------------------------------------------------------------------------


def test_create_workflow_step_writes_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    result = steps.create_workflow_step(_config(), action_name="my-action", self_hosted=True, base=tmp_path)

    assert result.status is StepStatus.SUCCESS
    assert result.detail == "./.github/workflows/my-action.yml"
    content = (tmp_path / ".github" / "workflows" / "my-action.yml").read_text(encoding="utf-8")
    assert "runs-on: self-hosted" in content
    assert "SUCCESS" in capsys.readouterr().out


def test_create_workflow_step_failure_is_not_fatal(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / ".github").write_text("blocker", encoding="utf-8")

    result = steps.create_workflow_step(_config(), action_name="my-action", self_hosted=False, base=tmp_path)

    assert result.status is StepStatus.FAILED
    assert "ERROR" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# commit
# ---------------------------------------------------------------------------


def test_commit_step_skipped_when_disabled(fake_git: FakeGit) -> None:
    result = steps.commit_step(_config(commit=False), fake_git, _WORKFLOW)

    assert result.status is StepStatus.SKIPPED
    assert fake_git.calls == []


def test_commit_step_stages_and_commits_path(fake_git: FakeGit) -> None:
    result = steps.commit_step(_config(), fake_git, _WORKFLOW)

    assert result.status is StepStatus.SUCCESS
    assert fake_git.calls == [
        ("add", str(_WORKFLOW)),
        ("commit", "Add GitHub Action for AI PR Summarizer", str(_WORKFLOW), False),
    ]


def test_commit_step_dry_run_warns(fake_git: FakeGit, capsys: pytest.CaptureFixture[str]) -> None:
    result = steps.commit_step(_config(dry_run=True), fake_git, _WORKFLOW)

    assert result.status is StepStatus.WARNING
    assert fake_git.calls[-1] == ("commit", steps.COMMIT_MESSAGE, str(_WORKFLOW), True)
    output = capsys.readouterr().out
    assert "Dry run: Not committing changes." in output
    assert "SUCCESS" not in output


def test_commit_failure_raises() -> None:
    git = FakeGit(commit_ok=False)

    with pytest.raises(CommitError) as exc:
        steps.commit_step(_config(), git, _WORKFLOW)

    assert exc.value.result is not None
    assert "nothing to commit" in str(exc.value)


def test_commit_step_unchanged_file_warns_without_committing(capsys: pytest.CaptureFixture[str]) -> None:
    git = FakeGit(staged=False)

    result = steps.commit_step(_config(), git, _WORKFLOW)

    assert result.status is StepStatus.WARNING
    assert result.detail == "nothing to commit"
    assert git.names() == ["add"]
    assert "Nothing to commit" in capsys.readouterr().out


def test_add_failure_raises_without_commit() -> None:
    git = FakeGit(add_ok=False)

    with pytest.raises(CommitError):
        steps.commit_step(_config(), git, _WORKFLOW)

    assert git.names() == ["add"]


# ---------------------------------------------------------------------------
# push
# ---------------------------------------------------------------------------


def test_push_step_skipped_by_default(fake_git: FakeGit) -> None:
    assert steps.push_step(_config(), fake_git).status is StepStatus.SKIPPED
    assert fake_git.calls == []


def test_push_step_success(fake_git: FakeGit) -> None:
    assert steps.push_step(_config(push=True), fake_git).status is StepStatus.SUCCESS
    assert fake_git.calls == [("push", False)]


def test_push_step_dry_run_warns(fake_git: FakeGit, capsys: pytest.CaptureFixture[str]) -> None:
    assert steps.push_step(_config(push=True, dry_run=True), fake_git).status is StepStatus.WARNING
    assert fake_git.calls == [("push", True)]
    assert "Dry run: Not pushing changes." in capsys.readouterr().out


def test_push_failure_is_reported_not_raised(capsys: pytest.CaptureFixture[str]) -> None:
    result = steps.push_step(_config(push=True), FakeGit(push_ok=False))

    assert result.status is StepStatus.FAILED
    assert result.detail == "no upstream branch"
    assert "Failed to push changes" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# guidance
# ---------------------------------------------------------------------------


def test_secrets_step_copies_name_and_opens_page(
    install_questionary: Callable[..., Any], no_side_effects: SimpleNamespace, fake_git: FakeGit
) -> None:
    install_questionary({"add the OpenAI API Key": True})

    result = steps.secrets_step(RunConfig(), fake_git)

    target = "https://github.com/owner/repo/settings/secrets/actions/new"
    assert result.status is StepStatus.SUCCESS
    assert no_side_effects.clipboard == ["OPENAI_API_KEY"]
    assert no_side_effects.opened == [target]
    assert steps.SECRETS_PAGE_DELAY in no_side_effects.slept


def test_secrets_step_declined(
    install_questionary: Callable[..., Any], no_side_effects: SimpleNamespace, fake_git: FakeGit
) -> None:
    install_questionary({"add the OpenAI API Key": False})

    assert steps.secrets_step(RunConfig(), fake_git).status is StepStatus.SKIPPED
    assert no_side_effects.clipboard == []
    assert no_side_effects.opened == []


def test_secrets_step_falls_back_to_manual_repo(
    install_questionary: Callable[..., Any],
    no_side_effects: SimpleNamespace,
    capsys: pytest.CaptureFixture[str],
) -> None:
    fake = install_questionary(
        {
            "name of your GitHub repository": ["owner repo", "some-user/fluffy-potato"],
            "add the OpenAI API Key": True,
        }
    )

    steps.secrets_step(RunConfig(), FakeGit(remote=None))

    assert "Failed to get git remote url" in capsys.readouterr().out
    assert no_side_effects.opened == ["https://github.com/some-user/fluffy-potato/settings/secrets/actions/new"]
    assert sum("repository?" in prompt for prompt in fake.asked) == 2


def test_secrets_step_without_clipboard_still_opens_page(
    install_questionary: Callable[..., Any],
    no_side_effects: SimpleNamespace,
    monkeypatch: pytest.MonkeyPatch,
    fake_git: FakeGit,
    capsys: pytest.CaptureFixture[str],
) -> None:
    install_questionary({"add the OpenAI API Key": True})
    monkeypatch.setattr("summarizer_init.core.guidance.copy_to_clipboard", lambda _text: False)

    assert steps.secrets_step(RunConfig(), fake_git).status is StepStatus.SUCCESS
    assert 'Use "OPENAI_API_KEY" as the secret name.' in capsys.readouterr().out
    assert len(no_side_effects.opened) == 1


def test_api_key_step_opens_key_page(
    install_questionary: Callable[..., Any], no_side_effects: SimpleNamespace
) -> None:
    install_questionary({"create an OpenAI API Key": True})

    result = steps.api_key_step(RunConfig())

    assert result.status is StepStatus.SUCCESS
    assert no_side_effects.opened == ["https://beta.openai.com/account/api-keys"]


def test_api_key_step_declined(install_questionary: Callable[..., Any], no_side_effects: SimpleNamespace) -> None:
    install_questionary({"create an OpenAI API Key": False})

    assert steps.api_key_step(RunConfig()).status is StepStatus.SKIPPED
    assert no_side_effects.opened == []
