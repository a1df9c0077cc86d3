"""Shared test fixtures for summarizer-init tests."""

from __future__ import annotations

import sys
from types import SimpleNamespace
from typing import Any

import pytest

from tests.fakes.git import FakeGit
from tests.fakes.questionary import ExplodingQuestionary, build_fake_questionary


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit()


@pytest.fixture
def no_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", ExplodingQuestionary())


@pytest.fixture
def install_questionary(monkeypatch: pytest.MonkeyPatch):
    def _install(answers: dict[str, Any]) -> SimpleNamespace:
        fake = build_fake_questionary(answers)
        monkeypatch.setitem(sys.modules, "questionary", fake)
        return fake

    return _install


@pytest.fixture(autouse=True)
def no_side_effects(monkeypatch: pytest.MonkeyPatch) -> SimpleNamespace:
    """Keep tests away from the real clipboard, browser and sleep."""
    recorded = SimpleNamespace(clipboard=[], opened=[], slept=[])

    def _copy(text: str) -> bool:
        recorded.clipboard.append(text)
        return True

    def _open(url: str) -> bool:
        recorded.opened.append(url)
        return True

    monkeypatch.setattr("summarizer_init.core.guidance.copy_to_clipboard", _copy)
    monkeypatch.setattr("summarizer_init.core.guidance.open_in_browser", _open)
    monkeypatch.setattr("summarizer_init.cli.console.time", SimpleNamespace(sleep=recorded.slept.append))
    return recorded
