from __future__ import annotations

import os
from pathlib import Path

import pytest

from gitrev.repository import facts as facts_module
from gitrev.repository.git import GitQueryError
from gitrev.settings import Settings, get_settings

FAKE_OUTPUT = {
    "log": "abc123",
    "rev-list": "17",
    "rev-parse": "main",
    "describe": "v0.1",
}


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for key in list(os.environ):
        if key.upper().startswith("GITREV_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def repo_dir(tmp_path):
    path = tmp_path / "repo"
    path.mkdir()
    return path


@pytest.fixture
def fake_git(monkeypatch):
    """Replace git with canned answers; records (args, cwd) per call."""

    class FakeGit:
        def __init__(self):
            self.calls: list[tuple[list[str], Path]] = []
            self.output = dict(FAKE_OUTPUT)
            self.fail_on: str | None = None

        def __call__(self, args, *, executable="git", timeout=None):
            self.calls.append((list(args), Path.cwd()))
            if args[0] == self.fail_on:
                raise GitQueryError(f"{executable} {args[0]} failed")
            return self.output[args[0]]

    fake = FakeGit()
    monkeypatch.setattr(facts_module, "run_git", fake)
    return fake
