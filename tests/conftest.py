"""Shared fixtures: a recorded fake git runner, a mocked HTTP session and a CI context."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Sequence
from unittest.mock import MagicMock

import pytest

from deploy_notifier.context.models import RevisionContext
from deploy_notifier.revisions.inspector import GitOutput


class FakeGitRunner:
    def __init__(self, outputs: dict[str, GitOutput] | None = None) -> None:
        self.outputs = outputs or {}
        self.calls: list[list[str]] = []

    def run(self, args: Sequence[str]) -> GitOutput:
        self.calls.append(list(args))
        return self.outputs.get(args[0], GitOutput(stdout=""))

    def subcommands(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def context() -> RevisionContext:
    return RevisionContext(
        repository_owner="mock-owner",
        repository_name="mock-repo",
        branch="main",
        actor="mock-actor",
        commit_sha="mock-sha",
        run_id="1234",
    )


@pytest.fixture
def ci_env() -> dict[str, str]:
    return {
        "GITHUB_REPOSITORY": "mock-owner/mock-repo",
        "GITHUB_REF": "refs/heads/main",
        "GITHUB_ACTOR": "mock-actor",
        "GITHUB_SHA": "mock-sha",
        "GITHUB_RUN_ID": "1234",
        "INPUT_TEAMS_WEBHOOK": "https://mock-teams-webhook-url",
    }


@pytest.fixture
def fake_git() -> FakeGitRunner:
    return FakeGitRunner({"log": GitOutput(stdout="Mock commit message\n")})


def make_response(status_code: int = 200, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


@pytest.fixture
def session() -> MagicMock:
    mock = MagicMock()
    mock.post.return_value = make_response(200, "1")
    return mock


class GitRepo:
    def __init__(self, path: Path) -> None:
        self.path = path
        self._git("init", "--quiet")

    def _git(self, *args: str) -> str:
        completed = subprocess.run(
            [
                "git",
                "-c", "user.name=Test",
                "-c", "user.email=test@example.com",
                "-c", "commit.gpgsign=false",
                *args,
            ],
            cwd=self.path,
            capture_output=True,
            check=True,
        )
        return completed.stdout.decode("utf-8", "replace").strip()

    def commit(self, files: dict[str, str], message: bytes = b"commit\n") -> str:
        for name, content in files.items():
            (self.path / name).write_text(content, encoding="utf-8")
        self._git("add", "--all")
        message_file = self.path.parent / "COMMIT_MSG"
        message_file.write_bytes(message)
        self._git("commit", "--quiet", "--file", str(message_file))
        return self._git("rev-parse", "HEAD")


@pytest.fixture
def git_repo(tmp_path: Path) -> GitRepo:
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    path = tmp_path / "repo"
    path.mkdir()
    return GitRepo(path)
