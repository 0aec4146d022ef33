from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

from ..errors import ProcessError
from .models import Baseline, BaselineRevision, ChangeSet, DiffMode, NoBaseline

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILES = 10


@dataclass(frozen=True, slots=True)
class GitOutput:
    stdout: str
    stderr: str = ""
    returncode: int = 0


class GitRunner(Protocol):
    def run(self, args: Sequence[str]) -> GitOutput:
        ...


class SubprocessGitRunner:
    def __init__(
        self,
        cwd: Path | None = None,
        timeout: float | None = None,
        executable: str = "git",
    ) -> None:
        self.cwd = cwd
        self.timeout = timeout
        self.executable = executable

    def run(self, args: Sequence[str]) -> GitOutput:
        command = [self.executable, *args]
        logger.debug("Running %s", " ".join(command))
        try:
            completed = subprocess.run(
                command,
                cwd=self.cwd,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            raise ProcessError(str(exc)) from exc
        return GitOutput(
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            returncode=completed.returncode,
        )


def _split_paths(output: str) -> list[str]:
    return [line for line in output.splitlines() if line]


class RevisionInspector:
    def __init__(self, runner: GitRunner, max_files: int = DEFAULT_MAX_FILES) -> None:
        self.runner = runner
        self.max_files = max_files

    def _git(self, *args: str) -> GitOutput:
        output = self.runner.run(list(args))
        if output.returncode != 0:
            message = output.stderr.strip() or (
                f"git {args[0]} exited with code {output.returncode}"
            )
            raise ProcessError(message)
        return output

    def commit_message(self) -> str:
        output = self._git("log", "-1", "--pretty=%B")
        return output.stdout.strip()

    def changed_files(self, baseline: Baseline, commit_sha: str) -> ChangeSet:
        if isinstance(baseline, BaselineRevision):
            return self._diff_between(baseline.sha, commit_sha)
        if isinstance(baseline, NoBaseline):
            return self._diff_commit(commit_sha)
        raise TypeError(f"Unsupported baseline: {baseline!r}")

    def _diff_between(self, base_sha: str, commit_sha: str) -> ChangeSet:
        output = self._git("diff", "--name-only", base_sha, commit_sha)
        if output.stderr.strip():
            raise ProcessError(output.stderr.strip())

        paths = _split_paths(output.stdout)
        truncated = len(paths) > self.max_files
        paths = paths[: self.max_files]
        logger.debug("Changed Files: %s", ", ".join(paths))
        if truncated:
            logger.info("Changed file list truncated to %d entries", self.max_files)
        return ChangeSet(
            paths=tuple(paths),
            mode=DiffMode.BETWEEN_REVISIONS,
            truncated=truncated,
        )

    def _diff_commit(self, commit_sha: str) -> ChangeSet:
        output = self._git(
            "diff-tree", "--no-commit-id", "--name-only", "-r", "--root", commit_sha
        )
        paths = _split_paths(output.stdout)
        logger.debug("Changed Files: %s", ", ".join(paths))
        return ChangeSet(paths=tuple(paths), mode=DiffMode.SINGLE_COMMIT)
