from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True, slots=True)
class NoBaseline:
    """No previous revision was supplied; inspect the current commit alone."""


@dataclass(frozen=True, slots=True)
class BaselineRevision:
    sha: str


Baseline = Union[NoBaseline, BaselineRevision]


def baseline_from(last_sha: Optional[str]) -> Baseline:
    sha = (last_sha or "").strip()
    if not sha:
        return NoBaseline()
    return BaselineRevision(sha=sha)


class DiffMode(str, Enum):
    BETWEEN_REVISIONS = "between_revisions"
    SINGLE_COMMIT = "single_commit"


@dataclass(frozen=True, slots=True)
class ChangeSet:
    paths: tuple[str, ...]
    mode: DiffMode
    truncated: bool = False

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self):
        return iter(self.paths)
