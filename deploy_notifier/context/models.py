from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from ..errors import ConfigurationError

DEFAULT_SERVER_URL = "https://github.com"
BRANCH_REF_PREFIX = "refs/heads/"


@dataclass(frozen=True, slots=True)
class RevisionContext:
    repository_owner: str
    repository_name: str
    branch: str
    actor: str
    commit_sha: str
    run_id: str
    server_url: str = DEFAULT_SERVER_URL

    @property
    def repository(self) -> str:
        return f"{self.repository_owner}/{self.repository_name}"

    @property
    def repository_url(self) -> str:
        return f"{self.server_url}/{self.repository}"

    @property
    def run_url(self) -> str:
        return f"{self.repository_url}/actions/runs/{self.run_id}"

    @property
    def commit_url(self) -> str:
        return f"{self.repository_url}/commit/{self.commit_sha}"

    @property
    def branch_url(self) -> str:
        return f"{self.repository_url}/tree/{self.branch}"

    @property
    def actor_url(self) -> str:
        return f"{self.server_url}/{self.actor}"

    def blob_url(self, path: str) -> str:
        return f"{self.repository_url}/blob/{self.branch}/{path}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RevisionContext":
        if environ is None:
            environ = os.environ

        values = {
            name: environ.get(name, "").strip()
            for name in (
                "GITHUB_REPOSITORY",
                "GITHUB_REF",
                "GITHUB_ACTOR",
                "GITHUB_SHA",
                "GITHUB_RUN_ID",
            )
        }
        missing = [name for name, value in values.items() if not value]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variable(s): {', '.join(missing)}"
            )

        owner, _, name = values["GITHUB_REPOSITORY"].partition("/")
        if not owner or not name:
            raise ConfigurationError(
                f"GITHUB_REPOSITORY must look like 'owner/name', got {values['GITHUB_REPOSITORY']!r}"
            )

        server_url = environ.get("GITHUB_SERVER_URL", "").strip() or DEFAULT_SERVER_URL

        return cls(
            repository_owner=owner,
            repository_name=name,
            branch=values["GITHUB_REF"].removeprefix(BRANCH_REF_PREFIX),
            actor=values["GITHUB_ACTOR"],
            commit_sha=values["GITHUB_SHA"],
            run_id=values["GITHUB_RUN_ID"],
            server_url=server_url.rstrip("/"),
        )
