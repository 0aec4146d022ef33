from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .cards.status import NotificationStatus
from .errors import ConfigurationError
from .notifications.teams import DEFAULT_TIMEOUT
from .revisions.inspector import DEFAULT_MAX_FILES
from .revisions.models import Baseline, baseline_from


def load_environment() -> None:
    """Load environment variables from a .env file if present."""
    env_file = os.getenv("ENV_FILE", ".env")
    env_path = Path(env_file)
    if env_path.is_file():
        load_dotenv(env_path)
    else:
        # Fallback: load .env in current working directory if ENV_FILE is missing
        default_path = Path(".env")
        if default_path.is_file():
            load_dotenv(default_path)


def input_env_name(name: str) -> str:
    # Matches how the Actions runner exposes `with:` inputs to the process.
    return "INPUT_" + name.replace(" ", "_").upper()


def read_input(
    name: str,
    environ: Mapping[str, str],
    overrides: Mapping[str, Optional[str]] | None = None,
) -> str:
    if overrides and overrides.get(name) is not None:
        return str(overrides[name]).strip()
    return environ.get(input_env_name(name), "").strip()


def _positive_int(name: str, raw: str, default: int) -> int:
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Input '{name}' must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ConfigurationError(f"Input '{name}' must be positive, got {value}")
    return value


def _debug_enabled(environ: Mapping[str, str]) -> bool:
    if environ.get("RUNNER_DEBUG") == "1":
        return True
    return environ.get("LOG_LEVEL", "").upper() == "DEBUG"


@dataclass(frozen=True)
class Settings:
    status: NotificationStatus
    teams_webhook: str
    last_sha: str | None = None
    max_files: int = DEFAULT_MAX_FILES
    timeout: int = DEFAULT_TIMEOUT
    repo_path: Path = Path(".")
    debug: bool = False

    @property
    def baseline(self) -> Baseline:
        return baseline_from(self.last_sha)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        overrides: Mapping[str, Optional[str]] | None = None,
    ) -> "Settings":
        if environ is None:
            load_environment()
            environ = os.environ

        status_raw = read_input("status", environ, overrides)
        teams_webhook = read_input("teams_webhook", environ, overrides)

        missing = [
            name
            for name, value in {
                "status": status_raw,
                "teams_webhook": teams_webhook,
            }.items()
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required input(s): {', '.join(missing)}"
            )

        status = NotificationStatus.parse(status_raw)
        last_sha = read_input("last_sha", environ, overrides) or None
        max_files = _positive_int(
            "max_files", read_input("max_files", environ, overrides), DEFAULT_MAX_FILES
        )
        timeout = _positive_int(
            "timeout", read_input("timeout", environ, overrides), DEFAULT_TIMEOUT
        )
        repo_path = (
            (overrides or {}).get("repo_path")
            or environ.get("GITHUB_WORKSPACE")
            or "."
        )

        return cls(
            status=status,
            teams_webhook=teams_webhook,
            last_sha=last_sha,
            max_files=max_files,
            timeout=timeout,
            repo_path=Path(repo_path).expanduser().resolve(),
            debug=_debug_enabled(environ),
        )
