from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Mapping, Sequence

from .config import Settings
from .context.models import RevisionContext
from .errors import NotifierError
from .notifications.reporting import report_failure, report_success
from .notifications.teams import TeamsWebhookClient
from .pipeline.notify import run_notification
from .revisions.inspector import RevisionInspector, SubprocessGitRunner


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Send a deployment status card to a Microsoft Teams webhook."
    )
    parser.add_argument(
        "--status",
        help="Job status: success, failure, cancelled or warning. Defaults to INPUT_STATUS.",
    )
    parser.add_argument(
        "--teams-webhook",
        dest="teams_webhook",
        help="Incoming webhook URL. Defaults to INPUT_TEAMS_WEBHOOK.",
    )
    parser.add_argument(
        "--last-sha",
        dest="last_sha",
        help="Previous deployed revision; diff against it instead of the current commit alone.",
    )
    parser.add_argument(
        "--max-files",
        dest="max_files",
        help="Maximum changed files listed when diffing two revisions (default 10).",
    )
    parser.add_argument(
        "--timeout",
        help="Seconds to wait on git and the webhook (default 30).",
    )
    parser.add_argument(
        "--repo-path",
        dest="repo_path",
        help="Repository checkout to inspect. Defaults to GITHUB_WORKSPACE or the current directory.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output, including the card JSON.",
    )
    return parser.parse_args(argv)


def main(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
    session=None,
    runner=None,
) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = parse_args(argv)
    overrides = {
        "status": args.status,
        "teams_webhook": args.teams_webhook,
        "last_sha": args.last_sha,
        "max_files": args.max_files,
        "timeout": args.timeout,
        "repo_path": args.repo_path,
    }

    try:
        settings = Settings.from_env(environ, overrides)
        if args.verbose:
            settings = replace(settings, debug=True)
        if settings.debug:
            logging.getLogger().setLevel(logging.DEBUG)

        context = RevisionContext.from_env(environ)
        inspector = RevisionInspector(
            runner or SubprocessGitRunner(cwd=settings.repo_path, timeout=settings.timeout),
            max_files=settings.max_files,
        )
        client = TeamsWebhookClient(
            settings.teams_webhook, session=session, timeout=settings.timeout
        )
        result = run_notification(settings, context, inspector, client)
    except NotifierError as exc:
        return report_failure(str(exc))

    return report_success(result)


if __name__ == "__main__":
    sys.exit(main())
