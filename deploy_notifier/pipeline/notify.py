from __future__ import annotations

import logging
from dataclasses import dataclass

from ..cards.builder import Card, build_card
from ..cards.status import NotificationStatus
from ..config import Settings
from ..context.models import RevisionContext
from ..notifications.teams import TeamsWebhookClient
from ..revisions.inspector import RevisionInspector
from ..revisions.models import ChangeSet

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class NotificationResult:
    status: NotificationStatus
    commit_message: str
    changes: ChangeSet
    card: Card


def run_notification(
    settings: Settings,
    context: RevisionContext,
    inspector: RevisionInspector,
    client: TeamsWebhookClient,
) -> NotificationResult:
    logger.debug("Status: %s", settings.status.value)
    logger.debug("Last SHA: %s", settings.last_sha or "")

    commit_message = inspector.commit_message()
    changes = inspector.changed_files(settings.baseline, context.commit_sha)

    card = build_card(settings.status, context, commit_message, changes)
    client.send(card)

    return NotificationResult(
        status=settings.status,
        commit_message=commit_message,
        changes=changes,
        card=card,
    )
