from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..context.models import RevisionContext
from ..revisions.models import ChangeSet
from .status import NotificationStatus

NO_FILES_CHANGED = "No files changed."
ADAPTIVE_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.adaptive"
ADAPTIVE_CARD_SCHEMA = "http://adaptivecards.io/schemas/adaptive-card.json"
ADAPTIVE_CARD_VERSION = "1.5"


@dataclass(frozen=True, slots=True)
class Fact:
    title: str
    value: str


@dataclass(frozen=True, slots=True)
class CardAction:
    id: str
    title: str
    url: str

    def to_payload(self) -> dict[str, str]:
        return {
            "id": self.id,
            "type": "Action.OpenUrl",
            "title": self.title,
            "url": self.url,
        }


@dataclass(slots=True)
class Card:
    header: str
    icon: str
    title: str
    details: str
    actor_line: str
    actions: tuple[CardAction, CardAction]
    facts: list[Fact] = field(default_factory=list)

    def _status_columns(self) -> dict[str, Any]:
        return {
            "type": "ColumnSet",
            "columns": [
                {
                    "type": "Column",
                    "items": [
                        {
                            "type": "TextBlock",
                            "weight": "bolder",
                            "text": self.icon,
                            "wrap": True,
                            "size": "extraLarge",
                        }
                    ],
                    "width": "auto",
                },
                {
                    "type": "Column",
                    "items": [
                        {
                            "type": "TextBlock",
                            "weight": "bolder",
                            "text": f"**{self.title}**",
                            "wrap": True,
                        },
                        {
                            "type": "TextBlock",
                            "spacing": "none",
                            "text": self.details,
                            "isSubtle": True,
                            "wrap": True,
                        },
                        {
                            "type": "TextBlock",
                            "spacing": "none",
                            "text": self.actor_line,
                            "isSubtle": True,
                            "wrap": True,
                        },
                    ],
                    "width": "stretch",
                },
            ],
        }

    def to_payload(self) -> dict[str, Any]:
        """Render the Teams message envelope wrapping the Adaptive Card."""
        body: list[dict[str, Any]] = [
            {
                "type": "TextBlock",
                "size": "medium",
                "weight": "bolder",
                "text": self.header,
            },
            self._status_columns(),
        ]
        if self.facts:
            body.append(
                {
                    "type": "FactSet",
                    "facts": [{"title": fact.title, "value": fact.value} for fact in self.facts],
                }
            )

        return {
            "type": "message",
            "attachments": [
                {
                    "contentType": ADAPTIVE_CARD_CONTENT_TYPE,
                    "content": {
                        "type": "AdaptiveCard",
                        "$schema": ADAPTIVE_CARD_SCHEMA,
                        "version": ADAPTIVE_CARD_VERSION,
                        "msteams": {"width": "Full"},
                        "body": body,
                        "actions": [action.to_payload() for action in self.actions],
                    },
                }
            ],
        }


def format_changed_files(context: RevisionContext, changes: Optional[ChangeSet]) -> str:
    if changes is None or not changes.paths:
        return NO_FILES_CHANGED
    return "\n".join(f"* [{path}]({context.blob_url(path)})" for path in changes.paths)


def build_card(
    status: NotificationStatus,
    context: RevisionContext,
    commit_message: str,
    changes: Optional[ChangeSet] = None,
) -> Card:
    presentation = status.presentation

    facts: list[Fact] = []
    if status is NotificationStatus.SUCCESS:
        facts = [
            Fact("Commit message:", commit_message.strip()),
            Fact("Branch:", f"[{context.branch}]({context.branch_url})"),
            Fact("Files changed:", format_changed_files(context, changes)),
        ]

    return Card(
        header=f"**Deployment Notification** on [{context.repository}]({context.repository_url})",
        icon=presentation.icon,
        title=presentation.title,
        details=presentation.details,
        actor_line=f"Ran by [{context.actor}]({context.actor_url})",
        actions=(
            CardAction("viewStatus", "View Deployment Logs", context.run_url),
            CardAction("reviewDiffs", "View commit diffs", context.commit_url),
        ),
        facts=facts,
    )
