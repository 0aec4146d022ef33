from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class StatusPresentation:
    title: str
    icon: str
    details: str


class NotificationStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    CANCELLED = "cancelled"
    WARNING = "warning"

    @classmethod
    def parse(cls, value: str) -> "NotificationStatus":
        normalized = (value or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ConfigurationError(f"Invalid job status: {normalized}") from exc

    @property
    def presentation(self) -> StatusPresentation:
        return PRESENTATIONS[self]


PRESENTATIONS: dict[NotificationStatus, StatusPresentation] = {
    NotificationStatus.SUCCESS: StatusPresentation(
        title="Deployment Successful",
        icon="✅",
        details="The deployment completed successfully.",
    ),
    NotificationStatus.FAILURE: StatusPresentation(
        title="Deployment Failed",
        icon="❌",
        details="The deployment encountered errors. Please check the logs for details.",
    ),
    NotificationStatus.CANCELLED: StatusPresentation(
        title="Deployment Cancelled",
        icon="⚠️",
        details="The deployment was cancelled.",
    ),
    NotificationStatus.WARNING: StatusPresentation(
        title="Deployment Warning",
        icon="⚠️",
        details="The deployment completed with warnings. Review the logs for more information.",
    ),
}
