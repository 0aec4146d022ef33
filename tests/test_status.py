import pytest

from deploy_notifier.cards.status import NotificationStatus
from deploy_notifier.errors import ConfigurationError


@pytest.mark.parametrize(
    ("raw", "title", "icon", "details"),
    [
        ("success", "Deployment Successful", "✅", "The deployment completed successfully."),
        (
            "failure",
            "Deployment Failed",
            "❌",
            "The deployment encountered errors. Please check the logs for details.",
        ),
        ("cancelled", "Deployment Cancelled", "⚠️", "The deployment was cancelled."),
        (
            "warning",
            "Deployment Warning",
            "⚠️",
            "The deployment completed with warnings. Review the logs for more information.",
        ),
    ],
)
def test_status_presentation(raw, title, icon, details):
    presentation = NotificationStatus.parse(raw).presentation

    assert presentation.title == title
    assert presentation.icon == icon
    assert presentation.details == details


def test_parse_is_case_insensitive():
    assert NotificationStatus.parse("  SUCCESS ") is NotificationStatus.SUCCESS
    assert NotificationStatus.parse("Cancelled") is NotificationStatus.CANCELLED


def test_parse_rejects_unknown_status():
    with pytest.raises(ConfigurationError, match="^Invalid job status: invalid-value$"):
        NotificationStatus.parse("invalid-value")
