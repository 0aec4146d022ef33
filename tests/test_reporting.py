import io

from deploy_notifier.notifications.reporting import escape_command_data, report_failure


def test_escape_command_data():
    assert escape_command_data("50%\nline\r") == "50%25%0Aline%0D"


def test_report_failure_writes_error_command():
    stream = io.StringIO()

    assert report_failure("HTTP 500: a\nb", stream=stream) == 1
    assert stream.getvalue() == "::error::HTTP 500: a%0Ab\n"
