"""
Outcome reporting for the Actions runner.

Success is logged; failures are logged and also emitted as an `::error::`
workflow command so the message shows up as a run annotation.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..pipeline.notify import NotificationResult

logger = logging.getLogger(__name__)


def escape_command_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def report_success(result: NotificationResult) -> int:
    logger.info(
        "Delivered %s notification (%d changed file(s)).",
        result.status.value,
        len(result.changes),
    )
    return 0


def report_failure(message: str, stream: TextIO | None = None) -> int:
    logger.error("%s", message)
    out = stream or sys.stdout
    out.write(f"::error::{escape_command_data(message)}\n")
    out.flush()
    return 1
