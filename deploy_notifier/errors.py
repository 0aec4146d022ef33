from __future__ import annotations


class NotifierError(RuntimeError):
    """Base class for every failure that aborts a notification run."""


class ConfigurationError(NotifierError):
    pass


class ProcessError(NotifierError):
    """Raised when git cannot run, exits non-zero or reports diagnostics."""


class DeliveryError(NotifierError):
    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Failed to send notification. HTTP {status_code}: {body}")


class TransportError(NotifierError):
    pass
