import logging

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Data processing failed"

_SEVERITY_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "success": logging.INFO,
}


class Notifier:
    """Interface for the user-facing message sinks the dashboard reports to."""

    def notify(self, message: str, severity: str = "error") -> None:
        """Deliver a message (implemented by subclasses)."""
        raise NotImplementedError("A notify method has not been implemented")

    def notify_error(self, err: BaseException) -> None:
        """Report an exception using its message, or a generic one when it has none."""
        self.notify(str(err) or DEFAULT_ERROR_MESSAGE, "error")


class LoggingNotifier(Notifier):
    """Writes notifications to the log; used when no webhook is configured."""

    def notify(self, message: str, severity: str = "error") -> None:
        logger.log(_SEVERITY_LEVELS.get(severity, logging.INFO), "[%s] %s", severity, message)
