from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: str = "default"


SUCCESS_NOTIFICATION = Notification(
    title="Waitlist submission successful!",
    description="Thank you for your interest in Chuno. We'll keep you updated!",
)

FAILURE_NOTIFICATION = Notification(
    title="Submission failed",
    description="There was an error submitting your form. Please try again.",
    variant="destructive",
)


class Notifier(ABC):
    """Abstract interface for toast-style user notifications."""

    @abstractmethod
    def notify(self, title: str, description: str, *, variant: str = "default") -> None:  # noqa: D401
        """Show a transient message; the return value is never consumed."""

    def send(self, notification: Notification) -> None:
        self.notify(notification.title, notification.description, variant=notification.variant)


class LoggingNotifier(Notifier):
    """Notifier that only writes to the log (scripts, headless runs)."""

    def notify(self, title: str, description: str, *, variant: str = "default") -> None:
        level = logging.WARNING if variant == "destructive" else logging.INFO
        logger.log(level, "%s – %s", title, description)
