"""Submission lifecycle of a single waitlist form.

    IDLE ──begin_submit()──▶ SUBMITTING ──send() ok──▶ SUBMITTED ──poll() after delay──▶ IDLE
                                        └─send() fails─▶ FAILED ──(immediately)─────────▶ IDLE

``submit()`` runs both steps back to back. The UI calls them separately so it
can render a disabled submit control while the request is in flight.

``WaitlistForm`` owns the field values of one mounted form. Side effects go
through injected collaborators: a client with ``submit(row)`` and a
:class:`~src.waitlist.notifier.Notifier`. The clock is injectable as well so
the auto-reset after a successful submission can be driven from tests.
"""
from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Any, Callable, Dict, Optional, Protocol

from . import options as opts
from .errors import FormValidationError, SubmissionError
from .notifier import FAILURE_NOTIFICATION, SUCCESS_NOTIFICATION, Notifier
from .payload import to_sheet_row
from .schema import WaitlistSubmission, validate_submission

logger = logging.getLogger(__name__)

DEFAULT_RESET_DELAY_SEC = 3.0


class SubmissionState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    FAILED = "failed"


class SubmissionClient(Protocol):
    def submit(self, row: Dict[str, str]) -> Dict[str, Any]:
        ...


def default_values() -> Dict[str, Any]:
    """Values shown by a fresh (or freshly reset) form."""
    return {
        "fullName": "",
        "email": "",
        "phoneNumber": "",
        "ageGroup": "25-34",
        "gamingPlatforms": frozenset(),
        "gamingFrequency": "occasionally",
        "recentGames": frozenset(),
        "otherRecentGames": "",
        "keepPlaying": frozenset(),
        "otherKeepPlaying": "",
        "desiredFeatures": frozenset(),
        "otherDesiredFeatures": "",
        "specificFeature": "",
        "earlyTester": "yes",
        "contactPreference": frozenset({"email"}),
        "wouldRefer": "maybe",
        "friendEmail": "",
    }


class WaitlistForm:
    """Field state, validation errors and submission state of one form."""

    def __init__(
        self,
        client: SubmissionClient,
        notifier: Notifier,
        *,
        reset_delay: float = DEFAULT_RESET_DELAY_SEC,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._client = client
        self._notifier = notifier
        self._clock = clock
        self.reset_delay = reset_delay

        self.values: Dict[str, Any] = default_values()
        self.errors: Dict[str, str] = {}
        self.state = SubmissionState.IDLE
        self.last_failure: Optional[SubmissionError] = None
        self._submit_attempted = False
        self._submitted_at: Optional[float] = None
        self._pending: Optional[WaitlistSubmission] = None

    # ------------------------------------------------------------------
    # Field editing
    # ------------------------------------------------------------------

    @property
    def can_submit(self) -> bool:
        """False while a request is in flight or the success view is shown."""
        return self.state == SubmissionState.IDLE

    def set_value(self, field: str, value: Any) -> None:
        if field not in self.values:
            raise KeyError(f"Unknown form field: {field}")
        if field in opts.MULTI_SELECT_OPTIONS:
            value = frozenset(value)
        self.values[field] = value
        self._revalidate()

    def toggle(self, field: str, tag: str) -> None:
        """Flip membership of *tag* in the multi-select *field*."""
        if field not in opts.MULTI_SELECT_OPTIONS:
            raise KeyError(f"Not a multi-select field: {field}")
        self.values[field] = opts.toggle(self.values[field], tag)
        self._revalidate()

    def _revalidate(self) -> None:
        # Errors only appear after the first submit; from then on they track edits.
        if self._submit_attempted:
            self.errors = validate_submission(self.values).errors

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def begin_submit(self) -> bool:
        """Validate and enter SUBMITTING without sending anything yet.

        Returns False (and records field errors) if the values are invalid or
        the form is not idle. The UI calls this on click, re-renders with the
        submit control disabled, then calls :meth:`send`.
        """
        if not self.can_submit:
            logger.warning("Submit ignored: form is %s", self.state.value)
            return False

        self._submit_attempted = True
        try:
            submission = validate_submission(self.values).raise_for_errors()
        except FormValidationError as exc:
            self.errors = exc.errors
            return False

        self.errors = {}
        self._pending = submission
        self.state = SubmissionState.SUBMITTING
        return True

    def send(self) -> bool:
        """Send the pending submission once. Returns True on success."""
        if self.state != SubmissionState.SUBMITTING or self._pending is None:
            logger.warning("Send ignored: form is %s", self.state.value)
            return False

        submission, self._pending = self._pending, None
        try:
            row = to_sheet_row(submission)
            self._client.submit(row)
        except SubmissionError as exc:
            logger.error("Error submitting waitlist form: %s", exc)
            self._fail(exc)
            return False
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Unexpected error submitting waitlist form")
            self._fail(SubmissionError(f"Unexpected error: {exc}"))
            return False

        logger.info("Waitlist form submitted")
        self.last_failure = None
        self.state = SubmissionState.SUBMITTED
        self._submitted_at = self._clock()
        self._notifier.send(SUCCESS_NOTIFICATION)
        return True

    def submit(self) -> bool:
        """Validate and send the form once. Returns True on success."""
        return self.begin_submit() and self.send()

    def _fail(self, exc: SubmissionError) -> None:
        self.last_failure = exc
        self.state = SubmissionState.FAILED
        try:
            self._notifier.send(FAILURE_NOTIFICATION)
        finally:
            self.state = SubmissionState.IDLE

    def seconds_until_reset(self) -> float:
        if self.state != SubmissionState.SUBMITTED or self._submitted_at is None:
            return 0.0
        return max(0.0, self._submitted_at + self.reset_delay - self._clock())

    def poll(self) -> bool:
        """Reset the form once the success delay has elapsed.

        Returns True if a reset happened.
        """
        if self.state != SubmissionState.SUBMITTED:
            return False
        if self.seconds_until_reset() > 0:
            return False
        self.reset()
        return True

    def reset(self) -> None:
        self.values = default_values()
        self.errors = {}
        self.state = SubmissionState.IDLE
        self._submit_attempted = False
        self._submitted_at = None
        self._pending = None
