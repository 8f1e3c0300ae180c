"""Exceptions raised by the waitlist form."""
from __future__ import annotations

from typing import Dict, Optional


class WaitlistError(Exception):
    """Base class for waitlist form errors."""
    pass


class FormValidationError(WaitlistError):
    """Submitted values failed field-level validation.

    ``errors`` maps the form field key (``fullName``, ``email``, …) to the
    message shown next to that input.
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid form values: {fields}")


class SubmissionError(WaitlistError):
    """The storage endpoint could not be reached or rejected the request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
