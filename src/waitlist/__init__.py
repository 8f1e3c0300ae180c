"""Chuno waitlist form: schema, payload mapping and submission lifecycle.

Import from:

    from src.waitlist.schema import validate_submission, WaitlistSubmission
    from src.waitlist.workflow import WaitlistForm, SubmissionState
"""

from src.waitlist.errors import FormValidationError, SubmissionError, WaitlistError
from src.waitlist.schema import WaitlistSubmission, validate_submission
from src.waitlist.workflow import SubmissionState, WaitlistForm

__all__ = [
    'FormValidationError',
    'SubmissionError',
    'WaitlistError',
    'WaitlistSubmission',
    'validate_submission',
    'SubmissionState',
    'WaitlistForm',
]
