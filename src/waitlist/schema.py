"""Validation schema for waitlist submissions.

The form speaks camelCase (``fullName``, ``gamingPlatforms``, …) while the
models use snake_case attributes; pydantic aliases bridge the two so callers
can pass the raw form values straight to :func:`validate_submission`.

``BasicInfo`` is the "Section 1" subset of the form. ``WaitlistSubmission``
extends it with the remaining sections and is the only record that is ever
submitted.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .errors import FormValidationError

logger = logging.getLogger(__name__)

AgeGroup = Literal["under18", "18-24", "25-34", "35-44", "45plus"]
PlatformTag = Literal["android", "ios", "web", "new"]
Frequency = Literal["daily", "weekly", "occasionally", "rarely"]
GameTag = Literal["uno", "ludo", "pool", "teenpatti", "monopoly"]
RetentionTag = Literal["friends", "rules", "fast", "customization", "leaderboards", "rewards"]
FeatureTag = Literal[
    "private-rooms",
    "quick-match",
    "tournaments",
    "avatar",
    "chat",
    "skins",
    "xp",
    "history",
    "challenge",
    "spectator",
]
ContactTag = Literal["email", "sms", "whatsapp", "discord", "social"]
YesNo = Literal["yes", "no"]
YesNoMaybe = Literal["yes", "no", "maybe"]

EMAIL_MESSAGE = "Please enter a valid email address."
CHOICE_MESSAGE = "Please select a valid option."
TEXT_MESSAGE = "Please enter a valid value."
REQUIRED_MESSAGE = "This field is required."

# Message shown for any failure of a given form field.
FIELD_MESSAGES: Dict[str, str] = {
    "fullName": "Name must be at least 2 characters.",
    "email": EMAIL_MESSAGE,
    "phoneNumber": TEXT_MESSAGE,
    "gamingPlatforms": "Please select at least one platform.",
    "otherRecentGames": TEXT_MESSAGE,
    "otherKeepPlaying": TEXT_MESSAGE,
    "otherDesiredFeatures": TEXT_MESSAGE,
    "specificFeature": TEXT_MESSAGE,
    "contactPreference": "Please select at least one contact method.",
    "friendEmail": EMAIL_MESSAGE,
}


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class BasicInfo(BaseModel):
    """Identity and demographics."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    full_name: str = Field(min_length=2)
    email: EmailStr
    phone_number: Optional[str] = None
    age_group: AgeGroup

    @field_validator("phone_number", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> Any:
        return _blank_to_none(value)


class WaitlistSubmission(BasicInfo):
    """Everything the waitlist form collects."""

    gaming_platforms: FrozenSet[PlatformTag] = Field(min_length=1)
    gaming_frequency: Frequency
    recent_games: FrozenSet[GameTag] = frozenset()
    other_recent_games: Optional[str] = None
    keep_playing: FrozenSet[RetentionTag] = frozenset()
    other_keep_playing: Optional[str] = None
    desired_features: FrozenSet[FeatureTag] = frozenset()
    other_desired_features: Optional[str] = None
    specific_feature: Optional[str] = None
    early_tester: YesNo
    contact_preference: FrozenSet[ContactTag] = Field(min_length=1)
    would_refer: YesNoMaybe
    friend_email: Optional[EmailStr] = None

    @field_validator(
        "other_recent_games",
        "other_keep_playing",
        "other_desired_features",
        "specific_feature",
        "friend_email",
        mode="before",
    )
    @classmethod
    def _optional_extras(cls, value: Any) -> Any:
        return _blank_to_none(value)


@dataclass
class ValidationResult:
    """Outcome of validating a set of form values.

    Exactly one of ``submission`` / ``errors`` is meaningful: ``errors`` is
    empty when validation passed.
    """

    submission: Optional[WaitlistSubmission] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.submission is not None and not self.errors

    def raise_for_errors(self) -> WaitlistSubmission:
        """Return the submission or raise :class:`FormValidationError`."""
        if not self.ok:
            raise FormValidationError(self.errors)
        return self.submission  # type: ignore[return-value]


def _message_for(field_key: str, error_type: str) -> str:
    if field_key in FIELD_MESSAGES:
        return FIELD_MESSAGES[field_key]
    if error_type == "missing":
        return REQUIRED_MESSAGE
    return CHOICE_MESSAGE


def collect_errors(exc: ValidationError) -> Dict[str, str]:
    """Flatten a pydantic error into ``{form key: message}`` (first error wins)."""
    errors: Dict[str, str] = {}
    for err in exc.errors():
        loc = err.get("loc") or ("__root__",)
        field_key = str(loc[0])
        errors.setdefault(field_key, _message_for(field_key, err.get("type", "")))
    return errors


def validate_submission(values: Mapping[str, Any]) -> ValidationResult:
    """Validate raw form *values* (camelCase keys) into a submission."""
    try:
        submission = WaitlistSubmission.model_validate(dict(values))
    except ValidationError as exc:
        errors = collect_errors(exc)
        logger.info("Waitlist form rejected: invalid fields %s", sorted(errors))
        return ValidationResult(errors=errors)
    return ValidationResult(submission=submission)
