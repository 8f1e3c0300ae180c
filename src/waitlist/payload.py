"""Map a validated submission onto the flat row SheetDB stores."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

from . import options as opts
from .schema import WaitlistSubmission

SEPARATOR = ", "

# Column order of the storage spreadsheet.
SHEET_COLUMNS = (
    "full_name",
    "email",
    "phone_number",
    "age_group",
    "gaming_platforms",
    "gaming_frequency",
    "recent_games",
    "other_recent_games",
    "keep_playing_factors",
    "other_keep_playing",
    "desired_features",
    "other_desired_features",
    "specific_feature_request",
    "early_tester",
    "contact_preference",
    "would_refer",
    "friend_email",
    "submitted_at",
)


def _join(selected: Iterable[str], options: opts.Options) -> str:
    return SEPARATOR.join(opts.ordered(selected, options))


def _text(value: Optional[Any]) -> str:
    return "" if value is None else str(value)


def to_sheet_row(
    submission: WaitlistSubmission, submitted_at: Optional[datetime] = None
) -> Dict[str, str]:
    """Flatten *submission* into snake_case string columns.

    Multi-selects are joined with ``", "`` in option order, absent optional
    fields become ``""`` and ``submitted_at`` (ISO-8601, UTC) is stamped now
    unless given.
    """
    stamp = submitted_at or datetime.now(timezone.utc)
    s = submission
    row = {
        "full_name": s.full_name,
        "email": str(s.email),
        "phone_number": _text(s.phone_number),
        "age_group": s.age_group,
        "gaming_platforms": _join(s.gaming_platforms, opts.GAMING_PLATFORMS),
        "gaming_frequency": s.gaming_frequency,
        "recent_games": _join(s.recent_games, opts.RECENT_GAMES),
        "other_recent_games": _text(s.other_recent_games),
        "keep_playing_factors": _join(s.keep_playing, opts.KEEP_PLAYING_FACTORS),
        "other_keep_playing": _text(s.other_keep_playing),
        "desired_features": _join(s.desired_features, opts.DESIRED_FEATURES),
        "other_desired_features": _text(s.other_desired_features),
        "specific_feature_request": _text(s.specific_feature),
        "early_tester": s.early_tester,
        "contact_preference": _join(s.contact_preference, opts.CONTACT_PREFERENCES),
        "would_refer": s.would_refer,
        "friend_email": _text(s.friend_email),
        "submitted_at": stamp.isoformat(),
    }
    return {column: row[column] for column in SHEET_COLUMNS}


def build_request_body(row: Dict[str, str]) -> Dict[str, Dict[str, str]]:
    """Wrap a sheet row in the envelope the SheetDB API expects."""
    return {"data": row}
