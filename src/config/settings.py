"""Minimal configuration for the waitlist form.

Only parameters that the current codebase uses are kept.
• SHEETDB_API_URL          – SheetDB endpoint that stores submissions.
• SHEETDB_TIMEOUT_SEC      – optional request timeout (unset = no timeout).
• WAITLIST_RESET_DELAY_SEC – seconds the success view stays before reset.
• LOG_LEVEL                – root logging level for the Streamlit app.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import load_dotenv  # type: ignore

# Load variables from .env if present
load_dotenv()

DEFAULT_SHEETDB_API_URL = "https://sheetdb.io/api/v1/kz7yi3363tsnq"


def _get_optional_float(name: str) -> Optional[float]:
    """Return env var *name* as float, or None when unset / blank."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    return float(raw)


@dataclass(frozen=True)
class WaitlistSettings:
    """Immutable container for runtime parameters."""

    # --- External storage -------------------------------------------------
    sheetdb_api_url: str = DEFAULT_SHEETDB_API_URL
    sheetdb_timeout_sec: Optional[float] = None

    # --- Form lifecycle -------------------------------------------------
    reset_delay_sec: float = 3.0

    # --- Logging --------------------------------------------------------
    log_level: str = "INFO"


def load_settings() -> WaitlistSettings:
    """Re-read the environment and return fresh settings."""
    return WaitlistSettings(
        sheetdb_api_url=os.getenv("SHEETDB_API_URL", DEFAULT_SHEETDB_API_URL),
        sheetdb_timeout_sec=_get_optional_float("SHEETDB_TIMEOUT_SEC"),
        reset_delay_sec=float(os.getenv("WAITLIST_RESET_DELAY_SEC", "3")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


# Singleton used by most callers
SETTINGS = load_settings()


def update_from_kwargs(**overrides) -> WaitlistSettings:  # type: ignore[override]
    """Return a new WaitlistSettings with supplied overrides."""

    return replace(SETTINGS, **overrides)
