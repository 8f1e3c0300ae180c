"""Business-logic helper for the waitlist form.

Thin façade that wires settings, the SheetDB client and a notifier into a
`WaitlistForm`, so UI code can get a ready form with a single call.
"""
from __future__ import annotations

import logging
from typing import Optional

from src.config.settings import WaitlistSettings, load_settings
from src.sheetdb import SheetDBClient
from src.waitlist.notifier import LoggingNotifier, Notifier
from src.waitlist.workflow import WaitlistForm

logger = logging.getLogger(__name__)


def build_waitlist_form(
    notifier: Optional[Notifier] = None,
    *,
    settings: Optional[WaitlistSettings] = None,
) -> WaitlistForm:
    """Return a fresh form bound to the configured SheetDB endpoint.

    Settings are re-read from the environment unless *settings* is given.
    """
    settings = settings or load_settings()
    client = SheetDBClient(settings.sheetdb_api_url, timeout=settings.sheetdb_timeout_sec)
    logger.debug("Waitlist form bound to %s", settings.sheetdb_api_url)
    return WaitlistForm(
        client,
        notifier or LoggingNotifier(),
        reset_delay=settings.reset_delay_sec,
    )
