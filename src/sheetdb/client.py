"""SheetDB API integration.

Thin wrapper over SheetDB's "create row" endpoint
(https://docs.sheetdb.io/sheetdb-api/create). One call, one attempt: there is
no retry or backoff, callers decide what to do with a :class:`SubmissionError`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from src.config.settings import SETTINGS
from src.waitlist.errors import SubmissionError
from src.waitlist.payload import build_request_body

logger = logging.getLogger(__name__)

HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class SheetDBClient:
    """SheetDB API client."""

    def __init__(self, api_url: str | None = None, timeout: Optional[float] = None):
        """Initialize SheetDB client.

        Args:
            api_url: Full SheetDB endpoint (``https://sheetdb.io/api/v1/<id>``)
            timeout: Seconds to wait for the response; ``None`` waits forever
        """
        self.api_url = api_url or SETTINGS.sheetdb_api_url
        self.timeout = timeout if timeout is not None else SETTINGS.sheetdb_timeout_sec

        if not self.api_url:
            raise ValueError("SheetDB API URL must be provided.")

    def submit(self, row: Dict[str, str]) -> Dict[str, Any]:
        """Append *row* to the sheet and return the parsed JSON response.

        Raises:
            SubmissionError: transport failure, non-2xx status, or a body
                that is not JSON
        """
        logger.info("Submitting waitlist row (%d columns) to SheetDB", len(row))

        try:
            response = requests.post(
                self.api_url,
                json=build_request_body(row),
                headers=HEADERS,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"SheetDB request failed: {e}")
            raise SubmissionError(f"Could not reach SheetDB: {e}") from e

        logger.info("SheetDB response status: %s", response.status_code)

        if not 200 <= response.status_code < 300:
            logger.error(f"SheetDB rejected submission: {response.status_code} - {response.text}")
            raise SubmissionError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise SubmissionError(
                f"SheetDB returned a non-JSON body: {e}",
                status_code=response.status_code,
            ) from e
