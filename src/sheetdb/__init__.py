"""SheetDB REST API client.

SheetDB exposes a Google Sheet as a JSON API; the waitlist form only ever
appends one row per submission:

    from src.sheetdb import SheetDBClient
"""

from src.sheetdb.client import SheetDBClient

__all__ = [
    'SheetDBClient',
]
