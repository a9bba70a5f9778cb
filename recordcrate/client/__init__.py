"""Client side: records API client, session and text rendering."""
from recordcrate.client.api import RecordsClient
from recordcrate.client.session import Session

__all__ = ["RecordsClient", "Session"]
