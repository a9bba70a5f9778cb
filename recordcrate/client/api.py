"""HTTP client for the records API."""
from __future__ import annotations

import logging
from typing import List

import httpx

from recordcrate.config import API_URL, CLIENT_TIMEOUT_SEC
from recordcrate.core.errors import FetchFailed, SubmissionFailed
from recordcrate.models.record import Record, RecordList

logger = logging.getLogger(__name__)


class RecordsClient:
    """Async client for GET /records and POST /records/new.

    Transport errors, non-2xx statuses and bodies that are not valid records
    are all raised as FetchFailed / SubmissionFailed.
    """

    def __init__(
        self,
        api_url: str = API_URL,
        timeout: float = CLIENT_TIMEOUT_SEC,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.client = httpx.AsyncClient(base_url=self.api_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> RecordsClient:
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def fetch_records(self) -> List[Record]:
        try:
            res = await self.client.get("/records", headers={"Accept": "application/json"})
            res.raise_for_status()
            return RecordList.validate_python(res.json())
        except (httpx.HTTPError, ValueError) as e:
            raise FetchFailed(f"GET /records: {e}") from e

    async def create_record(self, record: Record) -> Record:
        """Submit a candidate record; return the record as acknowledged by the server."""
        try:
            res = await self.client.post("/records/new", json=record.model_dump())
            res.raise_for_status()
            created = Record.model_validate(res.json())
        except (httpx.HTTPError, ValueError) as e:
            raise SubmissionFailed(f"POST /records/new: {e}") from e
        logger.info("Created record %r", created.album)
        return created
