"""Spreadsheet-backed store — implements AssignmentStore over a web-app endpoint.

The endpoint (a Google Apps Script deployment bound to the sheet) answers
``GET`` with ``{"data": [row, ...]}`` and appends one row per form ``POST``.
It offers no filtering, no uniqueness checks and no deletion, and its
reads may lag behind a write that just returned.
"""

from __future__ import annotations

import logging

import httpx

from topic_picker.application.ports.assignment_store import AssignmentStore
from topic_picker.adapters.sheets.records import domain_to_row, is_blank_row, row_to_domain
from topic_picker.config import settings
from topic_picker.domain.entities.assignment import Assignment
from topic_picker.domain.errors import StoreUnavailable

logger = logging.getLogger(__name__)


class AppsScriptAssignmentStore(AssignmentStore):
    """Fetch-all / append only; delete and clear keep the unsupported defaults."""

    def __init__(
        self,
        api_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_url = api_url or settings.sheets_api_url
        self._timeout = timeout if timeout is not None else settings.store_timeout_seconds
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout,
            follow_redirects=True,
            transport=self._transport,
        )

    async def fetch_all(self) -> list[Assignment]:
        try:
            async with self._client() as client:
                response = await client.get(self._api_url)
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Error fetching assignments from sheet: %s", e)
            raise StoreUnavailable(f"Sheet fetch failed: {e}") from e

        rows = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(rows, list):
            logger.error('Sheet response is missing "data" array: %s', payload)
            raise StoreUnavailable('Sheet response is missing "data" array')

        assignments = []
        for row in rows:
            if not isinstance(row, dict) or is_blank_row(row):
                continue
            assignment = row_to_domain(row)
            if assignment is not None:
                assignments.append(assignment)

        logger.debug("Fetched %d assignments from sheet", len(assignments))
        return assignments

    async def append(self, assignment: Assignment) -> str:
        form = domain_to_row(assignment)
        logger.info("Posting assignment %s to sheet", form["id"])
        try:
            async with self._client() as client:
                response = await client.post(self._api_url, data=form)
                response.raise_for_status()
                result = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to post assignment %s: %s", form["id"], e)
            raise StoreUnavailable(f"Sheet append failed: {e}") from e

        if isinstance(result, dict) and result.get("result") == "error":
            raise StoreUnavailable(f"Sheet rejected append: {result.get('error', result)}")

        logger.debug("Post successful: %s", result)
        return form["id"]
