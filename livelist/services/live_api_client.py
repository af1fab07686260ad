"""HTTP client for the live list backend."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from livelist.domain import LivePage
from livelist.services.errors import LiveApiError

logger = logging.getLogger("LiveList.ApiClient")

# The backend expects "0" when asking for the first page
FIRST_PAGE_CURSOR = "0"


class LiveApiClient:
    """Fetches pages of live items.

    The underlying ``httpx.AsyncClient`` is created on first use so it binds to
    the event loop that actually runs the requests.
    """

    def __init__(
        self,
        base_url: str,
        list_path: str,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.list_path = list_path
        self.timeout_seconds = timeout_seconds
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            timeout = httpx.Timeout(self.timeout_seconds, connect=min(5.0, self.timeout_seconds))
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=timeout,
                transport=self._transport,
                headers={"Content-Type": "application/json;charset=utf-8"},
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch_page(self, next_id: Optional[str] = None) -> LivePage:
        """
        Fetch one page of live items.

        Args:
            next_id: Cursor returned by the previous page, or None for the first page

        Returns:
            LivePage with the items and the cursor for the following page

        Raises:
            LiveApiError: On transport failures, HTTP errors or malformed payloads
        """
        payload = {"next": next_id or FIRST_PAGE_CURSOR, "record": False}
        logger.info(f"Requesting live list page (next={payload['next']})")

        try:
            response = await self._get_client().post(self.list_path, json=payload)
        except httpx.TimeoutException as e:
            logger.warning(f"Live list request timed out: {e}")
            raise LiveApiError("The request timed out.") from e
        except httpx.TransportError as e:
            logger.warning(f"Live list request failed: {e}")
            raise LiveApiError("Network unavailable") from e

        if response.status_code >= 400:
            logger.error(f"Live list request returned HTTP {response.status_code}")
            raise LiveApiError(
                f"Server error ({response.status_code})",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Live list response is not JSON: {e}")
            raise LiveApiError("The server returned an invalid response.") from e

        if not isinstance(body, dict):
            raise LiveApiError("The server returned an invalid response.")

        if body.get("success") is False:
            message = body.get("message") or "The server rejected the request."
            logger.error(f"Live list request rejected: {message}")
            raise LiveApiError(message, status_code=body.get("status"))

        try:
            page = LivePage.model_validate(body.get("content") or {})
        except ValidationError as e:
            logger.error(f"Live list payload failed validation: {e}")
            raise LiveApiError("The server returned an invalid response.") from e

        logger.info(f"Received {len(page.items)} live items (next={page.next_id})")
        return page
