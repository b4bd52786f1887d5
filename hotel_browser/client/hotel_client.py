"""
Hotel API client - fetches filtered hotel result sets from the read endpoint.
"""

import asyncio
import logging
from typing import List, Optional

import aiohttp
from pydantic import ValidationError

from hotel_browser.config import get_app_settings
from hotel_browser.error_handling import HotelFetchError
from hotel_browser.models import FilterCriteria, Hotel

logger = logging.getLogger(__name__)


class HotelApiClient:
    """
    Client for ``GET /api/fetch-data``.

    Every call returns the full result set for one search; batching is
    left to the presenter. Failures are never retried.
    """

    FETCH_PATH = "/api/fetch-data"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        api = get_app_settings().api
        self.base_url = (base_url or api.base_url).rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds or api.timeout_seconds)
        self._session = session
        # Sessions passed in by the caller are closed by the caller
        self._owns_session = session is None

    async def __aenter__(self):
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close the session if this client created it"""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    async def _ensure_session(self):
        """Ensure we have an open session"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True

    @property
    def fetch_url(self) -> str:
        return f"{self.base_url}{self.FETCH_PATH}"

    async def fetch_hotels(self, criteria: FilterCriteria) -> List[Hotel]:
        """
        Fetch every hotel matching the criteria.

        Args:
            criteria: Search filters; absent fields are left out of the query string

        Returns:
            Hotels in the order the server returned them

        Raises:
            HotelFetchError: On network error, timeout, non-200 status or malformed payload
        """
        await self._ensure_session()
        params = criteria.to_query_params()
        logger.debug(f"Fetching {self.fetch_url} with params {params}")

        try:
            async with self._session.get(self.fetch_url, params=params, timeout=self.timeout) as response:
                if response.status != 200:
                    raise HotelFetchError(f"Failed to fetch hotel data (status {response.status})")
                data = await response.json()
        except aiohttp.ClientError as e:
            raise HotelFetchError(f"Failed to fetch hotel data: {e}") from e
        except asyncio.TimeoutError as e:
            raise HotelFetchError("Failed to fetch hotel data: request timed out") from e
        except ValueError as e:
            raise HotelFetchError("Failed to fetch hotel data: response is not valid JSON") from e

        if not isinstance(data, list):
            raise HotelFetchError("Failed to fetch hotel data: unexpected response payload")

        try:
            return [Hotel.model_validate(item) for item in data]
        except ValidationError as e:
            raise HotelFetchError(f"Failed to fetch hotel data: invalid hotel record ({e.error_count()} errors)") from e
