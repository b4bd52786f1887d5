"""
Hotel record stores.

Stores are read-only from this application's point of view: they answer a
FilterCriteria with the full ordered list of matching hotels, or raise
DataUnavailableError. There are no partial results.
"""

import asyncio
import logging
from typing import Iterable, List

import asyncpg

from hotel_browser.db import acquire
from hotel_browser.error_handling import DataUnavailableError
from hotel_browser.filtering import HotelQuery
from hotel_browser.models import FilterCriteria, Hotel

logger = logging.getLogger(__name__)


class HotelStore:
    """Read access to hotel records"""

    async def find_hotels(self, criteria: FilterCriteria) -> List[Hotel]:
        raise NotImplementedError


class PostgresHotelStore(HotelStore):
    """Hotel records in a PostgreSQL table, read through the shared pool"""

    def __init__(self, table: str = "hotels"):
        self.table = table

    async def find_hotels(self, criteria: FilterCriteria) -> List[Hotel]:
        """
        Fetch every hotel matching the criteria.

        Args:
            criteria: Search constraints; absent fields apply no restriction

        Returns:
            Matching hotels ordered by id

        Raises:
            DataUnavailableError: If the store cannot be reached or the query fails
        """
        query = HotelQuery.from_criteria(criteria)
        sql, args = query.to_sql(self.table)
        logger.info(f"Final query: {sql} | args: {args}")

        try:
            async with acquire() as conn:
                rows = await conn.fetch(sql, *args)
            hotels = [Hotel.from_record(row) for row in rows]
        # ValueError covers malformed connection settings and rows that fail validation
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError, ValueError) as e:
            raise DataUnavailableError("Hotel data is unavailable") from e

        logger.info(f"Fetched {len(hotels)} hotels")
        return hotels


class InMemoryHotelStore(HotelStore):
    """Hotel records held in a list, filtered in input order"""

    def __init__(self, hotels: Iterable[Hotel] = ()):
        self.hotels = list(hotels)

    async def find_hotels(self, criteria: FilterCriteria) -> List[Hotel]:
        query = HotelQuery.from_criteria(criteria)
        logger.info(f"Final query: {query.describe()}")
        return query.filter(self.hotels)
