"""
Hotel read routes.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from hotel_browser.config import get_app_settings
from hotel_browser.error_handling import DataUnavailableError, log_error
from hotel_browser.models import FilterCriteria
from hotel_browser.services import HotelStore, PostgresHotelStore

logger = logging.getLogger(__name__)

router = APIRouter()

FETCH_FAILED_MESSAGE = "Failed to fetch data"


def get_hotel_store() -> HotelStore:
    """Store dependency; replaced in tests and local development."""
    return PostgresHotelStore(table=get_app_settings().database.table)


@router.get("/fetch-data")
async def fetch_data(
    hotelName: Optional[str] = None,
    hotelCity: Optional[str] = None,
    minPrice: Optional[str] = None,
    maxPrice: Optional[str] = None,
    store: HotelStore = Depends(get_hotel_store)
):
    """
    Return every hotel matching the supplied filters.

    All parameters are optional and AND-ed together. Prices arrive as raw
    strings: a bound that is not a non-negative number is ignored rather
    than rejected, and a fractional bound is truncated to a whole number.

    Returns:
        JSON array of hotel records, or ``{"error": ...}`` with status 500
    """
    logger.info(f"Query parameters: {hotelName!r}, {hotelCity!r}, {minPrice!r}, {maxPrice!r}")

    criteria = FilterCriteria.from_query_params(
        hotel_name=hotelName,
        hotel_city=hotelCity,
        min_price=minPrice,
        max_price=maxPrice
    )

    try:
        hotels = await store.find_hotels(criteria)
    except DataUnavailableError as e:
        log_error("fetch_hotels", e, criteria=criteria)
        return JSONResponse({"error": FETCH_FAILED_MESSAGE}, status_code=500)
    except Exception as e:
        logger.exception(f"Unexpected error fetching hotels: {e}")
        return JSONResponse({"error": FETCH_FAILED_MESSAGE}, status_code=500)

    logger.info(f"Returning {len(hotels)} hotels")
    return JSONResponse([hotel.to_wire() for hotel in hotels])
