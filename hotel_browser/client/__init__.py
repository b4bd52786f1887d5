"""HTTP client for the hotel read endpoint"""

from .hotel_client import HotelApiClient

__all__ = ["HotelApiClient"]
