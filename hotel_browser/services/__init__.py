"""Services for Hotel Browser"""

from .hotel_store import HotelStore, PostgresHotelStore, InMemoryHotelStore

__all__ = ["HotelStore", "PostgresHotelStore", "InMemoryHotelStore"]
