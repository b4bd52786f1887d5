"""Data models for Hotel Browser"""

from .hotel import Hotel, FEATURE_COUNT
from .criteria import FilterCriteria, parse_price_bound

__all__ = [
    "Hotel",
    "FEATURE_COUNT",
    "FilterCriteria",
    "parse_price_bound",
]
