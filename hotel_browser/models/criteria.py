"""
Search filter criteria.

A FilterCriteria exists for the duration of one search submission. It is
built from raw query-string values on the server and turned back into
query-string values by the client.
"""

import math
from dataclasses import dataclass
from typing import Dict, Optional, Union


def parse_price_bound(raw: Optional[Union[str, int, float]]) -> Optional[int]:
    """Parse a price bound as a non-negative whole number, or None.

    Fractions are truncated toward zero, so "99.5" bounds at 99. A bad bound
    only disables itself; it never fails the whole search.

    Examples:
        >>> parse_price_bound("150")
        150
        >>> parse_price_bound("99.5")
        99
        >>> parse_price_bound("-5") is None
        True
        >>> parse_price_bound("cheap") is None
        True
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None

    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None

    if not math.isfinite(value) or value < 0:
        return None

    return int(value)


def _clean_text(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    raw = raw.strip()
    return raw or None


def _format_bound(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class FilterCriteria:
    """Optional constraints for one hotel search.

    Attributes:
        hotel_name: Case-insensitive substring of the hotel name
        hotel_city: Case-insensitive exact city
        min_price: Inclusive lower price bound
        max_price: Inclusive upper price bound
    """
    hotel_name: Optional[str] = None
    hotel_city: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None

    @classmethod
    def from_query_params(
        cls,
        hotel_name: Optional[str] = None,
        hotel_city: Optional[str] = None,
        min_price: Optional[str] = None,
        max_price: Optional[str] = None
    ) -> 'FilterCriteria':
        """Build criteria from raw query-string values.

        Blank text is treated as not supplied, and each price bound is
        parsed on its own with ``parse_price_bound``.
        """
        return cls(
            hotel_name=_clean_text(hotel_name),
            hotel_city=_clean_text(hotel_city),
            min_price=parse_price_bound(min_price),
            max_price=parse_price_bound(max_price),
        )

    def to_query_params(self) -> Dict[str, str]:
        """Convert criteria to query-string parameters.

        Returns:
            Dictionary of wire parameter names to values, absent fields omitted
        """
        params = {}

        if self.hotel_name:
            params['hotelName'] = self.hotel_name

        if self.hotel_city:
            params['hotelCity'] = self.hotel_city

        if self.min_price is not None:
            params['minPrice'] = _format_bound(self.min_price)

        if self.max_price is not None:
            params['maxPrice'] = _format_bound(self.max_price)

        return params

    def is_empty(self) -> bool:
        """True when no constraint is present."""
        return not self.to_query_params()
