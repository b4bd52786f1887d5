"""
Query construction for hotel searches.

Each supplied filter field contributes one independent clause. Clause
builders return None for absent input, and HotelQuery folds whatever is
left into a single conjunction. With no clauses the query selects every
record.
"""

import re
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from hotel_browser.models import FilterCriteria, Hotel


IDENTIFIER_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')

# Allocates a positional placeholder ($1, $2, ...) for a bound value
Binder = Callable[[Any], str]


class Clause:
    """A single constraint on hotel records.

    Subclasses render themselves as a SQL fragment and evaluate themselves
    against a Hotel, and the two forms must agree.
    """

    def to_sql(self, bind: Binder) -> str:
        raise NotImplementedError

    def matches(self, hotel: Hotel) -> bool:
        raise NotImplementedError

    def describe(self) -> Dict[str, Any]:
        raise NotImplementedError


class NameClause(Clause):
    """Case-insensitive substring match on the hotel name."""

    def __init__(self, substring: str):
        self.substring = substring

    def to_sql(self, bind: Binder) -> str:
        # strpos keeps user text literal, unlike LIKE or regex patterns
        return f"strpos(lower(hotel_name), lower({bind(self.substring)})) > 0"

    def matches(self, hotel: Hotel) -> bool:
        return self.substring.lower() in hotel.hotel_name.lower()

    def describe(self) -> Dict[str, Any]:
        return {'hotel_name': {'contains': self.substring, 'case_insensitive': True}}


class CityClause(Clause):
    """Case-insensitive exact match on the city."""

    def __init__(self, city: str):
        self.city = city

    def to_sql(self, bind: Binder) -> str:
        return f"lower(city) = lower({bind(self.city)})"

    def matches(self, hotel: Hotel) -> bool:
        return hotel.city.lower() == self.city.lower()

    def describe(self) -> Dict[str, Any]:
        return {'city': {'equals': self.city, 'case_insensitive': True}}


class PriceClause(Clause):
    """Inclusive price range; either bound may be open."""

    def __init__(self, min_price: Optional[float] = None, max_price: Optional[float] = None):
        if min_price is None and max_price is None:
            raise ValueError("PriceClause needs at least one bound")
        self.min_price = min_price
        self.max_price = max_price

    def to_sql(self, bind: Binder) -> str:
        parts = []
        if self.min_price is not None:
            parts.append(f"hotel_price >= {bind(self.min_price)}")
        if self.max_price is not None:
            parts.append(f"hotel_price <= {bind(self.max_price)}")
        return " AND ".join(parts)

    def matches(self, hotel: Hotel) -> bool:
        if self.min_price is not None and hotel.hotel_price < self.min_price:
            return False
        if self.max_price is not None and hotel.hotel_price > self.max_price:
            return False
        return True

    def describe(self) -> Dict[str, Any]:
        bounds = {}
        if self.min_price is not None:
            bounds['gte'] = self.min_price
        if self.max_price is not None:
            bounds['lte'] = self.max_price
        return {'hotel_price': bounds}


def name_clause(hotel_name: Optional[str]) -> Optional[Clause]:
    """Clause for the name filter, or None when no name was supplied."""
    if not hotel_name:
        return None
    return NameClause(hotel_name)


def city_clause(hotel_city: Optional[str]) -> Optional[Clause]:
    """Clause for the city filter, or None when no city was supplied."""
    if not hotel_city:
        return None
    return CityClause(hotel_city)


def price_clause(min_price: Optional[float], max_price: Optional[float]) -> Optional[Clause]:
    """Clause for the price range, or None when neither bound was supplied."""
    if min_price is None and max_price is None:
        return None
    return PriceClause(min_price=min_price, max_price=max_price)


class HotelQuery:
    """Conjunction of the clauses present in a search.

    Example:
        >>> query = HotelQuery.from_criteria(FilterCriteria(min_price=100, max_price=150))
        >>> query.to_sql()
        ('SELECT * FROM hotels WHERE hotel_price >= $1 AND hotel_price <= $2 ORDER BY id', [100, 150])
    """

    def __init__(self, clauses: Sequence[Clause] = ()):
        self.clauses: List[Clause] = list(clauses)

    @classmethod
    def from_criteria(cls, criteria: FilterCriteria) -> 'HotelQuery':
        """Fold the clauses present in criteria into a query."""
        candidates = [
            name_clause(criteria.hotel_name),
            city_clause(criteria.hotel_city),
            price_clause(criteria.min_price, criteria.max_price),
        ]
        return cls([clause for clause in candidates if clause is not None])

    def to_sql(self, table: str = "hotels") -> Tuple[str, List[Any]]:
        """Render the query as parameterized SQL.

        Args:
            table: Table holding the hotel records (plain identifier)

        Returns:
            Tuple of SQL text and positional arguments

        Raises:
            ValueError: If the table name is not a plain identifier
        """
        if not IDENTIFIER_PATTERN.match(table):
            raise ValueError(f"Invalid table name: {table!r}")

        args: List[Any] = []

        def bind(value: Any) -> str:
            args.append(value)
            return f"${len(args)}"

        sql = f"SELECT * FROM {table}"
        conditions = [clause.to_sql(bind) for clause in self.clauses]
        if conditions:
            sql += " WHERE " + " AND ".join(conditions)
        sql += " ORDER BY id"

        return sql, args

    def matches(self, hotel: Hotel) -> bool:
        """True when the hotel satisfies every clause."""
        return all(clause.matches(hotel) for clause in self.clauses)

    def filter(self, hotels: Sequence[Hotel]) -> List[Hotel]:
        """Matching hotels, in their original order."""
        return [hotel for hotel in hotels if self.matches(hotel)]

    def describe(self) -> Dict[str, Any]:
        """Loggable summary of the present constraints."""
        summary: Dict[str, Any] = {}
        for clause in self.clauses:
            summary.update(clause.describe())
        return summary
