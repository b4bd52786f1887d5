"""
Filtering module for hotel records.

Turns FilterCriteria into a conjunctive query that renders to SQL for the
record store or evaluates against in-memory hotels.
"""

from .query_builder import (
    Clause,
    NameClause,
    CityClause,
    PriceClause,
    HotelQuery,
    name_clause,
    city_clause,
    price_clause,
)

__all__ = [
    'Clause',
    'NameClause',
    'CityClause',
    'PriceClause',
    'HotelQuery',
    'name_clause',
    'city_clause',
    'price_clause',
]
