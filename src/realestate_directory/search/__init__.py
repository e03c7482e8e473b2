"""
Search Package

Location-aware search: surrounding-suburb expansion, facet predicates and
the filter engine that combines them.
"""
from src.realestate_directory.search.expander import DistanceExpander
from src.realestate_directory.search.facets import (
    AtLeast,
    ContainsAll,
    ExactMatch,
    Facet,
    KeywordMatch,
    LocationMatch,
    PriceRange,
    parse_number,
)
from src.realestate_directory.search.engine import FilterEngine, FilterSpec

__all__ = [
    "DistanceExpander",
    "Facet",
    "ExactMatch",
    "AtLeast",
    "PriceRange",
    "ContainsAll",
    "KeywordMatch",
    "LocationMatch",
    "parse_number",
    "FilterEngine",
    "FilterSpec",
]
