"""
Search Facets

Independent filter dimensions. Each facet answers matches(candidate) and
never raises: malformed criteria collapse to "no constraint".
"""
import math
from enum import Enum
from typing import Iterable, Optional, Set

from src.realestate_directory.search.expander import DistanceExpander
from src.realestate_directory.transformers.address_formatter import normalize_text

# Criterion values that mean "don't filter on this facet"
WILDCARDS = frozenset({"", "any", "all"})


def parse_number(value) -> Optional[float]:
    """
    Parse free-form numeric input.

    Returns:
        Finite float, or None for empty/unparseable/non-finite input
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None

    text = str(value).strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def plain(value) -> str:
    """Normalized text form of a criterion or field value (enums by value)."""
    if isinstance(value, Enum):
        value = value.value
    if value is None:
        return ""
    return normalize_text(str(value))


def is_wildcard(value) -> bool:
    return value is None or plain(value) in WILDCARDS


class Facet:
    """Base class for a single filter dimension."""

    name = "facet"

    def matches(self, candidate) -> bool:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__}({self.name})>"


class ExactMatch(Facet):
    """Field equals the criterion; wildcard criteria always match."""

    def __init__(self, field: str, expected):
        self.name = field
        self.field = field
        self.expected = None if is_wildcard(expected) else plain(expected)

    def matches(self, candidate) -> bool:
        if self.expected is None:
            return True
        return plain(getattr(candidate, self.field, None)) == self.expected


class AtLeast(Facet):
    """
    "N or more" room counts. A missing candidate value counts as 0.
    """

    def __init__(self, field: str, minimum):
        self.name = field
        self.field = field
        self.minimum = None if is_wildcard(minimum) else parse_number(minimum)

    def matches(self, candidate) -> bool:
        if self.minimum is None:
            return True
        value = getattr(candidate, self.field, None)
        return (value or 0) >= self.minimum


class PriceRange(Facet):
    """
    Inclusive min/max on price. Unpriced candidates pass unless
    only_with_price is set.
    """

    name = "price"

    def __init__(self, price_min=None, price_max=None, only_with_price: bool = False,
                 field: str = "price"):
        self.field = field
        self.price_min = parse_number(price_min)
        self.price_max = parse_number(price_max)
        self.only_with_price = only_with_price

    def matches(self, candidate) -> bool:
        price = getattr(candidate, self.field, None)
        if price is None:
            return not self.only_with_price
        if self.price_min is not None and price < self.price_min:
            return False
        if self.price_max is not None and price > self.price_max:
            return False
        return True


class ContainsAll(Facet):
    """
    Candidate's tag set must hold every selected value (AND across tags).
    Comparison is trimmed and case-insensitive.
    """

    def __init__(self, field: str, values: Optional[Iterable]):
        self.name = field
        self.field = field
        self.required: Set[str] = {plain(value) for value in (values or []) if not is_wildcard(value)}

    def matches(self, candidate) -> bool:
        if not self.required:
            return True
        owned = {plain(value) for value in (getattr(candidate, self.field, None) or [])}
        return self.required.issubset(owned)


class KeywordMatch(Facet):
    """Case-insensitive substring of the candidate's descriptive text."""

    name = "keyword"

    def __init__(self, keyword: Optional[str]):
        self.keyword = normalize_text(keyword)

    def matches(self, candidate) -> bool:
        if not self.keyword:
            return True
        return self.keyword in normalize_text(candidate.search_text())


class LocationMatch(Facet):
    """
    Suburb/postcode matching, optionally widened to surrounding suburbs.

    Without surrounding suburbs a location matches when its suburb contains
    the query, its postcode equals the query, or its address text contains
    the query. With surrounding suburbs it matches when its suburb is in the
    expanded set or its postcode equals the query. Candidates with several
    locations (service areas) match if any location does.
    """

    name = "location"

    def __init__(self, query: Optional[str], include_surrounding: bool = False,
                 radius_km: float = 0, expander: Optional[DistanceExpander] = None):
        self.query = (query or "").strip()
        self.needle = normalize_text(self.query)
        self.include_surrounding = include_surrounding
        self.nearby: Set[str] = set()

        if self.query and include_surrounding:
            expander = expander or DistanceExpander()
            self.nearby = {normalize_text(suburb) for suburb in expander.expand(self.query, radius_km)}

    def matches(self, candidate) -> bool:
        if not self.query:
            return True
        return any(self._matches_location(location) for location in candidate.search_locations())

    def _matches_location(self, location) -> bool:
        suburb = normalize_text(location.suburb)
        postcode = (location.postcode or "").strip()

        if postcode == self.query:
            return True

        if self.include_surrounding:
            return suburb in self.nearby

        return self.needle in suburb or self.needle in normalize_text(location.address_text)
