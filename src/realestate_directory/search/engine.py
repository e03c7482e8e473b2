"""
Predicate Filter Engine

Applies a FilterSpec to a list of candidates in a single pass: eligibility
gate first, then every facet combined with AND, then optional shuffling.
"""
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from config.settings import settings
from src.realestate_directory.search.expander import DistanceExpander
from src.realestate_directory.search.facets import Facet, LocationMatch
from src.realestate_directory.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class FilterSpec:
    """
    Search criteria for one search invocation.

    Attributes:
        query: Suburb name, postcode or address fragment
        include_surrounding: Widen the location to nearby suburbs
        radius_km: Radius used when include_surrounding is set
        facets: Additional facet constraints (ANDed)
        shuffle: Return results as a random permutation
    """
    query: str = ""
    include_surrounding: bool = False
    radius_km: float = field(default_factory=lambda: settings.default_radius_km)
    facets: List[Facet] = field(default_factory=list)
    shuffle: bool = False


class FilterEngine:
    """
    Filters candidates against a FilterSpec.

    Candidates must provide is_visible(), search_locations() and
    search_text(), plus whatever attributes their facets read. The engine
    has no state beyond its collaborators; the same inputs give the same
    output unless shuffling is requested.
    """

    def __init__(self, expander: Optional[DistanceExpander] = None,
                 rng: Optional[random.Random] = None):
        """
        Args:
            expander: Surrounding-suburb expander (default: bundled gazetteer)
            rng: Random source for shuffling (default: module random)
        """
        self.expander = expander or DistanceExpander()
        self.rng = rng

    def build_facets(self, criteria: FilterSpec) -> List[Facet]:
        location = LocationMatch(
            criteria.query,
            include_surrounding=criteria.include_surrounding,
            radius_km=criteria.radius_km,
            expander=self.expander,
        )
        return [*criteria.facets, location]

    def apply(self, candidates: Sequence, criteria: FilterSpec) -> list:
        """
        Filter candidates.

        Args:
            candidates: Records of one entity type
            criteria: Search criteria

        Returns:
            New list of matching candidates; input order unless criteria.shuffle
        """
        visible = [candidate for candidate in candidates if candidate.is_visible()]
        facets = self.build_facets(criteria)

        results = [
            candidate for candidate in visible
            if all(facet.matches(candidate) for facet in facets)
        ]

        if criteria.shuffle:
            if self.rng is not None:
                self.rng.shuffle(results)
            else:
                random.shuffle(results)

        logger.debug(
            "filter_applied",
            candidates=len(candidates),
            visible=len(visible),
            results=len(results),
            facets=[facet.name for facet in facets],
            include_surrounding=criteria.include_surrounding,
        )

        return results
