"""
Surrounding Suburb Expansion

Turns a suburb/postcode query and a radius into the set of suburb names
considered nearby, using haversine distance over the gazetteer.
"""
from typing import Optional, Set

from config.settings import settings
from src.realestate_directory.geo.gazetteer import SuburbGazetteer
from src.realestate_directory.utils.geo_utils import haversine_km
from src.realestate_directory.utils.logger import get_logger

logger = get_logger(__name__)


class DistanceExpander:
    """
    Expands a location query to every gazetteer suburb within a radius.

    Unresolvable queries never fail the search: they come back as a single
    literal term (the trimmed query text) for plain name matching.
    """

    def __init__(self, gazetteer: Optional[SuburbGazetteer] = None,
                 earth_radius_km: Optional[float] = None):
        """
        Args:
            gazetteer: Suburb dataset (default: bundled Australian list)
            earth_radius_km: Sphere radius for haversine (default from settings)
        """
        self.gazetteer = gazetteer if gazetteer is not None else SuburbGazetteer.default()
        self.earth_radius_km = earth_radius_km or settings.earth_radius_km

    def expand(self, query_text: Optional[str], radius_km: float) -> Set[str]:
        """
        Resolve the query to an anchor suburb and collect its neighbours.

        Args:
            query_text: Suburb name (any case) or postcode
            radius_km: Inclusive search radius in kilometres; negative is 0

        Returns:
            Suburb names within the radius, always including the anchor.
            {query_text.strip()} when the anchor cannot be resolved; empty
            set for a blank query.
        """
        query = (query_text or "").strip()
        if not query:
            return set()

        radius = max(float(radius_km or 0), 0.0)

        anchor = self.gazetteer.find_by_suburb_or_postcode(query)
        if anchor is None:
            logger.debug("expansion_anchor_unresolved", query=query[:50])
            return {query}

        nearby = {anchor.suburb}

        if not anchor.has_coordinates():
            logger.debug("expansion_anchor_without_coordinates", anchor=anchor.suburb)
            return nearby

        for record in self.gazetteer:
            if not record.has_coordinates():
                continue
            distance = haversine_km(
                anchor.latitude,
                anchor.longitude,
                record.latitude,
                record.longitude,
                earth_radius_km=self.earth_radius_km,
            )
            if distance <= radius:
                nearby.add(record.suburb)

        logger.debug(
            "expansion_complete",
            anchor=anchor.suburb,
            radius_km=radius,
            suburbs_found=len(nearby),
        )

        return nearby
