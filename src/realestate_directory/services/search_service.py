"""
Service for searching the directory by entity type.
"""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.realestate_directory.db.repository import DirectoryRepository
from src.realestate_directory.models.enums import (
    EntityType,
    VISIBLE_LISTING_STATUSES,
    VISIBLE_PROFILE_STATUSES,
)
from src.realestate_directory.search.engine import FilterEngine, FilterSpec
from src.realestate_directory.search.facets import (
    AtLeast,
    ContainsAll,
    ExactMatch,
    KeywordMatch,
    PriceRange,
)
from src.realestate_directory.search.forms import (
    AgencySearchForm,
    AgentSearchForm,
    LocationForm,
    PropertySearchForm,
    ServiceSearchForm,
    ToolSearchForm,
)
from src.realestate_directory.utils.logger import get_logger

logger = get_logger(__name__)


class DirectorySearchService:
    def __init__(self, session: Session, repository: Optional[DirectoryRepository] = None,
                 engine: Optional[FilterEngine] = None):
        self.session = session
        self.repository = repository or DirectoryRepository()
        self.engine = engine or FilterEngine()

    def search_properties(self, form: PropertySearchForm) -> List:
        criteria = self._location_spec(form)
        criteria.facets = [
            ExactMatch("segment", form.segment),
            ExactMatch("intent", form.intent),
            ExactMatch("property_type", form.property_type),
            PriceRange(form.price_min, form.price_max, only_with_price=form.only_with_price),
            AtLeast("bedrooms", form.bedrooms),
            AtLeast("bathrooms", form.bathrooms),
            AtLeast("car_spaces", form.car_spaces),
            KeywordMatch(form.keyword),
            ContainsAll("features", form.feature_keywords),
        ]
        return self._run(EntityType.PROPERTY, criteria)

    def search_agencies(self, form: AgencySearchForm) -> List:
        criteria = self._location_spec(form, shuffle=True)
        criteria.facets = [
            ExactMatch("classification", form.classification),
            KeywordMatch(form.keyword),
        ]
        return self._run(EntityType.AGENCY, criteria)

    def search_agents(self, form: AgentSearchForm) -> List:
        criteria = self._location_spec(form, shuffle=True)
        criteria.facets = [
            ExactMatch("classification", form.classification),
            ExactMatch("agent_type", form.agent_type),
            KeywordMatch(form.keyword),
        ]
        return self._run(EntityType.AGENT, criteria)

    def search_services(self, form: ServiceSearchForm) -> List:
        criteria = self._location_spec(form)
        criteria.facets = [ContainsAll("categories", [form.category])]
        return self._run(EntityType.SERVICE, criteria)

    def search_tools(self, form: ToolSearchForm) -> List:
        criteria = self._location_spec(form)
        criteria.facets = [ExactMatch("tool_category", form.tool_category)]
        return self._run(EntityType.TOOL, criteria)

    @staticmethod
    def _location_spec(form: LocationForm, shuffle: bool = False) -> FilterSpec:
        return FilterSpec(
            query=form.query_text,
            include_surrounding=form.include_surrounding,
            radius_km=form.radius_km,
            shuffle=shuffle,
        )

    def _run(self, entity_type: EntityType, criteria: FilterSpec) -> List:
        candidates = self._fetch_candidates(entity_type)
        results = self.engine.apply(candidates, criteria)
        logger.info(
            "search_completed",
            entity_type=entity_type.value,
            query=criteria.query[:50],
            include_surrounding=criteria.include_surrounding,
            candidates=len(candidates),
            results=len(results),
        )
        return results

    def _fetch_candidates(self, entity_type: EntityType) -> List:
        statuses = (
            VISIBLE_LISTING_STATUSES if entity_type == EntityType.PROPERTY
            else VISIBLE_PROFILE_STATUSES
        )
        try:
            return self.repository.list(self.session, entity_type, statuses=statuses)
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(
                "search_candidates_unavailable",
                entity_type=entity_type.value,
                error=str(e),
                error_type=type(e).__name__,
            )
            return []
