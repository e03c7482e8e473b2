"""
Tests for Search Forms

Tests boundary validation and wildcard handling of raw search input.
"""
import pytest
from pydantic import ValidationError

from src.realestate_directory.models.enums import (
    AgentType,
    Classification,
    Intent,
    ServiceCategory,
    ToolCategory,
)
from src.realestate_directory.search.forms import (
    AgencySearchForm,
    AgentSearchForm,
    PropertySearchForm,
    ServiceSearchForm,
    ToolSearchForm,
)


class TestPropertySearchForm:
    def test_defaults(self):
        form = PropertySearchForm()
        assert form.query_text == ""
        assert form.include_surrounding is False
        assert form.radius_km == 10
        assert form.segment is None
        assert form.bedrooms == "Any"
        assert form.feature_keywords == []

    def test_wildcards_become_none(self):
        form = PropertySearchForm(segment="Any", intent="all")
        assert form.segment is None
        assert form.intent is None

    def test_enum_values_accepted(self):
        assert PropertySearchForm(intent="lease").intent == Intent.LEASE

    def test_unknown_enum_rejected(self):
        with pytest.raises(ValidationError):
            PropertySearchForm(intent="rent-to-own")

    def test_numbers_kept_as_text(self):
        form = PropertySearchForm(price_min=500000, bedrooms=3, query_text=2000)
        assert form.price_min == "500000"
        assert form.bedrooms == "3"
        assert form.query_text == "2000"

    def test_radius_from_text(self):
        assert PropertySearchForm(radius_km="25").radius_km == 25

    @pytest.mark.parametrize("radius", ["abc", "", None, "inf"])
    def test_unreadable_radius_uses_default(self, radius):
        form = PropertySearchForm(include_surrounding=True, radius_km=radius)
        assert form.radius_km == 10


class TestProfileSearchForms:
    def test_agency_defaults_to_residential(self):
        assert AgencySearchForm().classification == Classification.RESIDENTIAL

    def test_agency_any_classification(self):
        assert AgencySearchForm(classification="any").classification is None

    def test_agent_defaults(self):
        form = AgentSearchForm()
        assert form.classification == Classification.RESIDENTIAL
        assert form.agent_type == AgentType.SELLING

    def test_agent_type_rejected(self):
        with pytest.raises(ValidationError):
            AgentSearchForm(agent_type="buying")


class TestProviderSearchForms:
    def test_service_all_is_wildcard(self):
        assert ServiceSearchForm(category="all").category is None

    def test_service_category_by_label(self):
        form = ServiceSearchForm(category="Conveyancers/Solicitors")
        assert form.category == ServiceCategory.CONVEYANCERS

    def test_tool_category(self):
        assert ToolSearchForm(tool_category="Photography").tool_category == ToolCategory.PHOTOGRAPHY

    def test_tool_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            ToolSearchForm(tool_category="Drones")
