"""
Shared fixtures: in-memory database sessions and record builders.
"""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.realestate_directory.db.base import Base
from src.realestate_directory.db import models  # noqa: F401
from src.realestate_directory.geo.gazetteer import SuburbGazetteer
from src.realestate_directory.models.enums import (
    AgentType,
    Classification,
    Intent,
    ListingStatus,
    ProfileStatus,
    Segment,
    ServiceCategory,
    ToolCategory,
)
from src.realestate_directory.models.listing import Property
from src.realestate_directory.models.location import Address, ServiceArea, SuburbRecord
from src.realestate_directory.models.profiles import (
    AgencyProfile,
    AgentProfile,
    ServiceProvider,
    ToolProvider,
)


@pytest.fixture(scope="function")
def test_db():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)

    Session = sessionmaker(bind=engine, expire_on_commit=False)
    session = Session()

    yield session

    session.close()
    Base.metadata.drop_all(engine)


@pytest.fixture
def three_city_gazetteer():
    """Sydney, Parramatta (about 20 km west) and Melbourne."""
    return SuburbGazetteer([
        SuburbRecord(suburb="Sydney", postcode="2000", state="NSW", latitude=-33.8688, longitude=151.2093),
        SuburbRecord(suburb="Parramatta", postcode="2150", state="NSW", latitude=-33.815, longitude=151.0011),
        SuburbRecord(suburb="Melbourne", postcode="3000", state="VIC", latitude=-37.8136, longitude=144.9631),
    ])


@pytest.fixture
def make_agency():
    def _make(id="agency-1", suburb="Sydney", postcode="2000", state="NSW",
              status=ProfileStatus.APPROVED, **overrides):
        fields = dict(
            id=id,
            email=f"{id}@example.com",
            status=status,
            classification=Classification.RESIDENTIAL,
            name=f"{suburb} Realty {id}",
            suburb=suburb,
            state=state,
            postcode=postcode,
        )
        fields.update(overrides)
        return AgencyProfile(**fields)
    return _make


@pytest.fixture
def make_agent():
    def _make(id="agent-1", suburb="Sydney", postcode="2000",
              status=ProfileStatus.APPROVED, **overrides):
        fields = dict(
            id=id,
            email=f"{id}@example.com",
            status=status,
            classification=Classification.RESIDENTIAL,
            agent_type=AgentType.SELLING,
            name=f"Agent {id}",
            agency_name="Harbour Realty",
            suburb=suburb,
            postcode=postcode,
        )
        fields.update(overrides)
        return AgentProfile(**fields)
    return _make


@pytest.fixture
def make_property():
    def _make(property_id="prop-1", suburb="Sydney", postcode="2000",
              status=ListingStatus.PUBLISHED, **overrides):
        fields = dict(
            property_id=property_id,
            address=Address(street="1 George St", suburb=suburb, state="NSW", postcode=postcode),
            segment=Segment.RESIDENTIAL,
            intent=Intent.BUY,
            property_type="House",
            status=status,
        )
        fields.update(overrides)
        return Property(**fields)
    return _make


@pytest.fixture
def make_service_provider():
    def _make(id="svc-1", areas=(("Sydney", "2000", "NSW"),),
              categories=(ServiceCategory.CLEANING,), status=ProfileStatus.APPROVED, **overrides):
        fields = dict(
            id=id,
            email=f"{id}@example.com",
            status=status,
            service_id=f"SVC-{id.upper()}",
            business_name=f"Business {id}",
            categories=list(categories),
            service_areas=[
                ServiceArea(suburb=suburb, postcode=postcode, state=state, radius_km=25)
                for suburb, postcode, state in areas
            ],
        )
        fields.update(overrides)
        return ServiceProvider(**fields)
    return _make


@pytest.fixture
def make_tool_provider():
    def _make(id="tool-1", areas=(("Sydney", "2000", "NSW"),),
              tool_category=ToolCategory.PHOTOGRAPHY, status=ProfileStatus.APPROVED, **overrides):
        fields = dict(
            id=id,
            email=f"{id}@example.com",
            status=status,
            tool_id=f"TOL-{id.upper()}",
            business_name=f"Tools {id}",
            tool_category=tool_category,
            coverage_areas=[
                ServiceArea(suburb=suburb, postcode=postcode, state=state, radius_km=50)
                for suburb, postcode, state in areas
            ],
        )
        fields.update(overrides)
        return ToolProvider(**fields)
    return _make
