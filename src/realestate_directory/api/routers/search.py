"""
Search Router

Endpoints for searching each kind of directory record.
"""
from fastapi import APIRouter, Depends

from src.realestate_directory.api.dependencies import get_search_service
from src.realestate_directory.api.schemas import SearchResults, to_public
from src.realestate_directory.search.forms import (
    AgencySearchForm,
    AgentSearchForm,
    PropertySearchForm,
    ServiceSearchForm,
    ToolSearchForm,
)
from src.realestate_directory.services.search_service import DirectorySearchService

router = APIRouter(prefix="/api/v1/search", tags=["search"])


def _results(records) -> SearchResults:
    return SearchResults(count=len(records), results=[to_public(record) for record in records])


@router.post("/properties", response_model=SearchResults)
def search_properties(form: PropertySearchForm,
                      service: DirectorySearchService = Depends(get_search_service)):
    """Published properties matching the form, in listing order."""
    return _results(service.search_properties(form))


@router.post("/agencies", response_model=SearchResults)
def search_agencies(form: AgencySearchForm,
                    service: DirectorySearchService = Depends(get_search_service)):
    """Approved agencies matching the form, in random order."""
    return _results(service.search_agencies(form))


@router.post("/agents", response_model=SearchResults)
def search_agents(form: AgentSearchForm,
                  service: DirectorySearchService = Depends(get_search_service)):
    """Approved agents matching the form, in random order."""
    return _results(service.search_agents(form))


@router.post("/services", response_model=SearchResults)
def search_services(form: ServiceSearchForm,
                    service: DirectorySearchService = Depends(get_search_service)):
    """Approved service providers covering the location, in registration order."""
    return _results(service.search_services(form))


@router.post("/tools", response_model=SearchResults)
def search_tools(form: ToolSearchForm,
                 service: DirectorySearchService = Depends(get_search_service)):
    """Approved tool providers covering the location, in registration order."""
    return _results(service.search_tools(form))
