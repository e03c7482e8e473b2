"""
Suburbs Router

Endpoints for the suburb gazetteer and surrounding-suburb expansion.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from config.settings import settings
from src.realestate_directory.api.dependencies import get_expander, get_gazetteer
from src.realestate_directory.api.schemas import ExpansionResult
from src.realestate_directory.geo.gazetteer import SuburbGazetteer
from src.realestate_directory.models.enums import AustralianState
from src.realestate_directory.models.location import SuburbRecord
from src.realestate_directory.search.expander import DistanceExpander

router = APIRouter(prefix="/api/v1/suburbs", tags=["suburbs"])


@router.get("/", response_model=List[SuburbRecord])
def list_suburbs(
    state: Optional[AustralianState] = Query(None, description="Restrict to one state or territory"),
    gazetteer: SuburbGazetteer = Depends(get_gazetteer),
):
    """
    List gazetteer suburbs.

    Args:
        state: State code (NSW, VIC, ...); all suburbs when omitted

    Returns:
        Suburb records in dataset order
    """
    return gazetteer.list_by_state(state.value if state else None)


@router.get("/expand", response_model=ExpansionResult)
def expand_suburbs(
    q: str = Query(..., description="Suburb name or postcode"),
    radius_km: float = Query(settings.default_radius_km, ge=0, description="Search radius in km"),
    expander: DistanceExpander = Depends(get_expander),
):
    """
    Suburbs within a radius of the queried suburb.

    Returns:
        Sorted suburb names; the query itself when it is not a known suburb
    """
    suburbs = expander.expand(q, radius_km)
    return ExpansionResult(query=q.strip(), radius_km=radius_km, suburbs=sorted(suburbs))
