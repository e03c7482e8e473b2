"""
Profiles Router

Public profile pages and dashboard edits for agencies and agents.
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session as DbSession

from src.realestate_directory.api.auth import get_current_session
from src.realestate_directory.api.dependencies import get_db
from src.realestate_directory.api.schemas import to_public
from src.realestate_directory.exceptions import NotProfileOwnerError, ProfileNotFoundError
from src.realestate_directory.models.enums import EntityType
from src.realestate_directory.models.profile_updates import AgencyUpdate, AgentUpdate, ProfileUpdate
from src.realestate_directory.models.profiles import Session
from src.realestate_directory.services.profile_service import ProfileService

router = APIRouter(prefix="/api/v1/profiles", tags=["profiles"])


def _update(db: DbSession, current: Session, entity_type: EntityType, record_id: str,
            changes: ProfileUpdate) -> Dict[str, Any]:
    try:
        profile = ProfileService(db).update_own_profile(current, entity_type, record_id, changes)
    except NotProfileOwnerError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return to_public(profile)


@router.get("/{entity_type}/{record_id}", response_model=Dict[str, Any])
def get_profile(entity_type: EntityType, record_id: str, db: DbSession = Depends(get_db)):
    """
    Approved agency, agent, service or tool profile.

    Raises:
        HTTPException: 404 for unknown ids and profiles not yet approved
    """
    try:
        return to_public(ProfileService(db).get_public_profile(entity_type, record_id))
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.patch("/agency/{record_id}", response_model=Dict[str, Any])
def update_agency(
    record_id: str,
    changes: AgencyUpdate,
    db: DbSession = Depends(get_db),
    current: Session = Depends(get_current_session),
):
    """Edit the signed-in agency's phone and street address."""
    return _update(db, current, EntityType.AGENCY, record_id, changes)


@router.patch("/agent/{record_id}", response_model=Dict[str, Any])
def update_agent(
    record_id: str,
    changes: AgentUpdate,
    db: DbSession = Depends(get_db),
    current: Session = Depends(get_current_session),
):
    """Edit the signed-in agent's name and phone."""
    return _update(db, current, EntityType.AGENT, record_id, changes)
