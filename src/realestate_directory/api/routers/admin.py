"""
Admin Router

Endpoints for moderating professional profiles. Admin token required.
"""
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session as DbSession

from src.realestate_directory.api.auth import require_admin
from src.realestate_directory.api.dependencies import get_db
from src.realestate_directory.api.schemas import StatusChange, to_public
from src.realestate_directory.exceptions import InvalidStatusTransition, ProfileNotFoundError
from src.realestate_directory.models.enums import EntityType
from src.realestate_directory.models.profiles import Session
from src.realestate_directory.services.approval_service import MODERATED_TYPES, ApprovalService
from src.realestate_directory.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/admin/approvals", tags=["admin"])


def _moderated(entity_type: EntityType) -> EntityType:
    if entity_type not in MODERATED_TYPES:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{entity_type.value} records are not moderated",
        )
    return entity_type


@router.get("/{entity_type}", response_model=List[Dict[str, Any]])
def list_profiles(
    entity_type: EntityType,
    db: DbSession = Depends(get_db),
    admin: Session = Depends(require_admin),
):
    """
    Every profile of one kind, whatever its status.

    Args:
        entity_type: agency, agent, service or tool
    """
    profiles = ApprovalService(db).list_profiles(_moderated(entity_type))
    return [to_public(profile) for profile in profiles]


@router.post("/{entity_type}/{record_id}")
def change_status(
    entity_type: EntityType,
    record_id: str,
    change: StatusChange,
    db: DbSession = Depends(get_db),
    admin: Session = Depends(require_admin),
):
    """
    Approve, reject or suspend a profile.

    Raises:
        HTTPException: 404 for unknown profiles, 400 for disallowed transitions
    """
    try:
        profile = ApprovalService(db).set_status(_moderated(entity_type), record_id, change.status)
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidStatusTransition as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.info("admin_status_change", admin=admin.email, entity_type=entity_type.value, id=record_id)
    return to_public(profile)
