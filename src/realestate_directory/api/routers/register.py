"""
Registration Router

Endpoints for creating consumer accounts and professional profiles.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.realestate_directory.api.dependencies import get_db
from src.realestate_directory.api.schemas import to_public
from src.realestate_directory.exceptions import DuplicateEmailError
from src.realestate_directory.models.registration import (
    AgencyRegistration,
    AgentRegistration,
    ConsumerRegistration,
    ServiceRegistration,
    ToolRegistration,
)
from src.realestate_directory.services.registration_service import RegistrationService

router = APIRouter(prefix="/api/v1/register", tags=["registration"])


def _register(action, form):
    try:
        record = action(form)
    except DuplicateEmailError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return to_public(record)


@router.post("/agency", status_code=status.HTTP_201_CREATED)
def register_agency(form: AgencyRegistration, db: Session = Depends(get_db)):
    """
    Register an agency.

    Returns:
        The pending agency profile

    Raises:
        HTTPException: 409 if the email is already registered
    """
    return _register(RegistrationService(db).register_agency, form)


@router.post("/agent", status_code=status.HTTP_201_CREATED)
def register_agent(form: AgentRegistration, db: Session = Depends(get_db)):
    return _register(RegistrationService(db).register_agent, form)


@router.post("/service", status_code=status.HTTP_201_CREATED)
def register_service_provider(form: ServiceRegistration, db: Session = Depends(get_db)):
    """Register a service provider; the response carries its SVC- public ID."""
    return _register(RegistrationService(db).register_service_provider, form)


@router.post("/tool", status_code=status.HTTP_201_CREATED)
def register_tool_provider(form: ToolRegistration, db: Session = Depends(get_db)):
    """Register a tool provider; the response carries its TOL- public ID."""
    return _register(RegistrationService(db).register_tool_provider, form)


@router.post("/consumer", status_code=status.HTTP_201_CREATED)
def register_consumer(form: ConsumerRegistration, db: Session = Depends(get_db)):
    return _register(RegistrationService(db).register_consumer, form)
