"""
Authentication Router

Endpoints for signing in and inspecting the current session.
"""
from fastapi import APIRouter, Depends, Form, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session as DbSession

from src.realestate_directory.api.auth import Token, get_current_session
from src.realestate_directory.api.dependencies import get_db
from src.realestate_directory.models.enums import Role
from src.realestate_directory.models.profiles import Session
from src.realestate_directory.services.auth_service import authenticate, create_access_token

router = APIRouter(prefix="/api/v1/auth", tags=["authentication"])


@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    kind: Role = Form(Role.CONSUMER),
    db: DbSession = Depends(get_db),
):
    """
    OAuth2 compatible token login.

    Args:
        form_data: Email (as username) and password from OAuth2 form
        kind: Account kind to sign in as

    Returns:
        Access token, token type and the signed-in session

    Raises:
        HTTPException: If authentication fails
    """
    session = authenticate(db, kind, form_data.username, form_data.password)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(access_token=create_access_token(session), token_type="bearer", session=session)


@router.get("/me", response_model=Session)
async def read_session(current: Session = Depends(get_current_session)):
    """
    Get current session information.

    Returns:
        Session carried by the bearer token
    """
    return current
