"""
JWT Authentication for FastAPI

Bearer-token dependencies built on the auth service.
"""
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from pydantic import BaseModel

from src.realestate_directory.models.profiles import Session
from src.realestate_directory.services.auth_service import decode_access_token, is_admin

# OAuth2 scheme for token authentication
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/v1/auth/token")


class Token(BaseModel):
    """Token response model."""
    access_token: str
    token_type: str
    session: Session


async def get_current_session(token: str = Depends(oauth2_scheme)) -> Session:
    """
    Get the signed-in session from a JWT token.

    Args:
        token: JWT access token

    Returns:
        Current session

    Raises:
        HTTPException: If the token is invalid or expired
    """
    session = decode_access_token(token)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session


async def require_admin(current: Session = Depends(get_current_session)) -> Session:
    """
    Restrict an endpoint to admin accounts.

    Raises:
        HTTPException: 403 if the session is not an admin
    """
    if not is_admin(current):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return current
