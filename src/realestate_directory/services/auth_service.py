"""
Authentication Service

Password hashing, email/password sign-in and JWT session tokens.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError
from sqlalchemy.orm import Session as DbSession

from config.settings import settings
from src.realestate_directory.db.repository import DirectoryRepository
from src.realestate_directory.models.enums import EntityType, Role
from src.realestate_directory.models.profiles import Session
from src.realestate_directory.utils.logger import get_logger

logger = get_logger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

SIGN_IN_KINDS = (Role.CONSUMER, Role.AGENCY, Role.AGENT, Role.SERVICE, Role.TOOL)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against its hash.

    Args:
        plain_password: Plain text password
        hashed_password: Stored passlib hash

    Returns:
        True if password matches, False otherwise
    """
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def authenticate(db: DbSession, kind: Role, email: str, password: str,
                 repository: Optional[DirectoryRepository] = None) -> Optional[Session]:
    """
    Sign in an account of the given kind.

    Args:
        db: Database session
        kind: Account kind (consumer, agency, agent, service or tool)
        email: Sign-in email, any case
        password: Plain text password

    Returns:
        Session if the credentials match, None otherwise
    """
    kind = Role(kind)
    if kind not in SIGN_IN_KINDS:
        return None

    repository = repository or DirectoryRepository()
    account = repository.get_by_email(db, EntityType(kind.value), email)
    if account is None or not verify_password(password, account.password_hash):
        logger.info("sign_in_failed", kind=kind.value)
        return None

    logger.info("sign_in_succeeded", kind=kind.value, user_id=account.id)
    return Session(user_id=account.id, email=account.email, role=kind, name=account.display_name)


def create_access_token(session: Session, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create JWT access token carrying the session.

    Args:
        session: Signed-in identity
        expires_delta: Token lifetime (default from settings)

    Returns:
        Encoded JWT token
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode = {
        "sub": session.user_id,
        "email": session.email,
        "role": session.role.value,
        "name": session.name,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Optional[Session]:
    """Session from a token, or None if it is invalid or expired."""
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
        return Session(
            user_id=payload.get("sub"),
            email=payload.get("email"),
            role=payload.get("role"),
            name=payload.get("name"),
        )
    except (JWTError, ValidationError) as e:
        logger.info("access_token_rejected", error_type=type(e).__name__)
        return None


def is_admin(session: Optional[Session]) -> bool:
    if session is None or not session.email:
        return False
    return session.email.lower().endswith(settings.admin_email_domain.lower())


def has_role(session: Optional[Session], role: Role) -> bool:
    return session is not None and session.role == Role(role)
