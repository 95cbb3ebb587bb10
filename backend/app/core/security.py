from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
import bcrypt
from sqlalchemy.orm import Session
from fastapi import Depends, Request, Response
from fastapi.security import OAuth2PasswordBearer
from ..config import settings
from ..core.database import get_db
from ..models import User
from ..repositories import UserRepository
from ..exceptions import AuthenticationError, AuthorizationError
import logging

logger = logging.getLogger(__name__)

# Tokens may also arrive in a cookie, so a missing header is not an error here
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/v1/auth/login", auto_error=False)

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode('utf-8')[:BCRYPT_MAX_BYTES]


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash"""
    try:
        if isinstance(hashed_password, str):
            hashed_password_bytes = hashed_password.encode('utf-8')
        else:
            hashed_password_bytes = hashed_password
        return bcrypt.checkpw(_password_bytes(plain_password), hashed_password_bytes)
    except ValueError as e:
        logger.error(f"Password verification failed: {e}")
        return False


def get_password_hash(password: str) -> str:
    """Hash a password using bcrypt"""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    hashed = bcrypt.hashpw(_password_bytes(password), salt)
    return hashed.decode('utf-8')


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token"""
    to_encode = data.copy()
    issued_at = datetime.now(timezone.utc)
    if expires_delta:
        expire = issued_at + expires_delta
    else:
        expire = issued_at + timedelta(hours=settings.jwt_expiration_hours)
    to_encode.update({"iat": issued_at, "exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    logger.debug(f"Created access token for user: {data.get('sub')}")
    return encoded_jwt


def create_user_token(user: User) -> str:
    """Issue a session token bound to a user id"""
    return create_access_token(
        data={"sub": str(user.id)},
        expires_delta=timedelta(hours=settings.jwt_expiration_hours)
    )


def decode_access_token(token: str) -> int:
    """Verify a token and return the user id it was issued for"""
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        raise AuthenticationError("Could not validate credentials")

    subject = payload.get("sub")
    if subject is None or "exp" not in payload:
        raise AuthenticationError("Invalid token payload")
    try:
        return int(subject)
    except (TypeError, ValueError):
        raise AuthenticationError("Invalid token payload")


def resolve_user(db: Session, token: Optional[str]) -> User:
    """Resolve the active user a token was issued for"""
    if not token:
        raise AuthenticationError("Authentication required")

    user_id = decode_access_token(token)
    user = UserRepository(db).get(user_id)
    if user is None or not user.is_active:
        logger.warning(f"Token rejected for missing or inactive user: {user_id}")
        raise AuthenticationError("Invalid token or user inactive")

    return user


def get_request_token(request: Request, bearer_token: Optional[str] = None) -> Optional[str]:
    """Read the session token from the auth cookie, falling back to the bearer header"""
    return request.cookies.get(settings.auth_cookie_name) or bearer_token


def _bind_identity(request: Request, user: User) -> None:
    request.state.user = user
    request.state.user_id = user.id


def get_current_user(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> User:
    """Get current authenticated user from JWT token"""
    user = resolve_user(db, get_request_token(request, token))
    _bind_identity(request, user)
    return user


def get_optional_user(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """Get the authenticated user if a valid token was sent, otherwise None"""
    raw_token = get_request_token(request, token)
    if not raw_token:
        return None
    try:
        user = resolve_user(db, raw_token)
    except AuthenticationError:
        return None
    _bind_identity(request, user)
    return user


def require_admin(user: User) -> User:
    """Reject users without the admin role"""
    if not user.is_admin:
        logger.warning(f"Admin access denied for user: {user.id}")
        raise AuthorizationError("Admin access required")
    return user


def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    """Get current user, requiring the admin role"""
    return require_admin(current_user)


def set_auth_cookie(response: Response, token: str) -> None:
    """Hand the session token to the browser as an httponly cookie"""
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=settings.jwt_expiration_hours * 3600,
        httponly=True,
        secure=settings.auth_cookie_secure,
        samesite="lax",
    )


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.auth_cookie_name,
        httponly=True,
        secure=settings.auth_cookie_secure,
        samesite="lax",
    )
