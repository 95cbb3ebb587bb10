from typing import Optional, Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ..repositories import UserRepository
from ..core.security import (
    get_password_hash,
    verify_password,
    create_user_token,
    resolve_user,
)
from ..models import User, UserRole, SubscriptionTier
from ..schemas import UserRegister, UserLogin
from ..exceptions import ConflictError, InvalidCredentialsError, AccountDisabledError
from ..config import settings
from ..utils import utcnow
import logging

logger = logging.getLogger(__name__)


class AuthService:
    """Service for registration, login and session token handling"""

    def __init__(self, db: Session):
        self.user_repo = UserRepository(db)
        self.db = db

    def register(self, user_data: UserRegister) -> Tuple[User, str]:
        """Register a new user and issue a session token"""
        logger.info(f"Attempting to register user: {user_data.email}")

        if self.user_repo.exists_by_email(user_data.email):
            logger.warning(f"Registration failed: email already exists - {user_data.email}")
            raise ConflictError("Email already registered")

        try:
            new_user = self.user_repo.create(
                email=user_data.email,
                hashed_password=get_password_hash(user_data.password),
                name=user_data.name or None,
                avatar_url=None,
                role=UserRole.USER,
                subscription_tier=SubscriptionTier.FREE,
                tokens_used=0,
                tokens_limit=settings.default_tokens_limit,
                is_active=True,
                email_verified=False,
                last_login_at=utcnow(),
            )
            self.user_repo.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            self.user_repo.rollback()
            logger.warning(f"Registration failed: email already exists - {user_data.email}")
            raise ConflictError("Email already registered")
        except Exception as e:
            logger.error(f"Error registering user: {e}")
            self.user_repo.rollback()
            raise

        logger.info(f"User registered successfully: {new_user.email}")
        return new_user, create_user_token(new_user)

    def login(self, user_data: UserLogin) -> Tuple[User, str]:
        """Check credentials, record the login and issue a fresh token"""
        logger.info(f"Attempting login for: {user_data.email}")

        user = self.user_repo.get_by_email(user_data.email)
        if not user or not verify_password(user_data.password, user.hashed_password):
            logger.warning(f"Login failed for: {user_data.email}")
            raise InvalidCredentialsError()

        if not user.is_active:
            logger.warning(f"Login rejected for disabled account: {user_data.email}")
            raise AccountDisabledError()

        try:
            self.user_repo.update(user, last_login_at=utcnow())
            self.user_repo.commit()
        except Exception as e:
            logger.error(f"Error recording login: {e}")
            self.user_repo.rollback()
            raise

        logger.info(f"User logged in successfully: {user.email}")
        return user, create_user_token(user)

    def resolve_current_user(self, token: Optional[str]) -> User:
        """Resolve the user behind a session token"""
        return resolve_user(self.db, token)
