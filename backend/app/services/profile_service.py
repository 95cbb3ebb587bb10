from typing import List
from sqlalchemy.orm import Session
from ..repositories import UserRepository
from ..core.security import get_password_hash, verify_password, require_admin
from ..models import User
from ..schemas import UserUpdate, PasswordChange
from ..exceptions import NotFoundError, AuthorizationError, InvalidCredentialsError
import logging

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for account lookups and self-service profile changes"""

    def __init__(self, db: Session):
        self.user_repo = UserRepository(db)
        self.db = db

    def list_users(self, actor: User) -> List[User]:
        """List every account (admin only)"""
        require_admin(actor)
        logger.debug(f"Listing users for admin {actor.id}")
        return self.user_repo.get_all_newest_first()

    def get_user(self, actor: User, user_id: int) -> User:
        """Get an account; users may only look up themselves unless they are admins"""
        if not actor.is_admin and actor.id != user_id:
            logger.warning(f"User {actor.id} denied access to user {user_id}")
            raise AuthorizationError("Access denied")

        user = self.user_repo.get(user_id)
        if not user:
            raise NotFoundError("User", str(user_id))
        return user

    def update_profile(self, user: User, profile_data: UserUpdate) -> User:
        """Update display attributes present in the payload"""
        logger.info(f"Updating profile for user {user.id}")

        update_data = profile_data.model_dump(exclude_unset=True)

        try:
            updated_user = self.user_repo.update(user, **update_data)
            self.user_repo.commit()
            logger.info(f"Profile updated successfully: {user.email}")
            return updated_user
        except Exception as e:
            logger.error(f"Error updating profile: {e}")
            self.user_repo.rollback()
            raise

    def change_password(self, user: User, password_data: PasswordChange) -> None:
        """Rotate a user's password after checking the current one"""
        if not verify_password(password_data.current_password, user.hashed_password):
            logger.warning(f"Password change rejected for user {user.id}: current password mismatch")
            raise InvalidCredentialsError("Current password is incorrect")

        try:
            self.user_repo.update(user, hashed_password=get_password_hash(password_data.new_password))
            self.user_repo.commit()
            logger.info(f"Password changed for user: {user.email}")
        except Exception as e:
            logger.error(f"Error changing password: {e}")
            self.user_repo.rollback()
            raise
