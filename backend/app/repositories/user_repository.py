from typing import List, Optional
from sqlalchemy.orm import Session
from ..models.user import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model"""

    def __init__(self, db: Session):
        super().__init__(User, db)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        return self.db.query(User).filter(User.email == email).first()

    def exists_by_email(self, email: str) -> bool:
        """Check if an account is registered under the given email"""
        return self.db.query(User.id).filter(User.email == email).first() is not None

    def get_all_newest_first(self) -> List[User]:
        """Get all users, most recently created first"""
        return self.db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()
