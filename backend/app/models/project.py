from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime, Boolean, JSON, Enum
from sqlalchemy.orm import relationship
from ..utils import utcnow
import enum
from ..core.database import Base


DEFAULT_PROJECT_NAME = "Untitled Project"


class ProjectStatus(str, enum.Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False, default=DEFAULT_PROJECT_NAME)
    description = Column(Text, nullable=True)
    thumbnail_url = Column(String(500), nullable=True)
    data = Column("project_data", JSON, nullable=False, default=dict)
    status = Column(Enum(ProjectStatus), nullable=False, default=ProjectStatus.DRAFT)
    is_public = Column(Boolean, nullable=False, default=False)
    views_count = Column(Integer, nullable=False, default=0)
    tokens_used = Column(Integer, nullable=False, default=0)
    duration_seconds = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    owner = relationship("User", back_populates="projects")

    __table_args__ = (
        {"sqlite_autoincrement": True},
    )

    @property
    def is_visible_to_public(self) -> bool:
        """Only published projects marked public can be read by non-owners"""
        return bool(self.is_public) and self.status == ProjectStatus.PUBLISHED

    def is_owned_by(self, user_id) -> bool:
        return user_id is not None and self.user_id == user_id
