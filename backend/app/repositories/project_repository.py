from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from ..models.project import Project, ProjectStatus
from .base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project model"""

    def __init__(self, db: Session):
        super().__init__(Project, db)

    def get_by_user_id(self, user_id: int) -> List[Project]:
        """Get all projects for a user, most recently updated first"""
        return self.db.query(Project).filter(
            Project.user_id == user_id
        ).order_by(Project.updated_at.desc(), Project.id.desc()).all()

    def get_with_owner(self, project_id: int) -> Optional[Project]:
        """Get a project by ID with its owner loaded"""
        return self.db.query(Project).options(
            joinedload(Project.owner)
        ).filter(Project.id == project_id).first()

    def get_public(self, limit: int) -> List[Project]:
        """Get published public projects with owners, most viewed first"""
        return self.db.query(Project).options(
            joinedload(Project.owner)
        ).filter(
            Project.is_public.is_(True),
            Project.status == ProjectStatus.PUBLISHED
        ).order_by(Project.views_count.desc(), Project.id.desc()).limit(limit).all()

    def increment_views(self, project_id: int) -> None:
        """Atomically add one view in the database

        The increment is computed by the database so concurrent readers
        never lose updates; ``updated_at`` is left as is since a view is
        not an edit.
        """
        self.db.query(Project).filter(Project.id == project_id).update(
            {
                Project.views_count: Project.views_count + 1,
                Project.updated_at: Project.updated_at,
            },
            synchronize_session=False
        )
