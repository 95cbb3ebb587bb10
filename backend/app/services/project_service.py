from typing import List, Optional
from sqlalchemy.orm import Session
from ..repositories import ProjectRepository
from ..models import Project, ProjectStatus, DEFAULT_PROJECT_NAME
from ..schemas import ProjectCreate, ProjectUpdate
from ..exceptions import NotFoundError, AuthorizationError
from ..core.telemetry import get_tracer
from ..config import settings
import logging

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


class ProjectService:
    """Service for project operations"""

    def __init__(self, db: Session):
        self.project_repo = ProjectRepository(db)
        self.db = db

    def list_projects(self, user_id: int) -> List[Project]:
        """List all projects for a user"""
        logger.debug(f"Listing projects for user: {user_id}")
        return self.project_repo.get_by_user_id(user_id)

    def list_public_projects(self) -> List[Project]:
        """List the most viewed published public projects"""
        logger.debug("Listing public projects")
        return self.project_repo.get_public(settings.public_projects_limit)

    def get_project(self, project_id: int, viewer_id: Optional[int] = None) -> Project:
        """Get a project, counting a view when someone other than the owner reads it

        Non-owners may only read projects that are public and published.
        """
        with tracer.start_as_current_span("project.get") as span:
            span.set_attribute("project.id", project_id)
            project = self.project_repo.get_with_owner(project_id)
            if not project:
                raise NotFoundError("Project", str(project_id))

            if project.is_owned_by(viewer_id):
                return project

            if not project.is_visible_to_public:
                logger.warning(f"Access denied to project {project_id} for viewer {viewer_id}")
                raise AuthorizationError("Access denied")

            try:
                self.project_repo.increment_views(project_id)
                self.project_repo.commit()
            except Exception as e:
                logger.error(f"Error counting view for project {project_id}: {e}")
                self.project_repo.rollback()
                raise
            span.set_attribute("project.view_counted", True)

            return self.project_repo.refresh(project)

    def create_project(self, user_id: int, project_data: ProjectCreate) -> Project:
        """Create a new draft project"""
        name = project_data.name or DEFAULT_PROJECT_NAME
        logger.info(f"Creating project '{name}' for user {user_id}")

        try:
            project = self.project_repo.create(
                user_id=user_id,
                name=name,
                description=project_data.description or None,
                thumbnail_url=None,
                data=project_data.data or {},
                status=ProjectStatus.DRAFT,
                is_public=False,
                views_count=0,
                tokens_used=0,
                duration_seconds=None,
            )
            self.project_repo.commit()
            logger.info(f"Project created successfully: {project.id}")

            return project
        except Exception as e:
            logger.error(f"Error creating project: {e}")
            self.project_repo.rollback()
            raise

    def update_project(self, user_id: int, project_id: int, project_data: ProjectUpdate) -> Project:
        """Update a project with only the fields present in the payload"""
        logger.info(f"Updating project {project_id} for user {user_id}")

        try:
            project = self._get_owned_project(user_id, project_id)

            update_data = project_data.model_dump(exclude_unset=True)
            updated_project = self.project_repo.update(project, **update_data)
            self.project_repo.commit()
            logger.info(f"Project updated successfully: {project_id}")

            return updated_project
        except Exception as e:
            logger.error(f"Error updating project: {e}")
            self.project_repo.rollback()
            raise

    def delete_project(self, user_id: int, project_id: int) -> None:
        """Permanently delete a project"""
        logger.info(f"Deleting project {project_id} for user {user_id}")

        try:
            project = self._get_owned_project(user_id, project_id)

            self.project_repo.delete(project)
            self.project_repo.commit()
            logger.info(f"Project deleted successfully: {project_id}")
        except Exception as e:
            logger.error(f"Error deleting project: {e}")
            self.project_repo.rollback()
            raise

    def _get_owned_project(self, user_id: int, project_id: int) -> Project:
        project = self.project_repo.get(project_id)
        if not project:
            raise NotFoundError("Project", str(project_id))
        if not project.is_owned_by(user_id):
            logger.warning(f"User {user_id} tried to modify project {project_id} they do not own")
            raise AuthorizationError("Access denied")
        return project
