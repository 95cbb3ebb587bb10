from typing import Generic, TypeVar, Type, Optional
from sqlalchemy.orm import Session
from ..core.database import Base
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with common CRUD operations"""

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def get(self, id: int) -> Optional[ModelType]:
        """Get a record by ID"""
        return self.db.query(self.model).filter(self.model.id == id).first()

    def create(self, **kwargs) -> ModelType:
        """Create a new record"""
        instance = self.model(**kwargs)
        self.db.add(instance)
        self.db.flush()  # Flush instead of commit to allow rollback
        logger.debug(f"Created {self.model.__name__} with id: {instance.id}")
        return instance

    def update(self, instance: ModelType, **kwargs) -> ModelType:
        """Apply the given fields to a record

        Every supplied key is written, including explicit ``None`` values;
        callers pass only the fields they intend to change.
        """
        for key, value in kwargs.items():
            setattr(instance, key, value)
        self.db.flush()  # Flush instead of commit to allow rollback
        logger.debug(f"Updated {self.model.__name__} with id: {instance.id}")
        return instance

    def delete(self, instance: ModelType) -> None:
        """Delete a record"""
        self.db.delete(instance)
        self.db.flush()  # Flush instead of commit to allow rollback
        logger.debug(f"Deleted {self.model.__name__} with id: {instance.id}")

    def refresh(self, instance: ModelType) -> ModelType:
        """Reload a record's state from the database"""
        self.db.refresh(instance)
        return instance

    def commit(self) -> None:
        """Commit the current transaction"""
        self.db.commit()

    def rollback(self) -> None:
        """Rollback the current transaction"""
        self.db.rollback()
