"""
Base repository with standardized CRUD operations, transaction management, and error handling.

Provides foundation for all domain repositories: every store failure is
raised as a DatabaseError carrying the driver's message.
"""

from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from pghostel.core.exceptions import DatabaseError, DuplicateEntryError, ResourceNotFoundError
from pghostel.core.logging import get_logger
from pghostel.models.base import BaseModel

logger = get_logger(__name__)

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=BaseModel)


def driver_message(error: SQLAlchemyError) -> str:
    """Return the underlying DBAPI message, without SQLAlchemy's decoration."""
    orig = getattr(error, "orig", None)
    return str(orig) if orig is not None else str(error)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with standardized operations.

    Provides CRUD operations, transaction management, and error handling
    for all domain repositories.
    """

    #: Human readable entity name used in not-found messages
    entity_label: str = "Resource"

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    # ==================== Transaction Management ====================

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Transaction context manager with automatic rollback.

        Usage:
            with repository.transaction():
                repository.create(entity, commit=False)
                other_repository.update(id, data, commit=False)
        """
        try:
            yield self.db
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Transaction rollback: {driver_message(e)}")
            raise DuplicateEntryError(driver_message(e), operation="transaction") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Transaction rollback: {driver_message(e)}", exc_info=True)
            raise DatabaseError(driver_message(e), operation="transaction") from e
        except Exception:
            self.db.rollback()
            raise

    def commit(self) -> None:
        """Commit current transaction."""
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEntryError(driver_message(e), operation="commit") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError(driver_message(e), operation="commit") from e

    def _flush_or_commit(self, commit: bool) -> None:
        if commit:
            self.commit()
        else:
            self.db.flush()

    # ==================== Create Operations ====================

    def create(self, entity: ModelType, commit: bool = True) -> ModelType:
        """
        Create new entity.

        Args:
            entity: Entity to create
            commit: Whether to commit immediately

        Returns:
            Created entity

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For any other store failure
        """
        try:
            self.db.add(entity)
            self._flush_or_commit(commit)
            if commit:
                self.db.refresh(entity)
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEntryError(
                driver_message(e), operation="create", table=self.model.__tablename__
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError(
                driver_message(e), operation="create", table=self.model.__tablename__
            ) from e

        logger.info(f"Created {self.model.__name__} with id: {entity.id}")
        return entity

    def create_many(self, entities: List[ModelType], commit: bool = True) -> List[ModelType]:
        """
        Bulk create in one unit of work.

        Args:
            entities: Entities to create
            commit: Whether to commit immediately

        Returns:
            Created entities
        """
        try:
            self.db.add_all(entities)
            self._flush_or_commit(commit)
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEntryError(
                driver_message(e), operation="create_many", table=self.model.__tablename__
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError(
                driver_message(e), operation="create_many", table=self.model.__tablename__
            ) from e

        logger.info(f"Bulk created {len(entities)} {self.model.__name__} entities")
        return entities

    # ==================== Read Operations ====================

    def find_by_id(self, id: str) -> Optional[ModelType]:
        """
        Find entity by ID.

        Args:
            id: Entity ID

        Returns:
            Entity or None
        """
        try:
            return self.db.get(self.model, id)
        except SQLAlchemyError as e:
            raise DatabaseError(driver_message(e), operation="find_by_id") from e

    def get_by_id(self, id: str) -> ModelType:
        """
        Get entity by ID or raise exception.

        Raises:
            ResourceNotFoundError: If entity not found
        """
        entity = self.find_by_id(id)
        if entity is None:
            raise ResourceNotFoundError(self.entity_label, resource_id=id)
        return entity

    def find_all(self, order_by: Optional[List[str]] = None) -> List[ModelType]:
        """
        Find all entities.

        Args:
            order_by: List of fields to order by (prefix with - for desc)
        """
        return self.find_by_criteria({}, order_by=order_by)

    def find_by_criteria(
        self,
        criteria: Dict[str, Any],
        limit: Optional[int] = None,
        order_by: Optional[List[str]] = None,
    ) -> List[ModelType]:
        """
        Find entities matching equality criteria.

        Args:
            criteria: Filter criteria as key-value pairs (lists become IN)
            limit: Maximum number of records
            order_by: List of fields to order by (prefix with - for desc)

        Returns:
            List of matching entities
        """
        try:
            stmt = select(self.model)

            for key, value in criteria.items():
                column = getattr(self.model, key)
                if isinstance(value, (list, tuple, set)):
                    stmt = stmt.where(column.in_(list(value)))
                else:
                    stmt = stmt.where(column == value)

            for field in order_by or []:
                if field.startswith('-'):
                    stmt = stmt.order_by(getattr(self.model, field[1:]).desc())
                else:
                    stmt = stmt.order_by(getattr(self.model, field))

            if limit is not None:
                stmt = stmt.limit(limit)

            return list(self.db.scalars(stmt).all())

        except SQLAlchemyError as e:
            raise DatabaseError(driver_message(e), operation="find_by_criteria") from e

    def count(self, criteria: Optional[Dict[str, Any]] = None) -> int:
        """Count entities matching equality criteria."""
        try:
            stmt = select(func.count()).select_from(self.model)
            for key, value in (criteria or {}).items():
                stmt = stmt.where(getattr(self.model, key) == value)
            return int(self.db.scalar(stmt) or 0)
        except SQLAlchemyError as e:
            raise DatabaseError(driver_message(e), operation="count") from e

    # ==================== Update Operations ====================

    def update(self, id: str, data: Dict[str, Any], commit: bool = True) -> ModelType:
        """
        Update entity fields.

        Args:
            id: Entity ID
            data: Field values to overwrite
            commit: Whether to commit immediately

        Returns:
            Updated entity

        Raises:
            ResourceNotFoundError: If entity not found
        """
        entity = self.get_by_id(id)
        return self.apply(entity, data, commit=commit)

    def apply(self, entity: ModelType, data: Dict[str, Any], commit: bool = True) -> ModelType:
        """Overwrite fields of an already loaded entity and persist it."""
        try:
            for key, value in data.items():
                if hasattr(entity, key):
                    setattr(entity, key, value)

            self._flush_or_commit(commit)
            if commit:
                self.db.refresh(entity)
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEntryError(
                driver_message(e), operation="update", table=self.model.__tablename__
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError(
                driver_message(e), operation="update", table=self.model.__tablename__
            ) from e

        logger.info(f"Updated {self.model.__name__} with id: {entity.id}")
        return entity

    # ==================== Delete Operations ====================

    def delete(self, id: str, commit: bool = True) -> bool:
        """
        Hard delete entity. Dependent records are left untouched.

        Returns:
            True if deleted, False if not found
        """
        entity = self.find_by_id(id)
        if entity is None:
            return False

        try:
            self.db.delete(entity)
            self._flush_or_commit(commit)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError(
                driver_message(e), operation="delete", table=self.model.__tablename__
            ) from e

        logger.info(f"Deleted {self.model.__name__} with id: {id}")
        return True
