"""
Base service class providing common functionality for all services.
"""

from abc import ABC
from contextlib import contextmanager
from typing import Any, Dict, Generic, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pghostel.core.exceptions import (
    BaseAppException,
    DatabaseError,
    ErrorCode as AppErrorCode,
    ResourceNotFoundError,
)
from pghostel.core.logging import get_logger
from pghostel.repositories.base.base_repository import BaseRepository, driver_message
from pghostel.services.base.service_result import (
    ErrorCode,
    ErrorSeverity,
    ServiceError,
    ServiceResult,
)

TModel = TypeVar("TModel")
TRepo = TypeVar("TRepo", bound=BaseRepository)


class BaseService(ABC, Generic[TModel, TRepo]):
    """
    Base service with common behaviors:
    - Shared logger and db session
    - Consistent error handling via ServiceResult
    - Transaction management utilities
    - Standardized CRUD operations
    """

    def __init__(self, repository: TRepo, db_session: Session):
        """
        Initialize base service.

        Args:
            repository: Repository instance for data access
            db_session: SQLAlchemy database session
        """
        self.repository: TRepo = repository
        self.db: Session = db_session
        self._logger = get_logger(self.__class__.__name__)

    @property
    def entity_label(self) -> str:
        return self.repository.entity_label

    # -------------------------------------------------------------------------
    # Exception & Error Handling
    # -------------------------------------------------------------------------

    def _handle_exception(
        self,
        exception: Exception,
        operation: str,
        entity_ref: Optional[Any] = None,
        additional_context: Optional[Dict[str, Any]] = None,
    ) -> ServiceResult:
        """
        Convert exception to a ServiceResult failure with logging.

        The exception message is carried to the client unchanged.

        Args:
            exception: The caught exception
            operation: Description of the operation that failed
            entity_ref: Reference to the entity involved (ID, name, etc.)
            additional_context: Extra context for logging/debugging

        Returns:
            ServiceResult with failure status and error details
        """
        context = {
            "operation": operation,
            "entity_ref": str(entity_ref) if entity_ref is not None else None,
            "exception_type": type(exception).__name__,
        }
        if additional_context:
            context.update(additional_context)

        error_code = self._map_exception_to_error_code(exception)
        if isinstance(exception, SQLAlchemyError):
            message = driver_message(exception)
        else:
            message = str(exception)

        if error_code in (ErrorCode.NOT_FOUND, ErrorCode.VALIDATION_ERROR):
            severity = ErrorSeverity.WARNING
            self._logger.warning(f"{operation} failed: {message}", extra=context)
        else:
            severity = ErrorSeverity.CRITICAL
            self._logger.error(f"Error during {operation}: {message}", exc_info=True, extra=context)

        return ServiceResult.failure(
            ServiceError(
                code=error_code,
                message=message,
                details={
                    "entity_ref": context["entity_ref"],
                    "context": additional_context,
                },
                severity=severity,
            )
        )

    def _map_exception_to_error_code(self, exception: Exception) -> ErrorCode:
        """Map exception types to service error codes."""
        if isinstance(exception, ResourceNotFoundError):
            return ErrorCode.NOT_FOUND
        if isinstance(exception, DatabaseError):
            if exception.error_code == AppErrorCode.DUPLICATE_ENTRY:
                return ErrorCode.ALREADY_EXISTS
            return ErrorCode.DATABASE_ERROR
        if isinstance(exception, BaseAppException):
            if exception.status_code == 400:
                return ErrorCode.VALIDATION_ERROR
            return ErrorCode.INTERNAL_ERROR
        if isinstance(exception, SQLAlchemyError):
            return ErrorCode.DATABASE_ERROR
        if isinstance(exception, ValueError):
            return ErrorCode.VALIDATION_ERROR
        return ErrorCode.INTERNAL_ERROR

    # -------------------------------------------------------------------------
    # Transaction Management
    # -------------------------------------------------------------------------

    @contextmanager
    def transaction(self):
        """
        Context manager for a unit of work with automatic rollback.

        Example:
            with self.transaction():
                self.repository.create(entity, commit=False)
        """
        with self.repository.transaction() as session:
            yield session

    # -------------------------------------------------------------------------
    # Common CRUD Operations
    # -------------------------------------------------------------------------

    def create(self, data: Dict[str, Any]) -> ServiceResult[TModel]:
        """
        Create a new entity from column values.

        Args:
            data: Entity data dictionary

        Returns:
            ServiceResult containing the created entity or error
        """
        try:
            entity = self.repository.create(self.repository.model(**data))
            return ServiceResult.success(entity, message=f"{self.entity_label} created successfully")
        except Exception as e:
            return self._handle_exception(e, f"create {self.entity_label.lower()}")

    def update(self, entity_id: str, data: Dict[str, Any]) -> ServiceResult[TModel]:
        """
        Merge supplied fields into an existing entity.

        Args:
            entity_id: ID of the entity to update
            data: Update data dictionary

        Returns:
            ServiceResult containing the updated entity or error
        """
        try:
            entity = self.repository.update(entity_id, data)
            return ServiceResult.success(entity, message=f"{self.entity_label} updated successfully")
        except Exception as e:
            return self._handle_exception(e, f"update {self.entity_label.lower()}", entity_id)

    def delete(self, entity_id: str) -> ServiceResult[bool]:
        """
        Hard delete an entity. Records referencing it are left in place.

        Returns:
            ServiceResult indicating success, or a not-found failure
        """
        try:
            if not self.repository.delete(entity_id):
                return ServiceResult.not_found(self.entity_label, entity_id)
            return ServiceResult.success(True, message=f"{self.entity_label} deleted successfully")
        except Exception as e:
            return self._handle_exception(e, f"delete {self.entity_label.lower()}", entity_id)

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def _log_operation(
        self,
        operation: str,
        entity_ref: Optional[Any] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log service operation with standardized format."""
        context = {"entity_ref": str(entity_ref) if entity_ref else None}
        if extra:
            context.update(extra)

        self._logger.info(f"Operation: {operation}", extra=context)
