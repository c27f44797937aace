"""
Translate service results into API envelopes.
"""

from typing import List, Optional, Type, TypeVar

from pydantic import BaseModel

from pghostel.core.exceptions import (
    BaseAppException,
    DatabaseError,
    ErrorCode as AppErrorCode,
    ResourceNotFoundError,
    ValidationError,
)
from pghostel.schemas.common.response import ApiResponse
from pghostel.services.base import ErrorCode, ServiceResult

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def raise_for_failure(result: ServiceResult) -> None:
    """
    Raise the application exception matching a failed result.

    Validation failures map to 400, missing entities to 404 and anything
    else to 500, always with the service's message.
    """
    if result.is_success:
        return

    error = result.error
    message = error.message if error else "Internal server error"
    code = error.code if error else ErrorCode.INTERNAL_ERROR

    if code == ErrorCode.VALIDATION_ERROR:
        raise ValidationError(message)
    if code == ErrorCode.NOT_FOUND:
        raise ResourceNotFoundError(message=message)
    if code in (ErrorCode.DATABASE_ERROR, ErrorCode.ALREADY_EXISTS):
        raise DatabaseError(message)
    raise BaseAppException(message, AppErrorCode.OPERATION_FAILED)


def envelope(
    result: ServiceResult,
    schema: Optional[Type[SchemaT]] = None,
    message: Optional[str] = None,
    include_message: bool = False,
) -> ApiResponse:
    """
    Wrap a successful result's data, converted through ``schema``.

    Raises the matching application exception when the result failed.
    """
    raise_for_failure(result)

    data = result.data
    if schema is not None and data is not None:
        data = schema.model_validate(data)

    if message is None and include_message:
        message = result.message
    return ApiResponse.ok(data, message)


def envelope_list(result: ServiceResult, schema: Type[SchemaT]) -> ApiResponse:
    """Like ``envelope`` for a list of records."""
    raise_for_failure(result)
    items: List[SchemaT] = [schema.model_validate(item) for item in result.data]
    return ApiResponse.ok(items)


def message_only(result: ServiceResult, message: Optional[str] = None) -> ApiResponse:
    """Envelope carrying only a message, e.g. after a delete."""
    raise_for_failure(result)
    return ApiResponse.ok(message=message or result.message)
