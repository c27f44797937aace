from pghostel.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
    CalendarDate,
)
from pghostel.schemas.common.response import ApiResponse

__all__ = [
    "ApiResponse",
    "BaseCreateSchema",
    "BaseResponseSchema",
    "BaseSchema",
    "BaseUpdateSchema",
    "CalendarDate",
]
