"""
Liveness probe.
"""

from typing import Dict

from fastapi import APIRouter

from pghostel.schemas.common.response import ApiResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=ApiResponse[Dict[str, str]])
def health() -> ApiResponse:
    return ApiResponse(success=True, message="Server is running", data={"status": "OK"})
