"""
Administrative endpoints.
"""

from fastapi import APIRouter, Depends

from pghostel.api import deps
from pghostel.api.responses import message_only
from pghostel.schemas.common.response import ApiResponse
from pghostel.services.admin import DatabaseSeedService

router = APIRouter(tags=["Admin"])


@router.post("/init-database", response_model=ApiResponse[None])
def init_database(service: DatabaseSeedService = Depends(deps.get_seed_service)):
    """Load demo data into an empty database."""
    return message_only(service.seed())
