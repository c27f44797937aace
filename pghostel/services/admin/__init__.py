"""
Administrative services.
"""

from pghostel.services.admin.database_seed_service import DatabaseSeedService

__all__ = ["DatabaseSeedService"]
