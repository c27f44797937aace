from pghostel.repositories.base.base_repository import BaseRepository, ModelType, driver_message

__all__ = ["BaseRepository", "ModelType", "driver_message"]
