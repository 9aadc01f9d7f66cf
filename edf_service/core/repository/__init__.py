from .base_repository import BaseRepository
from .edf_metadata_repository import EdfMetadataRepository

__all__ = ["BaseRepository", "EdfMetadataRepository"]
