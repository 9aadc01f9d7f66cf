"""Service for extracting and storing EDF file metadata."""

import asyncio
from typing import Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..edf import EdfDecodeError, decode_file
from ..environment import get_config_service
from ..models import EdfMetadataRecord
from ..registry import register_service
from ..repository import EdfMetadataRepository
from ..retriever import EdfRetriever
from .base import BaseService
from .errors import FileProcessingError, StorageError


@register_service
class EdfFileService(BaseService):
    """Downloads EDF files, decodes their headers and stores the metadata."""

    def __init__(self, db: AsyncSession, retriever: Optional[EdfRetriever] = None):
        super().__init__(db)
        self.repo = EdfMetadataRepository(db)
        self.retriever = retriever or EdfRetriever.from_settings(
            get_config_service().get_retriever_settings()
        )

    @classmethod
    def from_db(cls, db: AsyncSession) -> "EdfFileService":
        return cls(db)

    async def health_check(self) -> bool:
        return True

    async def process_edf_file(self, file_url: str) -> EdfMetadataRecord:
        """Fetch an EDF file, decode its header and persist the metadata.

        Args:
            file_url: URL of the EDF file

        Returns:
            The stored metadata record, with its assigned id

        Raises:
            InvalidFileURLError: If the URL is blank or not allowed
            RetrievalError: If the file cannot be fetched
            FileProcessingError: If the header cannot be decoded
            StorageError: If the metadata cannot be saved
        """
        logger.info(f"Processing EDF file from URL: {file_url}")

        file_url = self.retriever.validate_url(file_url)

        async with self.retriever.fetch(file_url) as local_path:
            try:
                metadata = await asyncio.to_thread(decode_file, local_path)
            except (EdfDecodeError, OSError) as e:
                logger.error(f"Error processing EDF file {file_url}: {e}")
                raise FileProcessingError(
                    f"Error processing EDF file: {file_url}"
                ) from e

        try:
            record = await self.repo.create(metadata, file_url=file_url)
        except SQLAlchemyError as e:
            logger.error(f"Failed to store EDF metadata for {file_url}: {e}")
            raise StorageError(f"Failed to store EDF metadata: {file_url}") from e

        logger.info(f"EDF metadata successfully saved with ID: {record.id}")
        return record
