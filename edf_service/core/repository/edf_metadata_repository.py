from sqlalchemy.ext.asyncio import AsyncSession

from ..edf import EdfMetadata
from ..models import EdfMetadataRecord
from .base_repository import BaseRepository

DEFAULT_TITLE = "EDF File"


class EdfMetadataRepository(BaseRepository[EdfMetadataRecord]):
    def __init__(self, db: AsyncSession):
        super().__init__(EdfMetadataRecord, db)

    async def create(
        self, metadata: EdfMetadata, file_url: str, title: str = DEFAULT_TITLE
    ) -> EdfMetadataRecord:
        record = EdfMetadataRecord(
            title=title,
            file_url=file_url,
            patient_id=metadata.patient_id,
            start_date=metadata.start_date,
            number_of_channels=metadata.number_of_channels,
            duration=metadata.duration,
            number_of_annotations=metadata.number_of_annotations,
            channel_labels=list(metadata.channel_labels),
        )
        return await self.add(record)
