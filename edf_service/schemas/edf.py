"""EDF metadata schemas."""

from datetime import datetime
from typing import List, Optional

from humps import camelize
from pydantic import BaseModel, ConfigDict


class SnakeToCamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=camelize, populate_by_name=True, from_attributes=True
    )


class EdfMetadataDescriptor(SnakeToCamelModel):
    """Metadata extracted from an EDF file, as stored."""

    id: int
    title: str
    file_url: str
    patient_id: str
    start_date: str
    number_of_channels: int
    duration: float
    number_of_annotations: int
    channel_labels: List[str]
    created_at: Optional[datetime] = None
