"""Database models."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Float, Integer, String

from .database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class EdfMetadataRecord(Base):
    """Metadata extracted from an EDF file header."""

    __tablename__ = "edf_metadata"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String, nullable=False, default="EDF File")
    file_url = Column(String, nullable=False)
    patient_id = Column(String, nullable=False, default="")
    start_date = Column(String, nullable=False, default="")
    number_of_channels = Column(Integer, nullable=False, default=0)
    duration = Column(Float, nullable=False, default=0.0)
    number_of_annotations = Column(Integer, nullable=False, default=0)
    channel_labels = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=_utcnow)
