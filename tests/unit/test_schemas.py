"""Unit tests for the response schemas."""

import warnings
from types import SimpleNamespace

import pytest
from pydantic import PydanticDeprecatedSince20

from edf_service.schemas import EdfMetadataDescriptor
from edf_service.schemas.edf import SnakeToCamelModel


@pytest.mark.unit
class TestEdfMetadataDescriptor:
    def test_from_record_attributes(self):
        record = SimpleNamespace(
            id=7,
            title="EDF File",
            file_url="https://data.example.org/a.edf",
            patient_id="P1",
            start_date="01.01.24",
            number_of_channels=1,
            duration=10.0,
            number_of_annotations=0,
            channel_labels=["Cz"],
            created_at=None,
        )

        descriptor = EdfMetadataDescriptor.model_validate(record)

        data = descriptor.model_dump(by_alias=True)
        assert data["fileUrl"] == "https://data.example.org/a.edf"
        assert data["numberOfChannels"] == 1
        assert data["channelLabels"] == ["Cz"]

    def test_accepts_field_names_and_aliases(self):
        class Sample(SnakeToCamelModel):
            patient_id: str

        assert Sample(patient_id="a").patient_id == "a"
        assert Sample(patientId="b").patient_id == "b"

    def test_subclassing_emits_no_deprecation_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", PydanticDeprecatedSince20)

            class Sample(SnakeToCamelModel):
                number_of_channels: int

        assert Sample(numberOfChannels=2).number_of_channels == 2
