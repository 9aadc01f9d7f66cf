"""EDF header decoder.

Reads the fixed 256-byte preamble of an EDF file plus the channel label table
that follows it, and produces an :class:`EdfMetadata` record.

Field layout (offset, width in bytes):

    patient_id              168  20
    start_date               97  16
    number_of_annotations   236   4
    duration                244   8
    number_of_channels      252   4
    channel label i   256 + i*16 16

The patient_id and start_date offsets differ from the published EDF layout
(patient identification at 8, start date at 168). They are kept as-is because
records already stored by this service were decoded with them.
"""

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, TypeVar

from loguru import logger

from .byte_source import ByteSource, FileByteSource, MemoryByteSource

HEADER_SIZE = 256
LABEL_SIZE = 16

PATIENT_ID_FIELD = (168, 20)
START_DATE_FIELD = (97, 16)
NUM_ANNOTATIONS_FIELD = (236, 4)
DURATION_FIELD = (244, 8)
NUM_CHANNELS_FIELD = (252, 4)

ENCODING = "latin-1"

# Every code point up to and including the space character
_TRIM_CHARS = "".join(chr(c) for c in range(0x21))

N = TypeVar("N", int, float)


@dataclass(frozen=True)
class EdfMetadata:
    """Metadata decoded from an EDF header."""

    patient_id: str
    start_date: str
    number_of_channels: int
    duration: float
    number_of_annotations: int
    channel_labels: Tuple[str, ...]


def parse_or_default(text: str, default: N) -> N:
    """Parse ``text`` as the numeric type of ``default``.

    Returns ``default`` when the text is empty, not a number, negative or
    not finite. Digit-group underscores and non-ASCII characters, both of
    which ``int`` and ``float`` would otherwise accept, count as not a number.
    """
    if not text.isascii() or "_" in text:
        return default

    value_type = type(default)
    try:
        value = value_type(text)
    except (TypeError, ValueError, OverflowError):
        return default

    if value < 0 or (value_type is float and not math.isfinite(value)):
        return default
    return value


def _read_text(source: ByteSource, offset: int, width: int) -> str:
    return source.read_exact(offset, width).decode(ENCODING).strip(_TRIM_CHARS)


def decode(source: ByteSource) -> EdfMetadata:
    """Decode the metadata fields of an EDF header.

    Args:
        source: Random-access bytes of the EDF file, at least
            ``256 + number_of_channels * 16`` long

    Returns:
        The decoded metadata

    Raises:
        TruncatedSourceError: If the source is too short for the header or
            the channel label table
    """
    patient_id = _read_text(source, *PATIENT_ID_FIELD)
    start_date = _read_text(source, *START_DATE_FIELD)
    duration = parse_or_default(_read_text(source, *DURATION_FIELD), 0.0)
    number_of_annotations = parse_or_default(
        _read_text(source, *NUM_ANNOTATIONS_FIELD), 0
    )
    number_of_channels = parse_or_default(_read_text(source, *NUM_CHANNELS_FIELD), 0)

    channel_labels = tuple(
        _read_text(source, HEADER_SIZE + i * LABEL_SIZE, LABEL_SIZE)
        for i in range(number_of_channels)
    )

    logger.debug(
        f"Decoded EDF header: {number_of_channels} channels, "
        f"duration={duration}, annotations={number_of_annotations}"
    )

    return EdfMetadata(
        patient_id=patient_id,
        start_date=start_date,
        number_of_channels=number_of_channels,
        duration=duration,
        number_of_annotations=number_of_annotations,
        channel_labels=channel_labels,
    )


def decode_bytes(data: bytes) -> EdfMetadata:
    """Decode an EDF header held in memory."""
    return decode(MemoryByteSource(data))


def decode_file(file_path: str | Path) -> EdfMetadata:
    """Decode the header of a local EDF file."""
    with FileByteSource(file_path) as source:
        return decode(source)
