"""EDF header decoding."""

from .byte_source import ByteSource, FileByteSource, MemoryByteSource
from .errors import EdfDecodeError, TruncatedSourceError
from .header import (
    HEADER_SIZE,
    LABEL_SIZE,
    EdfMetadata,
    decode,
    decode_bytes,
    decode_file,
    parse_or_default,
)

__all__ = [
    "ByteSource",
    "EdfDecodeError",
    "EdfMetadata",
    "FileByteSource",
    "HEADER_SIZE",
    "LABEL_SIZE",
    "MemoryByteSource",
    "TruncatedSourceError",
    "decode",
    "decode_bytes",
    "decode_file",
    "parse_or_default",
]
