"""EDF decoding errors."""


class EdfDecodeError(Exception):
    """Base class for EDF header decoding errors."""


class TruncatedSourceError(EdfDecodeError):
    """Raised when a read runs past the end of the available bytes."""

    def __init__(self, offset: int, size: int, available: int):
        self.offset = offset
        self.size = size
        self.available = available
        super().__init__(
            f"Cannot read {size} bytes at offset {offset}: "
            f"source holds only {available} bytes"
        )
