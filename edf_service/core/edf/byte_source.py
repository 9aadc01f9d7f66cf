"""Random-access byte sources for the EDF header decoder."""

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Optional

from .errors import TruncatedSourceError


class ByteSource(ABC):
    """A read-only sequence of bytes supporting seek-and-read-exact-length."""

    @property
    @abstractmethod
    def size(self) -> int:
        """Total number of bytes available."""
        pass

    @abstractmethod
    def _read(self, offset: int, size: int) -> bytes:
        """Read up to ``size`` bytes starting at ``offset``."""
        pass

    def read_exact(self, offset: int, size: int) -> bytes:
        """Read exactly ``size`` bytes at ``offset``.

        Raises:
            TruncatedSourceError: If fewer than ``size`` bytes are available.
        """
        if offset < 0 or size < 0:
            raise ValueError("offset and size must be non-negative")
        if offset + size > self.size:
            raise TruncatedSourceError(offset, size, self.size)

        data = self._read(offset, size)
        if len(data) != size:
            raise TruncatedSourceError(offset, size, offset + len(data))
        return data


class MemoryByteSource(ByteSource):
    """Byte source over an in-memory buffer."""

    def __init__(self, data: bytes):
        self._data = bytes(data)

    @property
    def size(self) -> int:
        return len(self._data)

    def _read(self, offset: int, size: int) -> bytes:
        return self._data[offset : offset + size]


class FileByteSource(ByteSource):
    """Byte source over a local file, read with seek + read.

    Use as a context manager so the underlying handle is closed:

        with FileByteSource(path) as source:
            metadata = decode(source)
    """

    def __init__(self, file_path: str | Path):
        self.file_path = Path(file_path)
        self._handle: Optional[BinaryIO] = None
        self._size = 0

    def open(self) -> "FileByteSource":
        self._handle = open(self.file_path, "rb")
        self._size = os.fstat(self._handle.fileno()).st_size
        return self

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> "FileByteSource":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def size(self) -> int:
        return self._size

    def _read(self, offset: int, size: int) -> bytes:
        if self._handle is None:
            raise RuntimeError(f"File byte source is not open: {self.file_path}")
        self._handle.seek(offset)
        return self._handle.read(size)
