"""Fetching EDF files from URLs into local storage."""

import os
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, List, Optional
from urllib.parse import unquote, urlparse

import httpx
from loguru import logger

from .environment import RetrieverSettings
from .services.errors import InvalidFileURLError, RetrievalError

CHUNK_SIZE = 64 * 1024


class EdfRetriever:
    """Materialises the content behind a URL as a local file."""

    def __init__(
        self,
        allowed_schemes: List[str],
        timeout: float = 30.0,
        max_bytes: Optional[int] = None,
        temp_dir: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.allowed_schemes = [s.lower() for s in allowed_schemes]
        self.timeout = timeout
        self.max_bytes = max_bytes
        self.temp_dir = temp_dir
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: RetrieverSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "EdfRetriever":
        return cls(
            allowed_schemes=settings.allowed_url_schemes,
            timeout=settings.download_timeout_seconds,
            max_bytes=settings.max_download_bytes,
            temp_dir=settings.temp_dir,
            transport=transport,
        )

    def validate_url(self, file_url: Optional[str]) -> str:
        """Check a file URL against the scheme allowlist.

        Returns:
            The stripped URL

        Raises:
            InvalidFileURLError: If the URL is blank, malformed or not allowed
        """
        if not file_url or not file_url.strip():
            raise InvalidFileURLError("File URL is required.")

        file_url = file_url.strip()
        try:
            parsed = urlparse(file_url)
        except ValueError:
            raise InvalidFileURLError(f"Malformed EDF file URL: {file_url}")

        scheme = parsed.scheme.lower()
        if scheme not in self.allowed_schemes:
            allowed = "/".join(s.upper() for s in self.allowed_schemes)
            raise InvalidFileURLError(
                f"Invalid EDF file URL. Must be a valid {allowed} URL."
            )
        if scheme in ("http", "https"):
            if not parsed.netloc:
                raise InvalidFileURLError(f"Malformed EDF file URL: {file_url}")
            try:
                httpx.URL(file_url)
            except httpx.InvalidURL:
                raise InvalidFileURLError(f"Malformed EDF file URL: {file_url}")
        if scheme == "file" and not parsed.path:
            raise InvalidFileURLError(f"Malformed EDF file URL: {file_url}")

        return file_url

    @asynccontextmanager
    async def fetch(self, file_url: str) -> AsyncIterator[Path]:
        """Yield a local path holding the content of ``file_url``.

        Downloaded content lives in a temporary file that is removed when
        the context exits.

        Raises:
            InvalidFileURLError: If the URL is not allowed
            RetrievalError: If the content cannot be fetched
        """
        file_url = self.validate_url(file_url)
        parsed = urlparse(file_url)

        if parsed.scheme.lower() == "file":
            local_path = Path(unquote(parsed.path))
            if not local_path.is_file():
                raise RetrievalError(f"File not found: {local_path}")
            logger.info(f"Using local EDF file: {local_path}")
            yield local_path
            return

        fd, temp_name = tempfile.mkstemp(
            prefix="edf-file", suffix=".edf", dir=self.temp_dir
        )
        temp_path = Path(temp_name)
        try:
            with os.fdopen(fd, "wb") as out:
                await self._download(file_url, out)
            logger.info(
                f"File successfully downloaded to temporary location: {temp_path}"
            )
            yield temp_path
        finally:
            temp_path.unlink(missing_ok=True)

    async def _download(self, file_url: str, out) -> None:
        received = 0
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                async with client.stream("GET", file_url) as response:
                    if response.status_code >= 400:
                        raise RetrievalError(
                            f"Failed to download {file_url}: "
                            f"HTTP {response.status_code}"
                        )
                    async for chunk in response.aiter_bytes(CHUNK_SIZE):
                        received += len(chunk)
                        if self.max_bytes is not None and received > self.max_bytes:
                            raise RetrievalError(
                                f"Download of {file_url} exceeds {self.max_bytes} bytes"
                            )
                        out.write(chunk)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Error downloading EDF file {file_url}: {e}")
            raise RetrievalError(f"Failed to download {file_url}: {e}") from e
