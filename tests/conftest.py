"""Test configuration and fixtures."""

import os
from typing import AsyncGenerator, Callable, Dict, Optional, Sequence

# Settings are read when edf_service modules are imported
TEST_SECRET_KEY = "test-pre-shared-key"
os.environ["APP_SECRET_KEY"] = TEST_SECRET_KEY
os.environ["DB_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "testing"

import httpx
import pytest
import pytest_asyncio
from fastapi import Depends
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from edf_service.api.edf import get_edf_file_service
from edf_service.core import models  # noqa: F401
from edf_service.core.database import Base, get_db
from edf_service.core.retriever import EdfRetriever
from edf_service.core.services.edf_file_service import EdfFileService
from edf_service.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
EDF_BASE_URL = "https://data.example.org/recordings"


def make_edf_header(
    patient_id: str = "",
    start_date: str = "",
    number_of_annotations: str = "",
    duration: str = "",
    number_of_channels: Optional[str] = None,
    channel_labels: Sequence[str] = (),
) -> bytes:
    """Build a synthetic EDF header with the given fields at their offsets."""
    header = bytearray(b" " * 256)

    def put(offset: int, width: int, value: str) -> None:
        header[offset : offset + width] = value.encode("latin-1").ljust(width)[:width]

    if number_of_channels is None:
        number_of_channels = str(len(channel_labels))

    put(0, 8, "0")
    put(97, 16, start_date)
    put(168, 20, patient_id)
    put(236, 4, number_of_annotations)
    put(244, 8, duration)
    put(252, 4, number_of_channels)

    for label in channel_labels:
        header += label.encode("latin-1").ljust(16)[:16]
    return bytes(header)


@pytest.fixture
def edf_header_factory() -> Callable[..., bytes]:
    """Factory for synthetic EDF header bytes."""
    return make_edf_header


@pytest.fixture
def sample_edf_bytes() -> bytes:
    """A small, well-formed EDF header with three channels."""
    return make_edf_header(
        patient_id="P123",
        start_date="01.02.2024",
        number_of_annotations="2",
        duration="3600.5",
        channel_labels=("EEG Fp1", "EEG Fp2", "ECG"),
    )


@pytest.fixture
def edf_server(sample_edf_bytes) -> Dict[str, bytes]:
    """URL -> content map served by the mock HTTP transport."""
    return {f"{EDF_BASE_URL}/sample.edf": sample_edf_bytes}


@pytest.fixture
def mock_transport(edf_server) -> httpx.MockTransport:
    """HTTP transport that serves ``edf_server`` content and 404 otherwise."""

    def handler(request: httpx.Request) -> httpx.Response:
        content = edf_server.get(str(request.url))
        if content is None:
            return httpx.Response(404, text="Not Found")
        return httpx.Response(200, content=content)

    return httpx.MockTransport(handler)


@pytest.fixture
def retriever(mock_transport) -> EdfRetriever:
    """Retriever wired to the mock transport."""
    return EdfRetriever(["http", "https"], timeout=5.0, transport=mock_transport)


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def test_session_maker(test_engine) -> async_sessionmaker:
    return async_sessionmaker(bind=test_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def test_session(test_session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with test_session_maker() as session:
        yield session


@pytest.fixture
def override_dependencies(test_session_maker, retriever):
    """Point the app at the test database and the mock retriever."""

    async def _get_test_db():
        async with test_session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    def _get_test_service(db: AsyncSession = Depends(get_db)) -> EdfFileService:
        return EdfFileService(db, retriever=retriever)

    app.dependency_overrides[get_db] = _get_test_db
    app.dependency_overrides[get_edf_file_service] = _get_test_service
    yield
    app.dependency_overrides = {}


@pytest_asyncio.fixture
async def async_client(override_dependencies) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as test_client:
        yield test_client
