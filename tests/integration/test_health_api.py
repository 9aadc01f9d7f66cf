"""Integration tests for health and metrics endpoints."""

import pytest
from fastapi import status
from httpx import AsyncClient


@pytest.mark.integration
class TestHealthAPI:
    @pytest.mark.asyncio
    async def test_health_check(self, async_client: AsyncClient):
        response = await async_client.get("/api/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"status": "ok"}

    @pytest.mark.asyncio
    async def test_detailed_health_check(self, async_client: AsyncClient):
        response = await async_client.get("/api/health/detailed")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "ok"
        assert data["checks"]["database"]["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_health_check_method_not_allowed(self, async_client: AsyncClient):
        response = await async_client.post("/api/health")

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED

    @pytest.mark.asyncio
    async def test_metrics(self, async_client: AsyncClient):
        await async_client.get("/api/health")

        response = await async_client.get("/metrics")

        assert response.status_code == status.HTTP_200_OK
        assert "http_requests_total" in response.text
