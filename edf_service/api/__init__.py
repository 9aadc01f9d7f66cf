"""API router initialization."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from .edf import router as edf_router
from .health import router as health_router

router = APIRouter()
router_metrics = APIRouter()

router.include_router(edf_router, prefix="/edf", tags=["edf"])
router.include_router(health_router, prefix="/health", tags=["health"])


@router_metrics.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
