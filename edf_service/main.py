"""Main server application."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from edf_service import __version__
from edf_service.api import router as api_router
from edf_service.api import router_metrics as api_router_metrics
from edf_service.core.database import init_models
from edf_service.core.environment import get_config_service
from edf_service.core.logging import configure_logging
from edf_service.core.middleware import PrometheusMiddleware
from edf_service.core.services.errors import ServiceError

config_service = get_config_service()
service_settings = config_service.get_service_settings()

configure_logging(service_settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app."""
    logger.info(f"Starting {service_settings.service_name}...")
    logger.info(f"Environment: {config_service.get_environment().value}")

    try:
        await init_models()
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise

    logger.info(f"{service_settings.service_name} startup complete!")
    yield
    logger.info(f"Shutting down {service_settings.service_name}...")


app = FastAPI(
    title=service_settings.service_name,
    description="API for extracting EDF file metadata",
    debug=service_settings.debug,
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(PrometheusMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=3600,
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    """Map service errors that escape a route onto their status code."""
    if exc.status_code >= 500:
        logger.error(f"Handled {type(exc).__name__}: {exc.message}")
    else:
        logger.warning(f"Handled {type(exc).__name__}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


app.include_router(api_router, prefix="/api")
app.include_router(api_router_metrics)


if __name__ == "__main__":
    import uvicorn

    api_settings = config_service.get_api_settings()

    uvicorn.run(
        "edf_service.main:app",
        host=api_settings.api_host,
        port=api_settings.api_port,
        reload=api_settings.reload,
        log_level="debug" if service_settings.debug else "info",
    )
