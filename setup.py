#!/usr/bin/env python3
"""Setup script for the EDF file service."""

from setuptools import find_packages, setup

setup(
    name="edf-file-service",
    version="0.1.0",
    packages=find_packages(include=["edf_service", "edf_service.*"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.27",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "pyhumps>=3.8",
        "sqlalchemy[asyncio]>=2.0",
        "asyncpg>=0.29",
        "httpx>=0.27",
        "loguru>=0.7",
        "prometheus-client>=0.19",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "aiosqlite>=0.19",
        ],
    },
)
