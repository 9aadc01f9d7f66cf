"""EDF file descriptor endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger

from edf_service.core.dependencies import get_service
from edf_service.core.security import is_valid_key
from edf_service.core.services.edf_file_service import EdfFileService
from edf_service.core.services.errors import (
    FileProcessingError,
    InvalidFileURLError,
    StorageError,
)
from edf_service.schemas import EdfMetadataDescriptor

router = APIRouter()

get_edf_file_service = get_service(EdfFileService)


@router.get(
    "/descriptor",
    response_model=EdfMetadataDescriptor,
    responses={
        400: {"description": "Missing or invalid parameters"},
        403: {"description": "Invalid authentication key"},
        500: {"description": "Error retrieving, decoding or storing the file"},
    },
)
async def get_edf_descriptor(
    key: Optional[str] = Query(None, description="Pre-shared key for authentication"),
    file_url: Optional[str] = Query(
        None, alias="fileUrl", description="URL pointing to the EDF file"
    ),
    edf_file_service: EdfFileService = Depends(get_edf_file_service),
) -> EdfMetadataDescriptor:
    """Download an EDF file and return the metadata decoded from its header."""
    logger.info(f"Received request to process EDF file from URL: {file_url}")

    if not key or not key.strip():
        logger.warning("Authentication failed: Missing key")
        raise HTTPException(status_code=400, detail="Authentication key is missing.")

    if not is_valid_key(key):
        logger.warning("Authentication failed: Invalid key")
        raise HTTPException(status_code=403, detail="Invalid authentication key.")

    if not file_url or not file_url.strip():
        logger.warning("Invalid request: Missing file URL")
        raise HTTPException(status_code=400, detail="File URL is required.")

    try:
        record = await edf_file_service.process_edf_file(file_url)
    except InvalidFileURLError as e:
        logger.error(f"Invalid file URL provided: {file_url}")
        raise HTTPException(status_code=400, detail=e.message)
    except (FileProcessingError, StorageError) as e:
        logger.error(f"Error processing EDF file {file_url}: {e}")
        raise HTTPException(status_code=500, detail="Error processing EDF file.")
    except Exception as e:
        logger.exception(
            f"Unexpected error occurred while processing EDF file {file_url}: {e}"
        )
        raise HTTPException(status_code=500, detail="An unexpected error occurred.")

    logger.info(f"Successfully processed EDF file from URL: {file_url}")
    return EdfMetadataDescriptor.model_validate(record)
