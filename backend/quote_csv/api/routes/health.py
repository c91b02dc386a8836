"""Health check endpoint."""

from fastapi import APIRouter

from ...config import settings
from ...services.csv_schema import ITEM_HEADERS, PROJECT_KEYS


router = APIRouter(prefix="/api/v1", tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """
    Health check endpoint.

    Returns:
        Health status, CSV schema summary and upload limit
    """
    return {
        "status": "healthy",
        "service": "報價單 CSV 匯入匯出",
        "version": "0.1.0",
        "schema": {
            "project_columns": len(PROJECT_KEYS),
            "item_columns": len(ITEM_HEADERS),
        },
        "max_upload_bytes": settings.max_file_size_bytes,
    }
