from fastapi import APIRouter
from fastapi.responses import JSONResponse

from apps.filegate.config import get_filegate_settings
from apps.filegate.storage.factory import get_resource_factory

router = APIRouter()

@router.get("/health")
async def health_check():
    """Health check endpoint reporting whether protected files can be served"""
    settings = get_filegate_settings()
    storage_available = get_resource_factory().get_default_storage() is not None
    return JSONResponse(
        status_code=200 if storage_available else 503,
        content={
            "status": "healthy" if storage_available else "unavailable",
            "service": "filegate-api",
            "version": "1.0.0",
            "protected_prefix": settings.protected_path,
            "default_storage": storage_available,
        }
    )
