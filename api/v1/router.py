# api/v1/router.py
from fastapi import APIRouter
from api.v1.filegate import router as filegate_router

router = APIRouter()

# Mount tool-based or domain-based routers
router.include_router(filegate_router, prefix="/filegate")
