from fastapi import APIRouter
from apps.filegate.routes import health

router = APIRouter()

# Include health route(s) from filegate app
router.include_router(health.router, prefix="", tags=["Health"])
