# main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api.router import router as api_router
from apps.filegate.config import get_filegate_settings
from apps.filegate.db import init_filegate_db
from apps.filegate.middleware import FileAccessMiddleware

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title="Filegate API", version="1.0.0")

# Get settings
settings = get_filegate_settings()

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)

# Check access to files below the protected prefix before anything else handles them
app.add_middleware(FileAccessMiddleware, protected_prefix=settings.PROTECTED_PREFIX)

@app.on_event("startup")
async def startup_event():
    """Create the metadata index tables on startup"""
    await init_filegate_db()

app.include_router(api_router)
