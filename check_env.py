from pathlib import Path

from apps.filegate.config import get_filegate_settings
from core.auth.config import get_auth_settings

settings = get_filegate_settings()
auth_settings = get_auth_settings()


def mask(value: str) -> str:
    return "***" + value[-4:] if value else ""


print("=== Filegate configuration ===")
print(f"Protected prefix: {settings.protected_path}")
print(f"Storage root: {settings.STORAGE_ROOT or '(not set)'}")
print(f"Processing folder: {settings.PROCESSING_FOLDER}")
print(f"Metadata database: {settings.DATABASE_URL}")
print(f"Stream chunk size: {settings.STREAM_CHUNK_SIZE} bytes")

print("\n=== Auth configuration ===")
print(f"JWT_SECRET_KEY={mask(auth_settings.JWT_SECRET_KEY)}")
print(f"JWT_ALGORITHM={auth_settings.JWT_ALGORITHM}")
print(f"Session cookie: {auth_settings.SESSION_COOKIE_NAME}")

print("\n=== Storage checks ===")
if not settings.STORAGE_ROOT:
    print("No storage root configured: every protected request will answer 503")
    print("Set FILEGATE_STORAGE_ROOT=/path/to/uploads in your .env file")
else:
    root = Path(settings.STORAGE_ROOT)
    print(f"Storage root exists: {root.is_dir()}")
    if not root.is_dir():
        print("The storage root is not a directory: every protected request will answer 503")
    else:
        processing = root / settings.PROCESSING_FOLDER.strip("/")
        print(f"Processing folder exists: {processing.is_dir()}")
        print("Make sure the web server serves the processing folder directly")
