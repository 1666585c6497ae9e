import logging
from typing import AsyncIterator, Optional

import aiofiles
from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response, StreamingResponse
from starlette.types import ASGIApp

from apps.filegate.access import is_file_accessible
from apps.filegate.config import get_filegate_settings, normalize_prefix
from apps.filegate.exceptions import FilegateError, InvalidGroupListError
from apps.filegate.storage.factory import ResourceFactory, get_resource_factory
from core.auth.identity import FrontendIdentityResolver

logger = logging.getLogger(__name__)


async def _iter_file(source, chunk_size: int) -> AsyncIterator[bytes]:
    """Yield chunks from an already opened file and close it once streamed."""
    try:
        while True:
            chunk = await source.read(chunk_size)
            if not chunk:
                break
            yield chunk
    finally:
        await source.close()


def _not_found() -> Response:
    """Empty 404 shared by missing and denied files."""
    return Response(status_code=404)


class FileAccessMiddleware(BaseHTTPMiddleware):
    """
    Serves files below the protected prefix only to requesters allowed to see them.

    Requests outside the prefix are passed on untouched. Hidden, restricted
    and missing files all answer 404 so that the existence of a file is not
    revealed.
    """

    def __init__(
        self,
        app: ASGIApp,
        protected_prefix: Optional[str] = None,
        resource_factory: Optional[ResourceFactory] = None,
        identity_resolver: Optional[FrontendIdentityResolver] = None,
        chunk_size: Optional[int] = None,
    ):
        super().__init__(app)
        settings = get_filegate_settings()
        self.protected_path = normalize_prefix(protected_prefix or settings.PROTECTED_PREFIX)
        self.resource_factory = resource_factory or get_resource_factory()
        self.identity_resolver = identity_resolver or FrontendIdentityResolver()
        self.chunk_size = chunk_size or settings.STREAM_CHUNK_SIZE

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        if not path.startswith(self.protected_path):
            return await call_next(request)

        default_storage = self.resource_factory.get_default_storage()
        if default_storage is None:
            # Fail closed: nothing below the prefix is served without a storage
            logger.error("Default storage cannot be determined, please check the filegate storage configuration.")
            return Response(status_code=503)

        # Keep the leading slash: "/uploads/a/b.pdf" -> "/a/b.pdf"
        file_identifier = path[len(self.protected_path) - 1:]

        try:
            if not await default_storage.has_file(file_identifier):
                return _not_found()

            file = await default_storage.get_file(file_identifier)
            identity = await self.identity_resolver.resolve(request)
            if not is_file_accessible(file, identity):
                return _not_found()

            # Open before the status line is committed so an unreadable source is still a 404
            source = await aiofiles.open(file.get_for_local_processing(), "rb")
        except InvalidGroupListError as e:
            logger.error(f"Denying access to {file_identifier}: {e}")
            return _not_found()
        except (FilegateError, OSError, SQLAlchemyError) as e:
            logger.warning(f"Denying access to {file_identifier} after lookup failure: {e}")
            return _not_found()

        return StreamingResponse(
            _iter_file(source, self.chunk_size),
            headers={
                "Content-Type": file.mime_type,
                "Content-Length": str(file.size),
            },
        )
