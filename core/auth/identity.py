import logging
from typing import FrozenSet, Optional
from pydantic import BaseModel
from starlette.requests import Request

from core.auth.config import get_auth_settings
from core.auth.utils import JWTUtils

logger = logging.getLogger(__name__)


class FrontendIdentity(BaseModel):
    """The visitor behind a request and the frontend groups they belong to."""
    user_id: Optional[str] = None
    group_ids: FrozenSet[int] = frozenset()

    @property
    def is_anonymous(self) -> bool:
        return self.user_id is None

    def get_group_ids(self) -> FrozenSet[int]:
        return self.group_ids

    @classmethod
    def anonymous(cls) -> "FrontendIdentity":
        return cls()


class FrontendIdentityResolver:
    """
    Derives the frontend identity of a request from its session token.

    The token is read from a bearer ``Authorization`` header, falling back to
    the session cookie. Requests without a valid token are anonymous.
    """

    def __init__(self, cookie_name: Optional[str] = None):
        self.cookie_name = cookie_name or get_auth_settings().SESSION_COOKIE_NAME

    def extract_token(self, request: Request) -> Optional[str]:
        authorization = request.headers.get("Authorization", "")
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
        return request.cookies.get(self.cookie_name) or None

    async def resolve(self, request: Request) -> FrontendIdentity:
        token = self.extract_token(request)
        if not token:
            return FrontendIdentity.anonymous()

        token_data = JWTUtils.verify_token(token)
        if token_data is None:
            logger.debug("Ignoring invalid or expired frontend session token")
            return FrontendIdentity.anonymous()

        return FrontendIdentity(user_id=token_data.sub, group_ids=frozenset(token_data.groups))
