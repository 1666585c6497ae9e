"""
Test cases for frontend identity resolution
"""
from datetime import datetime, timedelta

import pytest
from jose import jwt
from starlette.requests import Request

from core.auth.config import get_auth_settings
from core.auth.identity import FrontendIdentity, FrontendIdentityResolver
from core.auth.utils import JWTUtils


def make_request(headers=None):
    raw_headers = [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in (headers or {}).items()]
    return Request({"type": "http", "method": "GET", "path": "/", "query_string": b"", "headers": raw_headers})


def encode(claims):
    settings = get_auth_settings()
    return jwt.encode(claims, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


class TestJWTUtils:
    """Test cases for session token handling"""

    def test_round_trip(self):
        token, jti, expires_in = JWTUtils.create_access_token("42", [7, 3])

        token_data = JWTUtils.verify_token(token)

        assert token_data is not None
        assert token_data.sub == "42"
        assert token_data.groups == [3, 7]
        assert token_data.jti == jti
        assert expires_in > 0

    def test_expired_token(self):
        token, _, _ = JWTUtils.create_access_token("42", [7], expires_delta=timedelta(seconds=-10))

        assert JWTUtils.verify_token(token) is None

    def test_wrong_signature(self):
        token = jwt.encode({"sub": "42", "groups": [7]}, "another-secret", algorithm="HS256")

        assert JWTUtils.verify_token(token) is None

    def test_non_numeric_group_claim(self):
        now = datetime.utcnow()
        token = encode({"sub": "42", "groups": ["admins"], "exp": now + timedelta(minutes=5), "iat": now, "jti": "x"})

        assert JWTUtils.verify_token(token) is None

    def test_missing_claims(self):
        token = encode({"sub": "42", "exp": datetime.utcnow() + timedelta(minutes=5)})

        assert JWTUtils.verify_token(token) is None


class TestFrontendIdentityResolver:
    """Test cases for FrontendIdentityResolver"""

    async def test_anonymous_without_token(self):
        identity = await FrontendIdentityResolver().resolve(make_request())

        assert identity.is_anonymous
        assert identity.get_group_ids() == frozenset()

    async def test_bearer_token(self):
        token, _, _ = JWTUtils.create_access_token("42", [3, 7])

        identity = await FrontendIdentityResolver().resolve(make_request({"Authorization": f"Bearer {token}"}))

        assert identity.user_id == "42"
        assert identity.group_ids == frozenset({3, 7})

    async def test_session_cookie(self):
        token, _, _ = JWTUtils.create_access_token("42", [5])
        resolver = FrontendIdentityResolver(cookie_name="session")

        identity = await resolver.resolve(make_request({"Cookie": f"session={token}"}))

        assert identity.group_ids == frozenset({5})

    async def test_bearer_token_takes_precedence(self):
        header_token, _, _ = JWTUtils.create_access_token("1", [1])
        cookie_token, _, _ = JWTUtils.create_access_token("2", [2])
        resolver = FrontendIdentityResolver(cookie_name="session")

        identity = await resolver.resolve(
            make_request({"Authorization": f"Bearer {header_token}", "Cookie": f"session={cookie_token}"})
        )

        assert identity.user_id == "1"

    @pytest.mark.parametrize("authorization", ["Bearer garbage", "Basic dXNlcjpwYXNz", "Bearer "])
    async def test_unusable_authorization_is_anonymous(self, authorization):
        identity = await FrontendIdentityResolver().resolve(make_request({"Authorization": authorization}))

        assert identity == FrontendIdentity.anonymous()
