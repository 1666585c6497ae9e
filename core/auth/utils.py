import uuid
from datetime import datetime, timedelta
from typing import Iterable, Optional
from jose import JWTError, jwt
from pydantic import ValidationError
from core.auth.schemas import TokenDataSchema
from core.auth.config import get_auth_settings


# Get auth settings
auth_settings = get_auth_settings()


class JWTUtils:
    """Utilities for frontend session token creation and validation."""
    
    @staticmethod
    def create_access_token(
        user_id: str,
        group_ids: Iterable[int],
        expires_delta: Optional[timedelta] = None
    ) -> tuple[str, str, int]:
        """
        Create a JWT access token for a frontend user.
        
        Returns:
            tuple: (token, jti, expires_in_seconds)
        """
        if expires_delta:
            expire = datetime.utcnow() + expires_delta
        else:
            expire = datetime.utcnow() + timedelta(minutes=auth_settings.JWT_EXPIRE_MINUTES)
        
        jti = str(uuid.uuid4())  # Unique token identifier
        
        to_encode = {
            "sub": str(user_id),
            "groups": sorted(int(group_id) for group_id in group_ids),
            "exp": expire,
            "iat": datetime.utcnow(),
            "jti": jti
        }
        
        encoded_jwt = jwt.encode(to_encode, auth_settings.JWT_SECRET_KEY, algorithm=auth_settings.JWT_ALGORITHM)
        expires_in = int((expire - datetime.utcnow()).total_seconds())
        
        return encoded_jwt, jti, expires_in
    
    @staticmethod
    def verify_token(token: str) -> Optional[TokenDataSchema]:
        """
        Verify and decode a JWT token.
        
        Returns:
            TokenDataSchema if valid, None if invalid or expired
        """
        try:
            payload = jwt.decode(token, auth_settings.JWT_SECRET_KEY, algorithms=[auth_settings.JWT_ALGORITHM])
            return TokenDataSchema(**payload)
        except (JWTError, ValidationError):
            return None
