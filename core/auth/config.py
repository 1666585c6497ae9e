from pydantic_settings import BaseSettings
from functools import lru_cache
import os


class AuthSettings(BaseSettings):
    """Authentication settings."""
    
    # JWT Configuration
    JWT_SECRET_KEY: str = "your-super-secret-jwt-key-change-this-in-production-minimum-32-characters"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 30
    
    # Cookie holding the frontend session token when no bearer token is sent
    SESSION_COOKIE_NAME: str = "fe_typo_user"
    
    class Config:
        env_prefix = "AUTH_"
        env_file = ".env"
        extra = "ignore"
    
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Override with direct environment variables if they exist
        self.JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", self.JWT_SECRET_KEY)
        self.JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", self.JWT_ALGORITHM)
        self.JWT_EXPIRE_MINUTES = int(os.getenv("JWT_EXPIRE_MINUTES", str(self.JWT_EXPIRE_MINUTES)))


@lru_cache()
def get_auth_settings():
    """Get cached auth settings instance."""
    return AuthSettings()
