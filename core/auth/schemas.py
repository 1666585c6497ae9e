from typing import List
from pydantic import BaseModel, Field


class TokenDataSchema(BaseModel):
    """Claims carried by a frontend session token."""
    sub: str = Field(..., description="Frontend user id")
    groups: List[int] = Field(default_factory=list, description="Frontend group ids of the user")
    exp: int
    iat: int
    jti: str
