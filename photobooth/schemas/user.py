from pydantic import BaseModel
from typing import Optional

class Response(BaseModel):
    message: str
    status: str
    status_code: int
    data: Optional[dict] = None

class TokenData(BaseModel):
    sub: Optional[str] = None
    email: Optional[str] = None

class Identity(BaseModel):
    """Resolved caller identity. An email is only ever present while connected."""
    connected: bool = False
    email: Optional[str] = None

    @classmethod
    def disconnected(cls) -> "Identity":
        return cls(connected=False, email=None)

    @classmethod
    def connected_as(cls, email: str) -> "Identity":
        return cls(connected=True, email=email)
