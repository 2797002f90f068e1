"""Data Transfer Objects for Auth Use Cases"""

from typing import Optional
from pydantic import BaseModel


class LoginCommandDTO(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class TokenResponseDTO(BaseModel):
    """Signed bearer token, valid for 24 hours by default"""

    token: str

    class Config:
        json_schema_extra = {
            "example": {"token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."}
        }


class ProvisionAdminCommandDTO(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class AdminDTO(BaseModel):
    id: str
    username: str
    created: bool
