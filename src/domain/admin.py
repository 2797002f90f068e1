"""Admin Domain Entity

The single administrator identity allowed to manage invoices.
"""

from datetime import datetime
from sqlmodel import Field, Column
from sqlalchemy import DateTime, String
from src.domain.base import BaseModel, generate_uuid, utcnow


class Admin(BaseModel, table=True):
    """
    Admin - credential record

    Domain Rules:
    - username is unique and matched exactly
    - password_hash is a bcrypt hash; the plaintext is never stored
    - Created and rotated only by the provisioning script
    """

    __tablename__ = "admins"

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Admin identifier (uuid)"
    )

    username: str = Field(
        sa_column=Column(String(100), nullable=False, unique=True),
        description="Login name (unique)"
    )

    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="bcrypt hash of the password"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last password rotation timestamp"
    )
