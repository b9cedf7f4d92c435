"""Admin session and actor models."""

from datetime import datetime

from pydantic import BaseModel, Field


class Session(BaseModel):
    """Admin session issued by a successful login."""

    session_id: str = Field(..., description="Opaque random token")
    expires: datetime = Field(..., description="Session is valid while expires > now")


class Actor(BaseModel):
    """Authenticated administrator, required by every mutating operation."""

    name: str = "Admin"

    class Config:
        """Pydantic config."""

        frozen = True


ADMIN = Actor()
