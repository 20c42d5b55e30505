from typing import Optional

from app.api.v1.base import CamelModel
from app.domain.identity.models import Role


class IdentityResponse(CamelModel):
    """Schema for a resolved wallet address"""
    is_registered: bool
    role: Optional[Role] = None
    name: Optional[str] = None
    id: Optional[str] = None


class UnregisteredResponse(CamelModel):
    """Body returned when a wallet address is unknown"""
    error: str
    is_registered: bool = False
