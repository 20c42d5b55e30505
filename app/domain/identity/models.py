"""
Identity Domain Models

Registered principals (patients and doctors) keyed by wallet address, plus
the login directory entry written at registration time.
"""

from pydantic import BaseModel, ConfigDict
from typing import Optional
import enum


class Role(str, enum.Enum):
    """Principal roles"""
    PATIENT = "patient"
    DOCTOR = "doctor"
    ADMIN = "admin"


class Patient(BaseModel):
    """Registered patient; immutable after registration"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    wallet_address: str
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    contact_info: Optional[str] = None


class Doctor(BaseModel):
    """Registered doctor; immutable after registration"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    wallet_address: str
    specialization: Optional[str] = None
    license_number: Optional[str] = None
    contact_info: Optional[str] = None


class DirectoryEntry(BaseModel):
    """Login directory entry stored under the lowercased wallet address"""
    role: Role
    name: str
    id: str


class Identity(BaseModel):
    """Result of resolving a wallet address; absence is not an error"""
    is_registered: bool
    role: Optional[Role] = None
    name: Optional[str] = None
    id: Optional[str] = None


def normalize_address(address: str) -> str:
    return address.strip().lower()
