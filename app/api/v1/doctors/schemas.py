from pydantic import Field, field_validator
from typing import Optional, List

from app.api.v1.base import CamelModel
from app.api.v1.appointments.schemas import AppointmentResponse


class DoctorCreate(CamelModel):
    """Schema for registering a doctor"""
    name: str = Field(..., min_length=1, max_length=200)
    wallet_address: str = Field(..., min_length=1, max_length=128)
    specialization: Optional[str] = Field(None, max_length=100)
    license_number: Optional[str] = Field(None, max_length=50)
    contact_info: Optional[str] = Field(None, max_length=255)

    @field_validator('name', 'wallet_address')
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('Field must not be blank')
        return v


class DoctorResponse(CamelModel):
    """Schema for doctor response"""
    id: str
    name: str
    wallet_address: str
    specialization: Optional[str] = None
    license_number: Optional[str] = None
    contact_info: Optional[str] = None


class DoctorDataResponse(CamelModel):
    """Doctor together with their appointments"""
    doctor: DoctorResponse
    appointments: List[AppointmentResponse]


class PatientAccessResponse(CamelModel):
    """Patient row on a doctor's patient list"""
    id: str
    name: str
    wallet_address: str
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    contact_info: Optional[str] = None
    has_permission: bool
    record_count: int
