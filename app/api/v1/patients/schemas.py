from pydantic import Field, field_validator
from typing import Optional, List

from app.api.v1.base import CamelModel
from app.api.v1.records.schemas import MedicalRecordResponse
from app.api.v1.appointments.schemas import AppointmentResponse


class PatientCreate(CamelModel):
    """Schema for registering a patient"""
    name: str = Field(..., min_length=1, max_length=200)
    wallet_address: str = Field(..., min_length=1, max_length=128)
    date_of_birth: Optional[str] = None
    gender: Optional[str] = Field(None, max_length=50)
    contact_info: Optional[str] = Field(None, max_length=255)

    @field_validator('name', 'wallet_address')
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('Field must not be blank')
        return v


class PatientResponse(CamelModel):
    """Schema for patient response"""
    id: str
    name: str
    wallet_address: str
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    contact_info: Optional[str] = None


class PatientDataResponse(CamelModel):
    """Patient together with their records and appointments"""
    patient: PatientResponse
    records: List[MedicalRecordResponse]
    appointments: List[AppointmentResponse]
