"""
Appointments API Schemas
"""

from pydantic import Field
from datetime import datetime

from app.api.v1.base import CamelModel
from app.domain.appointments.models import AppointmentStatus


class AppointmentCreate(CamelModel):
    """Schema for booking an appointment; the patient comes from the session"""
    doctor_address: str = Field(..., min_length=1)
    timestamp: datetime
    reason: str = Field(..., min_length=1, max_length=1000)


class AppointmentStatusUpdate(CamelModel):
    status: AppointmentStatus


class AppointmentResponse(CamelModel):
    """Schema for appointment response"""
    id: str
    patient_id: str
    doctor_id: str
    timestamp: datetime
    reason: str
    status: AppointmentStatus
