from pydantic import Field
from datetime import datetime

from app.api.v1.base import CamelModel


class PermissionChange(CamelModel):
    """Schema for granting or revoking a doctor's access"""
    patient_address: str = Field(..., min_length=1)
    doctor_address: str = Field(..., min_length=1)


class PermissionCheckResponse(CamelModel):
    patient_address: str
    doctor_address: str
    has_permission: bool


class PermissionLogResponse(CamelModel):
    patient_id: str
    doctor_id: str
    doctor_name: str
    granted: bool
    timestamp: datetime
