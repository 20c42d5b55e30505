from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class PermissionLogEntry(BaseModel):
    """Audit entry appended on every grant or revoke"""
    model_config = ConfigDict(frozen=True)

    patient_id: str
    doctor_id: str
    doctor_name: str  # snapshot at the time of the change
    granted: bool
    timestamp: datetime


class PatientAccess(BaseModel):
    """Patient summary as seen from a doctor's patient list"""
    id: str
    name: str
    wallet_address: str
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    contact_info: Optional[str] = None
    has_permission: bool
    record_count: int
