"""
Medical Records API Schemas
"""

from pydantic import Field
from datetime import datetime
from typing import Optional

from app.api.v1.base import CamelModel
from app.domain.records.models import FileType


class MedicalRecordCreate(CamelModel):
    """Schema for adding a medical record.

    ``patient_address`` names the owner when a doctor adds the record and is
    ignored when the patient uploads their own.
    """
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)
    file_hash: str = Field(..., min_length=1, max_length=255)
    file_type: FileType = FileType.OTHER
    patient_address: Optional[str] = None


class MedicalRecordUpdate(CamelModel):
    """Schema for replacing a record's content"""
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)
    file_hash: str = Field(..., min_length=1, max_length=255)
    file_type: FileType = FileType.OTHER


class MedicalRecordResponse(CamelModel):
    id: str
    patient_id: str
    doctor_id: str
    title: str
    description: Optional[str] = None
    file_hash: str
    file_type: FileType
    timestamp: datetime
