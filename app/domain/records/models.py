"""
Medical Records Domain Models
"""

from pydantic import BaseModel
from datetime import datetime
from typing import Optional
import enum


# Author id for records uploaded by the patient themself
SELF_UPLOADED = "0"


class FileType(str, enum.Enum):
    """Kind of document referenced by a record's file hash"""
    PDF = "pdf"
    IMAGE = "image"
    DICOM = "dicom"
    LAB = "lab"
    PRESCRIPTION = "prescription"
    OTHER = "other"


class MedicalRecord(BaseModel):
    """Medical record owned by a patient"""
    id: str
    patient_id: str
    doctor_id: str = SELF_UPLOADED
    title: str
    description: Optional[str] = None
    file_hash: str
    file_type: FileType = FileType.OTHER
    timestamp: datetime

    @property
    def is_self_uploaded(self) -> bool:
        return self.doctor_id == SELF_UPLOADED
