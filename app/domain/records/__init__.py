# Medical records domain module
from app.domain.records.models import FileType, MedicalRecord, SELF_UPLOADED

__all__ = [
    "FileType",
    "MedicalRecord",
    "SELF_UPLOADED",
]
