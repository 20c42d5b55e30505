# Permissions domain module
from app.domain.permissions.models import PatientAccess, PermissionLogEntry

__all__ = [
    "PatientAccess",
    "PermissionLogEntry",
]
