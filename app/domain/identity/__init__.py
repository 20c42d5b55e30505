# Identity domain module
from app.domain.identity.models import (
    DirectoryEntry,
    Doctor,
    Identity,
    Patient,
    Role,
)

__all__ = [
    "DirectoryEntry",
    "Doctor",
    "Identity",
    "Patient",
    "Role",
]
