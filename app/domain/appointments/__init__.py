# Appointments domain module
from app.domain.appointments.models import (
    ALLOWED_TRANSITIONS,
    Appointment,
    AppointmentStatus,
    TERMINAL_STATUSES,
)

__all__ = [
    "ALLOWED_TRANSITIONS",
    "Appointment",
    "AppointmentStatus",
    "TERMINAL_STATUSES",
]
