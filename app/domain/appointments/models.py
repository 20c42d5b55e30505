"""
Appointments Domain Models

Implements the appointment entity and its status state machine:

    Pending   --confirm-->  Confirmed
    Pending   --decline-->  Cancelled
    Confirmed --complete--> Completed
    Confirmed --cancel-->   Cancelled

Completed and Cancelled are terminal.
"""

from pydantic import BaseModel
from datetime import datetime
from typing import Dict, FrozenSet
import enum


class AppointmentStatus(str, enum.Enum):
    """Appointment status enumeration"""
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


ALLOWED_TRANSITIONS: Dict[AppointmentStatus, FrozenSet[AppointmentStatus]] = {
    AppointmentStatus.PENDING: frozenset({AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED}),
    AppointmentStatus.CONFIRMED: frozenset({AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED}),
    AppointmentStatus.COMPLETED: frozenset(),
    AppointmentStatus.CANCELLED: frozenset(),
}

TERMINAL_STATUSES = frozenset(
    status for status, targets in ALLOWED_TRANSITIONS.items() if not targets
)


def can_transition(current: AppointmentStatus, new: AppointmentStatus) -> bool:
    return new in ALLOWED_TRANSITIONS[current]


class Appointment(BaseModel):
    """Appointment between a patient and a doctor"""
    id: str
    patient_id: str
    doctor_id: str
    timestamp: datetime  # requested slot
    reason: str
    status: AppointmentStatus = AppointmentStatus.PENDING
