"""
Appointments Repository Layer

Provides data access operations for appointments.
"""

from typing import Optional, List

from app.domain.appointments.models import Appointment, AppointmentStatus
from app.infrastructure.ledger import LedgerStore


class AppointmentRepository:
    """Repository for appointment data access operations"""

    def __init__(self, store: LedgerStore):
        self.store = store

    def create(self, appointment_data: dict) -> Appointment:
        """Create a pending appointment; call inside a transaction"""
        appointment = Appointment(
            id=self.store.allocate_id("appointment"),
            status=AppointmentStatus.PENDING,
            **appointment_data
        )
        self.store.state.appointments.append(appointment)
        return appointment

    def get_by_id(self, appointment_id: str) -> Optional[Appointment]:
        """Get appointment by ID"""
        return next((a for a in self.store.state.appointments if a.id == appointment_id), None)

    def get_by_patient_id(self, patient_id: str) -> List[Appointment]:
        return [a for a in self.store.state.appointments if a.patient_id == patient_id]

    def get_by_doctor_id(self, doctor_id: str) -> List[Appointment]:
        return [a for a in self.store.state.appointments if a.doctor_id == doctor_id]

    def set_status(self, appointment_id: str, status: AppointmentStatus) -> Optional[Appointment]:
        """Overwrite the status field; call inside a transaction"""
        appointments = self.store.state.appointments
        for index, appointment in enumerate(appointments):
            if appointment.id == appointment_id:
                updated = appointment.model_copy(update={"status": status})
                appointments[index] = updated
                return updated
        return None
