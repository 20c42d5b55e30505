"""
Appointments Service Layer

Booking and the status state machine. Every status change is checked
against ALLOWED_TRANSITIONS and against who is asking: the doctor moves an
appointment through its lifecycle, the patient may cancel once confirmed.
"""

from typing import List
from datetime import datetime
import logging

from app.core.exceptions import AuthorizationError, InvalidTransitionError, NotFoundError
from app.domain.appointments.models import Appointment, AppointmentStatus, can_transition
from app.domain.identity.models import Role
from app.domain.appointments.repository import AppointmentRepository
from app.infrastructure.ledger import LedgerStore
from app.infrastructure.transport import LedgerTransport

logger = logging.getLogger(__name__)


class AppointmentService:
    """Service layer for appointment management"""

    def __init__(self, store: LedgerStore, transport: LedgerTransport):
        self.store = store
        self.transport = transport
        self.appointment_repo = AppointmentRepository(store)

    async def book(
        self,
        patient_address: str,
        doctor_address: str,
        timestamp: datetime,
        reason: str
    ) -> Appointment:
        """Book a pending appointment between a patient and a doctor"""
        await self.transport.round_trip("book_appointment")
        async with self.store.transaction():
            patient = self.store.find_patient_by_address(patient_address)
            doctor = self.store.find_doctor_by_address(doctor_address)
            if not patient or not doctor:
                raise NotFoundError(
                    "Patient or doctor not found",
                    details={"patient_address": patient_address, "doctor_address": doctor_address}
                )

            appointment = self.appointment_repo.create({
                "patient_id": patient.id,
                "doctor_id": doctor.id,
                "timestamp": timestamp,
                "reason": reason,
            })
        logger.info(f"Booked appointment {appointment.id} for patient {patient.id} with doctor {doctor.id}")
        return appointment

    def _authorize_transition(
        self,
        actor_role: Role,
        actor_address: str,
        appointment: Appointment,
        new_status: AppointmentStatus
    ) -> None:
        if actor_role == Role.DOCTOR:
            doctor = self.store.find_doctor_by_address(actor_address)
            if doctor and doctor.id == appointment.doctor_id:
                return
        elif actor_role == Role.PATIENT:
            patient = self.store.find_patient_by_address(actor_address)
            if (
                patient
                and patient.id == appointment.patient_id
                and appointment.status == AppointmentStatus.CONFIRMED
                and new_status == AppointmentStatus.CANCELLED
            ):
                return

        logger.warning(
            f"Rejected {new_status.value} on appointment {appointment.id} by {actor_role.value} {actor_address}"
        )
        raise AuthorizationError(
            f"Not allowed to set appointment {appointment.id} to {new_status.value}",
            details={"appointment_id": appointment.id, "role": actor_role.value}
        )

    async def set_status(
        self,
        actor_role: Role,
        actor_address: str,
        appointment_id: str,
        new_status: AppointmentStatus
    ) -> Appointment:
        """Apply a status transition on behalf of one of the appointment's parties"""
        await self.transport.round_trip("update_appointment_status")
        async with self.store.transaction():
            appointment = self.appointment_repo.get_by_id(appointment_id)
            if not appointment:
                raise NotFoundError("Appointment not found", details={"appointment_id": appointment_id})

            self._authorize_transition(actor_role, actor_address, appointment, new_status)

            if not can_transition(appointment.status, new_status):
                logger.warning(
                    f"Rejected transition of appointment {appointment_id} "
                    f"from {appointment.status.value} to {new_status.value}"
                )
                raise InvalidTransitionError(
                    f"Cannot change appointment from {appointment.status.value} to {new_status.value}",
                    details={
                        "appointment_id": appointment_id,
                        "current_status": appointment.status.value,
                        "requested_status": new_status.value,
                    }
                )

            appointment = self.appointment_repo.set_status(appointment_id, new_status)
        logger.info(f"Appointment {appointment_id} is now {new_status.value}")
        return appointment

    async def get_by_id(self, appointment_id: str) -> Appointment:
        await self.transport.round_trip("get_appointment")
        appointment = self.appointment_repo.get_by_id(appointment_id)
        if not appointment:
            raise NotFoundError("Appointment not found", details={"appointment_id": appointment_id})
        return appointment

    async def list_by_patient(self, patient_id: str) -> List[Appointment]:
        await self.transport.round_trip("list_appointments")
        return self.appointment_repo.get_by_patient_id(patient_id)

    async def list_by_doctor(self, doctor_id: str) -> List[Appointment]:
        await self.transport.round_trip("list_appointments")
        return self.appointment_repo.get_by_doctor_id(doctor_id)
