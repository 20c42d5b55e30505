"""
Identity Service Layer

Registration of patients and doctors and resolution of wallet addresses to
principals. Resolution never fails for an unknown address; it returns an
unregistered identity instead.
"""

from typing import Iterable, List, Optional
from pydantic import BaseModel
import logging

from app.core.exceptions import ConflictError
from app.domain.identity.models import Doctor, Identity, Patient, Role, normalize_address
from app.domain.identity.repository import PrincipalRepository
from app.domain.records.models import MedicalRecord
from app.domain.records.repository import MedicalRecordRepository
from app.domain.appointments.models import Appointment
from app.domain.appointments.repository import AppointmentRepository
from app.infrastructure.ledger import LedgerStore
from app.infrastructure.transport import LedgerTransport
from app.api.v1.patients.schemas import PatientCreate
from app.api.v1.doctors.schemas import DoctorCreate

logger = logging.getLogger(__name__)


class PatientData(BaseModel):
    patient: Patient
    records: List[MedicalRecord]
    appointments: List[Appointment]


class DoctorData(BaseModel):
    doctor: Doctor
    appointments: List[Appointment]


class IdentityService:
    """Service layer for the identity directory"""

    def __init__(
        self,
        store: LedgerStore,
        transport: LedgerTransport,
        allow_shadow_identities: bool = False,
        admin_addresses: Iterable[str] = ()
    ):
        self.store = store
        self.transport = transport
        self.allow_shadow_identities = allow_shadow_identities
        self.admin_addresses = {normalize_address(a) for a in admin_addresses}
        self.principal_repo = PrincipalRepository(store)
        self.record_repo = MedicalRecordRepository(store)
        self.appointment_repo = AppointmentRepository(store)

    def _check_address_available(self, address: str) -> None:
        if self.allow_shadow_identities:
            return
        if self.principal_repo.address_in_use(address) or normalize_address(address) in self.admin_addresses:
            logger.warning(f"Rejected registration for address already in use: {address}")
            raise ConflictError(
                message="Wallet address is already registered",
                details={"wallet_address": address},
                error_code="ADDRESS_ALREADY_REGISTERED"
            )

    async def register_patient(self, patient_data: PatientCreate) -> Patient:
        """Register a new patient"""
        await self.transport.round_trip("register_patient")
        async with self.store.transaction():
            self._check_address_available(patient_data.wallet_address)
            patient = self.principal_repo.add_patient(patient_data.model_dump())
        logger.info(f"Registered patient {patient.id} for {patient.wallet_address}")
        return patient

    async def register_doctor(self, doctor_data: DoctorCreate) -> Doctor:
        """Register a new doctor"""
        await self.transport.round_trip("register_doctor")
        async with self.store.transaction():
            self._check_address_available(doctor_data.wallet_address)
            doctor = self.principal_repo.add_doctor(doctor_data.model_dump())
        logger.info(f"Registered doctor {doctor.id} for {doctor.wallet_address}")
        return doctor

    async def resolve(self, address: str) -> Identity:
        """Resolve a wallet address to a registered principal"""
        await self.transport.round_trip("resolve")

        patient = self.principal_repo.get_patient_by_address(address)
        if patient:
            return Identity(is_registered=True, role=Role.PATIENT, name=patient.name, id=patient.id)

        doctor = self.principal_repo.get_doctor_by_address(address)
        if doctor:
            return Identity(is_registered=True, role=Role.DOCTOR, name=doctor.name, id=doctor.id)

        entry = self.principal_repo.get_directory_entry(address)
        if entry:
            return Identity(is_registered=True, role=entry.role, name=entry.name, id=entry.id)

        if normalize_address(address) in self.admin_addresses:
            return Identity(is_registered=True, role=Role.ADMIN, name="Admin User", id="1")

        return Identity(is_registered=False)

    async def get_all_doctors(self) -> List[Doctor]:
        await self.transport.round_trip("get_all_doctors")
        return self.principal_repo.get_all_doctors()

    async def get_patient_data(self, address: str) -> Optional[PatientData]:
        """Patient profile with records and appointments, or None"""
        await self.transport.round_trip("get_patient_data")
        patient = self.principal_repo.get_patient_by_address(address)
        if not patient:
            return None

        return PatientData(
            patient=patient,
            records=self.record_repo.get_by_patient_id(patient.id),
            appointments=self.appointment_repo.get_by_patient_id(patient.id),
        )

    async def get_doctor_data(self, address: str) -> Optional[DoctorData]:
        """Doctor profile with appointments, or None"""
        await self.transport.round_trip("get_doctor_data")
        doctor = self.principal_repo.get_doctor_by_address(address)
        if not doctor:
            return None

        return DoctorData(
            doctor=doctor,
            appointments=self.appointment_repo.get_by_doctor_id(doctor.id),
        )
