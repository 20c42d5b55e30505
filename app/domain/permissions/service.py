"""
Permission Service Layer

Patients grant and revoke doctors' access to their records. Every grant or
revoke is written to the audit log, including repeats that leave the edge
unchanged: the log records what the patient asked for. Access checks are
closed by default.
"""

from typing import List, Tuple
import logging

from app.core.exceptions import NotFoundError
from app.domain.identity.models import Doctor, Patient
from app.domain.permissions.models import PatientAccess, PermissionLogEntry
from app.domain.permissions.repository import PermissionRepository
from app.domain.records.repository import MedicalRecordRepository
from app.infrastructure.ledger import LedgerStore
from app.infrastructure.transport import LedgerTransport

logger = logging.getLogger(__name__)


class PermissionService:
    """Service layer for the permission engine and its audit log"""

    def __init__(self, store: LedgerStore, transport: LedgerTransport):
        self.store = store
        self.transport = transport
        self.permission_repo = PermissionRepository(store)
        self.record_repo = MedicalRecordRepository(store)

    def _resolve_pair(self, patient_address: str, doctor_address: str) -> Tuple[Patient, Doctor]:
        patient = self.store.find_patient_by_address(patient_address)
        doctor = self.store.find_doctor_by_address(doctor_address)
        if not patient or not doctor:
            raise NotFoundError(
                "Patient or doctor not found",
                details={"patient_address": patient_address, "doctor_address": doctor_address}
            )
        return patient, doctor

    async def _set_permission(self, patient_address: str, doctor_address: str, granted: bool) -> PermissionLogEntry:
        await self.transport.round_trip("grant_permission" if granted else "revoke_permission")
        async with self.store.transaction():
            patient, doctor = self._resolve_pair(patient_address, doctor_address)
            self.permission_repo.set_edge(patient.id, doctor.id, granted)
            entry = PermissionLogEntry(
                patient_id=patient.id,
                doctor_id=doctor.id,
                doctor_name=doctor.name,
                granted=granted,
                timestamp=self.store.now(),
            )
            self.permission_repo.prepend_log(entry)
        logger.info(
            f"Patient {patient.id} {'granted' if granted else 'revoked'} access for doctor {doctor.id}"
        )
        return entry

    async def grant(self, patient_address: str, doctor_address: str) -> PermissionLogEntry:
        """Grant a doctor access to a patient's records"""
        return await self._set_permission(patient_address, doctor_address, True)

    async def revoke(self, patient_address: str, doctor_address: str) -> PermissionLogEntry:
        """Revoke a doctor's access to a patient's records"""
        return await self._set_permission(patient_address, doctor_address, False)

    async def check(self, patient_address: str, doctor_address: str) -> bool:
        """Whether the doctor may read the patient's records.

        Unknown addresses and missing edges both deny; this never raises for
        lack of access.
        """
        await self.transport.round_trip("check_permission")
        patient = self.store.find_patient_by_address(patient_address)
        doctor = self.store.find_doctor_by_address(doctor_address)
        if not patient or not doctor:
            return False
        return self.permission_repo.is_granted(patient.id, doctor.id)

    async def logs_for_patient(self, patient_id: str) -> List[PermissionLogEntry]:
        await self.transport.round_trip("get_permission_logs")
        return self.permission_repo.get_logs_by_patient_id(patient_id)

    async def get_permission_logs(self, patient_address: str) -> List[PermissionLogEntry]:
        """Audit log for the patient at ``patient_address``; empty when unknown"""
        await self.transport.round_trip("get_permission_logs")
        patient = self.store.find_patient_by_address(patient_address)
        if not patient:
            return []
        return self.permission_repo.get_logs_by_patient_id(patient.id)

    async def patients_for_doctor(self, doctor_address: str) -> List[PatientAccess]:
        """Every patient with the doctor's access flag and record count"""
        await self.transport.round_trip("get_doctor_patients")
        doctor = self.store.find_doctor_by_address(doctor_address)
        if not doctor:
            raise NotFoundError("Doctor not found", details={"address": doctor_address})

        return [
            PatientAccess(
                **patient.model_dump(),
                has_permission=self.permission_repo.is_granted(patient.id, doctor.id),
                record_count=self.record_repo.count_by_patient_id(patient.id),
            )
            for patient in self.store.state.patients
        ]
