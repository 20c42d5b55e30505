"""
Medical Records Service Layer

Records are owned by a patient and written either by the patient (self
upload) or by a doctor on the patient's behalf. Only the owner or the
authoring doctor may replace a record. The store trusts the role asserted
by the caller's session; file content is never inspected.
"""

from typing import List, Optional
import logging

from app.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from app.domain.identity.models import Role
from app.domain.records.models import MedicalRecord, SELF_UPLOADED
from app.domain.records.repository import MedicalRecordRepository
from app.infrastructure.ledger import LedgerStore
from app.infrastructure.transport import LedgerTransport
from app.api.v1.records.schemas import MedicalRecordCreate, MedicalRecordUpdate

logger = logging.getLogger(__name__)


class MedicalRecordService:
    """Service layer for the record store"""

    def __init__(self, store: LedgerStore, transport: LedgerTransport):
        self.store = store
        self.transport = transport
        self.record_repo = MedicalRecordRepository(store)

    def _resolve_owner_and_author(
        self,
        actor_role: Role,
        actor_address: str,
        patient_address: Optional[str]
    ) -> tuple[str, str]:
        if actor_role == Role.PATIENT:
            patient = self.store.find_patient_by_address(actor_address)
            if not patient:
                raise NotFoundError("Patient not found", details={"address": actor_address})
            return patient.id, SELF_UPLOADED

        if actor_role == Role.DOCTOR:
            doctor = self.store.find_doctor_by_address(actor_address)
            if not doctor:
                raise NotFoundError("Doctor not found", details={"address": actor_address})
            if not patient_address:
                raise ValidationError(
                    "patient_address is required when a doctor adds a record",
                    details={"field": "patient_address"}
                )
            patient = self.store.find_patient_by_address(patient_address)
            if not patient:
                raise NotFoundError("Patient not found", details={"address": patient_address})
            return patient.id, doctor.id

        raise ValidationError(
            f"Role {actor_role.value} cannot add medical records",
            details={"role": actor_role.value}
        )

    async def add_record(
        self,
        actor_role: Role,
        actor_address: str,
        record_data: MedicalRecordCreate
    ) -> MedicalRecord:
        """Add a medical record for the owning patient"""
        await self.transport.round_trip("add_record")
        async with self.store.transaction():
            patient_id, doctor_id = self._resolve_owner_and_author(
                actor_role, actor_address, record_data.patient_address
            )
            record = self.record_repo.create({
                "patient_id": patient_id,
                "doctor_id": doctor_id,
                **record_data.model_dump(exclude={"patient_address"}),
            })
        logger.info(f"Added record {record.id} for patient {patient_id} by author {doctor_id}")
        return record

    async def list_by_patient(self, patient_id: str) -> List[MedicalRecord]:
        await self.transport.round_trip("list_records")
        return self.record_repo.get_by_patient_id(patient_id)

    async def get_patient_records(self, patient_address: str) -> List[MedicalRecord]:
        """Records of the patient at ``patient_address``; empty when unknown"""
        await self.transport.round_trip("get_patient_records")
        patient = self.store.find_patient_by_address(patient_address)
        if not patient:
            return []
        return self.record_repo.get_by_patient_id(patient.id)

    async def get_by_id(self, record_id: str) -> MedicalRecord:
        await self.transport.round_trip("get_record")
        record = self.record_repo.get_by_id(record_id)
        if not record:
            raise NotFoundError("Record not found", details={"record_id": record_id})
        return record

    def _authorize_update(self, actor_role: Role, actor_address: str, record: MedicalRecord) -> None:
        if actor_role == Role.PATIENT:
            patient = self.store.find_patient_by_address(actor_address)
            if patient and patient.id == record.patient_id:
                return
        elif actor_role == Role.DOCTOR:
            doctor = self.store.find_doctor_by_address(actor_address)
            if doctor and not record.is_self_uploaded and doctor.id == record.doctor_id:
                return

        logger.warning(f"Rejected update of record {record.id} by {actor_role.value} {actor_address}")
        raise AuthorizationError(
            "Only the owning patient or the authoring doctor may update a record",
            details={"record_id": record.id, "role": actor_role.value}
        )

    async def update_record(
        self,
        actor_role: Role,
        actor_address: str,
        record_id: str,
        record_data: MedicalRecordUpdate
    ) -> MedicalRecord:
        """Replace a record's content; the record id must exist"""
        await self.transport.round_trip("update_record")
        async with self.store.transaction():
            record = self.record_repo.get_by_id(record_id)
            if not record:
                raise NotFoundError("Record not found", details={"record_id": record_id})
            self._authorize_update(actor_role, actor_address, record)
            record = self.record_repo.replace(record_id, record_data.model_dump())
        logger.info(f"Updated record {record_id}")
        return record
