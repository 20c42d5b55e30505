from typing import List, Optional

from app.domain.records.models import MedicalRecord
from app.infrastructure.ledger import LedgerStore


class MedicalRecordRepository:
    """Repository for medical record data access operations"""

    def __init__(self, store: LedgerStore):
        self.store = store

    def create(self, record_data: dict) -> MedicalRecord:
        """Create a record stamped with the current time; call inside a transaction"""
        record = MedicalRecord(
            id=self.store.allocate_id("record"),
            timestamp=self.store.now(),
            **record_data
        )
        self.store.state.medical_records.append(record)
        return record

    def get_by_id(self, record_id: str) -> Optional[MedicalRecord]:
        return next((r for r in self.store.state.medical_records if r.id == record_id), None)

    def get_by_patient_id(self, patient_id: str) -> List[MedicalRecord]:
        """Records of a patient in insertion order"""
        return [r for r in self.store.state.medical_records if r.patient_id == patient_id]

    def count_by_patient_id(self, patient_id: str) -> int:
        return sum(1 for r in self.store.state.medical_records if r.patient_id == patient_id)

    def replace(self, record_id: str, update_data: dict) -> Optional[MedicalRecord]:
        """Replace content fields and refresh the timestamp; call inside a transaction"""
        records = self.store.state.medical_records
        for index, record in enumerate(records):
            if record.id == record_id:
                updated = record.model_copy(update={**update_data, "timestamp": self.store.now()})
                records[index] = updated
                return updated
        return None
