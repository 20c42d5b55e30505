from typing import List

from app.domain.permissions.models import PermissionLogEntry
from app.infrastructure.ledger import LedgerStore


class PermissionRepository:
    """Repository for permission edges and the permission audit log"""

    def __init__(self, store: LedgerStore):
        self.store = store

    def is_granted(self, patient_id: str, doctor_id: str) -> bool:
        """Missing edges are denied"""
        return self.store.state.permissions.get(patient_id, {}).get(doctor_id, False)

    def set_edge(self, patient_id: str, doctor_id: str, granted: bool) -> None:
        """Call inside a transaction"""
        self.store.state.permissions.setdefault(patient_id, {})[doctor_id] = granted

    def prepend_log(self, entry: PermissionLogEntry) -> None:
        """Call inside a transaction"""
        self.store.state.permission_logs.insert(0, entry)

    def get_logs_by_patient_id(self, patient_id: str) -> List[PermissionLogEntry]:
        """Log entries for a patient, newest first"""
        return [e for e in self.store.state.permission_logs if e.patient_id == patient_id]
