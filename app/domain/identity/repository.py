from typing import List, Optional

from app.domain.identity.models import DirectoryEntry, Doctor, Patient, Role, normalize_address
from app.infrastructure.ledger import LedgerStore


class PrincipalRepository:
    """Repository for patient and doctor registrations"""

    def __init__(self, store: LedgerStore):
        self.store = store

    def add_patient(self, data: dict) -> Patient:
        """Create a patient and its directory entry; call inside a transaction"""
        patient = Patient(id=self.store.allocate_id("patient"), **data)
        self.store.state.patients.append(patient)
        self._add_directory_entry(patient.wallet_address, Role.PATIENT, patient.name, patient.id)
        return patient

    def add_doctor(self, data: dict) -> Doctor:
        """Create a doctor and its directory entry; call inside a transaction"""
        doctor = Doctor(id=self.store.allocate_id("doctor"), **data)
        self.store.state.doctors.append(doctor)
        self._add_directory_entry(doctor.wallet_address, Role.DOCTOR, doctor.name, doctor.id)
        return doctor

    def _add_directory_entry(self, address: str, role: Role, name: str, principal_id: str) -> None:
        self.store.state.registered_users[normalize_address(address)] = DirectoryEntry(
            role=role, name=name, id=principal_id
        )

    def get_patient_by_address(self, address: str) -> Optional[Patient]:
        return self.store.find_patient_by_address(address)

    def get_doctor_by_address(self, address: str) -> Optional[Doctor]:
        return self.store.find_doctor_by_address(address)

    def get_directory_entry(self, address: str) -> Optional[DirectoryEntry]:
        return self.store.state.registered_users.get(normalize_address(address))

    def get_all_doctors(self) -> List[Doctor]:
        return list(self.store.state.doctors)

    def address_in_use(self, address: str) -> bool:
        return (
            self.get_patient_by_address(address) is not None
            or self.get_doctor_by_address(address) is not None
            or self.get_directory_entry(address) is not None
        )
