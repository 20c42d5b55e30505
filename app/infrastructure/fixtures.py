"""Demo data loaded into a freshly seeded ledger."""

from datetime import datetime, timedelta

from app.domain.identity.models import Doctor, Patient
from app.domain.records.models import FileType, MedicalRecord
from app.domain.appointments.models import Appointment, AppointmentStatus
from app.domain.permissions.models import PermissionLogEntry
from app.infrastructure.ledger import LedgerState


def build_fixture_state(now: datetime) -> LedgerState:
    patients = [
        Patient(
            id="1",
            name="John Smith",
            date_of_birth="1985-05-15",
            gender="Male",
            contact_info="john.smith@email.com",
            wallet_address="0x1234567890abcdef1234567890abcdef12345678",
        ),
        Patient(
            id="2",
            name="Sarah Johnson",
            date_of_birth="1990-08-22",
            gender="Female",
            contact_info="sarah.j@email.com",
            wallet_address="0x2345678901abcdef2345678901abcdef23456789",
        ),
    ]
    doctors = [
        Doctor(
            id="1",
            name="Dr. Michael Chen",
            specialization="Cardiology",
            license_number="MED12345",
            wallet_address="0x3456789012abcdef3456789012abcdef34567890",
        ),
        Doctor(
            id="2",
            name="Dr. Emily Williams",
            specialization="Neurology",
            license_number="MED67890",
            wallet_address="0x4567890123abcdef4567890123abcdef45678901",
        ),
        Doctor(
            id="3",
            name="Dr. Robert Garcia",
            specialization="Pediatrics",
            license_number="MED54321",
            wallet_address="0x5678901234abcdef5678901234abcdef56789012",
        ),
    ]
    records = [
        MedicalRecord(
            id="1",
            patient_id="1",
            doctor_id="1",
            title="Annual Checkup",
            description="Regular annual physical examination. Blood pressure normal, heart rate 72 bpm.",
            file_hash="QmT7fzZ6zS9YZxMFSYfhES5xKCE2oSJwLuEJgAG9mPXdK",
            file_type=FileType.PDF,
            timestamp="2023-04-15T10:30:00Z",
        ),
        MedicalRecord(
            id="2",
            patient_id="1",
            doctor_id="2",
            title="MRI Results",
            description="Brain MRI scan results. No abnormalities detected.",
            file_hash="QmUyF8jGZxMKdEJqHkx5NvwTYP8MQQcXkgN6hTuZnzKmtP",
            file_type=FileType.DICOM,
            timestamp="2023-05-22T14:15:00Z",
        ),
        MedicalRecord(
            id="3",
            patient_id="2",
            doctor_id="3",
            title="Vaccination Record",
            description="COVID-19 vaccination. Second dose of Pfizer-BioNTech.",
            file_hash="QmR7YzxMFSYfhES5xKCE2oSJwLuEJgAG9mPXdKT7fzZ6z",
            file_type=FileType.PDF,
            timestamp="2023-03-10T09:45:00Z",
        ),
    ]
    appointments = [
        Appointment(
            id="1",
            patient_id="1",
            doctor_id="1",
            timestamp="2023-06-15T10:00:00Z",
            reason="Follow-up on medication",
            status=AppointmentStatus.CONFIRMED,
        ),
        Appointment(
            id="2",
            patient_id="2",
            doctor_id="3",
            timestamp="2023-06-16T14:30:00Z",
            reason="Annual checkup",
            status=AppointmentStatus.CONFIRMED,
        ),
        Appointment(
            id="3",
            patient_id="1",
            doctor_id="2",
            timestamp="2023-06-20T11:15:00Z",
            reason="Headache consultation",
            status=AppointmentStatus.PENDING,
        ),
    ]
    permission_logs = [
        PermissionLogEntry(
            patient_id="1",
            doctor_id="1",
            doctor_name="Dr. Michael Chen",
            granted=True,
            timestamp=now,
        ),
        PermissionLogEntry(
            patient_id="1",
            doctor_id="2",
            doctor_name="Dr. Emily Williams",
            granted=False,
            timestamp=now - timedelta(days=1),
        ),
    ]

    return LedgerState(
        patients=patients,
        doctors=doctors,
        medical_records=records,
        appointments=appointments,
        permissions={"1": {"1": True, "2": True}, "2": {"3": True}},
        permission_logs=permission_logs,
        next_id={
            "patient": len(patients) + 1,
            "doctor": len(doctors) + 1,
            "record": len(records) + 1,
            "appointment": len(appointments) + 1,
        },
    )
