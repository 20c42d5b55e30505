import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient

from app.main import create_app
from app.core.config import Settings
from app.infrastructure.ledger import LedgerStore
from app.infrastructure.transport import LedgerTransport
from app.domain.identity.service import IdentityService
from app.domain.records.service import MedicalRecordService
from app.domain.appointments.service import AppointmentService
from app.domain.permissions.service import PermissionService
from app.api.v1.patients.schemas import PatientCreate
from app.api.v1.doctors.schemas import DoctorCreate
from tests.helpers import ADMIN_ADDRESS, ANN_ADDRESS, BEE_ADDRESS


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    """Settings for an empty, zero-latency ledger."""
    return Settings(
        LEDGER_SEED_FIXTURES=False,
        LEDGER_LATENCY_SECONDS=0.0,
        LEDGER_SNAPSHOT_PATH=None,
        ALLOW_SHADOW_IDENTITIES=False,
    )


@pytest.fixture(scope="function")
def ledger() -> LedgerStore:
    """Create a fresh, empty ledger for each test."""
    return LedgerStore()


@pytest.fixture(scope="function")
def transport() -> LedgerTransport:
    return LedgerTransport(latency_seconds=0.0)


@pytest.fixture(scope="function")
def identity_service(ledger: LedgerStore, transport: LedgerTransport) -> IdentityService:
    return IdentityService(ledger, transport, admin_addresses=[ADMIN_ADDRESS])


@pytest.fixture(scope="function")
def record_service(ledger: LedgerStore, transport: LedgerTransport) -> MedicalRecordService:
    return MedicalRecordService(ledger, transport)


@pytest.fixture(scope="function")
def appointment_service(ledger: LedgerStore, transport: LedgerTransport) -> AppointmentService:
    return AppointmentService(ledger, transport)


@pytest.fixture(scope="function")
def permission_service(ledger: LedgerStore, transport: LedgerTransport) -> PermissionService:
    return PermissionService(ledger, transport)


@pytest.fixture(scope="function")
def sample_patient_data() -> PatientCreate:
    """Sample patient registration for testing."""
    return PatientCreate(
        name="Ann",
        wallet_address=ANN_ADDRESS,
        date_of_birth="1990-01-01",
        gender="Female",
        contact_info="ann@example.com",
    )


@pytest.fixture(scope="function")
def sample_doctor_data() -> DoctorCreate:
    """Sample doctor registration for testing."""
    return DoctorCreate(
        name="Dr. Bee",
        wallet_address=BEE_ADDRESS,
        specialization="Cardiology",
        license_number="MED00001",
        contact_info="bee@example.com",
    )


@pytest.fixture(scope="function")
async def ann(identity_service: IdentityService, sample_patient_data: PatientCreate):
    return await identity_service.register_patient(sample_patient_data)


@pytest.fixture(scope="function")
async def bee(identity_service: IdentityService, sample_doctor_data: DoctorCreate):
    return await identity_service.register_doctor(sample_doctor_data)


@pytest.fixture(scope="function")
async def client(test_settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client over a fresh application."""
    app = create_app(test_settings)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture(scope="function")
async def seeded_client(test_settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client over an application loaded with the demo data."""
    app = create_app(test_settings.model_copy(update={"LEDGER_SEED_FIXTURES": True}))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "identity: mark test as identity directory related"
    )
    config.addinivalue_line(
        "markers", "records: mark test as medical record related"
    )
    config.addinivalue_line(
        "markers", "appointments: mark test as appointment related"
    )
    config.addinivalue_line(
        "markers", "permissions: mark test as permission and audit related"
    )
