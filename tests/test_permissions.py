import pytest
from httpx import AsyncClient

from app.api.v1.records.schemas import MedicalRecordCreate
from app.core.exceptions import NotFoundError
from app.domain.identity.models import Role
from app.domain.permissions.service import PermissionService
from app.domain.records.models import FileType
from app.domain.records.service import MedicalRecordService
from tests.helpers import (
    ANN_ADDRESS, BEE_ADDRESS, CAL_ADDRESS, CHEN_ADDRESS, GARCIA_ADDRESS, JOHN_ADDRESS,
    SARAH_ADDRESS, WILLIAMS_ADDRESS, patient_headers,
)


@pytest.mark.permissions
@pytest.mark.unit
@pytest.mark.asyncio
class TestPermissionEngine:
    """Test grants, revocations, checks and the audit log."""

    async def test_denied_without_grant(self, permission_service: PermissionService, ann, bee) -> None:
        assert await permission_service.check(ANN_ADDRESS, BEE_ADDRESS) is False

    async def test_unknown_parties_are_denied(self, permission_service: PermissionService, ann, bee) -> None:
        assert await permission_service.check(CAL_ADDRESS, BEE_ADDRESS) is False
        assert await permission_service.check(ANN_ADDRESS, CAL_ADDRESS) is False

    async def test_grant_then_revoke(self, permission_service: PermissionService, ann, bee) -> None:
        await permission_service.grant(ANN_ADDRESS, BEE_ADDRESS)
        assert await permission_service.check(ANN_ADDRESS, BEE_ADDRESS) is True

        await permission_service.revoke(ANN_ADDRESS, BEE_ADDRESS)
        assert await permission_service.check(ANN_ADDRESS, BEE_ADDRESS) is False

    async def test_grant_is_directional(self, permission_service: PermissionService, ann, bee) -> None:
        await permission_service.grant(ANN_ADDRESS, BEE_ADDRESS)
        # the doctor's address is not a patient, so the reverse pair is unresolved
        assert await permission_service.check(BEE_ADDRESS, ANN_ADDRESS) is False

    async def test_every_change_is_logged_newest_first(
        self, permission_service: PermissionService, ann, bee
    ) -> None:
        await permission_service.grant(ANN_ADDRESS, BEE_ADDRESS)
        await permission_service.grant(ANN_ADDRESS, BEE_ADDRESS)
        await permission_service.revoke(ANN_ADDRESS, BEE_ADDRESS)

        logs = await permission_service.logs_for_patient(ann.id)
        assert [entry.granted for entry in logs] == [False, True, True]
        assert all(entry.doctor_name == "Dr. Bee" for entry in logs)
        assert all(a.timestamp >= b.timestamp for a, b in zip(logs, logs[1:]))

    async def test_revoke_without_grant_is_logged(self, permission_service: PermissionService, ann, bee) -> None:
        entry = await permission_service.revoke(ANN_ADDRESS, BEE_ADDRESS)

        assert entry.granted is False
        assert len(await permission_service.get_permission_logs(ANN_ADDRESS)) == 1
        assert await permission_service.check(ANN_ADDRESS, BEE_ADDRESS) is False

    async def test_grant_with_unknown_party(self, permission_service: PermissionService, ann, bee) -> None:
        with pytest.raises(NotFoundError):
            await permission_service.grant(ANN_ADDRESS, CAL_ADDRESS)
        with pytest.raises(NotFoundError):
            await permission_service.revoke(CAL_ADDRESS, BEE_ADDRESS)

        assert await permission_service.get_permission_logs(ANN_ADDRESS) == []

    async def test_logs_for_unknown_patient(self, permission_service: PermissionService) -> None:
        assert await permission_service.get_permission_logs(CAL_ADDRESS) == []

    async def test_patients_for_doctor(
        self, permission_service: PermissionService, record_service: MedicalRecordService, ann, bee
    ) -> None:
        await record_service.add_record(Role.PATIENT, ANN_ADDRESS, MedicalRecordCreate(title="Scan", file_hash="Qm1"))
        await permission_service.grant(ANN_ADDRESS, BEE_ADDRESS)

        patients = await permission_service.patients_for_doctor(BEE_ADDRESS)
        assert len(patients) == 1
        assert patients[0].id == ann.id
        assert patients[0].has_permission is True
        assert patients[0].record_count == 1
        assert patients[0].date_of_birth == "1990-01-01"

        with pytest.raises(NotFoundError):
            await permission_service.patients_for_doctor(CAL_ADDRESS)

    async def test_ann_and_dr_bee(
        self, permission_service: PermissionService, record_service: MedicalRecordService, ann, bee
    ) -> None:
        assert await permission_service.check(ANN_ADDRESS, BEE_ADDRESS) is False

        await permission_service.grant(ANN_ADDRESS, BEE_ADDRESS)
        await record_service.add_record(
            Role.DOCTOR,
            BEE_ADDRESS,
            MedicalRecordCreate(
                title="Checkup",
                description="Annual checkup",
                file_hash="QmCheckup",
                file_type=FileType.PDF,
                patient_address=ANN_ADDRESS,
            ),
        )

        records = await record_service.get_patient_records(ANN_ADDRESS)
        assert len(records) == 1
        assert records[0].title == "Checkup"

        await permission_service.revoke(ANN_ADDRESS, BEE_ADDRESS)
        assert await permission_service.check(ANN_ADDRESS, BEE_ADDRESS) is False
        assert len(await permission_service.get_permission_logs(ANN_ADDRESS)) == 2


@pytest.mark.permissions
@pytest.mark.integration
class TestPermissionEndpoints:
    """Test permission routes against the demo data."""

    async def test_seeded_permissions(self, seeded_client: AsyncClient) -> None:
        async def check(patient: str, doctor: str) -> bool:
            response = await seeded_client.get(
                "/api/permissions/check",
                params={"patient_address": patient, "doctor_address": doctor},
            )
            assert response.status_code == 200
            return response.json()["hasPermission"]

        assert await check(JOHN_ADDRESS, CHEN_ADDRESS) is True
        assert await check(JOHN_ADDRESS, WILLIAMS_ADDRESS) is True
        assert await check(JOHN_ADDRESS, GARCIA_ADDRESS) is False
        assert await check(SARAH_ADDRESS, GARCIA_ADDRESS) is True
        assert await check(CAL_ADDRESS, GARCIA_ADDRESS) is False

    async def test_grant_revoke_and_logs(self, seeded_client: AsyncClient) -> None:
        change = {"patientAddress": SARAH_ADDRESS, "doctorAddress": CHEN_ADDRESS}

        response = await seeded_client.post("/api/permissions/grant", json=change, headers=patient_headers(SARAH_ADDRESS))
        assert response.status_code == 200
        assert response.json()["success"] is True

        response = await seeded_client.post("/api/permissions/revoke", json=change, headers=patient_headers(SARAH_ADDRESS))
        assert response.status_code == 200

        logs = (await seeded_client.get(f"/api/permissions/logs/{SARAH_ADDRESS}")).json()
        assert [(entry["doctorName"], entry["granted"]) for entry in logs] == [
            ("Dr. Michael Chen", False),
            ("Dr. Michael Chen", True),
        ]

    async def test_seeded_logs_newest_first(self, seeded_client: AsyncClient) -> None:
        logs = (await seeded_client.get(f"/api/permissions/logs/{JOHN_ADDRESS}")).json()
        assert [entry["doctorId"] for entry in logs] == ["1", "2"]
        assert logs[0]["timestamp"] > logs[1]["timestamp"]

    async def test_only_owner_may_change(self, seeded_client: AsyncClient) -> None:
        change = {"patientAddress": JOHN_ADDRESS, "doctorAddress": GARCIA_ADDRESS}

        response = await seeded_client.post("/api/permissions/grant", json=change, headers=patient_headers(SARAH_ADDRESS))
        assert response.status_code == 403

        response = await seeded_client.post(
            "/api/permissions/grant",
            json=change,
            headers={"X-Wallet-Address": GARCIA_ADDRESS, "X-User-Role": "doctor"},
        )
        assert response.status_code == 403

        logs = (await seeded_client.get(f"/api/permissions/logs/{JOHN_ADDRESS}")).json()
        assert len(logs) == 2

    async def test_grant_to_unknown_doctor(self, seeded_client: AsyncClient) -> None:
        response = await seeded_client.post(
            "/api/permissions/grant",
            json={"patientAddress": JOHN_ADDRESS, "doctorAddress": CAL_ADDRESS},
            headers=patient_headers(JOHN_ADDRESS),
        )
        assert response.status_code == 404

    async def test_doctor_patient_list(self, seeded_client: AsyncClient) -> None:
        patients = (await seeded_client.get(f"/api/doctors/{GARCIA_ADDRESS}/patients")).json()
        assert [(p["name"], p["hasPermission"], p["recordCount"]) for p in patients] == [
            ("John Smith", False, 2),
            ("Sarah Johnson", True, 1),
        ]
