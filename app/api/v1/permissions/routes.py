from fastapi import APIRouter, Depends, Query
from typing import List

from app.api.deps import SessionContext, get_patient_session, get_permission_service
from app.api.v1.base import MutationResponse
from app.api.v1.permissions.schemas import (
    PermissionChange,
    PermissionCheckResponse,
    PermissionLogResponse,
)
from app.core.exceptions import AuthorizationError
from app.domain.permissions.service import PermissionService

router = APIRouter(prefix="/permissions", tags=["Permissions"])


def _require_owner(session: SessionContext, change: PermissionChange) -> None:
    # Patients may only change their own edges
    if not session.owns(change.patient_address):
        raise AuthorizationError(
            "Patients can only change access to their own records",
            details={"patient_address": change.patient_address}
        )


@router.post("/grant", response_model=MutationResponse)
async def grant_permission(
    change: PermissionChange,
    session: SessionContext = Depends(get_patient_session),
    permission_service: PermissionService = Depends(get_permission_service)
):
    _require_owner(session, change)
    await permission_service.grant(change.patient_address, change.doctor_address)
    return MutationResponse()


@router.post("/revoke", response_model=MutationResponse)
async def revoke_permission(
    change: PermissionChange,
    session: SessionContext = Depends(get_patient_session),
    permission_service: PermissionService = Depends(get_permission_service)
):
    _require_owner(session, change)
    await permission_service.revoke(change.patient_address, change.doctor_address)
    return MutationResponse()


@router.get("/check", response_model=PermissionCheckResponse)
async def check_permission(
    patient_address: str = Query(..., min_length=1),
    doctor_address: str = Query(..., min_length=1),
    permission_service: PermissionService = Depends(get_permission_service)
):
    has_permission = await permission_service.check(patient_address, doctor_address)
    return PermissionCheckResponse(
        patient_address=patient_address,
        doctor_address=doctor_address,
        has_permission=has_permission
    )


@router.get("/logs/{address}", response_model=List[PermissionLogResponse])
async def get_permission_logs(
    address: str,
    permission_service: PermissionService = Depends(get_permission_service)
):
    """Permission changes for a patient, newest first"""
    return await permission_service.get_permission_logs(address)
