from fastapi import APIRouter, Depends, status
from typing import List

from app.api.deps import get_identity_service, get_permission_service
from app.api.v1.base import MutationResponse
from app.api.v1.doctors.schemas import (
    DoctorCreate,
    DoctorDataResponse,
    DoctorResponse,
    PatientAccessResponse,
)
from app.core.exceptions import NotFoundError
from app.domain.identity.service import IdentityService
from app.domain.permissions.service import PermissionService

router = APIRouter(prefix="/doctors", tags=["Doctors"])


@router.post("", response_model=MutationResponse, status_code=status.HTTP_201_CREATED)
async def register_doctor(
    doctor_data: DoctorCreate,
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Register a new doctor"""
    doctor = await identity_service.register_doctor(doctor_data)
    return MutationResponse(id=doctor.id)


@router.get("", response_model=List[DoctorResponse])
async def get_all_doctors(identity_service: IdentityService = Depends(get_identity_service)):
    return await identity_service.get_all_doctors()


@router.get("/{address}", response_model=DoctorDataResponse)
async def get_doctor_data(
    address: str,
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Get a doctor's profile and appointments"""
    data = await identity_service.get_doctor_data(address)
    if data is None:
        raise NotFoundError("Doctor not found", details={"address": address})
    return data


@router.get("/{address}/patients", response_model=List[PatientAccessResponse])
async def get_doctor_patients(
    address: str,
    permission_service: PermissionService = Depends(get_permission_service)
):
    """List patients with whether this doctor may read their records"""
    return await permission_service.patients_for_doctor(address)
