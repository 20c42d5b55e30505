from fastapi import APIRouter, Depends, status

from app.api.deps import get_identity_service
from app.api.v1.base import MutationResponse
from app.api.v1.patients.schemas import PatientCreate, PatientDataResponse
from app.core.exceptions import NotFoundError
from app.domain.identity.service import IdentityService

router = APIRouter(prefix="/patients", tags=["Patients"])


@router.post("", response_model=MutationResponse, status_code=status.HTTP_201_CREATED)
async def register_patient(
    patient_data: PatientCreate,
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Register a new patient"""
    patient = await identity_service.register_patient(patient_data)
    return MutationResponse(id=patient.id)


@router.get("/{address}", response_model=PatientDataResponse)
async def get_patient_data(
    address: str,
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Get a patient's profile, records and appointments"""
    data = await identity_service.get_patient_data(address)
    if data is None:
        raise NotFoundError("Patient not found", details={"address": address})
    return data
