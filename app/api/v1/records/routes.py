"""
Medical Records API Routes
"""

from fastapi import APIRouter, Depends, status
from typing import List

from app.api.deps import SessionContext, get_record_service, get_session
from app.api.v1.base import MutationResponse
from app.api.v1.records.schemas import (
    MedicalRecordCreate,
    MedicalRecordResponse,
    MedicalRecordUpdate,
)
from app.domain.records.service import MedicalRecordService

router = APIRouter(prefix="/records", tags=["Medical Records"])


@router.post("", response_model=MutationResponse, status_code=status.HTTP_201_CREATED)
async def add_medical_record(
    record_data: MedicalRecordCreate,
    session: SessionContext = Depends(get_session),
    record_service: MedicalRecordService = Depends(get_record_service)
):
    """Add a record as the session's patient, or as a doctor for ``patientAddress``"""
    record = await record_service.add_record(session.role, session.address, record_data)
    return MutationResponse(id=record.id)


@router.get("/patient/{address}", response_model=List[MedicalRecordResponse])
async def get_patient_records(
    address: str,
    record_service: MedicalRecordService = Depends(get_record_service)
):
    return await record_service.get_patient_records(address)


@router.get("/{record_id}", response_model=MedicalRecordResponse)
async def get_medical_record(
    record_id: str,
    record_service: MedicalRecordService = Depends(get_record_service)
):
    return await record_service.get_by_id(record_id)


@router.put("/{record_id}", response_model=MedicalRecordResponse)
async def update_medical_record(
    record_id: str,
    record_data: MedicalRecordUpdate,
    session: SessionContext = Depends(get_session),
    record_service: MedicalRecordService = Depends(get_record_service)
):
    """Replace a record's title, description and file reference"""
    return await record_service.update_record(session.role, session.address, record_id, record_data)
