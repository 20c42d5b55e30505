"""
Appointments API Routes
"""

from fastapi import APIRouter, Depends, status

from app.api.deps import SessionContext, get_appointment_service, get_session
from app.api.v1.base import MutationResponse
from app.api.v1.appointments.schemas import (
    AppointmentCreate,
    AppointmentResponse,
    AppointmentStatusUpdate,
)
from app.domain.appointments.service import AppointmentService

router = APIRouter(prefix="/appointments", tags=["Appointments"])


@router.post("", response_model=MutationResponse, status_code=status.HTTP_201_CREATED)
async def book_appointment(
    appointment_data: AppointmentCreate,
    session: SessionContext = Depends(get_session),
    appointment_service: AppointmentService = Depends(get_appointment_service)
):
    """Book an appointment for the session's patient"""
    appointment = await appointment_service.book(
        patient_address=session.address,
        doctor_address=appointment_data.doctor_address,
        timestamp=appointment_data.timestamp,
        reason=appointment_data.reason
    )
    return MutationResponse(id=appointment.id)


@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: str,
    appointment_service: AppointmentService = Depends(get_appointment_service)
):
    return await appointment_service.get_by_id(appointment_id)


@router.patch("/{appointment_id}/status", response_model=AppointmentResponse)
async def update_appointment_status(
    appointment_id: str,
    status_update: AppointmentStatusUpdate,
    session: SessionContext = Depends(get_session),
    appointment_service: AppointmentService = Depends(get_appointment_service)
):
    """Confirm, decline, complete or cancel an appointment"""
    return await appointment_service.set_status(
        session.role, session.address, appointment_id, status_update.status
    )
