from fastapi import APIRouter, Depends, status
from typing import List

from ...api.deps import get_appointment_service, get_current_identity, require_role
from ...core.security import TokenClaims, UserRole
from ...services.appointment_service import AppointmentService
from ...schemas.appointment import (
    AppointmentCreate, AppointmentStatusUpdate, AppointmentResponse
)

router = APIRouter(prefix="/appointments", tags=["Appointments"])

@router.post("", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    appointment_data: AppointmentCreate,
    identity: TokenClaims = Depends(require_role(UserRole.PATIENT, strict_only=True)),
    service: AppointmentService = Depends(get_appointment_service)
):
    """Book an appointment for the caller with a doctor."""
    return service.create(identity, appointment_data.doctor_email, appointment_data.date)

@router.get("", response_model=List[AppointmentResponse])
async def list_patient_appointments(
    identity: TokenClaims = Depends(get_current_identity),
    service: AppointmentService = Depends(get_appointment_service)
):
    """Appointments booked by the caller."""
    return service.list_for_patient(identity)

@router.get("/doctor", response_model=List[AppointmentResponse])
async def list_doctor_appointments(
    identity: TokenClaims = Depends(get_current_identity),
    service: AppointmentService = Depends(get_appointment_service)
):
    """Appointments assigned to the caller as doctor."""
    return service.list_for_doctor(identity)

@router.patch("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment_status(
    appointment_id: int,
    status_data: AppointmentStatusUpdate,
    identity: TokenClaims = Depends(get_current_identity),
    service: AppointmentService = Depends(get_appointment_service)
):
    """Approve or reject an appointment."""
    return service.update_status(identity, appointment_id, status_data.status)
