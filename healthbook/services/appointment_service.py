from datetime import datetime
from sqlalchemy.orm import Session
from typing import List
import logging

from ..core.config import Settings
from ..core.exceptions import (
    AppointmentNotFound, InvalidStatus, InvalidStatusTransition, PermissionDenied
)
from ..core.security import TokenClaims, UserRole
from ..crud.appointment import AppointmentStore
from ..models.appointment import Appointment, AppointmentStatus, DECISION_STATUSES

logger = logging.getLogger(__name__)

class AppointmentService:
    """
    Appointment operations scoped by the caller's identity.

    With STRICT_APPOINTMENT_UPDATES on, only the assigned doctor may move a
    pending appointment to approved or rejected. Patient-only booking is
    enforced by the route's role gate.
    With it off, any caller may write any status string.
    """

    def __init__(self, db: Session, config: Settings):
        self.appointments = AppointmentStore(db)
        self.strict = config.STRICT_APPOINTMENT_UPDATES

    def create(self, identity: TokenClaims, doctor_email: str, date: datetime) -> Appointment:
        appointment = self.appointments.create(
            patient_email=identity.email,
            doctor_email=doctor_email,
            date=date,
        )
        logger.info(f"Appointment {appointment.id} booked by {identity.email} with {doctor_email}")
        return appointment

    def list_for_patient(self, identity: TokenClaims) -> List[Appointment]:
        return self.appointments.list_by_patient(identity.email)

    def list_for_doctor(self, identity: TokenClaims) -> List[Appointment]:
        return self.appointments.list_by_doctor(identity.email)

    def update_status(self, identity: TokenClaims, appointment_id: int, new_status: str) -> Appointment:
        appointment = self.appointments.get(appointment_id)
        if not appointment:
            raise AppointmentNotFound()

        if self.strict:
            self._check_decision(identity, appointment, new_status)

        previous = appointment.status
        appointment = self.appointments.set_status(appointment, new_status)
        logger.info(
            f"Appointment {appointment.id} status {previous} -> {appointment.status} by {identity.email}"
        )
        return appointment

    def _check_decision(self, identity: TokenClaims, appointment: Appointment, new_status: str):
        if new_status not in [s.value for s in DECISION_STATUSES]:
            raise InvalidStatus(
                f"Status must be one of: {', '.join(s.value for s in DECISION_STATUSES)}"
            )

        if identity.role != UserRole.DOCTOR or identity.email != appointment.doctor_email:
            logger.warning(
                f"{identity.email} tried to change appointment {appointment.id} assigned to {appointment.doctor_email}"
            )
            raise PermissionDenied("Only the assigned doctor can change this appointment")

        if appointment.status != AppointmentStatus.PENDING.value:
            raise InvalidStatusTransition(f"Appointment has already been {appointment.status}")
