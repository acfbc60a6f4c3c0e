from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session

from ..models.appointment import Appointment, AppointmentStatus

class AppointmentStore:
    def __init__(self, db: Session):
        self.db = db

    def get(self, appointment_id: int) -> Optional[Appointment]:
        return self.db.query(Appointment).filter(Appointment.id == appointment_id).first()

    def create(self, patient_email: str, doctor_email: str, date: datetime) -> Appointment:
        appointment = Appointment(
            patient_email=patient_email,
            doctor_email=doctor_email,
            date=date,
            status=AppointmentStatus.PENDING.value,
        )
        self.db.add(appointment)
        self.db.commit()
        self.db.refresh(appointment)
        return appointment

    def list_by_patient(self, patient_email: str) -> List[Appointment]:
        return (
            self.db.query(Appointment)
            .filter(Appointment.patient_email == patient_email)
            .order_by(Appointment.date, Appointment.id)
            .all()
        )

    def list_by_doctor(self, doctor_email: str) -> List[Appointment]:
        return (
            self.db.query(Appointment)
            .filter(Appointment.doctor_email == doctor_email)
            .order_by(Appointment.date, Appointment.id)
            .all()
        )

    def set_status(self, appointment: Appointment, status: str) -> Appointment:
        appointment.status = status
        self.db.commit()
        self.db.refresh(appointment)
        return appointment
