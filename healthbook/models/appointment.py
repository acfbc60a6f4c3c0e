from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
import enum

from ..core.database import Base

class AppointmentStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

# Statuses a doctor may move a pending appointment into
DECISION_STATUSES = (AppointmentStatus.APPROVED, AppointmentStatus.REJECTED)

class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)

    # Parties, referenced by email
    patient_email = Column(String(255), nullable=False, index=True)
    doctor_email = Column(String(255), nullable=False, index=True)

    # Appointment details
    # Naive UTC; offsets are normalized away in the request schema
    date = Column(DateTime, nullable=False)
    # Plain string column: legacy update mode may store values outside AppointmentStatus
    status = Column(String(32), nullable=False, default=AppointmentStatus.PENDING.value)

    # Tracking
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Appointment(id={self.id}, patient='{self.patient_email}', doctor='{self.doctor_email}', status='{self.status}')>"
