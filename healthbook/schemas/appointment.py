from datetime import datetime, timezone
from pydantic import BaseModel, EmailStr, Field, field_validator

def to_naive_utc(value: datetime) -> datetime:
    """Appointment dates are stored as naive UTC; input without an offset is taken as UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value

class AppointmentCreate(BaseModel):
    doctor_email: EmailStr = Field(..., alias="doctorEmail")
    date: datetime

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return to_naive_utc(value)

    class Config:
        populate_by_name = True

class AppointmentStatusUpdate(BaseModel):
    status: str = Field(..., min_length=1, max_length=32)

class AppointmentResponse(BaseModel):
    id: int
    patient_email: str = Field(..., serialization_alias="patientEmail")
    doctor_email: str = Field(..., serialization_alias="doctorEmail")
    date: datetime
    status: str

    @field_validator("date")
    @classmethod
    def mark_utc(cls, value: datetime) -> datetime:
        # Serialized with a trailing "Z"
        return to_naive_utc(value).replace(tzinfo=timezone.utc)

    class Config:
        from_attributes = True
