from typing import Optional

from pydantic import BaseModel, Field, field_validator

from telemedcart.domain.models import AppointmentType


TIME_SLOTS = (
    "09:00 AM", "09:30 AM", "10:00 AM", "10:30 AM",
    "11:00 AM", "11:30 AM", "02:00 PM", "02:30 PM",
    "03:00 PM", "03:30 PM", "04:00 PM", "04:30 PM",
)


class SymptomCheckRequest(BaseModel):
    symptoms: str
    # accepted from the form but not used by the rules
    severity: Optional[str] = None
    duration: Optional[str] = None


class AppointmentRequest(BaseModel):
    doctor_id: str
    date: str
    time: str
    type: AppointmentType = "video"
    symptoms: str = ""

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: str):
        if v not in TIME_SLOTS:
            raise ValueError(f"Unavailable time slot: {v}")
        return v

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str):
        v = v.strip()
        if not v:
            raise ValueError("Date is required")
        return v


class AdminStats(BaseModel):
    total_users: int = Field(..., alias="totalUsers")
    total_doctors: int = Field(..., alias="totalDoctors")
    total_patients: int = Field(..., alias="totalPatients")
    total_appointments: int = Field(..., alias="totalAppointments")
    completed_appointments: int = Field(..., alias="completedAppointments")
