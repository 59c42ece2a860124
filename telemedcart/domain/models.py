from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


Level = Literal["low", "medium", "high"]
Role = Literal["patient", "doctor", "admin"]
AppointmentType = Literal["video", "in-person"]
AppointmentStatus = Literal["scheduled", "completed", "cancelled"]
RecordType = Literal["consultation", "prescription", "test-result", "diagnosis"]
RecordStatus = Literal["completed", "pending", "follow-up"]


class ConditionMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    probability: int = Field(..., ge=0, le=100)
    severity: Level
    description: str = Field(..., min_length=1)


class Assessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    conditions: List[ConditionMatch] = []
    urgency: Level = "low"
    recommendations: List[str] = []


class PublicUser(BaseModel):
    id: str
    name: str
    email: str
    role: Role
    specialization: Optional[str] = None
    created_at: Optional[datetime] = None


class User(PublicUser):
    password_hash: str

    def public(self) -> PublicUser:
        return PublicUser(**self.model_dump(exclude={"password_hash"}))


class DoctorProfile(BaseModel):
    id: str
    name: str
    specialization: Optional[str] = None
    rating: float = Field(..., ge=0.0, le=5.0)
    experience: str


class Appointment(BaseModel):
    id: str
    patient_id: str
    doctor_id: str
    date: str
    time: str
    type: AppointmentType = "video"
    symptoms: str = ""
    status: AppointmentStatus = "scheduled"
    created_at: datetime


class MedicalRecord(BaseModel):
    id: str
    patient_id: str
    date: str
    doctor_name: str
    type: RecordType
    title: str
    description: str
    status: RecordStatus
