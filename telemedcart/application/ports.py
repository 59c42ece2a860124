from typing import List, Optional, Protocol

from telemedcart.domain.models import Appointment, DoctorProfile, MedicalRecord, PublicUser


class UserDirectoryPort(Protocol):
    def get_user_by_id(self, user_id: str) -> Optional[PublicUser]:
        ...

    def list_users(self, role: Optional[str] = None) -> List[PublicUser]:
        ...


class AppointmentRepositoryPort(Protocol):
    def add(self, appointment: Appointment) -> Appointment:
        ...

    def get(self, appointment_id: str) -> Optional[Appointment]:
        ...

    def list_all(self) -> List[Appointment]:
        ...

    def update_status(self, appointment_id: str, status: str) -> Optional[Appointment]:
        ...


class DoctorSearchPort(Protocol):
    def list_doctors(self, specialty: Optional[str] = None) -> List[DoctorProfile]:
        ...


class MedicalRecordPort(Protocol):
    def list_for_patient(self, patient_id: str, record_type: Optional[str] = None) -> List[MedicalRecord]:
        ...


class VideoRoomPort(Protocol):
    def initialize(self, appointment_id: Optional[str], user: PublicUser, audio_on: bool, video_on: bool) -> dict:
        """
        Prepare the conferencing room for a consultation and return the options used.
        """
        ...
