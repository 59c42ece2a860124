import logging
import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import ValidationError

from telemedcart.application.errors import AccessDeniedError, BookingError
from telemedcart.application.ports import AppointmentRepositoryPort, UserDirectoryPort
from telemedcart.application.schemas import AdminStats, AppointmentRequest, SymptomCheckRequest
from telemedcart.domain.models import Appointment, Assessment, PublicUser
from telemedcart.domain.rules import assess


logger = logging.getLogger(__name__)


NEED_MORE_INFO_MESSAGE = (
    "I need more specific information about your symptoms. Could you describe what you're "
    "feeling in more detail? For example, mention specific symptoms like fever, headache, cough, etc."
)


def format_assessment_reply(assessment: Assessment) -> str:
    """Render an assessment as the assistant's chat reply."""
    if not assessment.conditions:
        return NEED_MORE_INFO_MESSAGE

    lines = ["Based on your symptoms, here are some possible conditions I've identified:\n"]
    for i, condition in enumerate(assessment.conditions, 1):
        lines.append(f"{i}. **{condition.name}** ({condition.probability}% match)")
        lines.append(f"   {condition.description}\n")

    lines.append(f"**Urgency Level:** {assessment.urgency.upper()}\n")
    lines.append("**Recommendations:**")
    for rec in assessment.recommendations:
        lines.append(f"• {rec}")
    return "\n".join(lines)


class SymptomCheckUseCase:
    def check(self, request: SymptomCheckRequest) -> Assessment:
        assessment = assess(request.symptoms)
        logger.info(
            "Symptom check: %d condition(s), urgency=%s",
            len(assessment.conditions),
            assessment.urgency,
        )
        return assessment


class AppointmentBookingUseCase:
    def __init__(self, appointments: AppointmentRepositoryPort, users: UserDirectoryPort):
        self.appointments = appointments
        self.users = users

    def book(self, patient: PublicUser, request: AppointmentRequest) -> Appointment:
        if patient.role != "patient":
            raise AccessDeniedError("Only patients can book appointments")

        doctor = self.users.get_user_by_id(request.doctor_id)
        if doctor is None or doctor.role != "doctor":
            raise BookingError("Selected doctor is not available")

        appointment = Appointment(
            id=str(uuid.uuid4()),
            patient_id=patient.id,
            doctor_id=doctor.id,
            date=request.date,
            time=request.time,
            type=request.type,
            symptoms=request.symptoms.strip(),
            status="scheduled",
            created_at=datetime.now(),
        )
        self.appointments.add(appointment)
        logger.info("Booked %s appointment %s with %s", appointment.type, appointment.id, doctor.name)
        return appointment

    def book_from_form(self, patient: PublicUser, **fields) -> Appointment:
        try:
            request = AppointmentRequest(**fields)
        except ValidationError as e:
            logger.warning("Rejected booking form: %s", e)
            raise BookingError(e.errors()[0]["msg"]) from e
        return self.book(patient, request)

    def list_for(self, user: PublicUser) -> List[Appointment]:
        appointments = self.appointments.list_all()
        if user.role == "patient":
            return [a for a in appointments if a.patient_id == user.id]
        if user.role == "doctor":
            return [a for a in appointments if a.doctor_id == user.id]
        return appointments

    def cancel(self, user: PublicUser, appointment_id: str) -> Appointment:
        appointment = self.appointments.get(appointment_id)
        if appointment is None:
            raise BookingError("Appointment not found")
        if user.role != "admin" and appointment.patient_id != user.id:
            raise AccessDeniedError("You can only cancel your own appointments")
        if appointment.status != "scheduled":
            raise BookingError(f"Appointment is already {appointment.status}")
        return self.appointments.update_status(appointment_id, "cancelled")


class AdminUseCase:
    def __init__(self, appointments: AppointmentRepositoryPort, users: UserDirectoryPort):
        self.appointments = appointments
        self.users = users

    @staticmethod
    def _require_admin(user: PublicUser) -> None:
        if user.role != "admin":
            raise AccessDeniedError("Admin access required")

    def stats(self, user: PublicUser) -> AdminStats:
        self._require_admin(user)
        users = self.users.list_users()
        appointments = self.appointments.list_all()
        return AdminStats(
            totalUsers=len(users),
            totalDoctors=sum(1 for u in users if u.role == "doctor"),
            totalPatients=sum(1 for u in users if u.role == "patient"),
            totalAppointments=len(appointments),
            completedAppointments=sum(1 for a in appointments if a.status == "completed"),
        )

    def users_list(self, user: PublicUser, role: Optional[str] = None) -> List[PublicUser]:
        self._require_admin(user)
        return self.users.list_users(role=role)

    def appointments_list(self, user: PublicUser) -> List[Appointment]:
        self._require_admin(user)
        return self.appointments.list_all()
