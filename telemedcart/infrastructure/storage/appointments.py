import logging
from typing import Dict, List, Optional

from telemedcart.domain.models import Appointment


logger = logging.getLogger(__name__)


class InMemoryAppointmentRepository:
    """Process-local appointment store; contents are lost on restart."""

    def __init__(self):
        self._appointments: Dict[str, Appointment] = {}

    def add(self, appointment: Appointment) -> Appointment:
        self._appointments[appointment.id] = appointment
        return appointment

    def get(self, appointment_id: str) -> Optional[Appointment]:
        return self._appointments.get(appointment_id)

    def list_all(self) -> List[Appointment]:
        return sorted(self._appointments.values(), key=lambda a: a.created_at)

    def update_status(self, appointment_id: str, status: str) -> Optional[Appointment]:
        appointment = self._appointments.get(appointment_id)
        if appointment is None:
            logger.warning("Status update for unknown appointment %s", appointment_id)
            return None
        updated = appointment.model_copy(update={"status": status})
        self._appointments[appointment_id] = updated
        return updated
