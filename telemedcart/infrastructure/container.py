from dataclasses import dataclass

from telemedcart.application.use_cases import AdminUseCase, AppointmentBookingUseCase, SymptomCheckUseCase
from telemedcart.infrastructure.auth.tokens import TokenService
from telemedcart.infrastructure.auth.user_manager import DEMO_USERS, UserManager
from telemedcart.infrastructure.config import Settings
from telemedcart.infrastructure.doctor_search.directory import DirectoryDoctorSearchAdapter
from telemedcart.infrastructure.storage.appointments import InMemoryAppointmentRepository
from telemedcart.infrastructure.storage.records import InMemoryMedicalRecordRepository
from telemedcart.infrastructure.video.jitsi_mock import MockVideoRoomAdapter


@dataclass
class Services:
    settings: Settings
    users: UserManager
    tokens: TokenService
    appointments: InMemoryAppointmentRepository
    records: InMemoryMedicalRecordRepository
    doctors: DirectoryDoctorSearchAdapter
    video: MockVideoRoomAdapter
    symptom_check: SymptomCheckUseCase
    booking: AppointmentBookingUseCase
    admin: AdminUseCase


def build_services(settings: Settings | None = None) -> Services:
    settings = settings or Settings()
    seed = settings.seed_demo_data

    users = UserManager(seed_demo_users=seed)
    appointments = InMemoryAppointmentRepository()
    demo_patient_id = next(u["id"] for u in DEMO_USERS if u["role"] == "patient") if seed else None

    return Services(
        settings=settings,
        users=users,
        tokens=TokenService(settings),
        appointments=appointments,
        records=InMemoryMedicalRecordRepository(seed_patient_id=demo_patient_id),
        doctors=DirectoryDoctorSearchAdapter(users),
        video=MockVideoRoomAdapter(settings),
        symptom_check=SymptomCheckUseCase(),
        booking=AppointmentBookingUseCase(appointments, users),
        admin=AdminUseCase(appointments, users),
    )
