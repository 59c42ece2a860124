from typing import List, Optional

from telemedcart.domain.models import MedicalRecord


def _demo_records(patient_id: str) -> List[MedicalRecord]:
    rows = [
        ("2024-01-10", "Dr. Sarah Johnson", "consultation", "General Health Checkup",
         "Routine annual physical examination. Blood pressure: 120/80. Heart rate: 72 bpm. "
         "No immediate concerns noted.", "completed"),
        ("2024-01-05", "Dr. Michael Brown", "prescription", "Medication Prescription",
         "Prescribed Lisinopril 10mg daily for blood pressure management. Follow-up in 4 weeks.",
         "completed"),
        ("2023-12-20", "Lab Services", "test-result", "Blood Test Results",
         "Complete blood count, lipid panel, and glucose levels. All values within normal range.",
         "completed"),
        ("2023-12-15", "Dr. Emily Davis", "diagnosis", "Hypertension Diagnosis",
         "Diagnosed with Stage 1 hypertension. Recommended lifestyle changes and medication management.",
         "follow-up"),
        ("2024-02-01", "Dr. Sarah Johnson", "consultation", "Follow-up Consultation",
         "Scheduled follow-up to review blood pressure medication effectiveness.", "pending"),
    ]
    return [
        MedicalRecord(
            id=f"{patient_id}-{i}",
            patient_id=patient_id,
            date=date,
            doctor_name=doctor,
            type=rtype,
            title=title,
            description=description,
            status=status,
        )
        for i, (date, doctor, rtype, title, description, status) in enumerate(rows, 1)
    ]


class InMemoryMedicalRecordRepository:
    """Read-only medical history; seeded for the demo patient only."""

    def __init__(self, seed_patient_id: Optional[str] = None):
        self._records: List[MedicalRecord] = _demo_records(seed_patient_id) if seed_patient_id else []

    def list_for_patient(self, patient_id: str, record_type: Optional[str] = None) -> List[MedicalRecord]:
        records = [
            r for r in self._records
            if r.patient_id == patient_id and (record_type in (None, "all") or r.type == record_type)
        ]
        return sorted(records, key=lambda r: r.date, reverse=True)
