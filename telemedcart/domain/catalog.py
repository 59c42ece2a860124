"""Static symptom and condition tables used by the assessment rules."""
from types import MappingProxyType
from typing import Mapping, Tuple


# Iteration order decides tie-breaks between equally scored conditions.
SYMPTOM_CATALOG: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("fever", ("common cold", "flu", "covid-19", "bacterial infection")),
    ("headache", ("tension headache", "migraine", "sinusitis", "dehydration")),
    ("cough", ("common cold", "flu", "covid-19", "bronchitis", "allergies")),
    ("sore throat", ("common cold", "flu", "strep throat", "allergies")),
    ("fatigue", ("flu", "covid-19", "anemia", "depression", "thyroid issues")),
    ("nausea", ("food poisoning", "gastroenteritis", "pregnancy", "migraine")),
    ("chest pain", ("heart attack", "angina", "panic attack", "muscle strain")),
    ("shortness of breath", ("asthma", "covid-19", "heart condition", "anxiety")),
    ("dizziness", ("dehydration", "low blood pressure", "inner ear infection")),
    ("abdominal pain", ("gastroenteritis", "appendicitis", "food poisoning")),
)

CONDITION_DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    "common cold": "A viral infection affecting the nose and throat",
    "flu": "Influenza - a respiratory illness caused by flu viruses",
    "covid-19": "Coronavirus disease caused by SARS-CoV-2",
    "bacterial infection": "Infection caused by harmful bacteria",
    "tension headache": "Most common type of headache, often stress-related",
    "migraine": "Severe headache often accompanied by nausea and sensitivity to light",
    "sinusitis": "Inflammation of the sinuses",
    "dehydration": "Inadequate fluid intake or excessive fluid loss",
    "bronchitis": "Inflammation of the bronchial tubes",
    "allergies": "Immune system reaction to allergens",
    "strep throat": "Bacterial infection of the throat",
    "anemia": "Low red blood cell count or hemoglobin",
    "depression": "Mental health condition affecting mood and energy",
    "thyroid issues": "Problems with thyroid gland function",
    "food poisoning": "Illness from contaminated food",
    "gastroenteritis": "Inflammation of stomach and intestines",
    "pregnancy": "Pregnancy-related symptoms",
    "heart attack": "Medical emergency requiring immediate attention",
    "angina": "Chest pain due to reduced blood flow to heart",
    "panic attack": "Sudden episode of intense anxiety",
    "muscle strain": "Injury to muscle or tendon",
    "asthma": "Respiratory condition causing breathing difficulties",
    "heart condition": "Various heart-related medical conditions",
    "anxiety": "Mental health condition causing excessive worry",
    "low blood pressure": "Blood pressure below normal range",
    "inner ear infection": "Infection affecting balance and hearing",
    "appendicitis": "Inflammation of the appendix - requires medical attention",
})

DEFAULT_CONDITION_DESCRIPTION = "Condition requiring medical evaluation"

HIGH_RISK_PHRASES = ("chest pain", "shortness of breath", "severe")

URGENCY_RECOMMENDATIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "high": (
        "🚨 Seek immediate medical attention or call emergency services",
        "Do not delay - visit the emergency room if symptoms worsen",
        "Avoid driving yourself - ask someone to take you or call an ambulance",
    ),
    "medium": (
        "📞 Contact your healthcare provider within 24 hours",
        "Consider scheduling an appointment with a doctor",
    ),
    "low": (
        "💊 Monitor symptoms and consider over-the-counter remedies",
        "Contact a healthcare provider if symptoms persist or worsen",
    ),
})

SYMPTOM_RECOMMENDATIONS: Tuple[Tuple[str, str], ...] = (
    ("fever", "🌡️ Rest and stay hydrated, monitor temperature regularly"),
    ("cough", "💧 Stay hydrated and consider using a humidifier"),
)

CLOSING_RECOMMENDATIONS: Tuple[str, ...] = (
    "📋 Keep a symptom diary to track changes",
    "🏥 Book a video consultation for professional medical advice",
)


def describe_condition(name: str) -> str:
    return CONDITION_DESCRIPTIONS.get(name) or DEFAULT_CONDITION_DESCRIPTION
