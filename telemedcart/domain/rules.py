from typing import Dict, List

from .catalog import (
    CLOSING_RECOMMENDATIONS,
    HIGH_RISK_PHRASES,
    SYMPTOM_CATALOG,
    SYMPTOM_RECOMMENDATIONS,
    URGENCY_RECOMMENDATIONS,
    describe_condition,
)
from .models import Assessment, ConditionMatch, Level


MAX_CONDITIONS = 4
PROBABILITY_STEP = 25
PROBABILITY_CAP = 85


def find_symptoms(text: str) -> List[str]:
    """Return catalog keywords occurring anywhere in ``text`` (already lowercased)."""
    return [keyword for keyword, _ in SYMPTOM_CATALOG if keyword in text]


def count_conditions(symptoms: List[str]) -> Dict[str, int]:
    catalog = dict(SYMPTOM_CATALOG)
    counts: Dict[str, int] = {}
    for symptom in symptoms:
        for condition in catalog[symptom]:
            counts[condition] = counts.get(condition, 0) + 1
    return counts


def severity_for(count: int) -> Level:
    if count >= 3:
        return "high"
    if count == 2:
        return "medium"
    return "low"


def determine_urgency(text: str, matched_conditions: int) -> Level:
    if any(phrase in text for phrase in HIGH_RISK_PHRASES):
        return "high"
    if matched_conditions > 2:
        return "medium"
    return "low"


def generate_recommendations(symptoms: List[str], urgency: Level) -> List[str]:
    recommendations = list(URGENCY_RECOMMENDATIONS[urgency])
    for symptom, advice in SYMPTOM_RECOMMENDATIONS:
        if symptom in symptoms:
            recommendations.append(advice)
    recommendations.extend(CLOSING_RECOMMENDATIONS)
    return recommendations


def assess(description: str) -> Assessment:
    """
    Score a free-text symptom description against the symptom catalog.

    Never raises for string input. An empty or unmatched description yields no
    conditions, ``low`` urgency and the generic guidance only.
    """
    text = description.lower()
    symptoms = find_symptoms(text)
    counts = count_conditions(symptoms)

    matches = [
        ConditionMatch(
            name=name,
            probability=min(count * PROBABILITY_STEP, PROBABILITY_CAP),
            severity=severity_for(count),
            description=describe_condition(name),
        )
        for name, count in counts.items()
    ]
    # sorted() is stable, so ties keep first-insertion order
    ranked = sorted(matches, key=lambda m: m.probability, reverse=True)[:MAX_CONDITIONS]

    urgency = determine_urgency(text, len(counts))
    return Assessment(
        conditions=ranked,
        urgency=urgency,
        recommendations=generate_recommendations(symptoms, urgency),
    )
