"""Unit tests for the symptom assessment rules."""
import pytest
from pydantic import ValidationError

from telemedcart.domain.catalog import (
    CLOSING_RECOMMENDATIONS,
    CONDITION_DESCRIPTIONS,
    DEFAULT_CONDITION_DESCRIPTION,
    SYMPTOM_CATALOG,
    SYMPTOM_RECOMMENDATIONS,
    URGENCY_RECOMMENDATIONS,
    describe_condition,
)
from telemedcart.domain.rules import assess, count_conditions, find_symptoms, severity_for


FEVER_ADVICE = dict(SYMPTOM_RECOMMENDATIONS)["fever"]
COUGH_ADVICE = dict(SYMPTOM_RECOMMENDATIONS)["cough"]

SAMPLE_DESCRIPTIONS = [
    "",
    "   ",
    "I feel fine",
    "I have a fever and a cough",
    "FEVER, cough, sore throat, fatigue",
    "headache nausea dizziness abdominal pain fatigue fever cough sore throat",
    "severe chest pain and shortness of breath",
    "feverishly coughing all night",
    "fever fever fever fever",
]


class TestCatalog:
    """Test the static lookup tables."""

    def test_every_condition_has_description(self):
        for _, conditions in SYMPTOM_CATALOG:
            for condition in conditions:
                assert CONDITION_DESCRIPTIONS.get(condition), f"missing description for {condition}"

    def test_unknown_condition_falls_back(self):
        assert describe_condition("space flu") == DEFAULT_CONDITION_DESCRIPTION

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            CONDITION_DESCRIPTIONS["flu"] = "changed"

    def test_urgency_tiers(self):
        assert len(URGENCY_RECOMMENDATIONS["high"]) == 3
        assert len(URGENCY_RECOMMENDATIONS["medium"]) == 2
        assert len(URGENCY_RECOMMENDATIONS["low"]) == 2


class TestMatching:
    """Test keyword matching and counting."""

    def test_substring_match_inside_words(self):
        assert find_symptoms("feverishly") == ["fever"]

    def test_keywords_in_catalog_order(self):
        assert find_symptoms("cough and fever") == ["fever", "cough"]

    def test_counts_accumulate(self):
        counts = count_conditions(["fever", "cough"])
        assert counts["common cold"] == 2
        assert counts["bronchitis"] == 1
        assert list(counts)[:4] == ["common cold", "flu", "covid-19", "bacterial infection"]

    @pytest.mark.parametrize("count,expected", [(1, "low"), (2, "medium"), (3, "high"), (5, "high")])
    def test_severity(self, count, expected):
        assert severity_for(count) == expected


class TestAssess:
    """Test the assess entry point."""

    def test_empty_description(self):
        result = assess("")
        assert result.conditions == []
        assert result.urgency == "low"
        assert result.recommendations == list(URGENCY_RECOMMENDATIONS["low"]) + list(CLOSING_RECOMMENDATIONS)

    def test_chest_pain_is_high_urgency(self):
        result = assess("I have chest pain")
        assert result.urgency == "high"
        assert [c.name for c in result.conditions] == ["heart attack", "angina", "panic attack", "muscle strain"]
        assert result.recommendations[:3] == list(URGENCY_RECOMMENDATIONS["high"])

    def test_severe_without_keywords_is_high(self):
        result = assess("Severe pain in my knee")
        assert result.conditions == []
        assert result.urgency == "high"

    def test_fever_and_cough(self):
        result = assess("I have a fever and a cough")

        assert [(c.name, c.probability, c.severity) for c in result.conditions] == [
            ("common cold", 50, "medium"),
            ("flu", 50, "medium"),
            ("covid-19", 50, "medium"),
            ("bacterial infection", 25, "low"),
        ]
        assert result.urgency == "medium"
        assert result.recommendations == (
            list(URGENCY_RECOMMENDATIONS["medium"])
            + [FEVER_ADVICE, COUGH_ADVICE]
            + list(CLOSING_RECOMMENDATIONS)
        )

    def test_headache_nausea_dizziness(self):
        result = assess("I have a headache and nausea and dizziness")
        assert result.urgency == "medium"
        assert [(c.name, c.probability) for c in result.conditions] == [
            ("migraine", 50),
            ("dehydration", 50),
            ("tension headache", 25),
            ("sinusitis", 25),
        ]

    def test_probability_cap(self):
        result = assess("fever, cough, sore throat, fatigue")
        assert [(c.name, c.probability, c.severity) for c in result.conditions] == [
            ("flu", 85, "high"),
            ("common cold", 75, "high"),
            ("covid-19", 75, "high"),
            ("allergies", 50, "medium"),
        ]

    def test_repeated_keyword_counts_once(self):
        result = assess("fever fever fever fever")
        assert {c.probability for c in result.conditions} == {25}

    def test_unmatched_description_is_low(self):
        result = assess("my elbow itches")
        assert result.urgency == "low"

    def test_case_insensitive(self):
        assert assess("FEVER").model_dump() == assess("fever").model_dump()

    @pytest.mark.parametrize("description", SAMPLE_DESCRIPTIONS)
    def test_result_invariants(self, description):
        result = assess(description)

        assert 0 <= len(result.conditions) <= 4
        probabilities = [c.probability for c in result.conditions]
        assert probabilities == sorted(probabilities, reverse=True)
        assert all(p in {25, 50, 75, 85} for p in probabilities)
        assert all(c.description for c in result.conditions)
        assert result.recommendations[-2:] == list(CLOSING_RECOMMENDATIONS)

    @pytest.mark.parametrize("description", SAMPLE_DESCRIPTIONS)
    def test_deterministic(self, description):
        assert assess(description).model_dump_json() == assess(description).model_dump_json()

    def test_assessment_is_frozen(self):
        result = assess("fever")
        with pytest.raises(ValidationError):
            result.urgency = "high"
