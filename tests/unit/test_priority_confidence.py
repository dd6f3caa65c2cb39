"""
Unit Tests for Priority Resolution and Confidence

Tests the emergency override, the near-tie priority order and the
confidence adjustments.
"""
import itertools

import pytest

from triage_ai.core.department import (
    AssessmentRecord,
    Department,
    DepartmentAnalysisEngine,
    DepartmentScore,
    PriorityResolver,
    SymptomSeverity,
    estimate_confidence,
    is_emergency_priority,
    sort_scores,
)
from triage_ai.core.department.confidence import margin_confidence


def _scores(**values) -> list:
    """DepartmentScore list in evaluation order from keyword scores."""
    order = [
        ("EMERGENCY", Department.EMERGENCY),
        ("CARDIOLOGY", Department.CARDIOLOGY),
        ("PULMONOLOGY", Department.PULMONOLOGY),
        ("NEUROLOGY", Department.NEUROLOGY),
        ("ORTHOPEDICS", Department.ORTHOPEDICS),
        ("GENERAL_MEDICINE", Department.GENERAL_MEDICINE),
    ]
    return [DepartmentScore(dept, values.get(key, 0)) for key, dept in order]


class TestEmergencyPriority:

    @pytest.mark.parametrize("kwargs", [
        {"oxygen_saturation": 89},
        {"bleeding": SymptomSeverity.SEVERE},
        {"altered_consciousness": SymptomSeverity.SEVERE},
        {"chest_pain": SymptomSeverity.SEVERE, "shortness_of_breath": SymptomSeverity.MODERATE},
        {"heart_rate": 151},
        {"heart_rate": 39},
        {"systolic_bp": 201},
        {"systolic_bp": 69},
    ])
    def test_life_threatening_conditions(self, kwargs):
        assert is_emergency_priority(AssessmentRecord(**kwargs)) is True

    @pytest.mark.parametrize("kwargs", [
        {},
        {"oxygen_saturation": 90},
        {"heart_rate": 150},
        {"heart_rate": 40},
        {"systolic_bp": 200},
        {"systolic_bp": 70},
        {"chest_pain": SymptomSeverity.SEVERE, "shortness_of_breath": SymptomSeverity.MILD},
        {"bleeding": SymptomSeverity.CRITICAL},
    ])
    def test_not_emergency(self, kwargs):
        assert is_emergency_priority(AssessmentRecord(**kwargs)) is False


class TestPriorityResolver:

    def test_emergency_override_ignores_scores(self):
        ranked = sort_scores(_scores(CARDIOLOGY=90, EMERGENCY=5))
        assert PriorityResolver().resolve(ranked, emergency_priority=True) == Department.EMERGENCY

    def test_clear_winner(self):
        ranked = sort_scores(_scores(PULMONOLOGY=60, CARDIOLOGY=40))
        assert PriorityResolver().resolve(ranked, emergency_priority=False) == Department.PULMONOLOGY

    def test_near_tie_uses_priority_order(self):
        ranked = sort_scores(_scores(PULMONOLOGY=60, CARDIOLOGY=55))
        assert PriorityResolver().resolve(ranked, emergency_priority=False) == Department.CARDIOLOGY

    def test_margin_of_exactly_ten_is_a_tie(self):
        ranked = sort_scores(_scores(ORTHOPEDICS=40, NEUROLOGY=30))
        assert PriorityResolver().resolve(ranked, emergency_priority=False) == Department.NEUROLOGY

    def test_tie_considers_everything_within_margin_of_top(self):
        # Second place opens the tie; third place is still within 10 of the top
        ranked = sort_scores(_scores(GENERAL_MEDICINE=50, ORTHOPEDICS=45, EMERGENCY=40))
        assert PriorityResolver().resolve(ranked, emergency_priority=False) == Department.EMERGENCY

    def test_near_tie_with_all_zero_competitors_uses_priority_order(self):
        # Baseline-only General Medicine is within 10 of every zero score
        ranked = sort_scores(_scores(GENERAL_MEDICINE=10))
        assert PriorityResolver().resolve(ranked, emergency_priority=False) == Department.EMERGENCY

    def test_custom_priority_order(self):
        order = [Department.GENERAL_MEDICINE] + [d for d in Department if d != Department.GENERAL_MEDICINE]
        ranked = sort_scores(_scores(GENERAL_MEDICINE=50, CARDIOLOGY=55))
        assert PriorityResolver(order).resolve(ranked, emergency_priority=False) == Department.GENERAL_MEDICINE

    def test_sort_is_stable(self):
        ranked = sort_scores(_scores(GENERAL_MEDICINE=10))
        assert [s.department for s in ranked] == [
            Department.GENERAL_MEDICINE,
            Department.EMERGENCY,
            Department.CARDIOLOGY,
            Department.PULMONOLOGY,
            Department.NEUROLOGY,
            Department.ORTHOPEDICS,
        ]


class TestConfidence:

    @pytest.mark.parametrize("margin,expected", [
        (50, 95), (40, 95), (39, 85), (30, 85), (20, 75), (10, 65), (9, 55), (0, 55), (-5, 55),
    ])
    def test_margin_table(self, margin, expected):
        assert margin_confidence(margin) == expected

    def test_zero_winner_score_returns_baseline(self):
        assert estimate_confidence(_scores(), Department.EMERGENCY) == 50

    def test_high_score_boost_is_capped(self):
        scores = _scores(CARDIOLOGY=90, PULMONOLOGY=40)
        assert estimate_confidence(scores, Department.CARDIOLOGY) == 99

    def test_high_score_boost(self):
        scores = _scores(CARDIOLOGY=85, PULMONOLOGY=50)
        assert estimate_confidence(scores, Department.CARDIOLOGY) == 90

    def test_close_competitor_penalty(self):
        scores = _scores(CARDIOLOGY=50, PULMONOLOGY=45, NEUROLOGY=40)
        assert estimate_confidence(scores, Department.CARDIOLOGY) == 45

    def test_single_close_competitor_no_penalty(self):
        scores = _scores(CARDIOLOGY=50, PULMONOLOGY=45)
        assert estimate_confidence(scores, Department.CARDIOLOGY) == 55

    def test_override_winner_below_top(self):
        scores = _scores(EMERGENCY=30, CARDIOLOGY=60, PULMONOLOGY=50)
        # margin -30 → 55; both others within 15 of 30 → 45
        assert estimate_confidence(scores, Department.EMERGENCY) == 45


class TestPipelineOutcomes:
    """End-to-end recommendation without storage."""

    @pytest.fixture
    def engine(self):
        return DepartmentAnalysisEngine()

    def test_cardiac_presentation(self, engine, cardiac_assessment, patient):
        result = engine.evaluate(cardiac_assessment, patient)
        assert result.recommended_department == Department.CARDIOLOGY
        assert result.confidence_score == 95
        assert result.is_emergency_priority is False
        assert result.all_scores[0].department == Department.CARDIOLOGY
        assert result.all_scores[0].score == 60
        assert result.all_scores[1].department == Department.GENERAL_MEDICINE
        assert result.all_scores[1].score == 10

    def test_critical_oxygen_forces_emergency(self, engine, patient):
        result = engine.evaluate(AssessmentRecord(oxygen_saturation=85), patient)
        assert result.is_emergency_priority is True
        assert result.recommended_department == Department.EMERGENCY
        assert result.score_for(Department.EMERGENCY).score == 50
        assert result.confidence_score == 95

    def test_extreme_heart_rate_override(self, engine, patient):
        result = engine.evaluate(AssessmentRecord(heart_rate=155), patient)
        assert result.recommended_department == Department.EMERGENCY
        assert result.score_for(Department.EMERGENCY).score == 30
        assert result.score_for(Department.CARDIOLOGY).score == 20
        assert result.confidence_score == 65

    def test_near_tie_prefers_cardiology_over_pulmonology(self, engine, patient):
        a = AssessmentRecord(
            heart_rate=115,
            systolic_bp=145,
            respiratory_rate=24,
            chest_pain=SymptomSeverity.MILD,
            shortness_of_breath=SymptomSeverity.MODERATE,
        )
        result = engine.evaluate(a, patient)
        assert result.score_for(Department.PULMONOLOGY).score == 60
        assert result.score_for(Department.CARDIOLOGY).score == 55
        assert result.recommended_department == Department.CARDIOLOGY
        assert result.confidence_score == 55

    def test_stroke_presentation(self, engine, patient):
        a = AssessmentRecord(systolic_bp=170, altered_consciousness=SymptomSeverity.MILD)
        result = engine.evaluate(a, patient)
        assert result.recommended_department == Department.NEUROLOGY
        assert result.confidence_score == 95

    def test_isolated_severe_pain(self, engine, patient):
        result = engine.evaluate(AssessmentRecord(pain_level=8), patient)
        assert result.recommended_department == Department.ORTHOPEDICS
        assert result.key_findings == (
            "Severe pain: 8/10",
            "Severe isolated pain: 8/10 - possible musculoskeletal",
        )

    def test_confidence_always_in_range(self, engine, patient):
        severities = [SymptomSeverity.NONE, SymptomSeverity.MODERATE, SymptomSeverity.SEVERE]
        vitals = [
            {},
            {"heart_rate": 120, "systolic_bp": 165},
            {"oxygen_saturation": 92, "respiratory_rate": 26},
            {"heart_rate": 45, "systolic_bp": 75, "oxygen_saturation": 86},
        ]
        for v, cp, sob, loc, pain in itertools.product(vitals, severities, severities, severities, (0, 6, 9)):
            a = AssessmentRecord(
                chest_pain=cp,
                shortness_of_breath=sob,
                altered_consciousness=loc,
                pain_level=pain,
                **v,
            )
            result = engine.evaluate(a, patient)
            winner = result.score_for(result.recommended_department)
            if winner.score == 0:
                assert result.confidence_score == 50
            else:
                assert 40 <= result.confidence_score <= 99
            assert len(result.all_scores) == 6
            assert len(set(result.key_findings)) == len(result.key_findings)
