"""
General Medicine Scoring Rules

Rule ordering:
    1. High fever                      fever >= Severe or T > 39 °C
    2. Moderate fever                  fever == Moderate or 38 < T <= 39
       (only when rule 1 did not fire)
    3. Mildly abnormal vitals          100 < HR <= 110 or 140 < SBP <= 160,
                                       with no specific indicators
    4. Mild pain (1–4/10) with no specific indicators
    5. Mild bleeding with pain < 4

Baseline: +10 "General evaluation recommended" when nothing fired, so the
department always competes as the default destination.
"""
from __future__ import annotations

from .base import AssessmentRecord, Department, RuleSet, ScoringRule, SymptomSeverity as S, fixed

# ── Thresholds ────────────────────────────────────────────────────────────────
TEMP_HIGH       = 39.0
TEMP_MODERATE   = 38.0
HR_MILD         = (100, 110)
SBP_MILD        = (140, 160)
PAIN_MILD       = (1, 4)
PAIN_TRAUMA     = 4
BASELINE_POINTS = 10


def _high_fever(a: AssessmentRecord) -> bool:
    return a.fever >= S.SEVERE or a.temperature > TEMP_HIGH


def _moderate_fever(a: AssessmentRecord) -> bool:
    if _high_fever(a):
        return False
    return a.fever == S.MODERATE or TEMP_MODERATE < a.temperature <= TEMP_HIGH


def _mildly_abnormal_vitals(a: AssessmentRecord) -> bool:
    return (
        HR_MILD[0] < a.heart_rate <= HR_MILD[1]
        or SBP_MILD[0] < a.systolic_bp <= SBP_MILD[1]
    )


def _no_specific_indicators(a: AssessmentRecord) -> bool:
    return (
        a.chest_pain <= S.MILD
        and a.shortness_of_breath <= S.MILD
        and a.altered_consciousness == S.NONE
    )


RULES = RuleSet(
    department=Department.GENERAL_MEDICINE,
    rules=(
        ScoringRule(
            rule_id="GM-FEVER-001",
            predicate=_high_fever,
            points=30,
            factor=lambda a: f"High fever ({fixed(a.temperature, 1)}°C)",
            key_finding=lambda a: f"High fever: {fixed(a.temperature, 1)}°C",
        ),
        ScoringRule(
            rule_id="GM-FEVER-002",
            predicate=_moderate_fever,
            points=20,
            factor=lambda a: f"Moderate fever ({fixed(a.temperature, 1)}°C)",
        ),
        ScoringRule(
            rule_id="GM-VITALS-001",
            predicate=lambda a: _mildly_abnormal_vitals(a) and _no_specific_indicators(a),
            points=20,
            factor=lambda a: "Mildly abnormal vitals requiring general evaluation",
        ),
        ScoringRule(
            rule_id="GM-PAIN-001",
            predicate=lambda a: (
                PAIN_MILD[0] <= a.pain_level <= PAIN_MILD[1] and _no_specific_indicators(a)
            ),
            points=15,
            factor=lambda a: f"Mild pain ({a.pain_level}/10) for general assessment",
        ),
        ScoringRule(
            rule_id="GM-BLEED-001",
            predicate=lambda a: a.bleeding == S.MILD and a.pain_level < PAIN_TRAUMA,
            points=10,
            factor=lambda a: "Minor bleeding for evaluation",
        ),
    ),
    baseline=(BASELINE_POINTS, "General evaluation recommended"),
)
