"""
Orthopedics Scoring Rules

Rule ordering:
    1. Severe isolated pain (> 7/10) — no cardiac, respiratory or neurological signs
    2. Moderate pain (5–7/10) with stable vitals and no cardiac signs
    3. Mild bleeding with pain >= 4 — possible trauma
"""
from __future__ import annotations

from .base import AssessmentRecord, Department, RuleSet, ScoringRule, SymptomSeverity as S

# ── Thresholds ────────────────────────────────────────────────────────────────
PAIN_SEVERE     = 7
PAIN_MODERATE   = (5, 7)
PAIN_TRAUMA     = 4
HR_STABLE       = (60, 100)
SBP_STABLE      = (90, 140)


def _no_cardiac_symptoms(a: AssessmentRecord) -> bool:
    return a.chest_pain <= S.MILD and a.shortness_of_breath <= S.MILD


def _stable_vitals(a: AssessmentRecord) -> bool:
    return (
        HR_STABLE[0] <= a.heart_rate <= HR_STABLE[1]
        and SBP_STABLE[0] <= a.systolic_bp <= SBP_STABLE[1]
    )


RULES = RuleSet(
    department=Department.ORTHOPEDICS,
    rules=(
        ScoringRule(
            rule_id="ORTHO-PAIN-001",
            predicate=lambda a: (
                a.pain_level > PAIN_SEVERE
                and _no_cardiac_symptoms(a)
                and a.altered_consciousness == S.NONE
            ),
            points=40,
            factor=lambda a: f"Severe localized pain ({a.pain_level}/10)",
            key_finding=lambda a: (
                f"Severe isolated pain: {a.pain_level}/10 - possible musculoskeletal"
            ),
        ),
        ScoringRule(
            rule_id="ORTHO-PAIN-002",
            predicate=lambda a: (
                PAIN_MODERATE[0] <= a.pain_level <= PAIN_MODERATE[1]
                and _no_cardiac_symptoms(a)
                and _stable_vitals(a)
            ),
            points=25,
            factor=lambda a: "Moderate pain with stable vitals",
        ),
        ScoringRule(
            rule_id="ORTHO-TRAUMA-001",
            predicate=lambda a: a.bleeding == S.MILD and a.pain_level >= PAIN_TRAUMA,
            points=15,
            factor=lambda a: "Minor bleeding with pain - possible trauma",
        ),
    ),
)
