"""
Emergency Department Scoring Rules

Rule ordering (evaluation order = factor order in the result):
    1. Critical oxygen saturation      SpO2 < 90 %
    2. Severe bleeding
    3. Severe altered consciousness
    4. Critical heart rate             HR > 130 or HR < 50
    5. Critical systolic pressure      SBP > 180 or SBP < 80
    6. Severe chest pain + respiratory distress (SOB >= Moderate)
"""
from __future__ import annotations

from .base import AssessmentRecord, Department, RuleSet, ScoringRule, SymptomSeverity as S, fixed

# ── Thresholds ────────────────────────────────────────────────────────────────
SPO2_CRITICAL   = 90
HR_CRITICAL_HI  = 130
HR_CRITICAL_LO  = 50
SBP_CRITICAL_HI = 180
SBP_CRITICAL_LO = 80


def _critical_hr(a: AssessmentRecord) -> bool:
    return a.heart_rate > HR_CRITICAL_HI or a.heart_rate < HR_CRITICAL_LO


def _critical_sbp(a: AssessmentRecord) -> bool:
    return a.systolic_bp > SBP_CRITICAL_HI or a.systolic_bp < SBP_CRITICAL_LO


RULES = RuleSet(
    department=Department.EMERGENCY,
    rules=(
        ScoringRule(
            rule_id="ED-SPO2-001",
            predicate=lambda a: a.oxygen_saturation < SPO2_CRITICAL,
            points=50,
            factor=lambda a: f"Critical O2 saturation ({fixed(a.oxygen_saturation)}%)",
            key_finding=lambda a: f"Critically low oxygen saturation: {fixed(a.oxygen_saturation)}%",
        ),
        ScoringRule(
            rule_id="ED-BLEED-001",
            predicate=lambda a: a.bleeding == S.SEVERE,
            points=50,
            factor=lambda a: "Severe bleeding present",
            key_finding=lambda a: "Severe bleeding requiring immediate attention",
        ),
        ScoringRule(
            rule_id="ED-LOC-001",
            predicate=lambda a: a.altered_consciousness == S.SEVERE,
            points=50,
            factor=lambda a: "Severe altered consciousness",
            key_finding=lambda a: "Severely altered level of consciousness",
        ),
        ScoringRule(
            rule_id="ED-HR-001",
            predicate=_critical_hr,
            points=30,
            factor=lambda a: f"Critical heart rate ({fixed(a.heart_rate)} bpm)",
        ),
        ScoringRule(
            rule_id="ED-BP-001",
            predicate=_critical_sbp,
            points=30,
            factor=lambda a: f"Critical blood pressure ({a.blood_pressure} mmHg)",
        ),
        ScoringRule(
            rule_id="ED-CP-SOB-001",
            predicate=lambda a: a.chest_pain == S.SEVERE and a.shortness_of_breath >= S.MODERATE,
            points=40,
            factor=lambda a: "Severe chest pain with respiratory distress",
            key_finding=lambda a: "Severe chest pain combined with breathing difficulty",
        ),
    ),
)
