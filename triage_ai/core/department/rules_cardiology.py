"""
Cardiology Scoring Rules

Rule ordering:
    1. Chest pain >= Moderate
    2. Tachycardia                     HR > 110
    3. Bradycardia                     HR < 55
    4. Elevated systolic pressure      SBP > 160
    5. Shortness of breath >= Moderate with chest pain >= Mild
    6. Combined pattern                chest pain >= Mild, HR > 100, SBP > 140
"""
from __future__ import annotations

from .base import Department, RuleSet, ScoringRule, SymptomSeverity as S, fixed

# ── Thresholds ────────────────────────────────────────────────────────────────
HR_TACHY        = 110
HR_BRADY        = 55
SBP_HIGH        = 160
HR_PATTERN      = 100
SBP_PATTERN     = 140


RULES = RuleSet(
    department=Department.CARDIOLOGY,
    rules=(
        ScoringRule(
            rule_id="CARD-CP-001",
            predicate=lambda a: a.chest_pain >= S.MODERATE,
            points=40,
            factor=lambda a: f"{a.chest_pain.label} chest pain",
            key_finding=lambda a: f"{a.chest_pain.label} chest pain present",
        ),
        ScoringRule(
            rule_id="CARD-TACHY-001",
            predicate=lambda a: a.heart_rate > HR_TACHY,
            points=20,
            factor=lambda a: f"Elevated heart rate ({fixed(a.heart_rate)} bpm)",
            key_finding=lambda a: f"Tachycardia: {fixed(a.heart_rate)} bpm",
        ),
        ScoringRule(
            rule_id="CARD-BRADY-001",
            predicate=lambda a: a.heart_rate < HR_BRADY,
            points=25,
            factor=lambda a: f"Low heart rate ({fixed(a.heart_rate)} bpm)",
            key_finding=lambda a: f"Bradycardia: {fixed(a.heart_rate)} bpm",
        ),
        ScoringRule(
            rule_id="CARD-HTN-001",
            predicate=lambda a: a.systolic_bp > SBP_HIGH,
            points=20,
            factor=lambda a: f"Elevated systolic BP ({fixed(a.systolic_bp)} mmHg)",
            key_finding=lambda a: f"Hypertension: {a.blood_pressure} mmHg",
        ),
        ScoringRule(
            rule_id="CARD-SOB-001",
            predicate=lambda a: a.shortness_of_breath >= S.MODERATE and a.chest_pain >= S.MILD,
            points=20,
            factor=lambda a: "Shortness of breath with chest discomfort",
        ),
        ScoringRule(
            rule_id="CARD-MULTI-001",
            predicate=lambda a: (
                a.chest_pain >= S.MILD
                and a.heart_rate > HR_PATTERN
                and a.systolic_bp > SBP_PATTERN
            ),
            points=15,
            factor=lambda a: "Multiple cardiovascular indicators",
        ),
    ),
)
