"""
Neurology Scoring Rules

Rule ordering:
    1. Altered consciousness >= Mild
    2. Severe pain (> 7/10) without significant chest pain — possible headache
    3. Altered consciousness with SBP > 160 — stroke risk
"""
from __future__ import annotations

from .base import Department, RuleSet, ScoringRule, SymptomSeverity as S

# ── Thresholds ────────────────────────────────────────────────────────────────
PAIN_SEVERE     = 7
SBP_STROKE      = 160


RULES = RuleSet(
    department=Department.NEUROLOGY,
    rules=(
        ScoringRule(
            rule_id="NEURO-LOC-001",
            predicate=lambda a: a.altered_consciousness >= S.MILD,
            points=50,
            factor=lambda a: f"{a.altered_consciousness.label} altered consciousness",
            key_finding=lambda a: f"{a.altered_consciousness.label} altered level of consciousness",
        ),
        ScoringRule(
            rule_id="NEURO-PAIN-001",
            predicate=lambda a: a.pain_level > PAIN_SEVERE and a.chest_pain <= S.MILD,
            points=20,
            factor=lambda a: f"Severe pain level ({a.pain_level}/10) - possible headache",
            key_finding=lambda a: f"Severe pain: {a.pain_level}/10",
        ),
        ScoringRule(
            rule_id="NEURO-STROKE-001",
            predicate=lambda a: a.altered_consciousness >= S.MILD and a.systolic_bp > SBP_STROKE,
            points=20,
            factor=lambda a: "Altered consciousness with hypertension - stroke risk",
            key_finding=lambda a: "Elevated stroke risk factors",
        ),
    ),
)
