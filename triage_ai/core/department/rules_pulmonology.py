"""
Pulmonology Scoring Rules

Rule ordering:
    1. Shortness of breath >= Moderate
    2. Hypoxemia                       90 <= SpO2 < 94
    3. Tachypnea                       RR > 22
    4. Fever >= Moderate with shortness of breath >= Mild
    5. Temperature > 38.5 °C with shortness of breath >= Mild

SpO2 below 90 % is an emergency finding and is scored by the Emergency table.
"""
from __future__ import annotations

from .base import Department, RuleSet, ScoringRule, SymptomSeverity as S, fixed

# ── Thresholds ────────────────────────────────────────────────────────────────
SPO2_LOW_UPPER  = 94
SPO2_LOW_LOWER  = 90
RR_HIGH         = 22
TEMP_HIGH       = 38.5


RULES = RuleSet(
    department=Department.PULMONOLOGY,
    rules=(
        ScoringRule(
            rule_id="PULM-SOB-001",
            predicate=lambda a: a.shortness_of_breath >= S.MODERATE,
            points=40,
            factor=lambda a: f"{a.shortness_of_breath.label} shortness of breath",
            key_finding=lambda a: f"{a.shortness_of_breath.label} respiratory distress",
        ),
        ScoringRule(
            rule_id="PULM-SPO2-001",
            predicate=lambda a: SPO2_LOW_LOWER <= a.oxygen_saturation < SPO2_LOW_UPPER,
            points=30,
            factor=lambda a: f"Low O2 saturation ({fixed(a.oxygen_saturation)}%)",
            key_finding=lambda a: f"Hypoxemia: SpO2 {fixed(a.oxygen_saturation)}%",
        ),
        ScoringRule(
            rule_id="PULM-RR-001",
            predicate=lambda a: a.respiratory_rate > RR_HIGH,
            points=20,
            factor=lambda a: f"Elevated respiratory rate ({fixed(a.respiratory_rate)}/min)",
            key_finding=lambda a: f"Tachypnea: {fixed(a.respiratory_rate)} breaths/min",
        ),
        ScoringRule(
            rule_id="PULM-FEVER-001",
            predicate=lambda a: a.fever >= S.MODERATE and a.shortness_of_breath >= S.MILD,
            points=15,
            factor=lambda a: "Fever with respiratory symptoms",
        ),
        ScoringRule(
            rule_id="PULM-TEMP-001",
            predicate=lambda a: a.temperature > TEMP_HIGH and a.shortness_of_breath >= S.MILD,
            points=10,
            factor=lambda a: (
                f"Elevated temperature ({fixed(a.temperature, 1)}°C) with respiratory involvement"
            ),
        ),
    ),
)
