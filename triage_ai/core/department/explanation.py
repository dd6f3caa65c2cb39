"""
Clinical Explanation Generator

Renders one deterministic paragraph for a department recommendation:

    Patient <name> presents with <symptoms>. [Vital signs show <vitals>. ]
    <department interpretation> Therefore, <department> is recommended for
    further evaluation[ with priority attention].

The output is a presentation contract: identical inputs always produce
byte-identical text.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .base import (
    AssessmentRecord,
    Department,
    DepartmentScore,
    PatientInfo,
    SymptomSeverity as S,
    fixed,
)

PRIORITY_ATTENTION_SCORE = 60

# Symptom clause
PAIN_MENTION        = 3

# Vitals clause
HR_HIGH             = 100
HR_LOW              = 60
SBP_HIGH            = 140
DBP_HIGH            = 90
SBP_LOW             = 90
SPO2_REDUCED        = 95
RR_HIGH             = 20

DEFAULT_INTERPRETATION = "Clinical evaluation is recommended."

INTERPRETATIONS: Dict[Department, str] = {
    Department.EMERGENCY: (
        "These findings indicate a potentially life-threatening condition "
        "requiring immediate emergency intervention."
    ),
    Department.CARDIOLOGY: (
        "These findings suggest possible cardiovascular involvement and cardiac "
        "stress that warrants cardiological assessment."
    ),
    Department.PULMONOLOGY: (
        "These findings indicate respiratory compromise requiring pulmonary "
        "evaluation and management."
    ),
    Department.NEUROLOGY: (
        "These findings suggest neurological involvement that requires "
        "specialized neurological assessment."
    ),
    Department.ORTHOPEDICS: (
        "The pain pattern and presentation suggest musculoskeletal involvement "
        "requiring orthopedic evaluation."
    ),
    Department.GENERAL_MEDICINE: (
        "These findings warrant general medical evaluation to determine the "
        "underlying cause."
    ),
}


def describe_symptoms(a: AssessmentRecord) -> List[str]:
    symptoms = []
    if a.chest_pain >= S.MILD:
        symptoms.append(f"{a.chest_pain.label.lower()} chest pain")
    if a.shortness_of_breath >= S.MILD:
        symptoms.append(f"{a.shortness_of_breath.label.lower()} shortness of breath")
    if a.altered_consciousness >= S.MILD:
        symptoms.append(f"{a.altered_consciousness.label.lower()} altered consciousness")
    if a.bleeding >= S.MILD:
        symptoms.append(f"{a.bleeding.label.lower()} bleeding")
    if a.fever >= S.MILD:
        symptoms.append(f"fever ({fixed(a.temperature, 1)}°C)")
    if a.pain_level > PAIN_MENTION:
        symptoms.append(f"pain level {a.pain_level}/10")
    return symptoms


def describe_vitals(a: AssessmentRecord) -> List[str]:
    vitals = []
    if a.heart_rate > HR_HIGH:
        vitals.append(f"elevated heart rate ({fixed(a.heart_rate)} bpm)")
    elif a.heart_rate < HR_LOW:
        vitals.append(f"low heart rate ({fixed(a.heart_rate)} bpm)")

    if a.systolic_bp > SBP_HIGH or a.diastolic_bp > DBP_HIGH:
        vitals.append(f"elevated blood pressure ({a.blood_pressure} mmHg)")
    elif a.systolic_bp < SBP_LOW:
        vitals.append(f"low blood pressure ({a.blood_pressure} mmHg)")

    if a.oxygen_saturation < SPO2_REDUCED:
        vitals.append(f"reduced oxygen saturation ({fixed(a.oxygen_saturation)}%)")

    if a.respiratory_rate > RR_HIGH:
        vitals.append(f"elevated respiratory rate ({fixed(a.respiratory_rate)}/min)")
    return vitals


class ExplanationGenerator:
    """Builds the clinical explanation paragraph. Stateless."""

    def __init__(self, interpretations: Optional[Dict[Department, str]] = None):
        self.interpretations = dict(INTERPRETATIONS)
        if interpretations:
            self.interpretations.update(interpretations)

    def interpretation(self, department: Department) -> str:
        return self.interpretations.get(department, DEFAULT_INTERPRETATION)

    def generate(
        self,
        assessment: AssessmentRecord,
        patient: PatientInfo,
        recommended: Department,
        scores: Sequence[DepartmentScore],
    ) -> str:
        dept_score = next(s for s in scores if s.department == recommended)

        symptoms = describe_symptoms(assessment)
        parts = [
            f"Patient {patient.full_name} presents with "
            f"{', '.join(symptoms) if symptoms else 'non-specific symptoms'}. "
        ]

        vitals = describe_vitals(assessment)
        if vitals:
            parts.append(f"Vital signs show {' and '.join(vitals)}. ")

        parts.append(self.interpretation(recommended))

        closing = f" Therefore, {recommended.value} is recommended for further evaluation"
        if dept_score.score >= PRIORITY_ATTENTION_SCORE:
            closing += " with priority attention"
        parts.append(closing + ".")

        return "".join(parts)
