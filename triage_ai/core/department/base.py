"""
Department Recommendation — Base Types

Defines the input record, the rule-table contract that every department
module exports, and the per-department / final result objects.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum, IntEnum
from typing import Callable, Dict, List, Optional, Tuple


def fixed(value: float, places: int = 0) -> str:
    """
    Fixed-point text with halves rounded away from zero: ``fixed(92.5)`` is
    ``"93"`` where ``f"{92.5:.0f}"`` gives ``"92"``.
    """
    if not math.isfinite(value):
        return f"{value:.{places}f}"
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


class SymptomSeverity(IntEnum):
    """
    Ordinal symptom intensity.

    Always compare members numerically (``>= SymptomSeverity.MODERATE``),
    never by name.
    """
    NONE     = 0
    MILD     = 1
    MODERATE = 2
    SEVERE   = 3
    CRITICAL = 4

    @property
    def label(self) -> str:
        """Capitalised display label, e.g. ``"Moderate"``."""
        return self.name.capitalize()


class Department(str, Enum):
    """Candidate departments, declared in fixed evaluation order."""
    EMERGENCY        = "Emergency"
    CARDIOLOGY       = "Cardiology"
    PULMONOLOGY      = "Pulmonology"
    NEUROLOGY        = "Neurology"
    ORTHOPEDICS      = "Orthopedics"
    GENERAL_MEDICINE = "GeneralMedicine"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Department.EMERGENCY:        "Emergency",
    Department.CARDIOLOGY:       "Cardiology",
    Department.PULMONOLOGY:      "Pulmonology",
    Department.NEUROLOGY:        "Neurology",
    Department.ORTHOPEDICS:      "Orthopedics",
    Department.GENERAL_MEDICINE: "General Medicine",
}


@dataclass(frozen=True)
class AssessmentRecord:
    """
    One set of vital signs and symptom severities.

    Units: heart rate bpm, blood pressure mmHg, temperature °C,
    respiratory rate breaths/min, oxygen saturation %, pain 0–10.
    """
    heart_rate: float = 75.0
    systolic_bp: float = 120.0
    diastolic_bp: float = 80.0
    temperature: float = 37.0
    respiratory_rate: float = 16.0
    oxygen_saturation: float = 98.0
    pain_level: int = 0

    chest_pain: SymptomSeverity = SymptomSeverity.NONE
    shortness_of_breath: SymptomSeverity = SymptomSeverity.NONE
    altered_consciousness: SymptomSeverity = SymptomSeverity.NONE
    bleeding: SymptomSeverity = SymptomSeverity.NONE
    fever: SymptomSeverity = SymptomSeverity.NONE

    assessment_id: Optional[int] = None

    def __post_init__(self):
        # Accept plain ints (e.g. decoded JSON) for the severity fields
        for name in ("chest_pain", "shortness_of_breath", "altered_consciousness",
                     "bleeding", "fever"):
            object.__setattr__(self, name, SymptomSeverity(getattr(self, name)))

    @property
    def blood_pressure(self) -> str:
        return f"{fixed(self.systolic_bp)}/{fixed(self.diastolic_bp)}"


@dataclass(frozen=True)
class PatientInfo:
    """The slice of the patient record the department pipeline needs."""
    patient_id: int
    full_name: str
    age: int = 0
    gender: str = ""


# ── Rule tables ───────────────────────────────────────────────────────────────

Predicate = Callable[[AssessmentRecord], bool]
TextBuilder = Callable[[AssessmentRecord], str]


@dataclass(frozen=True)
class ScoringRule:
    """
    One additive scoring rule.

    ``factor`` is appended to the department's contributing factors when the
    rule fires; ``key_finding`` (optional) is added to the analysis-wide
    key-finding list for clinically salient findings.
    """
    rule_id: str
    predicate: Predicate
    points: int
    factor: TextBuilder
    key_finding: Optional[TextBuilder] = None

    def applies(self, assessment: AssessmentRecord) -> bool:
        return bool(self.predicate(assessment))


@dataclass(frozen=True)
class RuleSet:
    """
    The full rule table of one department.

    ``baseline`` is a (points, factor) floor applied when no rule fired.
    """
    department: Department
    rules: Tuple[ScoringRule, ...]
    baseline: Optional[Tuple[int, str]] = None


# ── Results ───────────────────────────────────────────────────────────────────

@dataclass
class DepartmentScore:
    """Accumulated score of one department; factors keep rule order."""
    department: Department
    score: int = 0
    contributing_factors: List[str] = field(default_factory=list)
    key_findings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "department": self.department.value,
            "score": self.score,
            "contributing_factors": list(self.contributing_factors),
        }


@dataclass(frozen=True)
class DepartmentAnalysisResult:
    """
    Outcome of one department analysis.

    ``all_scores`` is sorted by score, descending (stable: equal scores keep
    evaluation order). ``key_findings`` is de-duplicated, first occurrence wins.
    """
    recommended_department: Department
    confidence_score: int
    clinical_explanation: str
    all_scores: Tuple[DepartmentScore, ...]
    is_emergency_priority: bool
    key_findings: Tuple[str, ...] = ()

    def score_for(self, department: Department) -> Optional[DepartmentScore]:
        for s in self.all_scores:
            if s.department == department:
                return s
        return None

    def to_dict(self) -> Dict:
        return {
            "recommended_department": self.recommended_department.value,
            "confidence_score": self.confidence_score,
            "clinical_explanation": self.clinical_explanation,
            "all_scores": [s.to_dict() for s in self.all_scores],
            "is_emergency_priority": self.is_emergency_priority,
            "key_findings": list(self.key_findings),
        }
