"""
Risk Classifier Collaborator

The machine-learned risk classifier is external to this package. The core
only consumes it through ``RiskClassifier.predict(vitals, age)``.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

from triage_ai.core.department.base import AssessmentRecord
from triage_ai.utils import ClassifierError


class TriageLevel(IntEnum):
    """Standard emergency-department triage levels (1 = most urgent)."""
    EMERGENCY  = 1
    URGENT     = 2
    STANDARD   = 3
    NON_URGENT = 4


@dataclass(frozen=True)
class RiskPrediction:
    """Classifier output. ``risk_score`` and ``confidence`` are in [0, 1]."""
    level: TriageLevel
    risk_score: float
    confidence: float

    @classmethod
    def validated(cls, level: int, risk_score: float, confidence: float) -> "RiskPrediction":
        """Build a prediction from raw classifier values, rejecting out-of-range output."""
        try:
            triage_level = TriageLevel(int(level))
        except ValueError as exc:
            raise ClassifierError(
                f"Classifier returned unknown triage level {level!r}",
                details={"level": level},
            ) from exc
        for name, value in (("risk_score", risk_score), ("confidence", confidence)):
            if not 0.0 <= float(value) <= 1.0:
                raise ClassifierError(
                    f"Classifier {name} {value!r} outside [0, 1]",
                    details={name: value},
                )
        return cls(triage_level, float(risk_score), float(confidence))


class RiskClassifier(Protocol):
    def predict(self, vitals: AssessmentRecord, age: int) -> RiskPrediction: ...
