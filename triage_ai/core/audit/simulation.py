"""
Predicted-Label Sources

The fairness audit compares each record's actual risk label with a predicted
label. Predictions come from a ``LabelPredictor``:

  - SimulatedLabelPredictor — a deterministic stand-in used when no real
    classifier output exists. It produces realistic-looking error patterns
    (82–88 % agreement, errors one ordinal step away) seeded purely by the
    record identifier, so the same dataset always yields the same audit.
  - ClassifierLabelPredictor — adapts a real RiskClassifier. Swap it in to
    audit actual model behaviour; the metric code is unchanged.
"""
from __future__ import annotations

import hashlib
from typing import Dict, Protocol, Sequence, Tuple

import numpy as np

from triage_ai.core.department.base import AssessmentRecord
from triage_ai.services.classifier import RiskClassifier, TriageLevel
from triage_ai.utils import ClassifierError
from .base import RiskLevel, TrainingRecord

# Agreement probability range for the simulated classifier
SIMULATED_ACCURACY_MIN = 0.82
SIMULATED_ACCURACY_MAX = 0.88

# Where a wrong prediction lands, per actual label (probabilities sum to 1)
ERROR_TRANSITIONS: Dict[RiskLevel, Tuple[Tuple[RiskLevel, float], ...]] = {
    RiskLevel.LOW:      ((RiskLevel.MEDIUM, 0.70), (RiskLevel.HIGH, 0.30)),
    RiskLevel.MEDIUM:   ((RiskLevel.LOW, 0.50), (RiskLevel.HIGH, 0.50)),
    RiskLevel.HIGH:     ((RiskLevel.MEDIUM, 0.60), (RiskLevel.CRITICAL, 0.40)),
    RiskLevel.CRITICAL: ((RiskLevel.HIGH, 0.80), (RiskLevel.MEDIUM, 0.20)),
}

TRIAGE_TO_RISK = {
    TriageLevel.EMERGENCY:  RiskLevel.CRITICAL,
    TriageLevel.URGENT:     RiskLevel.HIGH,
    TriageLevel.STANDARD:   RiskLevel.MEDIUM,
    TriageLevel.NON_URGENT: RiskLevel.LOW,
}


class LabelPredictor(Protocol):
    def predict(self, record: TrainingRecord) -> RiskLevel: ...


def identifier_seed(identifier: str) -> int:
    """Stable 64-bit seed from the identifier (independent of PYTHONHASHSEED)."""
    digest = hashlib.sha256(identifier.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


def _pick(transitions: Sequence[Tuple[RiskLevel, float]], u: float) -> RiskLevel:
    cumulative = 0.0
    for level, probability in transitions:
        cumulative += probability
        if u < cumulative:
            return level
    return transitions[-1][0]


def simulate_label(identifier: str, actual: RiskLevel) -> RiskLevel:
    """
    Deterministic simulated prediction for one record.

    Draw order from the per-record generator: agreement probability,
    agreement draw, error-transition draw.
    """
    rng = np.random.default_rng(identifier_seed(identifier))
    p_correct = SIMULATED_ACCURACY_MIN + (SIMULATED_ACCURACY_MAX - SIMULATED_ACCURACY_MIN) * rng.random()
    if rng.random() < p_correct:
        return actual
    return _pick(ERROR_TRANSITIONS[actual], rng.random())


class SimulatedLabelPredictor:
    """Stand-in classifier; see module docstring."""

    def predict(self, record: TrainingRecord) -> RiskLevel:
        return simulate_label(record.patient_id, record.actual_risk)


class ClassifierLabelPredictor:
    """
    Runs a real RiskClassifier on each training row.

    The dataset carries heart rate, temperature and blood pressure; the
    remaining vitals are filled with nominal resting values.
    """

    def __init__(self, classifier: RiskClassifier):
        self.classifier = classifier

    @staticmethod
    def to_vitals(record: TrainingRecord) -> AssessmentRecord:
        systolic, diastolic = record.blood_pressure_values()
        defaults = AssessmentRecord()
        return AssessmentRecord(
            heart_rate=float(record.heart_rate) or defaults.heart_rate,
            systolic_bp=systolic or defaults.systolic_bp,
            diastolic_bp=diastolic or defaults.diastolic_bp,
            temperature=record.temperature or defaults.temperature,
        )

    def predict(self, record: TrainingRecord) -> RiskLevel:
        prediction = self.classifier.predict(self.to_vitals(record), record.age)
        try:
            level = TriageLevel(int(prediction.level))
        except ValueError as exc:
            raise ClassifierError(
                f"Classifier returned unknown triage level {prediction.level!r} "
                f"for record {record.patient_id}",
                details={"patient_id": record.patient_id, "level": prediction.level},
            ) from exc
        return TRIAGE_TO_RISK[level]
