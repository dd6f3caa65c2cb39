"""
Fairness Audit Layer

Evaluates a historical training dataset for demographic disparities in a
risk classifier's predictions and reduces them to a fairness score.

Usage:
    from triage_ai.core.audit import BiasAuditEngine

    result = BiasAuditEngine().analyze(csv_text)
"""
from .base import (
    AgeGroupMetrics,
    BiasAnalysisResult,
    DemographicAccuracy,
    GenderMetrics,
    RiskLevel,
    TrainingRecord,
)
from .engine import BiasAuditEngine
from .fairness import compute_fairness_score, rate_fairness
from .metrics import analyze_age_groups, compute_demographic_accuracy
from .parser import DelimitedRecordParser, split_line
from .simulation import (
    ClassifierLabelPredictor,
    LabelPredictor,
    SimulatedLabelPredictor,
    simulate_label,
)

__all__ = [
    "AgeGroupMetrics",
    "BiasAnalysisResult",
    "DemographicAccuracy",
    "GenderMetrics",
    "RiskLevel",
    "TrainingRecord",
    "BiasAuditEngine",
    "compute_fairness_score",
    "rate_fairness",
    "analyze_age_groups",
    "compute_demographic_accuracy",
    "DelimitedRecordParser",
    "split_line",
    "ClassifierLabelPredictor",
    "LabelPredictor",
    "SimulatedLabelPredictor",
    "simulate_label",
]
