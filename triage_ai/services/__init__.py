"""
External Collaborator Contracts

Storage for department predictions and the black-box risk classifier.
"""
from .classifier import RiskClassifier, RiskPrediction, TriageLevel
from .storage import (
    DepartmentScoreEntry,
    InMemoryPredictionStore,
    PredictionRecord,
    PredictionStore,
)

__all__ = [
    "RiskClassifier",
    "RiskPrediction",
    "TriageLevel",
    "DepartmentScoreEntry",
    "InMemoryPredictionStore",
    "PredictionRecord",
    "PredictionStore",
]
