"""
Department Recommendation Layer

Turns one assessment (vitals + symptom severities) into a ranked department
recommendation with a confidence value and a clinical explanation.

Usage:
    from triage_ai.core.department import DepartmentAnalysisEngine, AssessmentRecord

    engine = DepartmentAnalysisEngine()
    result = engine.analyze(assessment, patient)
"""
from .base import (
    AssessmentRecord,
    Department,
    DepartmentAnalysisResult,
    DepartmentScore,
    PatientInfo,
    RuleSet,
    ScoringRule,
    SymptomSeverity,
)
from .confidence import estimate_confidence
from .engine import DepartmentAnalysisEngine
from .explanation import ExplanationGenerator
from .priority import PriorityResolver, is_emergency_priority, sort_scores
from .scorer import DepartmentScorer

__all__ = [
    "AssessmentRecord",
    "Department",
    "DepartmentAnalysisResult",
    "DepartmentScore",
    "PatientInfo",
    "RuleSet",
    "ScoringRule",
    "SymptomSeverity",
    "estimate_confidence",
    "DepartmentAnalysisEngine",
    "ExplanationGenerator",
    "PriorityResolver",
    "is_emergency_priority",
    "sort_scores",
    "DepartmentScorer",
]
