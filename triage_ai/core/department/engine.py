"""
Department Analysis Engine

Runs the full recommendation pipeline for one assessment:

    DepartmentScorer → PriorityResolver → confidence → ExplanationGenerator

and hands the result to the storage collaborator, if one is configured.

Usage:
    from triage_ai.core.department import DepartmentAnalysisEngine
    from triage_ai.services import InMemoryPredictionStore

    engine = DepartmentAnalysisEngine(store=InMemoryPredictionStore())
    result = engine.analyze(assessment, patient)
    print(result.recommended_department, result.confidence_score)
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from triage_ai.config import settings
from triage_ai.utils import AssessmentError, get_logger
from .base import AssessmentRecord, Department, DepartmentAnalysisResult, PatientInfo
from .confidence import estimate_confidence
from .explanation import ExplanationGenerator
from .priority import PriorityResolver, is_emergency_priority, sort_scores
from .scorer import DepartmentScorer

if TYPE_CHECKING:
    from triage_ai.services.storage import PredictionRecord, PredictionStore

logger = get_logger(__name__)


class DepartmentAnalysisEngine:
    """
    Recommends a department for one assessment.

    The computation itself is pure; the only side effect is the optional
    ``store.save(...)`` call, whose failures propagate to the caller.
    """

    def __init__(
        self,
        store: Optional["PredictionStore"] = None,
        scorer: Optional[DepartmentScorer] = None,
        resolver: Optional[PriorityResolver] = None,
        explainer: Optional[ExplanationGenerator] = None,
    ):
        self.store = store
        self.scorer = scorer or DepartmentScorer()
        self.resolver = resolver or PriorityResolver()
        self.explainer = explainer or ExplanationGenerator()

    def evaluate(
        self,
        assessment: AssessmentRecord,
        patient: PatientInfo,
    ) -> DepartmentAnalysisResult:
        """Run the pipeline without persisting anything."""
        if assessment is None:
            raise AssessmentError("Department analysis requires an assessment", missing="assessment")
        if patient is None:
            raise AssessmentError("Department analysis requires a patient", missing="patient")

        scores = self.scorer.score(assessment)

        key_findings: List[str] = []
        for s in scores:
            for finding in s.key_findings:
                if finding not in key_findings:
                    key_findings.append(finding)

        ranked = sort_scores(scores)
        emergency = is_emergency_priority(assessment)
        recommended = self.resolver.resolve(ranked, emergency)
        confidence = estimate_confidence(ranked, recommended)
        explanation = self.explainer.generate(assessment, patient, recommended, ranked)

        return DepartmentAnalysisResult(
            recommended_department=recommended,
            confidence_score=confidence,
            clinical_explanation=explanation,
            all_scores=tuple(ranked),
            is_emergency_priority=emergency,
            key_findings=tuple(key_findings),
        )

    def analyze(
        self,
        assessment: AssessmentRecord,
        patient: PatientInfo,
    ) -> DepartmentAnalysisResult:
        """
        Run the pipeline and persist the result.

        Returns:
            The DepartmentAnalysisResult (also saved to ``store`` when set).
        """
        result = self.evaluate(assessment, patient)

        logger.info(
            f"DepartmentAnalysisEngine [patient={patient.patient_id}]: "
            f"{result.recommended_department.value} "
            f"(confidence={result.confidence_score}, "
            f"emergency={result.is_emergency_priority})"
        )

        if self.store is not None:
            self.store.save(result, patient.patient_id, assessment.assessment_id)

        return result

    # ── Storage pass-through ──────────────────────────────────────────────────

    def patient_history(self, patient_id: int) -> List["PredictionRecord"]:
        if self.store is None:
            return []
        return self.store.for_patient(patient_id)

    def latest_prediction(self, patient_id: int) -> Optional["PredictionRecord"]:
        if self.store is None:
            return None
        return self.store.latest_for_patient(patient_id)

    def predictions(
        self,
        department: Optional[Department] = None,
        limit: int = settings.prediction_limit,
    ) -> List["PredictionRecord"]:
        if self.store is None:
            return []
        return self.store.recent(department=department, limit=limit)

    def department_distribution(self) -> Dict[Department, int]:
        if self.store is None:
            return {}
        return self.store.department_distribution()

    @staticmethod
    def summarise(result: DepartmentAnalysisResult, top_n: int = 3) -> Dict:
        """
        Build a compact summary dict suitable for JSON responses.

        Example output:
        {
            "recommended_department": "Cardiology",
            "confidence_score": 95,
            "is_emergency_priority": false,
            "top_departments": [{"department": "Cardiology", "score": 60}, ...],
            "key_findings": ["Moderate chest pain present", ...]
        }
        """
        return {
            "recommended_department": result.recommended_department.value,
            "confidence_score":       result.confidence_score,
            "is_emergency_priority":  result.is_emergency_priority,
            "top_departments": [
                {"department": s.department.value, "score": s.score}
                for s in result.all_scores[:top_n]
            ],
            "key_findings":           list(result.key_findings),
        }
