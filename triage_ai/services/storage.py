"""
Prediction Storage

The department pipeline persists each DepartmentAnalysisResult through the
narrow ``PredictionStore`` contract below. Any storage engine can implement
it; ``InMemoryPredictionStore`` is the reference implementation used by the
demo and the tests.
"""
from __future__ import annotations

import threading
from collections import Counter
from datetime import datetime, timezone
from typing import Dict, List, Optional, Protocol

from pydantic import BaseModel, Field

from triage_ai.config import settings
from triage_ai.core.department.base import Department, DepartmentAnalysisResult
from triage_ai.utils import StorageError, get_logger

logger = get_logger(__name__)


class DepartmentScoreEntry(BaseModel):
    department: Department
    score: int


class PredictionRecord(BaseModel):
    """Persisted form of one department analysis."""
    id: Optional[int] = None
    patient_id: int
    assessment_id: Optional[int] = None
    recommended_department: Department
    confidence_score: int = Field(ge=0, le=100)
    clinical_explanation: str
    department_scores: List[DepartmentScoreEntry] = Field(default_factory=list)
    is_emergency_priority: bool = False
    key_findings: List[str] = Field(default_factory=list)
    predicted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_result(
        cls,
        result: DepartmentAnalysisResult,
        patient_id: int,
        assessment_id: Optional[int] = None,
    ) -> "PredictionRecord":
        return cls(
            patient_id=patient_id,
            assessment_id=assessment_id,
            recommended_department=result.recommended_department,
            confidence_score=result.confidence_score,
            clinical_explanation=result.clinical_explanation,
            department_scores=[
                DepartmentScoreEntry(department=s.department, score=s.score)
                for s in result.all_scores
            ],
            is_emergency_priority=result.is_emergency_priority,
            key_findings=list(result.key_findings),
        )


class PredictionStore(Protocol):
    """Storage collaborator contract consumed by the department engine."""

    def save(
        self,
        result: DepartmentAnalysisResult,
        patient_id: int,
        assessment_id: Optional[int] = None,
    ) -> PredictionRecord: ...

    def for_patient(self, patient_id: int) -> List[PredictionRecord]: ...

    def latest_for_patient(self, patient_id: int) -> Optional[PredictionRecord]: ...

    def recent(
        self,
        department: Optional[Department] = None,
        limit: int = settings.prediction_limit,
    ) -> List[PredictionRecord]: ...

    def department_distribution(self) -> Dict[Department, int]: ...


class InMemoryPredictionStore:
    """
    Process-local PredictionStore.

    Thread-safe: independent analyses running on separate threads may share
    one instance.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._records: List[PredictionRecord] = []
        self._next_id = 1

    def save(
        self,
        result: DepartmentAnalysisResult,
        patient_id: int,
        assessment_id: Optional[int] = None,
    ) -> PredictionRecord:
        if patient_id <= 0:
            raise StorageError(
                f"Cannot store prediction for invalid patient id {patient_id}",
                operation="save",
                details={"patient_id": patient_id},
            )
        record = PredictionRecord.from_result(result, patient_id, assessment_id)
        with self._lock:
            stored = record.model_copy(update={"id": self._next_id})
            self._next_id += 1
            self._records.append(stored)
        logger.debug(
            f"InMemoryPredictionStore: saved prediction {stored.id} "
            f"(patient={stored.patient_id}, dept={stored.recommended_department.value})"
        )
        return stored

    def _newest_first(self) -> List[PredictionRecord]:
        # Records are appended in save order; ids break timestamp ties.
        with self._lock:
            records = list(self._records)
        return sorted(records, key=lambda r: (r.predicted_at, r.id or 0), reverse=True)

    def for_patient(self, patient_id: int) -> List[PredictionRecord]:
        return [r for r in self._newest_first() if r.patient_id == patient_id]

    def latest_for_patient(self, patient_id: int) -> Optional[PredictionRecord]:
        history = self.for_patient(patient_id)
        return history[0] if history else None

    def recent(
        self,
        department: Optional[Department] = None,
        limit: int = settings.prediction_limit,
    ) -> List[PredictionRecord]:
        records = self._newest_first()
        if department is not None:
            records = [r for r in records if r.recommended_department == department]
        return records[:max(limit, 0)]

    def department_distribution(self) -> Dict[Department, int]:
        with self._lock:
            counts = Counter(r.recommended_department for r in self._records)
        return dict(counts)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
