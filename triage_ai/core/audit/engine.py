"""
Bias Audit Engine

Runs the fairness audit over one uploaded training dataset:

    DelimitedRecordParser → LabelPredictor → demographic metrics → fairness score

The audit never raises back to its caller: insufficient data and unexpected
failures both come back as an unavailable BiasAnalysisResult.

Usage:
    from triage_ai.core.audit import BiasAuditEngine

    engine = BiasAuditEngine()
    result = engine.analyze(csv_text)
    if result.is_available:
        print(result.fairness_score, result.fairness_rating)
"""
from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import IO, Optional, Sequence, Union

from triage_ai.config import settings
from triage_ai.utils import get_logger
from .base import BiasAnalysisResult, GenderMetrics, TrainingRecord
from .fairness import compute_fairness_score, rate_fairness
from .metrics import analyze_age_groups, compute_demographic_accuracy, split_by_gender
from .parser import DelimitedRecordParser
from .simulation import LabelPredictor, SimulatedLabelPredictor

logger = get_logger(__name__)


class BiasAuditEngine:
    """
    Evaluates a dataset for gender and age-band disparities.

    Each ``analyze*`` call is independent; the engine only keeps the last
    available result for ``cached_result()``.
    """

    def __init__(
        self,
        predictor: Optional[LabelPredictor] = None,
        min_records: Optional[int] = None,
    ):
        self.predictor = predictor or SimulatedLabelPredictor()
        self.min_records = settings.bias_min_records if min_records is None else min_records
        self._cache_lock = threading.Lock()
        self._cached: Optional[BiasAnalysisResult] = None

    def analyze(self, text: str) -> BiasAnalysisResult:
        """Parse dataset text and audit it. Never raises."""
        try:
            records = DelimitedRecordParser().parse(text)
            return self.analyze_records(records)
        except Exception as exc:
            logger.error(f"BiasAuditEngine: audit failed, reporting unavailable ({exc})", exc_info=True)
            return BiasAnalysisResult.unavailable()

    def analyze_stream(self, stream: IO[Union[str, bytes]]) -> BiasAnalysisResult:
        """Audit a text or binary file object (bytes decoded as UTF-8). Never raises."""
        try:
            data = stream.read()
            if isinstance(data, bytes):
                data = data.decode("utf-8-sig")
            return self.analyze(data.lstrip("\ufeff"))
        except Exception as exc:
            logger.error(f"BiasAuditEngine: could not read dataset ({exc})", exc_info=True)
            return BiasAnalysisResult.unavailable()

    def analyze_records(self, records: Sequence[TrainingRecord]) -> BiasAnalysisResult:
        """Audit already-parsed records."""
        if len(records) < self.min_records:
            logger.warning(
                f"BiasAuditEngine: {len(records)} usable record(s), "
                f"need at least {self.min_records}; analysis unavailable"
            )
            return BiasAnalysisResult.unavailable(total_records=len(records))

        labeled = [r.with_prediction(self.predictor.predict(r)) for r in records]

        male, female = split_by_gender(labeled)
        gender = None
        if male and female:
            gender = GenderMetrics(
                male=compute_demographic_accuracy("Male", male),
                female=compute_demographic_accuracy("Female", female),
            )

        age_groups = analyze_age_groups(labeled)
        score = compute_fairness_score(gender, age_groups)

        result = BiasAnalysisResult(
            is_available=True,
            total_records=len(labeled),
            analysis_date=datetime.now(timezone.utc),
            gender_analysis=gender,
            age_group_analysis=age_groups,
            fairness_score=score,
            fairness_rating=rate_fairness(score),
        )

        with self._cache_lock:
            self._cached = result

        logger.info(
            f"BiasAuditEngine: {result.total_records} record(s), "
            f"fairness={result.fairness_score:.1f} ({result.fairness_rating})"
        )
        return result

    def cached_result(self) -> Optional[BiasAnalysisResult]:
        """Last available result, or None if no audit has succeeded yet."""
        with self._cache_lock:
            return self._cached
