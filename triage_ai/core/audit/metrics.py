"""
Demographic Accuracy

Per-group accuracy, false-positive rate and false-negative rate, plus the
actual-label distribution. "Positive" means an elevated risk label
(High or Critical):

    FPR = predicted elevated & actually Low/Medium  /  actually Low/Medium
    FNR = predicted Low/Medium & actually elevated  /  actually elevated

All three values are percentages; a rate with an empty denominator is 0.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .base import AgeGroupMetrics, DemographicAccuracy, RiskLevel, TrainingRecord

# (label, min age, max age inclusive; None = open-ended)
AGE_BANDS: Tuple[Tuple[str, int, Optional[int]], ...] = (
    ("0-17", 0, 17),
    ("18-34", 18, 34),
    ("35-49", 35, 49),
    ("50-64", 50, 64),
    ("65+", 65, None),
)


def _rate(numerator: int, denominator: int) -> float:
    return numerator / denominator * 100 if denominator > 0 else 0.0


def compute_demographic_accuracy(
    group: str,
    records: Sequence[TrainingRecord],
) -> DemographicAccuracy:
    """
    Metrics for one group. Every record must already carry a
    ``predicted_risk``.
    """
    result = DemographicAccuracy(group=group, sample_count=len(records))
    if not records:
        return result

    actual = np.array([r.actual_risk.ordinal for r in records])
    predicted = np.array([r.predicted_risk.ordinal for r in records])

    elevated = RiskLevel.HIGH.ordinal
    actual_pos = actual >= elevated
    predicted_pos = predicted >= elevated

    result.accuracy = float(np.mean(actual == predicted) * 100)
    result.false_positive_rate = _rate(
        int(np.sum(predicted_pos & ~actual_pos)), int(np.sum(~actual_pos))
    )
    result.false_negative_rate = _rate(
        int(np.sum(~predicted_pos & actual_pos)), int(np.sum(actual_pos))
    )

    counts = np.bincount(actual, minlength=4)
    result.low_risk_count = int(counts[RiskLevel.LOW.ordinal])
    result.medium_risk_count = int(counts[RiskLevel.MEDIUM.ordinal])
    result.high_risk_count = int(counts[RiskLevel.HIGH.ordinal])
    result.critical_risk_count = int(counts[RiskLevel.CRITICAL.ordinal])
    return result


def age_band_for(age: int) -> str:
    """Band label for an age; negative ages fall into the youngest band."""
    for label, low, high in AGE_BANDS:
        if age >= low and (high is None or age <= high):
            return label
    return AGE_BANDS[0][0]


def split_by_gender(
    records: Sequence[TrainingRecord],
) -> Tuple[List[TrainingRecord], List[TrainingRecord]]:
    male = [r for r in records if r.is_male]
    female = [r for r in records if r.is_female]
    return male, female


def analyze_age_groups(records: Sequence[TrainingRecord]) -> List[AgeGroupMetrics]:
    """One AgeGroupMetrics per non-empty band, youngest first."""
    buckets: Dict[str, List[TrainingRecord]] = {label: [] for label, _, _ in AGE_BANDS}
    for r in records:
        buckets[age_band_for(r.age)].append(r)

    groups = []
    for label, low, high in AGE_BANDS:
        members = buckets[label]
        if not members:
            continue
        groups.append(AgeGroupMetrics(
            age_group=label,
            min_age=low,
            max_age=high,
            metrics=compute_demographic_accuracy(label, members),
        ))
    return groups
