"""
Fairness Scoring

Reduces gender and age-band disparities to one 0–100 score:

    score = 100
          - (2 × accuracy disparity + FPR disparity + FNR disparity)   [gender]
          - 0.5 × (max − min accuracy across age bands)                 [> 1 band]

clamped to [0, 100] and mapped to a rating.
"""
from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from .base import AgeGroupMetrics, GenderMetrics

PERFECT_SCORE           = 100.0
ACCURACY_WEIGHT         = 2.0
AGE_SPREAD_WEIGHT       = 0.5

RATING_BANDS = (
    (90.0, "Excellent"),
    (80.0, "Good"),
    (70.0, "Fair"),
    (60.0, "Needs Improvement"),
)
LOWEST_RATING = "Poor"


def gender_penalty(gender: Optional[GenderMetrics]) -> float:
    if gender is None:
        return 0.0
    return (
        ACCURACY_WEIGHT * gender.accuracy_disparity
        + gender.false_positive_disparity
        + gender.false_negative_disparity
    )


def age_penalty(age_groups: Sequence[AgeGroupMetrics]) -> float:
    if len(age_groups) <= 1:
        return 0.0
    accuracies = np.array([g.accuracy for g in age_groups])
    return AGE_SPREAD_WEIGHT * float(np.ptp(accuracies))


def compute_fairness_score(
    gender: Optional[GenderMetrics],
    age_groups: Sequence[AgeGroupMetrics],
) -> float:
    score = PERFECT_SCORE - gender_penalty(gender) - age_penalty(age_groups)
    return float(np.clip(score, 0.0, PERFECT_SCORE))


def rate_fairness(score: float) -> str:
    for minimum, rating in RATING_BANDS:
        if score >= minimum:
            return rating
    return LOWEST_RATING
