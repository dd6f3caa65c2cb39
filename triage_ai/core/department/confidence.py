"""
Confidence Estimation

Maps the margin between the recommended department and its best competitor
to a 0–100 confidence value. Adjustments are applied in a fixed order:
margin lookup → high-score boost → close-competitor penalty.
"""
from __future__ import annotations

from typing import Sequence

from .base import Department, DepartmentScore

BASELINE_CONFIDENCE = 50

# (minimum margin, confidence), checked top-down
MARGIN_TABLE = (
    (40, 95),
    (30, 85),
    (20, 75),
    (10, 65),
)
NARROW_MARGIN_CONFIDENCE = 55

HIGH_SCORE          = 80
HIGH_SCORE_BOOST    = 5
CONFIDENCE_CAP      = 99

CLOSE_WINDOW        = 15
CLOSE_COUNT         = 2
CLOSE_PENALTY       = 10
CONFIDENCE_FLOOR    = 40


def margin_confidence(margin: int) -> int:
    for minimum, confidence in MARGIN_TABLE:
        if margin >= minimum:
            return confidence
    return NARROW_MARGIN_CONFIDENCE


def estimate_confidence(scores: Sequence[DepartmentScore], recommended: Department) -> int:
    """
    Confidence (40–99, or the 50 baseline) for ``recommended``.

    The recommended department may not be the top scorer (emergency
    override), in which case the margin is negative and the narrow-margin
    value applies.
    """
    winner = next(s for s in scores if s.department == recommended)
    others = [s for s in scores if s.department != recommended]

    if not others or winner.score == 0:
        return BASELINE_CONFIDENCE

    margin = winner.score - max(s.score for s in others)
    confidence = margin_confidence(margin)

    if winner.score >= HIGH_SCORE:
        confidence = min(confidence + HIGH_SCORE_BOOST, CONFIDENCE_CAP)

    close = sum(1 for s in others if s.score >= winner.score - CLOSE_WINDOW)
    if close >= CLOSE_COUNT:
        confidence = max(confidence - CLOSE_PENALTY, CONFIDENCE_FLOOR)

    return confidence
