"""
Priority Resolution

Decides emergency-priority status and picks the single recommended
department from the six department scores.

  - Emergency priority overrides scoring entirely.
  - Otherwise the top score wins outright when it leads by more than
    TIE_MARGIN points; inside the margin the fixed clinical priority order
    decides among all departments within TIE_MARGIN of the top.
"""
from __future__ import annotations

from typing import List, Sequence

from .base import AssessmentRecord, Department, DepartmentScore, SymptomSeverity as S

# ── Emergency override thresholds ─────────────────────────────────────────────
SPO2_CRITICAL   = 90
HR_EXTREME_HI   = 150
HR_EXTREME_LO   = 40
SBP_EXTREME_HI  = 200
SBP_EXTREME_LO  = 70

TIE_MARGIN = 10

DEFAULT_PRIORITY_ORDER = (
    Department.EMERGENCY,
    Department.CARDIOLOGY,
    Department.PULMONOLOGY,
    Department.NEUROLOGY,
    Department.ORTHOPEDICS,
    Department.GENERAL_MEDICINE,
)


def is_emergency_priority(assessment: AssessmentRecord) -> bool:
    """True when any life-threatening condition is present."""
    a = assessment
    return (
        a.oxygen_saturation < SPO2_CRITICAL
        or a.bleeding == S.SEVERE
        or a.altered_consciousness == S.SEVERE
        or (a.chest_pain == S.SEVERE and a.shortness_of_breath >= S.MODERATE)
        or a.heart_rate > HR_EXTREME_HI
        or a.heart_rate < HR_EXTREME_LO
        or a.systolic_bp > SBP_EXTREME_HI
        or a.systolic_bp < SBP_EXTREME_LO
    )


def sort_scores(scores: Sequence[DepartmentScore]) -> List[DepartmentScore]:
    """Descending by score; ``sorted`` is stable, so ties keep evaluation order."""
    return sorted(scores, key=lambda s: s.score, reverse=True)


class PriorityResolver:
    """Picks the recommended department. Stateless."""

    def __init__(self, priority_order: Sequence[Department] = DEFAULT_PRIORITY_ORDER):
        self.priority_order = tuple(priority_order)

    def resolve(
        self,
        sorted_scores: Sequence[DepartmentScore],
        emergency_priority: bool,
    ) -> Department:
        """
        Args:
            sorted_scores: Department scores, already sorted descending.
            emergency_priority: Result of ``is_emergency_priority``.
        """
        if emergency_priority:
            return Department.EMERGENCY

        top = sorted_scores[0]
        if len(sorted_scores) > 1 and top.score - sorted_scores[1].score <= TIE_MARGIN:
            contenders = {
                s.department for s in sorted_scores if s.score >= top.score - TIE_MARGIN
            }
            for department in self.priority_order:
                if department in contenders:
                    return department

        return top.department
