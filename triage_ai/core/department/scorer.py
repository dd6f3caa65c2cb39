"""
Department Scorer

Evaluates every registered department rule table against one assessment.

Usage:
    from triage_ai.core.department import DepartmentScorer

    scorer = DepartmentScorer()
    scores = scorer.score(assessment)      # six DepartmentScores, fixed order
    for s in scores:
        print(s.department.value, s.score, s.contributing_factors)

Adding a department:
    1. Create  triage_ai/core/department/rules_<department>.py exporting RULES
    2. Register it in _DEPARTMENT_RULES below (position = evaluation order).
"""
from __future__ import annotations

from typing import Dict, List

from triage_ai.utils import get_logger
from .base import AssessmentRecord, Department, DepartmentScore, RuleSet
from . import (
    rules_cardiology,
    rules_emergency,
    rules_general,
    rules_neurology,
    rules_orthopedics,
    rules_pulmonology,
)

logger = get_logger(__name__)

# ── Registry: department → rule table (insertion order = evaluation order) ───
_DEPARTMENT_RULES: Dict[Department, RuleSet] = {
    Department.EMERGENCY:        rules_emergency.RULES,
    Department.CARDIOLOGY:       rules_cardiology.RULES,
    Department.PULMONOLOGY:      rules_pulmonology.RULES,
    Department.NEUROLOGY:        rules_neurology.RULES,
    Department.ORTHOPEDICS:      rules_orthopedics.RULES,
    Department.GENERAL_MEDICINE: rules_general.RULES,
}


def apply_rule_set(rule_set: RuleSet, assessment: AssessmentRecord) -> DepartmentScore:
    """
    Fire every rule of one table independently and sum the points.

    Pure: the same assessment always yields the same score, factors and
    key findings, in rule order.
    """
    result = DepartmentScore(department=rule_set.department)

    for rule in rule_set.rules:
        if not rule.applies(assessment):
            continue
        result.score += rule.points
        result.contributing_factors.append(rule.factor(assessment))
        if rule.key_finding is not None:
            result.key_findings.append(rule.key_finding(assessment))

    if result.score == 0 and rule_set.baseline is not None:
        points, factor = rule_set.baseline
        result.score = points
        result.contributing_factors.append(factor)

    return result


class DepartmentScorer:
    """
    Computes one additive score per department.

    Stateless; one instance may be shared across threads.
    """

    def score(self, assessment: AssessmentRecord) -> List[DepartmentScore]:
        """
        Score all registered departments.

        Returns:
            One DepartmentScore per department, in registry order
            (Emergency, Cardiology, Pulmonology, Neurology, Orthopedics,
            General Medicine). Not sorted.
        """
        scores = [apply_rule_set(rs, assessment) for rs in _DEPARTMENT_RULES.values()]
        logger.debug(
            "DepartmentScorer: "
            + ", ".join(f"{s.department.value}={s.score}" for s in scores)
        )
        return scores

    def score_department(
        self,
        department: Department,
        assessment: AssessmentRecord,
    ) -> DepartmentScore:
        """
        Score a single department. Useful for unit-testing one rule table
        without running the full pipeline.
        """
        return apply_rule_set(_DEPARTMENT_RULES[department], assessment)

    @staticmethod
    def registered_departments() -> List[Department]:
        """Departments with an active rule table, in evaluation order."""
        return list(_DEPARTMENT_RULES.keys())

    @staticmethod
    def rule_set(department: Department) -> RuleSet:
        return _DEPARTMENT_RULES[department]
