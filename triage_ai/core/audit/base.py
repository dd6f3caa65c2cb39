"""
Fairness Audit — Base Types

Training records read from an uploaded dataset, per-group accuracy metrics,
and the final bias-analysis result.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class RiskLevel(str, Enum):
    """Normalised risk label. ``ordinal`` gives Low < Medium < High < Critical."""
    LOW      = "Low"
    MEDIUM   = "Medium"
    HIGH     = "High"
    CRITICAL = "Critical"

    @property
    def ordinal(self) -> int:
        return _ORDINALS[self]

    @property
    def is_elevated(self) -> bool:
        """High and Critical count as positive predictions for FPR/FNR."""
        return self in (RiskLevel.HIGH, RiskLevel.CRITICAL)

    @classmethod
    def normalize(cls, text: Optional[str]) -> "RiskLevel":
        """
        Map free-text labels onto the four levels.

        Case-insensitive substring match in severity order; anything
        unrecognised (including "moderate") maps to Medium.
        """
        value = (text or "").strip().lower()
        if "critical" in value:
            return cls.CRITICAL
        if "high" in value:
            return cls.HIGH
        if "low" in value:
            return cls.LOW
        return cls.MEDIUM


_ORDINALS = {
    RiskLevel.LOW: 0,
    RiskLevel.MEDIUM: 1,
    RiskLevel.HIGH: 2,
    RiskLevel.CRITICAL: 3,
}


@dataclass(frozen=True)
class TrainingRecord:
    """
    One row of a historical training dataset.

    ``predicted_risk`` is filled in by a LabelPredictor before metrics are
    computed; parsing leaves it unset.
    """
    patient_id: str
    age: int
    gender: str
    symptoms: str
    blood_pressure: str
    heart_rate: int
    temperature: float
    conditions: str
    risk_label: str
    predicted_risk: Optional[RiskLevel] = None

    @property
    def actual_risk(self) -> RiskLevel:
        return RiskLevel.normalize(self.risk_label)

    @property
    def is_male(self) -> bool:
        return self.gender.strip().lower() == "male"

    @property
    def is_female(self) -> bool:
        return self.gender.strip().lower() == "female"

    def blood_pressure_values(self) -> Tuple[float, float]:
        """
        Parse "systolic/diastolic" text. Missing or unparseable parts come
        back as 0.
        """
        parts = (self.blood_pressure or "").split("/")
        values = []
        for part in (parts + ["", ""])[:2]:
            try:
                values.append(float(part.strip()))
            except ValueError:
                values.append(0.0)
        return values[0], values[1]

    def with_prediction(self, level: RiskLevel) -> "TrainingRecord":
        return replace(self, predicted_risk=level)


@dataclass
class DemographicAccuracy:
    """Accuracy and error metrics for one demographic group (rates in %)."""
    group: str = ""
    sample_count: int = 0
    accuracy: float = 0.0
    false_positive_rate: float = 0.0
    false_negative_rate: float = 0.0

    low_risk_count: int = 0
    medium_risk_count: int = 0
    high_risk_count: int = 0
    critical_risk_count: int = 0

    @property
    def risk_distribution(self) -> Dict[RiskLevel, int]:
        return {
            RiskLevel.LOW: self.low_risk_count,
            RiskLevel.MEDIUM: self.medium_risk_count,
            RiskLevel.HIGH: self.high_risk_count,
            RiskLevel.CRITICAL: self.critical_risk_count,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "group": self.group,
            "sample_count": self.sample_count,
            "accuracy": round(self.accuracy, 2),
            "false_positive_rate": round(self.false_positive_rate, 2),
            "false_negative_rate": round(self.false_negative_rate, 2),
            "risk_distribution": {k.value: v for k, v in self.risk_distribution.items()},
        }


@dataclass
class GenderMetrics:
    """Male vs female metrics; disparities are absolute differences."""
    male: DemographicAccuracy
    female: DemographicAccuracy

    @property
    def accuracy_disparity(self) -> float:
        return abs(self.male.accuracy - self.female.accuracy)

    @property
    def false_positive_disparity(self) -> float:
        return abs(self.male.false_positive_rate - self.female.false_positive_rate)

    @property
    def false_negative_disparity(self) -> float:
        return abs(self.male.false_negative_rate - self.female.false_negative_rate)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "male": self.male.to_dict(),
            "female": self.female.to_dict(),
            "accuracy_disparity": round(self.accuracy_disparity, 2),
            "false_positive_disparity": round(self.false_positive_disparity, 2),
            "false_negative_disparity": round(self.false_negative_disparity, 2),
        }


def _percent(count: int, total: int) -> float:
    return count / total * 100 if total > 0 else 0.0


@dataclass
class AgeGroupMetrics:
    """Metrics for one age band; ``max_age`` is None for the open top band."""
    age_group: str
    min_age: int
    max_age: Optional[int]
    metrics: DemographicAccuracy

    @property
    def sample_count(self) -> int:
        return self.metrics.sample_count

    @property
    def accuracy(self) -> float:
        return self.metrics.accuracy

    @property
    def low_risk_percent(self) -> float:
        return _percent(self.metrics.low_risk_count, self.sample_count)

    @property
    def medium_risk_percent(self) -> float:
        return _percent(self.metrics.medium_risk_count, self.sample_count)

    @property
    def high_risk_percent(self) -> float:
        return _percent(self.metrics.high_risk_count, self.sample_count)

    @property
    def critical_risk_percent(self) -> float:
        return _percent(self.metrics.critical_risk_count, self.sample_count)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "age_group": self.age_group,
            "min_age": self.min_age,
            "max_age": self.max_age,
            **self.metrics.to_dict(),
            "risk_percent": {
                "Low": round(self.low_risk_percent, 1),
                "Medium": round(self.medium_risk_percent, 1),
                "High": round(self.high_risk_percent, 1),
                "Critical": round(self.critical_risk_percent, 1),
            },
        }


@dataclass
class BiasAnalysisResult:
    """
    Outcome of one fairness audit.

    When ``is_available`` is False only ``total_records`` is meaningful.
    """
    is_available: bool = False
    total_records: int = 0
    analysis_date: Optional[datetime] = None
    gender_analysis: Optional[GenderMetrics] = None
    age_group_analysis: List[AgeGroupMetrics] = field(default_factory=list)
    fairness_score: float = 0.0
    fairness_rating: str = "Unknown"

    @classmethod
    def unavailable(cls, total_records: int = 0) -> "BiasAnalysisResult":
        return cls(is_available=False, total_records=total_records)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_available": self.is_available,
            "total_records": self.total_records,
            "analysis_date": self.analysis_date.isoformat() if self.analysis_date else None,
            "gender_analysis": self.gender_analysis.to_dict() if self.gender_analysis else None,
            "age_group_analysis": [g.to_dict() for g in self.age_group_analysis],
            "fairness_score": round(self.fairness_score, 2),
            "fairness_rating": self.fairness_rating,
        }
