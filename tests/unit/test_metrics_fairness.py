"""
Unit Tests for Demographic Metrics and Fairness Scoring
"""
import pytest

from triage_ai.core.audit import (
    AgeGroupMetrics,
    BiasAnalysisResult,
    DemographicAccuracy,
    GenderMetrics,
    RiskLevel,
    TrainingRecord,
    analyze_age_groups,
    compute_demographic_accuracy,
    compute_fairness_score,
    rate_fairness,
)
from triage_ai.core.audit.metrics import age_band_for, split_by_gender


def _labeled(actual: str, predicted: RiskLevel, age: int = 40, gender: str = "Male",
             patient_id: str = "P") -> TrainingRecord:
    return TrainingRecord(
        patient_id=patient_id,
        age=age,
        gender=gender,
        symptoms="",
        blood_pressure="120/80",
        heart_rate=80,
        temperature=37.0,
        conditions="",
        risk_label=actual,
    ).with_prediction(predicted)


def _group(name: str, accuracy: float, fpr: float = 0.0, fnr: float = 0.0) -> DemographicAccuracy:
    return DemographicAccuracy(
        group=name,
        sample_count=10,
        accuracy=accuracy,
        false_positive_rate=fpr,
        false_negative_rate=fnr,
    )


def _band(label: str, accuracy: float) -> AgeGroupMetrics:
    return AgeGroupMetrics(age_group=label, min_age=0, max_age=None, metrics=_group(label, accuracy))


class TestDemographicAccuracy:

    @pytest.fixture
    def records(self):
        return [
            _labeled("Low", RiskLevel.LOW),
            _labeled("Low", RiskLevel.HIGH),
            _labeled("Medium", RiskLevel.MEDIUM),
            _labeled("High", RiskLevel.MEDIUM),
            _labeled("Critical", RiskLevel.CRITICAL),
        ]

    def test_rates(self, records):
        m = compute_demographic_accuracy("All", records)
        assert m.sample_count == 5
        assert m.accuracy == pytest.approx(60.0)
        assert m.false_positive_rate == pytest.approx(100 / 3)
        assert m.false_negative_rate == pytest.approx(50.0)

    def test_distribution_uses_actual_labels(self, records):
        m = compute_demographic_accuracy("All", records)
        assert m.risk_distribution == {
            RiskLevel.LOW: 2,
            RiskLevel.MEDIUM: 1,
            RiskLevel.HIGH: 1,
            RiskLevel.CRITICAL: 1,
        }

    def test_empty_group(self):
        m = compute_demographic_accuracy("None", [])
        assert m.sample_count == 0
        assert m.accuracy == 0.0
        assert m.false_positive_rate == 0.0
        assert m.false_negative_rate == 0.0

    def test_no_elevated_actuals_gives_zero_fnr(self):
        m = compute_demographic_accuracy("G", [_labeled("Low", RiskLevel.LOW), _labeled("Medium", RiskLevel.HIGH)])
        assert m.false_negative_rate == 0.0
        assert m.false_positive_rate == pytest.approx(50.0)

    def test_to_dict_rounds(self, records):
        d = compute_demographic_accuracy("All", records).to_dict()
        assert d["false_positive_rate"] == 33.33
        assert d["risk_distribution"] == {"Low": 2, "Medium": 1, "High": 1, "Critical": 1}


class TestGroupSplits:

    @pytest.mark.parametrize("age,band", [
        (-3, "0-17"), (0, "0-17"), (17, "0-17"), (18, "18-34"), (34, "18-34"),
        (35, "35-49"), (49, "35-49"), (50, "50-64"), (64, "50-64"), (65, "65+"), (120, "65+"),
    ])
    def test_age_bands(self, age, band):
        assert age_band_for(age) == band

    def test_gender_is_case_insensitive(self):
        records = [
            _labeled("Low", RiskLevel.LOW, gender="male"),
            _labeled("Low", RiskLevel.LOW, gender=" FEMALE "),
            _labeled("Low", RiskLevel.LOW, gender="Other"),
        ]
        male, female = split_by_gender(records)
        assert len(male) == 1
        assert len(female) == 1

    def test_only_non_empty_bands_youngest_first(self):
        records = [
            _labeled("Low", RiskLevel.LOW, age=70),
            _labeled("High", RiskLevel.HIGH, age=20),
            _labeled("High", RiskLevel.LOW, age=25),
        ]
        groups = analyze_age_groups(records)
        assert [g.age_group for g in groups] == ["18-34", "65+"]
        assert groups[0].sample_count == 2
        assert groups[0].accuracy == pytest.approx(50.0)
        assert groups[1].max_age is None

    def test_band_percentages_sum_to_100(self):
        records = [
            _labeled(label, RiskLevel.LOW, age=30)
            for label in ("Low", "Low", "Medium", "High", "Critical", "Critical", "Critical")
        ]
        group = analyze_age_groups(records)[0]
        dist = group.metrics
        assert dist.low_risk_count + dist.medium_risk_count + dist.high_risk_count + dist.critical_risk_count == 7
        total = (group.low_risk_percent + group.medium_risk_percent
                 + group.high_risk_percent + group.critical_risk_percent)
        assert total == pytest.approx(100.0)
        assert group.critical_risk_percent == pytest.approx(300 / 7)


class TestFairnessScore:

    def test_no_disparity_is_perfect(self):
        gender = GenderMetrics(male=_group("Male", 85, 10, 10), female=_group("Female", 85, 10, 10))
        bands = [_band("18-34", 85), _band("35-49", 85)]
        score = compute_fairness_score(gender, bands)
        assert score == 100.0
        assert rate_fairness(score) == "Excellent"

    def test_penalties(self):
        gender = GenderMetrics(male=_group("Male", 90, 10, 5), female=_group("Female", 85, 12, 9))
        assert gender.accuracy_disparity == 5
        assert gender.false_positive_disparity == 2
        assert gender.false_negative_disparity == 4
        bands = [_band("18-34", 80), _band("35-49", 90), _band("50-64", 70)]
        score = compute_fairness_score(gender, bands)
        assert score == pytest.approx(100 - 16 - 10)
        assert rate_fairness(score) == "Fair"

    def test_single_band_has_no_age_penalty(self):
        assert compute_fairness_score(None, [_band("65+", 20)]) == 100.0

    def test_clamped_at_zero(self):
        gender = GenderMetrics(male=_group("Male", 100, 0, 0), female=_group("Female", 20, 60, 70))
        score = compute_fairness_score(gender, [_band("0-17", 100), _band("65+", 0)])
        assert score == 0.0
        assert rate_fairness(score) == "Poor"

    @pytest.mark.parametrize("score,rating", [
        (100.0, "Excellent"), (90.0, "Excellent"), (89.99, "Good"), (80.0, "Good"),
        (70.0, "Fair"), (69.5, "Needs Improvement"), (60.0, "Needs Improvement"),
        (59.9, "Poor"), (0.0, "Poor"),
    ])
    def test_rating_bands(self, score, rating):
        assert rate_fairness(score) == rating


class TestBiasAnalysisResult:

    def test_unavailable_defaults(self):
        result = BiasAnalysisResult.unavailable(total_records=4)
        assert result.is_available is False
        assert result.total_records == 4
        assert result.gender_analysis is None
        assert result.age_group_analysis == []
        assert result.fairness_rating == "Unknown"
        assert result.to_dict()["analysis_date"] is None
