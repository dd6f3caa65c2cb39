"""
Pytest Configuration and Fixtures

Shared fixtures for the department and audit pipeline tests.
"""
import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from triage_ai.core.department import AssessmentRecord, PatientInfo, SymptomSeverity
from triage_ai.services import InMemoryPredictionStore

DATASET_HEADER = (
    "Patient_ID,Age,Gender,Symptoms,Blood_Pressure,Heart_Rate,"
    "Temperature,Pre_Existing_Conditions,Risk_Level"
)

_LABELS = ["Low", "Medium", "High", "Critical"]
_AGES = [8, 22, 30, 41, 47, 55, 60, 68, 75, 82]


def build_dataset_rows(count: int, separator: str = ",") -> list:
    """Deterministic, well-formed dataset rows (no header)."""
    rows = []
    for i in range(count):
        fields = [
            f"P{i:04d}",
            str(_AGES[i % len(_AGES)]),
            "Male" if i % 2 == 0 else "Female",
            '"fever, cough"' if separator == "," else "fever, cough",
            "130/85",
            str(70 + i % 40),
            "37.5",
            "None",
            _LABELS[i % 4],
        ]
        rows.append(separator.join(fields))
    return rows


@pytest.fixture
def nominal_assessment() -> AssessmentRecord:
    """Healthy resting vitals, no symptoms."""
    return AssessmentRecord(
        heart_rate=75,
        systolic_bp=120,
        diastolic_bp=80,
        temperature=37.0,
        respiratory_rate=16,
        oxygen_saturation=98,
        pain_level=0,
    )


@pytest.fixture
def cardiac_assessment() -> AssessmentRecord:
    """Moderate chest pain with tachycardia, everything else nominal."""
    return AssessmentRecord(
        heart_rate=120,
        systolic_bp=120,
        diastolic_bp=80,
        temperature=37.0,
        respiratory_rate=16,
        oxygen_saturation=98,
        pain_level=0,
        chest_pain=SymptomSeverity.MODERATE,
    )


@pytest.fixture
def patient() -> PatientInfo:
    return PatientInfo(patient_id=1, full_name="Jane Doe", age=54, gender="Female")


@pytest.fixture
def store() -> InMemoryPredictionStore:
    return InMemoryPredictionStore()


@pytest.fixture
def dataset_text() -> str:
    """Forty well-formed comma-separated rows plus header."""
    return "\n".join([DATASET_HEADER] + build_dataset_rows(40))


@pytest.fixture
def dataset_factory():
    """Build dataset text with ``count`` rows: dataset_factory(count, separator)."""
    def _build(count: int, separator: str = ",") -> str:
        header = DATASET_HEADER.replace(",", separator)
        return "\n".join([header] + build_dataset_rows(count, separator))
    return _build
