"""
End-to-End Demo Script for the Triage Decision Core

This script runs both pipelines on built-in sample data:
1. Department recommendation for three sample patients
2. Prediction history queries against the in-memory store
3. Fairness audit over a generated training dataset

Run: python demo.py
"""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

# ---- Imports ----
print("=" * 60)
print("TRIAGE DECISION CORE - END-TO-END DEMO")
print("=" * 60)
print()

print("[1/4] Loading modules...")

try:
    from triage_ai.core.department import (
        AssessmentRecord, DepartmentAnalysisEngine, PatientInfo, SymptomSeverity,
    )
    from triage_ai.core.audit import BiasAuditEngine
    from triage_ai.services import InMemoryPredictionStore
    from triage_ai.utils import setup_logging
    print("   ✓ All modules loaded successfully!")
    setup_logging()
except ImportError as e:
    print(f"   ✗ Import error: {e}")
    print("   Try: pip install -e .")
    sys.exit(1)


# ---- Sample Patients ----
print()
print("[2/4] Analysing sample assessments...")

store = InMemoryPredictionStore()
engine = DepartmentAnalysisEngine(store=store)

samples = [
    (
        PatientInfo(patient_id=1, full_name="Maria Santos", age=58, gender="Female"),
        AssessmentRecord(
            heart_rate=118, systolic_bp=165, diastolic_bp=95,
            chest_pain=SymptomSeverity.MODERATE,
            shortness_of_breath=SymptomSeverity.MILD,
            assessment_id=101,
        ),
    ),
    (
        PatientInfo(patient_id=2, full_name="Tom Becker", age=71, gender="Male"),
        AssessmentRecord(
            heart_rate=112, respiratory_rate=28, oxygen_saturation=86, temperature=38.9,
            shortness_of_breath=SymptomSeverity.SEVERE, fever=SymptomSeverity.MODERATE,
            assessment_id=102,
        ),
    ),
    (
        PatientInfo(patient_id=3, full_name="Aisha Khan", age=29, gender="Female"),
        AssessmentRecord(pain_level=8, assessment_id=103),
    ),
]

for patient, assessment in samples:
    result = engine.analyze(assessment, patient)
    icon = "🔴" if result.is_emergency_priority else "🟢"
    print(f"   {icon} {patient.full_name}: {result.recommended_department.display_name} "
          f"(confidence {result.confidence_score}%)")
    for s in result.all_scores[:3]:
        print(f"      - {s.department.display_name}: {s.score}")
    if result.key_findings:
        print(f"      Key findings: {'; '.join(result.key_findings)}")


# ---- History ----
print()
print("[3/4] Querying prediction history...")

latest = engine.latest_prediction(1)
print(f"   ✓ Stored predictions: {len(store)}")
print(f"   ✓ Latest for patient 1: #{latest.id} {latest.recommended_department.value}")
for department, count in engine.department_distribution().items():
    print(f"   ✓ {department.display_name}: {count}")


# ---- Fairness Audit ----
print()
print("[4/4] Running fairness audit on generated dataset...")

header = ("Patient_ID,Age,Gender,Symptoms,Blood_Pressure,Heart_Rate,"
          "Temperature,Pre_Existing_Conditions,Risk_Level")
labels = ["Low", "Medium", "High", "Critical"]
ages = [9, 19, 27, 38, 44, 52, 61, 67, 73, 88]
rows = [
    f'T{i:04d},{ages[i % 10]},{"Male" if i % 3 else "Female"},"cough, fatigue",'
    f'{110 + i % 60}/{70 + i % 25},{60 + i % 50},{36.5 + (i % 30) / 10:.1f},None,{labels[i % 4]}'
    for i in range(200)
]

audit = BiasAuditEngine().analyze("\n".join([header] + rows))

if audit.is_available:
    gender = audit.gender_analysis
    print(f"   ✓ Records analysed: {audit.total_records}")
    if gender:
        print(f"   ✓ Accuracy: male {gender.male.accuracy:.1f}%, female {gender.female.accuracy:.1f}% "
              f"(disparity {gender.accuracy_disparity:.1f})")
    for group in audit.age_group_analysis:
        print(f"   ✓ Age {group.age_group:>6}: n={group.sample_count:<3} accuracy={group.accuracy:.1f}%")
else:
    print("   ⚠️  Not enough data for a fairness audit")

print()
print("=" * 60)
print(f"Fairness Score: {audit.fairness_score:.1f} ({audit.fairness_rating})")
print("=" * 60)
