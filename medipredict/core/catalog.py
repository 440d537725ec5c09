# medipredict/core/catalog.py
from typing import Tuple

from medipredict.core.errors import UnknownDiseaseError
from medipredict.schemas.disease_schema import DiseaseConfig, DiseaseType, FieldKind, FormField

NUMBER = FieldKind.NUMBER
SELECT = FieldKind.SELECT


# =========================
#   당뇨 (Pima Indians Diabetes 항목)
# =========================
DIABETES = DiseaseConfig(
    type=DiseaseType.DIABETES,
    title="Diabetes Prediction",
    description="Assess the risk of Type 2 Diabetes based on glucose, BMI, and insulin levels.",
    fields=(
        FormField(id="pregnancies", label="Pregnancies", kind=NUMBER, min=0, max=20, default_value=0),
        FormField(
            id="glucose", label="Glucose Level", kind=NUMBER, unit="mg/dL", min=0, max=300, default_value=120,
            description="Plasma glucose concentration a 2 hours in an oral glucose tolerance test",
        ),
        FormField(
            id="bp", label="Blood Pressure", kind=NUMBER, unit="mm Hg", min=0, max=200, default_value=70,
            description="Diastolic blood pressure",
        ),
        FormField(id="skinThickness", label="Skin Thickness", kind=NUMBER, unit="mm", min=0, max=100, default_value=20),
        FormField(id="insulin", label="Insulin Level", kind=NUMBER, unit="mu U/ml", min=0, max=900, default_value=79),
        FormField(id="bmi", label="BMI", kind=NUMBER, min=10, max=60, step=0.1, default_value=25.0),
        FormField(id="pedigree", label="Diabetes Pedigree Function", kind=NUMBER, min=0, max=3, step=0.001, default_value=0.5),
        FormField(id="age", label="Age", kind=NUMBER, min=1, max=120, default_value=30),
    ),
)

# =========================
#   심장질환 (Cleveland Heart Disease 항목)
# =========================
HEART_DISEASE = DiseaseConfig(
    type=DiseaseType.HEART_DISEASE,
    title="Heart Disease Prediction",
    description="Evaluate cardiovascular health using metrics like chest pain type, cholesterol, and max heart rate.",
    fields=(
        FormField(id="age", label="Age", kind=NUMBER, min=1, max=120, default_value=45),
        FormField(id="sex", label="Sex", kind=SELECT, options=("Male", "Female"), default_value="Male"),
        FormField(
            id="cp", label="Chest Pain Type", kind=SELECT,
            options=("Typical Angina", "Atypical Angina", "Non-anginal Pain", "Asymptomatic"),
            default_value="Typical Angina",
        ),
        FormField(id="trestbps", label="Resting Blood Pressure", kind=NUMBER, unit="mm Hg", min=50, max=250, default_value=120),
        FormField(id="chol", label="Serum Cholesterol", kind=NUMBER, unit="mg/dl", min=100, max=600, default_value=200),
        FormField(id="fbs", label="Fasting Blood Sugar > 120 mg/dl", kind=SELECT, options=("True", "False"), default_value="False"),
        FormField(id="thalach", label="Max Heart Rate", kind=NUMBER, min=50, max=250, default_value=150),
        FormField(id="exang", label="Exercise Induced Angina", kind=SELECT, options=("Yes", "No"), default_value="No"),
    ),
)

# =========================
#   유방암 (Wisconsin Breast Cancer 항목) - 범위 제한 없음
# =========================
BREAST_CANCER = DiseaseConfig(
    type=DiseaseType.BREAST_CANCER,
    title="Breast Cancer Risk",
    description="Analyze tumor features like radius, texture, and smoothness to predict malignancy.",
    fields=(
        FormField(
            id="radius_mean", label="Radius Mean", kind=NUMBER, step=0.01, default_value=14.0,
            description="Mean of distances from center to points on the perimeter",
        ),
        FormField(
            id="texture_mean", label="Texture Mean", kind=NUMBER, step=0.01, default_value=19.0,
            description="Standard deviation of gray-scale values",
        ),
        FormField(id="perimeter_mean", label="Perimeter Mean", kind=NUMBER, step=0.1, default_value=90.0),
        FormField(id="area_mean", label="Area Mean", kind=NUMBER, step=0.1, default_value=600.0),
        FormField(
            id="smoothness_mean", label="Smoothness Mean", kind=NUMBER, step=0.0001, default_value=0.09,
            description="Local variation in radius lengths",
        ),
        FormField(
            id="concavity_mean", label="Concavity Mean", kind=NUMBER, step=0.0001, default_value=0.08,
            description="Severity of concave portions of the contour",
        ),
    ),
)

DISEASE_CONFIGS: Tuple[DiseaseConfig, ...] = (DIABETES, HEART_DISEASE, BREAST_CANCER)


def list_configs() -> Tuple[DiseaseConfig, ...]:
    return DISEASE_CONFIGS


def get_config(key) -> DiseaseConfig:
    disease_type = DiseaseType.lookup(key)
    if disease_type is None:
        raise UnknownDiseaseError(key)
    for cfg in DISEASE_CONFIGS:
        if cfg.type == disease_type:
            return cfg
    raise UnknownDiseaseError(key)
