# medipredict/schemas/request_schema.py
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from medipredict.schemas.disease_schema import DiseaseType

PatientValue = Union[int, float, str]
PatientData = Dict[str, PatientValue]


def _to_disease_type(v):
    found = DiseaseType.lookup(v)
    if found is None:
        raise ValueError(f"unknown disease type: {v!r}")
    return found


class PredictionRequest(BaseModel):
    """제출 1회당 1개 생성, 이후 변경 불가."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    disease_type: DiseaseType = Field(..., alias="diseaseType")
    patient_data: PatientData = Field(..., alias="patientData")


class PredictIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    disease_type: DiseaseType = Field(..., alias="diseaseType", description="Diabetes / Heart Disease / Breast Cancer")
    # 비어 있는 필드는 기본값으로 채움
    patient_data: Dict[str, Any] = Field(default_factory=dict, alias="patientData")

    @field_validator("disease_type", mode="before")
    @classmethod
    def lookup_disease(cls, v):
        return _to_disease_type(v)


class SelectIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    disease_type: DiseaseType = Field(..., alias="diseaseType")

    @field_validator("disease_type", mode="before")
    @classmethod
    def lookup_disease(cls, v):
        return _to_disease_type(v)
