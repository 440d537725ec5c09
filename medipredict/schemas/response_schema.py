# medipredict/schemas/response_schema.py
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from medipredict.schemas.disease_schema import DiseaseConfig, DiseaseType

RiskLevel = Literal["Low", "Moderate", "High", "Critical"]
RISK_LEVELS = ("Low", "Moderate", "High", "Critical")


class PredictionResult(BaseModel):
    # 외부 모델 응답이 그대로 들어오므로 형변환 없이 엄격하게 검사
    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True, extra="ignore")

    risk_score: float = Field(..., alias="riskScore", ge=0, le=100, allow_inf_nan=False)
    risk_level: RiskLevel = Field(..., alias="riskLevel")
    analysis: str
    contributing_factors: List[str] = Field(..., alias="contributingFactors")
    recommendations: List[str]


class ResultView(BaseModel):
    heading: str
    score_label: str
    risk_score: float
    risk_level: RiskLevel
    badge: str
    color: str
    analysis: str
    contributing_factors: List[str]
    recommendations: List[str]
    disclaimer: str


class DiseaseCard(BaseModel):
    type: DiseaseType
    slug: str
    title: str
    description: str
    field_count: int


class DiseaseDetail(BaseModel):
    config: DiseaseConfig
    defaults: Dict[str, Any]


class PredictOut(BaseModel):
    result: PredictionResult
    view: ResultView


class SessionView(BaseModel):
    session_id: str
    view: Literal["dashboard", "form", "result"]
    disease_type: Optional[DiseaseType] = None
    config: Optional[DiseaseConfig] = None
    form_data: Optional[Dict[str, Any]] = None
    result: Optional[ResultView] = None
    error: Optional[str] = None
    submitting: bool = False
