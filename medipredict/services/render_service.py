# medipredict/services/render_service.py
from typing import List

from medipredict.core.catalog import list_configs
from medipredict.schemas.disease_schema import DiseaseType
from medipredict.schemas.response_schema import DiseaseCard, PredictionResult, ResultView

RISK_COLORS = {
    "Low": "#10b981",
    "Moderate": "#f59e0b",
    "High": "#f97316",
    "Critical": "#ef4444",
}
DEFAULT_COLOR = "#3b82f6"

DISCLAIMER = (
    "This is an AI-powered educational tool utilizing simulated predictive models. "
    "Results are for demonstration purposes only and do not constitute a medical diagnosis. "
    "Always consult a healthcare professional."
)


def _score_label(score: float) -> str:
    if float(score).is_integer():
        return f"{int(score)}%"
    return f"{score}%"


def render_result(result: PredictionResult, disease_type: DiseaseType) -> ResultView:
    return ResultView(
        heading=f"{disease_type.value} Assessment",
        score_label=_score_label(result.risk_score),
        risk_score=result.risk_score,
        risk_level=result.risk_level,
        badge=f"{result.risk_level} Risk",
        color=RISK_COLORS.get(result.risk_level, DEFAULT_COLOR),
        analysis=result.analysis,
        contributing_factors=list(result.contributing_factors),
        recommendations=list(result.recommendations),
        disclaimer=DISCLAIMER,
    )


def render_text(view: ResultView) -> str:
    lines = [
        view.heading,
        f"{view.badge} ({view.score_label})",
        "",
        view.analysis,
        "",
        "Key Risk Factors:",
    ]
    lines += [f"  - {f}" for f in view.contributing_factors]
    lines += ["", "Recommendations:"]
    lines += [f"  - {r}" for r in view.recommendations]
    lines += ["", f"Disclaimer: {view.disclaimer}"]
    return "\n".join(lines)


def render_catalog() -> List[DiseaseCard]:
    return [
        DiseaseCard(
            type=cfg.type,
            slug=cfg.type.slug,
            title=cfg.title,
            description=cfg.description,
            field_count=len(cfg.fields),
        )
        for cfg in list_configs()
    ]
