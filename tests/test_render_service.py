import pytest

from medipredict.schemas.disease_schema import DiseaseType
from medipredict.schemas.response_schema import PredictionResult
from medipredict.services.render_service import RISK_COLORS, render_result, render_text


def _result(score, level="High"):
    return PredictionResult(
        risk_score=score,
        risk_level=level,
        analysis="Elevated cholesterol and exercise induced angina.",
        contributing_factors=["chol", "exang"],
        recommendations=["Lipid panel", "Cardiology referral"],
    )


@pytest.mark.parametrize(
    "score, label",
    [(42, "42%"), (42.0, "42%"), (12.5, "12.5%"), (33.333333, "33.333333%"), (0.125, "0.125%")],
)
def test_score_label_shows_score_unrounded(score, label):
    assert render_result(_result(score), DiseaseType.HEART_DISEASE).score_label == label


@pytest.mark.parametrize("level", ["Low", "Moderate", "High", "Critical"])
def test_badge_and_color_per_level(level):
    view = render_result(_result(50, level), DiseaseType.HEART_DISEASE)
    assert view.badge == f"{level} Risk"
    assert view.color == RISK_COLORS[level]


def test_render_text_lists_factors_and_recommendations():
    text = render_text(render_result(_result(71.5), DiseaseType.HEART_DISEASE))
    assert text.startswith("Heart Disease Assessment\nHigh Risk (71.5%)")
    assert "  - exang" in text
    assert "  - Cardiology referral" in text
    assert "Disclaimer:" in text
