import json
from unittest.mock import Mock

import pytest
import requests

from medipredict.core.config import API_KEY_ENV_VARS
from medipredict.core.errors import TransportError
from medipredict.schemas.response_schema import PredictionResult

MODERATE = {
    "riskScore": 42,
    "riskLevel": "Moderate",
    "analysis": "Glucose is borderline; other metrics are within range.",
    "contributingFactors": ["glucose"],
    "recommendations": ["diet"],
}


@pytest.fixture
def moderate_payload() -> dict:
    return dict(MODERATE)


@pytest.fixture
def no_api_key(monkeypatch):
    for name in API_KEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def api_key(monkeypatch, no_api_key):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    return "test-key"


def gemini_body(text: str) -> dict:
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


def fake_response(body=None, status_code=200):
    """requests.Response 대용."""
    resp = Mock(status_code=status_code)
    resp.json = Mock(return_value=body)
    if status_code >= 400:
        err = requests.exceptions.HTTPError(f"{status_code} Error", response=resp)
        resp.raise_for_status = Mock(side_effect=err)
    else:
        resp.raise_for_status = Mock(return_value=None)
    return resp


@pytest.fixture
def stub_predictor(moderate_payload):
    """호출된 요청을 기록하고 고정 결과를 돌려주는 예측기."""
    calls = []

    async def predictor(request):
        calls.append(request)
        return PredictionResult.model_validate(moderate_payload)

    predictor.calls = calls
    return predictor


@pytest.fixture
def failing_predictor():
    calls = []

    async def predictor(request):
        calls.append(request)
        raise TransportError("connection refused")

    predictor.calls = calls
    return predictor


@pytest.fixture
def fenced_text(moderate_payload) -> str:
    return "```json\n" + json.dumps(moderate_payload, indent=2) + "\n```"
