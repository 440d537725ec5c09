# medipredict/services/prediction_service.py
import json
import logging
from typing import Mapping, Optional

import requests
from fastapi.concurrency import run_in_threadpool

from medipredict.core.config import Settings, get_api_key, settings as default_settings
from medipredict.core.errors import EmptyResponseError, MissingCredentialError, TransportError
from medipredict.prompts.risk_prompt import PROMPT_TMPL, RESPONSE_SCHEMA
from medipredict.schemas.disease_schema import DiseaseType
from medipredict.schemas.request_schema import PredictionRequest
from medipredict.schemas.response_schema import PredictionResult
from medipredict.services.response_parser import parse_response

log = logging.getLogger(__name__)


# =========================
#   요청/프롬프트 구성
# =========================
def build_request(disease_type, patient_data: Mapping) -> PredictionRequest:
    """존재 여부만 확인하고 그대로 감싼다 (값 검증은 폼 단계 책임)."""
    if disease_type is None:
        raise ValueError("disease_type is required")
    if patient_data is None:
        raise ValueError("patient_data is required")
    found = DiseaseType.lookup(disease_type)
    if found is None:
        raise ValueError(f"unknown disease type: {disease_type!r}")
    return PredictionRequest(disease_type=found, patient_data=dict(patient_data))


def build_prompt(request: PredictionRequest) -> str:
    return PROMPT_TMPL.format(
        disease_type=request.disease_type.value,
        patient_data=json.dumps(request.patient_data, indent=2, ensure_ascii=False),
    )


def build_payload(prompt: str, cfg: Settings) -> dict:
    return {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": RESPONSE_SCHEMA,
            "temperature": cfg.TEMPERATURE,
        },
    }


# =========================
#   외부 호출 (Gemini generateContent)
# =========================
def _extract_text(data) -> Optional[str]:
    try:
        parts = data["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(parts, list):
        return None
    texts = [p.get("text", "") for p in parts if isinstance(p, dict)]
    text = "".join(t for t in texts if isinstance(t, str))
    return text or None


def call_model(prompt: str, cfg: Optional[Settings] = None) -> str:
    """요청 1회 = 외부 호출 정확히 1회. 재시도 없음."""
    cfg = cfg or default_settings
    api_key = get_api_key()
    if not api_key:
        raise MissingCredentialError("API Key is missing")

    url = f"{cfg.GEMINI_API_BASE.rstrip('/')}/models/{cfg.GEMINI_MODEL}:generateContent"
    headers = {
        "x-goog-api-key": api_key,
        "Content-Type": "application/json",
    }
    log.info(f"Calling {cfg.GEMINI_MODEL} (temperature={cfg.TEMPERATURE})")
    try:
        r = requests.post(url, headers=headers, json=build_payload(prompt, cfg), timeout=cfg.REQUEST_TIMEOUT)
        r.raise_for_status()
        data = r.json()
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        raise TransportError(f"Prediction service returned HTTP {status}", status_code=status) from e
    except requests.exceptions.RequestException as e:
        raise TransportError(f"Prediction service request failed: {e}") from e
    except ValueError as e:
        raise TransportError("Prediction service returned a non-JSON body") from e

    text = _extract_text(data)
    if text is None:
        raise EmptyResponseError("No response from AI")
    return text


# =========================
#   공개 API 로직
# =========================
async def predict_disease_risk(request: PredictionRequest, cfg: Optional[Settings] = None) -> PredictionResult:
    prompt = build_prompt(request)
    text = await run_in_threadpool(call_model, prompt, cfg)
    result = parse_response(text)
    log.info(f"{request.disease_type.value}: riskLevel={result.risk_level} riskScore={result.risk_score}")
    return result
