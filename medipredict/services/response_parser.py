# medipredict/services/response_parser.py
import json
import logging
import re

from pydantic import ValidationError

from medipredict.core.errors import EmptyResponseError, MalformedResponseError
from medipredict.schemas.response_schema import PredictionResult

log = logging.getLogger(__name__)

_FENCE_OPEN = re.compile(r"^\s*```[\w-]*[ \t]*\n?")
_FENCE_CLOSE = re.compile(r"\n?[ \t]*```\s*$")


def strip_code_fences(s: str) -> str:
    """```json ... ``` 형태로 감싸져 오면 마커만 벗겨낸다."""
    s = s.strip()
    if s.startswith("```"):
        s = _FENCE_OPEN.sub("", s, count=1)
        s = _FENCE_CLOSE.sub("", s, count=1)
    return s.strip()


def parse_json_or_raise(s: str) -> dict:
    try:
        doc = json.loads(strip_code_fences(s))
    except json.JSONDecodeError as e:
        raise MalformedResponseError("Invalid response format from AI model", [f"json: {e.msg}"]) from e
    if not isinstance(doc, dict):
        raise MalformedResponseError(
            "Invalid response format from AI model", [f"json: expected an object, got {type(doc).__name__}"]
        )
    return doc


def _describe(err: dict) -> str:
    loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
    return f"{loc}: {err.get('msg', 'invalid')}"


def parse_response(raw_text) -> PredictionResult:
    if raw_text is None or not str(raw_text).strip():
        raise EmptyResponseError("No response from AI")

    doc = parse_json_or_raise(str(raw_text))
    try:
        return PredictionResult.model_validate(doc)
    except ValidationError as e:
        errors = [_describe(err) for err in e.errors()]
        log.warning(f"Response failed schema validation: {errors}")
        raise MalformedResponseError("Response does not match the prediction schema", errors) from e
