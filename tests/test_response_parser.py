import json

import pytest

from medipredict.core.errors import EmptyResponseError, MalformedResponseError
from medipredict.services.response_parser import parse_response, strip_code_fences


@pytest.mark.parametrize(
    "text",
    [
        '{"a": 1}',
        '```json\n{"a": 1}\n```',
        '```\n{"a": 1}\n```',
        '  ```json\n{"a": 1}```  ',
        '```JSON {"a": 1} ```',
    ],
)
def test_strip_code_fences(text):
    assert json.loads(strip_code_fences(text)) == {"a": 1}


def test_plain_json_parses(moderate_payload):
    result = parse_response(json.dumps(moderate_payload))
    assert result.risk_score == 42
    assert result.risk_level == "Moderate"
    assert result.contributing_factors == ["glucose"]


def test_fenced_json_parses(fenced_text, moderate_payload):
    result = parse_response(fenced_text)
    assert result.model_dump(by_alias=True) == moderate_payload


@pytest.mark.parametrize(
    "payload",
    [
        {"riskScore": 0, "riskLevel": "Low", "analysis": "", "contributingFactors": [], "recommendations": []},
        {
            "riskScore": 97.5,
            "riskLevel": "Critical",
            "analysis": "Several markers far outside reference ranges.",
            "contributingFactors": ["radius_mean", "concavity_mean"],
            "recommendations": ["Biopsy", "Oncology referral"],
        },
    ],
)
@pytest.mark.parametrize("fenced", [False, True])
def test_schema_conformant_objects_round_trip(payload, fenced):
    text = json.dumps(payload)
    if fenced:
        text = f"```json\n{text}\n```"
    assert parse_response(text).model_dump(by_alias=True) == payload


def test_extra_keys_are_ignored(moderate_payload):
    moderate_payload["confidence"] = "high"
    assert parse_response(json.dumps(moderate_payload)).risk_level == "Moderate"


def test_non_json_text():
    with pytest.raises(MalformedResponseError) as exc:
        parse_response("The patient is at moderate risk.")
    assert exc.value.errors[0].startswith("json:")


def test_json_array_is_not_an_object():
    with pytest.raises(MalformedResponseError):
        parse_response("[1, 2, 3]")


def test_missing_risk_score(moderate_payload):
    del moderate_payload["riskScore"]
    with pytest.raises(MalformedResponseError) as exc:
        parse_response(json.dumps(moderate_payload))
    assert any(e.startswith("riskScore") for e in exc.value.errors)


def test_risk_level_outside_enum(moderate_payload):
    moderate_payload["riskLevel"] = "Severe"
    with pytest.raises(MalformedResponseError) as exc:
        parse_response(json.dumps(moderate_payload))
    assert any(e.startswith("riskLevel") for e in exc.value.errors)


def test_non_text_contributing_factor(moderate_payload):
    moderate_payload["contributingFactors"] = ["glucose", 7]
    with pytest.raises(MalformedResponseError) as exc:
        parse_response(json.dumps(moderate_payload))
    assert any(e.startswith("contributingFactors.1") for e in exc.value.errors)


@pytest.mark.parametrize("score", ["42", True, 101, -1])
def test_risk_score_must_be_number_in_range(moderate_payload, score):
    moderate_payload["riskScore"] = score
    with pytest.raises(MalformedResponseError):
        parse_response(json.dumps(moderate_payload))


def test_every_failing_field_is_reported(moderate_payload):
    payload = {**moderate_payload, "riskLevel": "Severe", "recommendations": "diet"}
    with pytest.raises(MalformedResponseError) as exc:
        parse_response(json.dumps(payload))
    fields = {e.split(":")[0] for e in exc.value.errors}
    assert fields == {"riskLevel", "recommendations"}


@pytest.mark.parametrize("text", [None, "", "   \n"])
def test_empty_text(text):
    with pytest.raises(EmptyResponseError):
        parse_response(text)
