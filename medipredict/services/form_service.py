# medipredict/services/form_service.py
import logging
import math
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from medipredict.core.config import NumericPolicy, settings
from medipredict.core.errors import PatientDataError
from medipredict.schemas.disease_schema import DiseaseConfig, FieldKind, FormField
from medipredict.schemas.patient_schema import patient_model

log = logging.getLogger(__name__)

PatientData = Dict[str, Union[int, float, str]]


def _resolve_policy(policy) -> NumericPolicy:
    if policy is None:
        policy = settings.NUMERIC_INPUT_POLICY
    return NumericPolicy.parse(policy)


def initialize(config: DiseaseConfig) -> PatientData:
    return {f.id: f.default_value for f in config.fields}


def _parse_number(raw) -> Optional[Union[int, float]]:
    """입력 어떤 타입이 와도 숫자로 정규화, 실패하면 None."""
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return raw if math.isfinite(raw) else None
    s = str(raw).strip()
    if s == "":
        return None
    try:
        return int(s)
    except ValueError:
        pass
    try:
        v = float(s)
    except ValueError:
        return None
    return v if math.isfinite(v) else None


def _clamp(field: FormField, value):
    if field.min is not None and value < field.min:
        return field.min
    if field.max is not None and value > field.max:
        return field.max
    return value


def _coerce(field: FormField, raw, policy: NumericPolicy):
    """필드 값으로 쓸 수 있으면 변환값, 아니면 None."""
    if field.kind == FieldKind.SELECT:
        if isinstance(raw, str) and raw in field.options:
            return raw
        return None

    value = _parse_number(raw)
    if value is None or field.in_range(value):
        return value
    if policy == NumericPolicy.CLAMP:
        return _clamp(field, value)
    if policy == NumericPolicy.REJECT:
        return None
    return value


def set_field(config: DiseaseConfig, data: Mapping[str, Any], field_id: str, raw_value, policy=None) -> PatientData:
    out = dict(data)
    field = config.field(field_id)
    if field is None:
        log.debug(f"Ignoring unknown field {field_id!r} for {config.type.value}")
        return out

    value = _coerce(field, raw_value, _resolve_policy(policy))
    if value is None:
        log.debug(f"Ignoring invalid value for {field_id!r}: {raw_value!r}")
        return out
    out[field_id] = value
    return out


def apply_fields(config: DiseaseConfig, data: Mapping[str, Any], updates: Mapping[str, Any], policy=None) -> PatientData:
    out = dict(data)
    for field_id, raw in updates.items():
        out = set_field(config, out, field_id, raw, policy=policy)
    return out


def validate_patient_data(config: DiseaseConfig, data: Mapping[str, Any], policy=None) -> PatientData:
    """
    전체 입력을 질병별 레코드 모델로 검사.
    - accept 정책이면 범위는 보지 않고 타입/선택지만 확인
    - clamp 정책이면 숫자 값을 [min, max]로 보정한 뒤 검사
    """
    policy = _resolve_policy(policy)
    data = dict(data)
    if policy == NumericPolicy.CLAMP:
        for f in config.fields:
            v = data.get(f.id)
            if f.kind == FieldKind.NUMBER and isinstance(v, (int, float)) and not isinstance(v, bool):
                data[f.id] = _clamp(f, v)
    model = patient_model(config.type, policy != NumericPolicy.ACCEPT)
    try:
        record = model.model_validate(data)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False)
        raise PatientDataError(f"Invalid patient data for {config.type.value}", errors) from e
    # 폼 순서 유지
    dumped = record.model_dump()
    return {f.id: dumped[f.id] for f in config.fields}
