# medipredict/schemas/patient_schema.py
"""
질병별 환자 입력 레코드.

카탈로그(DiseaseConfig)의 필드 정의로부터 pydantic 모델을 생성한다.
- number 필드 → int | float (bool/문자열 거부), min/max 있으면 ge/le
- select 필드 → Literal[options]
- 정의되지 않은 키는 거부
"""
from functools import lru_cache
from typing import Literal, Type, Union

from pydantic import BaseModel, ConfigDict, Field, confloat, conint, create_model

from medipredict.core.catalog import get_config
from medipredict.schemas.disease_schema import DiseaseConfig, DiseaseType, FieldKind, FormField


def _number_type(f: FormField, bounded: bool):
    bounds = {}
    if bounded:
        if f.min is not None:
            bounds["ge"] = f.min
        if f.max is not None:
            bounds["le"] = f.max
    return Union[conint(strict=True, **bounds), confloat(strict=True, allow_inf_nan=False, **bounds)]


def _field_definition(f: FormField, bounded: bool):
    if f.kind == FieldKind.SELECT:
        return (Literal[f.options], Field(..., description=f.label))
    return (_number_type(f, bounded), Field(..., description=f.label))


def build_patient_model(config: DiseaseConfig, bounded: bool = True) -> Type[BaseModel]:
    name = config.type.name.title().replace("_", "") + "Data"
    definitions = {f.id: _field_definition(f, bounded) for f in config.fields}
    return create_model(name, __config__=ConfigDict(extra="forbid"), **definitions)


@lru_cache(maxsize=None)
def patient_model(disease_type: DiseaseType, bounded: bool = True) -> Type[BaseModel]:
    return build_patient_model(get_config(disease_type), bounded=bounded)
