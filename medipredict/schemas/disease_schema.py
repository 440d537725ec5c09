# medipredict/schemas/disease_schema.py
from enum import Enum
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DiseaseType(str, Enum):
    DIABETES = "Diabetes"
    HEART_DISEASE = "Heart Disease"
    BREAST_CANCER = "Breast Cancer"

    @property
    def slug(self) -> str:
        return self.value.lower().replace(" ", "-")

    @classmethod
    def lookup(cls, key) -> Optional["DiseaseType"]:
        """value / name / slug 어느 쪽이든 대소문자 무시하고 찾는다."""
        if isinstance(key, cls):
            return key
        if not isinstance(key, str):
            return None
        k = key.strip().lower()
        for member in cls:
            if k in (member.value.lower(), member.name.lower(), member.slug):
                return member
        return None


class FieldKind(str, Enum):
    NUMBER = "number"
    SELECT = "select"


Number = Union[int, float]


def _is_number(v) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


class FormField(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    label: str
    kind: FieldKind
    unit: Optional[str] = None
    min: Optional[Number] = None
    max: Optional[Number] = None
    step: Optional[Number] = None
    options: Optional[Tuple[str, ...]] = None
    default_value: Union[int, float, str] = Field(..., alias="defaultValue")
    description: Optional[str] = None

    @model_validator(mode="after")
    def check_default(self):
        if self.kind == FieldKind.SELECT:
            if not self.options:
                raise ValueError(f"select field {self.id!r} needs options")
            if self.default_value not in self.options:
                raise ValueError(f"default of {self.id!r} is not one of its options")
        else:
            if not _is_number(self.default_value):
                raise ValueError(f"default of number field {self.id!r} must be numeric")
            if self.min is not None and self.max is not None and self.min > self.max:
                raise ValueError(f"field {self.id!r}: min > max")
            if self.min is not None and self.default_value < self.min:
                raise ValueError(f"default of {self.id!r} below min")
            if self.max is not None and self.default_value > self.max:
                raise ValueError(f"default of {self.id!r} above max")
        return self

    def in_range(self, value: Number) -> bool:
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True


class DiseaseConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: DiseaseType
    title: str
    description: str
    fields: Tuple[FormField, ...]

    @model_validator(mode="after")
    def unique_field_ids(self):
        ids = [f.id for f in self.fields]
        dupes = sorted({i for i in ids if ids.count(i) > 1})
        if dupes:
            raise ValueError(f"duplicate field ids in {self.type.value}: {dupes}")
        return self

    def field(self, field_id: str) -> Optional[FormField]:
        for f in self.fields:
            if f.id == field_id:
                return f
        return None
