# medipredict/core/errors.py
from typing import List, Optional

# 화면에 노출되는 고정 배너 문구
BANNER_MESSAGE = (
    "Failed to generate prediction. Please ensure your API key is configured and try again."
)


class PredictionError(Exception):
    """예측 파이프라인(요청 → 외부 호출 → 응답 검증) 실패의 공통 부모."""


class MissingCredentialError(PredictionError):
    pass


class TransportError(PredictionError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(PredictionError):
    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors or [])

    def __str__(self):
        base = super().__str__()
        if not self.errors:
            return base
        return f"{base}: " + "; ".join(self.errors)


class EmptyResponseError(PredictionError):
    pass


class UnknownDiseaseError(KeyError):
    def __str__(self):
        return f"Unknown disease type: {self.args[0]!r}"


class PatientDataError(ValueError):
    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = list(errors or [])


class SessionStateError(RuntimeError):
    pass
