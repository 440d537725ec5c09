# medipredict/core/config.py
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[2]

# .env.local 우선, 이미 설정된 환경변수는 덮어쓰지 않음
load_dotenv(ROOT / ".env.local")
load_dotenv(ROOT / ".env")

API_KEY_ENV_VARS = ("GEMINI_API_KEY", "API_KEY", "GOOGLE_API_KEY")


def _env_float(name: str, default: Optional[float]) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


class NumericPolicy(str, Enum):
    """범위를 벗어난 숫자 입력 처리 방식."""

    ACCEPT = "accept"  # 그대로 저장
    CLAMP = "clamp"    # [min, max]로 보정
    REJECT = "reject"  # 무시 (기존 값 유지)

    @classmethod
    def parse(cls, value) -> "NumericPolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"Invalid NUMERIC_INPUT_POLICY {value!r} (expected one of: {allowed})") from None


@dataclass
class Settings:
    GEMINI_MODEL: str = field(default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.5-flash"))
    GEMINI_API_BASE: str = field(
        default_factory=lambda: os.getenv(
            "GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta"
        )
    )
    TEMPERATURE: float = field(default_factory=lambda: _env_float("TEMPERATURE", 0.2))
    # None = no timeout enforced by the application
    REQUEST_TIMEOUT: Optional[float] = field(default_factory=lambda: _env_float("REQUEST_TIMEOUT", None))
    NUMERIC_INPUT_POLICY: NumericPolicy = field(default_factory=lambda: os.getenv("NUMERIC_INPUT_POLICY", "accept"))
    SESSION_TTL_SECONDS: Optional[float] = field(default_factory=lambda: _env_float("SESSION_TTL_SECONDS", 1800.0))
    MAX_SESSIONS: int = field(default_factory=lambda: int(os.getenv("MAX_SESSIONS", "1000")))
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    def __post_init__(self):
        # 오타는 기동 시점에 바로 실패
        self.NUMERIC_INPUT_POLICY = NumericPolicy.parse(self.NUMERIC_INPUT_POLICY)
        if self.MAX_SESSIONS < 1:
            raise ValueError("MAX_SESSIONS must be at least 1")


def get_api_key() -> Optional[str]:
    """API 키는 호출 시점에 환경에서 읽는다 (settings에 캐시하지 않음)."""
    for name in API_KEY_ENV_VARS:
        raw = os.getenv(name)
        if raw and raw.strip():
            return raw.strip()
    return None


settings = Settings()
