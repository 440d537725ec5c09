# medipredict/services/session_service.py
"""
화면 전환 + 제출 오케스트레이션.

dashboard → (select) → form → (submit) → result → (reset) → dashboard
                        form → (cancel) → dashboard

제출 중에는 submitting 플래그로 재제출을 막는다 (요청 동시 1건).
예측 파이프라인 오류는 여기서 한 번만 잡아서 고정 배너 문구로 바꾼다.
"""
import logging
import time
import uuid
from collections import OrderedDict
from typing import Awaitable, Callable, Mapping, Optional

from medipredict.core.catalog import get_config
from medipredict.core.config import settings
from medipredict.core.errors import BANNER_MESSAGE, PredictionError, SessionStateError
from medipredict.schemas.disease_schema import DiseaseConfig
from medipredict.schemas.request_schema import PredictionRequest
from medipredict.schemas.response_schema import PredictionResult, SessionView
from medipredict.services import form_service
from medipredict.services.prediction_service import build_request, predict_disease_risk
from medipredict.services.render_service import render_result

log = logging.getLogger(__name__)

Predictor = Callable[[PredictionRequest], Awaitable[PredictionResult]]


class PredictionSession:
    def __init__(self, session_id: Optional[str] = None, predictor: Optional[Predictor] = None, policy=None):
        self.session_id = session_id or uuid.uuid4().hex
        self.predictor = predictor or predict_disease_risk
        self.policy = policy
        self.config: Optional[DiseaseConfig] = None
        self.form_data: Optional[dict] = None
        self.result: Optional[PredictionResult] = None
        self.error: Optional[str] = None
        self.submitting = False
        self.touched_at = time.monotonic()

    def touch(self, now: Optional[float] = None) -> None:
        self.touched_at = time.monotonic() if now is None else now

    @property
    def view(self) -> str:
        if self.config is None:
            return "dashboard"
        if self.result is None:
            return "form"
        return "result"

    def _require_form(self, action: str):
        if self.view != "form":
            raise SessionStateError(f"Cannot {action} in {self.view} view")
        if self.submitting:
            raise SessionStateError(f"Cannot {action} while a prediction is in flight")

    def select(self, disease) -> None:
        if self.submitting:
            raise SessionStateError("Cannot select while a prediction is in flight")
        self.config = get_config(disease)
        self.form_data = form_service.initialize(self.config)
        self.result = None
        self.error = None

    def edit(self, field_id: str, value) -> dict:
        self._require_form("edit")
        self.form_data = form_service.set_field(self.config, self.form_data, field_id, value, policy=self.policy)
        return dict(self.form_data)

    def edit_many(self, updates: Mapping) -> dict:
        self._require_form("edit")
        self.form_data = form_service.apply_fields(self.config, self.form_data, updates, policy=self.policy)
        return dict(self.form_data)

    async def submit(self, predictor: Optional[Predictor] = None) -> Optional[PredictionResult]:
        self._require_form("submit")
        predictor = predictor or self.predictor

        self.submitting = True
        self.error = None
        try:
            request = build_request(self.config.type, self.form_data)
            result = await predictor(request)
        except PredictionError as e:
            log.error(f"Prediction failed ({type(e).__name__}): {e}")
            self.error = BANNER_MESSAGE
            return None
        finally:
            self.submitting = False

        self.result = result
        return result

    def cancel(self) -> None:
        if self.submitting:
            raise SessionStateError("Cannot cancel while a prediction is in flight")
        self.config = None
        self.form_data = None
        self.result = None

    def reset(self) -> None:
        if self.submitting:
            raise SessionStateError("Cannot reset while a prediction is in flight")
        self.config = None
        self.form_data = None
        self.result = None
        self.error = None

    def dismiss_error(self) -> None:
        self.error = None

    def snapshot(self) -> SessionView:
        return SessionView(
            session_id=self.session_id,
            view=self.view,
            disease_type=self.config.type if self.config else None,
            config=self.config,
            form_data=dict(self.form_data) if self.form_data is not None else None,
            result=render_result(self.result, self.config.type) if self.result else None,
            error=self.error,
            submitting=self.submitting,
        )


class SessionStore:
    """
    메모리 보관만 (영속화 없음).
    - ttl_seconds 동안 손대지 않은 세션은 create()/get() 시점에 정리
    - max_sessions 초과 시 가장 오래 안 쓴 세션부터 제거 (LRU)
    - 제출 중인 세션은 정리 대상에서 제외
    """

    def __init__(
        self,
        predictor: Optional[Predictor] = None,
        ttl_seconds: Optional[float] = None,
        max_sessions: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._sessions: "OrderedDict[str, PredictionSession]" = OrderedDict()
        self.predictor = predictor
        self.ttl_seconds = settings.SESSION_TTL_SECONDS if ttl_seconds is None else ttl_seconds
        self.max_sessions = settings.MAX_SESSIONS if max_sessions is None else max_sessions
        self.clock = clock

    def cleanup_expired_sessions(self) -> int:
        if not self.ttl_seconds:
            return 0
        cutoff = self.clock() - self.ttl_seconds
        expired = [
            sid for sid, s in self._sessions.items()
            if s.touched_at < cutoff and not s.submitting
        ]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            log.info(f"Expired {len(expired)} idle sessions")
        return len(expired)

    def _evict_overflow(self) -> None:
        # 앞쪽이 가장 오래 안 쓴 세션
        while len(self._sessions) >= self.max_sessions:
            victim = next((sid for sid, s in self._sessions.items() if not s.submitting), None)
            if victim is None:
                return
            del self._sessions[victim]
            log.info(f"Evicted session {victim} (store full)")

    def create(self) -> PredictionSession:
        self.cleanup_expired_sessions()
        self._evict_overflow()
        session = PredictionSession(predictor=self.predictor)
        session.touch(self.clock())
        self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> PredictionSession:
        self.cleanup_expired_sessions()
        session = self._sessions[session_id]
        session.touch(self.clock())
        self._sessions.move_to_end(session_id)
        return session

    def delete(self, session_id: str) -> None:
        del self._sessions[session_id]

    def __len__(self):
        return len(self._sessions)


store = SessionStore()
