from fastapi import FastAPI
from medipredict.api.routes_diseases import router as diseases_router
from medipredict.api.routes_health import router as health_router
from medipredict.api.routes_predict import router as predict_router
from medipredict.api.routes_session import router as session_router
from medipredict.core.logger import setup_logging


setup_logging()
app = FastAPI(title="MediPredict API", version="1.0.0")


app.include_router(health_router, prefix="/health", tags=["health"])
app.include_router(diseases_router, prefix="/api/diseases", tags=["diseases"])
app.include_router(predict_router, prefix="/api/risk", tags=["risk"])
app.include_router(session_router, prefix="/api/session", tags=["session"])
