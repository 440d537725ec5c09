# medipredict/api/routes_predict.py
import logging

from fastapi import APIRouter, HTTPException

from medipredict.core.catalog import get_config
from medipredict.core.errors import BANNER_MESSAGE, MissingCredentialError, PatientDataError, PredictionError
from medipredict.schemas.request_schema import PredictIn
from medipredict.schemas.response_schema import PredictOut
from medipredict.services import form_service, prediction_service
from medipredict.services.render_service import render_result

router = APIRouter()
log = logging.getLogger(__name__)


# 폼 없이 한 번에: 입력(부분 허용) → 기본값 병합 → 검증 → 예측
@router.post("/predict", response_model=PredictOut)
async def predict(req: PredictIn):
    config = get_config(req.disease_type)
    merged = {**form_service.initialize(config), **req.patient_data}
    try:
        patient_data = form_service.validate_patient_data(config, merged)
    except PatientDataError as e:
        raise HTTPException(status_code=422, detail={"message": str(e), "errors": e.errors})

    request = prediction_service.build_request(config.type, patient_data)
    try:
        result = await prediction_service.predict_disease_risk(request)
    except MissingCredentialError as e:
        log.error(f"Prediction failed ({type(e).__name__}): {e}")
        raise HTTPException(status_code=500, detail=BANNER_MESSAGE)
    except PredictionError as e:
        log.error(f"Prediction failed ({type(e).__name__}): {e}")
        raise HTTPException(status_code=502, detail=BANNER_MESSAGE)

    return PredictOut(result=result, view=render_result(result, config.type))
