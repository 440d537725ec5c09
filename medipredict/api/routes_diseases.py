# medipredict/api/routes_diseases.py
from typing import List

from fastapi import APIRouter, HTTPException

from medipredict.core.catalog import get_config
from medipredict.core.errors import UnknownDiseaseError
from medipredict.schemas.response_schema import DiseaseCard, DiseaseDetail
from medipredict.services import form_service
from medipredict.services.render_service import render_catalog

router = APIRouter()


@router.get("", response_model=List[DiseaseCard])
async def list_diseases():
    return render_catalog()


@router.get("/{key}", response_model=DiseaseDetail)
async def disease_detail(key: str):
    """key: 'diabetes', 'heart-disease', 'Breast Cancer' 등"""
    try:
        config = get_config(key)
    except UnknownDiseaseError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return DiseaseDetail(config=config, defaults=form_service.initialize(config))
