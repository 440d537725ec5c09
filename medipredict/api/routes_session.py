# medipredict/api/routes_session.py
from typing import Any, Dict

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from medipredict.core.errors import SessionStateError
from medipredict.schemas.request_schema import SelectIn
from medipredict.schemas.response_schema import SessionView
from medipredict.services.render_service import render_result, render_text
from medipredict.services.session_service import PredictionSession, store

router = APIRouter()


def _session(session_id: str) -> PredictionSession:
    try:
        return store.get(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")


def _conflict(e: SessionStateError):
    return HTTPException(status_code=409, detail=str(e))


@router.post("", response_model=SessionView, status_code=201)
async def create_session():
    return store.create().snapshot()


@router.get("/{session_id}", response_model=SessionView)
async def get_session(session_id: str):
    return _session(session_id).snapshot()


@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str):
    _session(session_id)
    store.delete(session_id)


@router.post("/{session_id}/select", response_model=SessionView)
async def select_disease(session_id: str, body: SelectIn):
    session = _session(session_id)
    try:
        session.select(body.disease_type)
    except SessionStateError as e:
        raise _conflict(e)
    return session.snapshot()


@router.patch("/{session_id}/fields", response_model=SessionView)
async def edit_fields(session_id: str, updates: Dict[str, Any]):
    # 잘못된 값은 조용히 무시됨 (기존 값 유지)
    session = _session(session_id)
    try:
        session.edit_many(updates)
    except SessionStateError as e:
        raise _conflict(e)
    return session.snapshot()


@router.post("/{session_id}/submit", response_model=SessionView)
async def submit(session_id: str):
    session = _session(session_id)
    try:
        await session.submit()
    except SessionStateError as e:
        raise _conflict(e)
    return session.snapshot()


@router.post("/{session_id}/cancel", response_model=SessionView)
async def cancel(session_id: str):
    session = _session(session_id)
    try:
        session.cancel()
    except SessionStateError as e:
        raise _conflict(e)
    return session.snapshot()


@router.post("/{session_id}/reset", response_model=SessionView)
async def reset(session_id: str):
    session = _session(session_id)
    try:
        session.reset()
    except SessionStateError as e:
        raise _conflict(e)
    return session.snapshot()


@router.delete("/{session_id}/error", response_model=SessionView)
async def dismiss_error(session_id: str):
    session = _session(session_id)
    session.dismiss_error()
    return session.snapshot()


@router.get("/{session_id}/report", response_class=PlainTextResponse)
async def report(session_id: str):
    session = _session(session_id)
    if session.view != "result":
        raise HTTPException(status_code=409, detail=f"No result in {session.view} view")
    return render_text(render_result(session.result, session.config.type))
