"""Practice endpoints — configuration, session start, practice view, metronome."""

from __future__ import annotations

from fastapi import APIRouter, Query, Request

from lotus_riyaaz.api.routes.ragas import request_language
from lotus_riyaaz.api.schemas import (
    BolCellOut,
    ConfigOut,
    ConfigUpdate,
    MetronomeOut,
    PracticeViewOut,
    SessionOut,
    SessionStart,
)
from lotus_riyaaz.raga.text import Language, resolve
from lotus_riyaaz.session.config import Instrument, SessionSnapshot
from lotus_riyaaz.session.state import PracticeState
from lotus_riyaaz.tala.models import get_taal
from lotus_riyaaz.tala.notation import render_cycle

router = APIRouter()

START_HINT = "Open Ragas, pick one and tap Start."

_LANG_PARAM = Query(None, description="Display language (hi or en)")


def _config_out(state: PracticeState, lang: Language) -> ConfigOut:
    config = state.config
    return ConfigOut(
        selected_raga=resolve(state.selected.name, lang) if state.selected else None,
        scale_hz=config.scale_hz,
        tempo=config.tempo,
        taal=config.taal,
        instruments=dict(config.instruments),
    )


def _session_out(session: SessionSnapshot, lang: Language) -> SessionOut:
    return SessionOut(
        mode=session.mode,
        raga=resolve(session.raga.name, lang) if session.raga else None,
        scale_hz=session.scale_hz,
        tempo=session.tempo,
        taal=session.taal,
        instruments=dict(session.instruments),
    )


def _metronome_out(state: PracticeState) -> MetronomeOut:
    engine = state.engine
    return MetronomeOut(
        running=engine.running,
        beat_index=engine.beat_index,
        taal=engine.taal.name,
        tempo=engine.tempo,
    )


@router.get("/practice/config", response_model=ConfigOut)
async def get_config(request: Request, lang: Language | None = _LANG_PARAM) -> ConfigOut:
    state = request.app.state.practice
    return _config_out(state, request_language(request, lang))


@router.patch("/practice/config", response_model=ConfigOut)
async def update_config(
    request: Request, update: ConfigUpdate, lang: Language | None = _LANG_PARAM,
) -> ConfigOut:
    """Change tempo, scale or tāl. A running metronome is rescheduled."""
    state = request.app.state.practice
    if update.tempo is not None:
        state.set_tempo(update.tempo)
    if update.scale_hz is not None:
        state.set_scale_hz(update.scale_hz)
    if update.taal is not None:
        state.set_taal(update.taal.value)
    return _config_out(state, request_language(request, lang))


@router.post("/practice/instruments/{instrument}/toggle", response_model=ConfigOut)
async def toggle_instrument(
    request: Request, instrument: Instrument, lang: Language | None = _LANG_PARAM,
) -> ConfigOut:
    state = request.app.state.practice
    state.toggle_instrument(instrument)
    return _config_out(state, request_language(request, lang))


@router.post("/practice/session", response_model=SessionOut)
async def start_session(
    request: Request, body: SessionStart, lang: Language | None = _LANG_PARAM,
) -> SessionOut:
    """Freeze the current selection and settings into a new session."""
    state = request.app.state.practice
    session = state.start_session(body.mode)
    return _session_out(session, request_language(request, lang))


@router.get("/practice", response_model=PracticeViewOut)
async def get_practice_view(
    request: Request, lang: Language | None = _LANG_PARAM,
) -> PracticeViewOut:
    """Return the practice screen: session summary and the highlighted bols."""
    state = request.app.state.practice
    language = request_language(request, lang)

    if state.session is None:
        return PracticeViewOut(
            view=state.view.value,
            message=START_HINT,
            metronome=_metronome_out(state),
        )

    taal = get_taal(state.session.taal)
    cycle = [
        BolCellOut(position=c.position, bol=c.bol, active=c.active)
        for c in render_cycle(taal, state.engine.beat_index)
    ]
    return PracticeViewOut(
        view=state.view.value,
        session=_session_out(state.session, language),
        cycle=cycle,
        metronome=_metronome_out(state),
    )


@router.post("/practice/metronome/toggle", response_model=MetronomeOut)
async def toggle_metronome(request: Request) -> MetronomeOut:
    """Play or pause the beat cycle."""
    state = request.app.state.practice
    state.toggle_metronome()
    return _metronome_out(state)
