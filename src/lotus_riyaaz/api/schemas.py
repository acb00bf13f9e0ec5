"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from lotus_riyaaz.session.config import Instrument, Mode
from lotus_riyaaz.tala.models import TaalName

# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class ConfigUpdate(BaseModel):
    """Partial update of the practice configuration."""

    tempo: int | None = Field(None, gt=0, description="Beats per minute")
    scale_hz: float | None = Field(None, gt=0, description="Sa reference pitch in Hz")
    taal: TaalName | None = None


class SessionStart(BaseModel):
    mode: Mode


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    taals: list[str]


class RagaCardOut(BaseModel):
    index: int
    name: str
    thaat: str
    time_of_day: str


class CatalogOut(BaseModel):
    """Catalog cards plus where the catalog came from."""

    source: str
    ragas: list[RagaCardOut]
    message: str | None = None


class RagaDetailOut(BaseModel):
    index: int
    name: str
    thaat: str
    aroh: str
    avroh: str
    pakad: str
    vadi: str
    samvadi: str
    jati: str
    time_of_day: str
    mood: str
    difficulty_level: str


class TaalOut(BaseModel):
    name: str
    matras: int
    bols: list[str]


class ConfigOut(BaseModel):
    selected_raga: str | None
    scale_hz: float
    tempo: int
    taal: str
    instruments: dict[Instrument, bool]


class SessionOut(BaseModel):
    mode: Mode
    raga: str | None
    scale_hz: float
    tempo: int
    taal: str
    instruments: dict[Instrument, bool]


class BolCellOut(BaseModel):
    position: int
    bol: str
    active: bool


class MetronomeOut(BaseModel):
    running: bool
    beat_index: int
    taal: str
    tempo: int


class PracticeViewOut(BaseModel):
    """Everything the practice screen needs to render."""

    view: str
    session: SessionOut | None = None
    message: str | None = None
    cycle: list[BolCellOut] = []
    metronome: MetronomeOut
