"""Practice state — the single owner of catalog, selection, session and metronome.

All mutation goes through PracticeState methods so that the beat cycle
engine always follows the live tempo and tāl, and so that teardown has one
place to stop the metronome.
"""

from __future__ import annotations

import asyncio
import logging
from enum import StrEnum

from lotus_riyaaz.raga.catalog import Catalog, RagaRecord
from lotus_riyaaz.raga.text import Language, resolve
from lotus_riyaaz.session.config import (
    Instrument,
    Mode,
    SessionConfig,
    SessionSnapshot,
)
from lotus_riyaaz.tala.beat_cycle import BeatCycleEngine, SleepFn
from lotus_riyaaz.tala.models import TaalDefinition, get_taal

logger = logging.getLogger(__name__)


class View(StrEnum):
    """Screen the learner is looking at."""

    ragas = "ragas"
    practice = "practice"


class PracticeState:
    """Process-wide practice state.

    Args:
        catalog: The catalog loaded at startup.
        config: Initial settings (defaults if None).
        sleep: Sleep coroutine used by the metronome.
    """

    def __init__(
        self,
        catalog: Catalog,
        config: SessionConfig | None = None,
        *,
        sleep: SleepFn = asyncio.sleep,
    ):
        self.catalog = catalog
        self.config = config or SessionConfig()
        self.selected: RagaRecord | None = None
        self.session: SessionSnapshot | None = None
        self.view = View.ragas
        self.engine = BeatCycleEngine(
            get_taal(self.config.taal), self.config.tempo, sleep=sleep,
        )

    @property
    def active_taal(self) -> TaalDefinition:
        return get_taal(self.config.taal)

    # -- selection -----------------------------------------------------------

    def select_raga(self, index: int) -> RagaRecord:
        """Open a rāga from the catalog.

        Raises:
            IndexError: If ``index`` is outside the catalog.
        """
        if not 0 <= index < len(self.catalog):
            raise IndexError(f"No raga at index {index}")
        self.selected = self.catalog[index]
        self.config.reset_for_raga()
        self.engine.reconfigure(tempo=self.config.tempo)
        return self.selected

    def clear_selection(self) -> None:
        self.selected = None

    # -- configuration -------------------------------------------------------

    def set_tempo(self, bpm: int) -> None:
        self.config.set_tempo(bpm)
        self.engine.reconfigure(tempo=self.config.tempo)

    def set_scale_hz(self, hz: float) -> None:
        self.config.set_scale_hz(hz)

    def set_taal(self, name: str) -> None:
        self.config.set_taal(name)
        self.engine.reconfigure(taal=self.active_taal)

    def toggle_instrument(self, instrument: Instrument | str) -> bool:
        return self.config.toggle_instrument(instrument)

    # -- session -------------------------------------------------------------

    def start_session(self, mode: Mode | str) -> SessionSnapshot:
        """Freeze the current selection and settings and open the practice view."""
        self.session = self.config.snapshot(mode, self.selected)
        self.view = View.practice
        raga_name = resolve(self.selected.name, Language.en) if self.selected else None
        logger.info(
            "Session started: mode=%s raga=%s tempo=%d taal=%s",
            self.session.mode, raga_name, self.session.tempo, self.session.taal,
        )
        return self.session

    def toggle_metronome(self) -> bool:
        """Play or pause the beat cycle. Returns the new running state."""
        return self.engine.toggle()

    def shutdown(self) -> None:
        """Stop the metronome; called when the hosting app tears down."""
        self.engine.stop()
