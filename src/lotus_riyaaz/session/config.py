"""Session configuration — the learner's live choices and frozen snapshots."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

from lotus_riyaaz.raga.catalog import RagaRecord
from lotus_riyaaz.tala.models import DEFAULT_TAAL, get_taal

DEFAULT_SCALE_HZ = 440.0
DEFAULT_TEMPO = 90


class Mode(StrEnum):
    """Kind of practice run."""

    alap = "alap"                 # unmetered melodic exploration
    composition = "composition"   # fixed composition


class Instrument(StrEnum):
    """Accompaniment instruments that can be toggled."""

    tanpura = "tanpura"
    harmonium = "harmonium"
    tabla = "tabla"
    dholak = "dholak"


def _default_instruments() -> dict[Instrument, bool]:
    return {
        Instrument.tanpura: True,
        Instrument.harmonium: False,
        Instrument.tabla: True,
        Instrument.dholak: False,
    }


@dataclass(frozen=True)
class SessionSnapshot:
    """Frozen configuration of one practice run.

    Attributes:
        mode: Alap or composition.
        raga: The selected rāga, or None when the session started without one.
        scale_hz: Reference pitch of Sa in Hz.
        tempo: Beats per minute.
        taal: Name of the tāl.
        instruments: Read-only instrument -> enabled mapping.
    """

    mode: Mode
    raga: RagaRecord | None
    scale_hz: float
    tempo: int
    taal: str
    instruments: Mapping[Instrument, bool]


@dataclass
class SessionConfig:
    """Mutable practice settings edited before a session starts."""

    scale_hz: float = DEFAULT_SCALE_HZ
    tempo: int = DEFAULT_TEMPO
    taal: str = DEFAULT_TAAL
    instruments: dict[Instrument, bool] = field(default_factory=_default_instruments)

    def set_tempo(self, bpm: int) -> None:
        """Set the tempo.

        Raises:
            ValueError: If ``bpm`` is not positive.
        """
        if bpm <= 0:
            raise ValueError(f"Tempo must be positive, got {bpm}")
        self.tempo = bpm

    def set_scale_hz(self, hz: float) -> None:
        """Set the reference pitch.

        Raises:
            ValueError: If ``hz`` is not positive.
        """
        if hz <= 0:
            raise ValueError(f"Scale must be positive, got {hz}")
        self.scale_hz = hz

    def set_taal(self, name: str) -> None:
        """Select a registered tāl.

        Raises:
            KeyError: If the tāl is not registered.
        """
        self.taal = get_taal(name).name

    def toggle_instrument(self, instrument: Instrument | str) -> bool:
        """Flip one instrument on or off. Returns its new state."""
        key = Instrument(instrument)
        self.instruments[key] = not self.instruments.get(key, False)
        return self.instruments[key]

    def reset_for_raga(self) -> None:
        """Restore the default scale and tempo after opening a rāga."""
        self.scale_hz = DEFAULT_SCALE_HZ
        self.tempo = DEFAULT_TEMPO

    def snapshot(self, mode: Mode | str, raga: RagaRecord | None) -> SessionSnapshot:
        """Freeze the current settings into a SessionSnapshot."""
        return SessionSnapshot(
            mode=Mode(mode),
            raga=raga,
            scale_hz=self.scale_hz,
            tempo=self.tempo,
            taal=self.taal,
            instruments=MappingProxyType(dict(self.instruments)),
        )
