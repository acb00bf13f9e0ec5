"""Tāl (rhythm) module.

Provides:
- The registry of supported Hindustani tāls (Teentaal, Dadra, Keharwa)
- Beat cycle rendering for highlighting the active bol
- The asyncio beat cycle engine (metronome)
"""

from lotus_riyaaz.tala.beat_cycle import BeatCycleEngine
from lotus_riyaaz.tala.models import (
    DEFAULT_TAAL,
    TaalDefinition,
    TaalName,
    get_taal,
    list_taals,
)
from lotus_riyaaz.tala.notation import (
    BolCell,
    render_cycle,
    render_cycle_text,
)

__all__ = [
    "DEFAULT_TAAL",
    "BeatCycleEngine",
    "BolCell",
    "TaalDefinition",
    "TaalName",
    "get_taal",
    "list_taals",
    "render_cycle",
    "render_cycle_text",
]
