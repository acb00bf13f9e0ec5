"""Beat cycle rendering — mark the bol that belongs to the current beat.

A bol at display position ``i`` is active when ``i % matras`` equals the
current beat index. Separators count as positions, so in cycles whose bol
list is longer than the matra count more than one cell can light up.
"""

from __future__ import annotations

from dataclasses import dataclass

from lotus_riyaaz.tala.models import TaalDefinition


@dataclass(frozen=True)
class BolCell:
    """One displayed bol of a tāl cycle."""

    position: int
    bol: str
    active: bool


def render_cycle(taal: TaalDefinition, beat_index: int) -> list[BolCell]:
    """Return every bol of the cycle with its highlight state."""
    return [
        BolCell(position=i, bol=bol, active=i % taal.matras == beat_index)
        for i, bol in enumerate(taal.bols)
    ]


def render_cycle_text(taal: TaalDefinition, beat_index: int) -> str:
    """Render the cycle on one line with active bols in brackets.

    Example for Dadra at beat 1::

        Dha [Dhi] Na | Ti Na
    """
    return " ".join(
        f"[{cell.bol}]" if cell.active else cell.bol
        for cell in render_cycle(taal, beat_index)
    )
