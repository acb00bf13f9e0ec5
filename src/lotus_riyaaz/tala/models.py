"""Tāl registry — metric structure of the supported Hindustani rhythmic cycles.

Each tāl has a fixed number of matras (beats) and an ordered list of bols
(spoken syllables). The bol list also carries the vibhag separators "|" and
"||" exactly as they are displayed, so its length is independent of the
matra count.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaalName(StrEnum):
    """Names of the registered tāls."""

    TEENTAAL = "Teentaal"
    DADRA = "Dadra"
    KEHARWA = "Keharwa"


@dataclass(frozen=True)
class TaalDefinition:
    """A tāl cycle.

    Attributes:
        name: Display name (e.g. "Teentaal").
        matras: Total beats in one cycle.
        bols: Syllables in display order, including vibhag separators.
    """

    name: str
    matras: int
    bols: tuple[str, ...]

    def __post_init__(self) -> None:
        if self.matras <= 0:
            raise ValueError(f"{self.name}: matras must be positive, got {self.matras}")


_TAALS: dict[str, TaalDefinition] = {
    t.name: t
    for t in (
        TaalDefinition(
            name=TaalName.TEENTAAL.value,
            matras=16,
            bols=(
                "Dha", "Dhin", "Dhin", "Dha", "|",
                "Dha", "Dhin", "Dhin", "Dha", "||",
                "Na", "Tin", "Tin", "Ta", "|",
                "Ta", "Dhin", "Dhin", "Dha",
            ),
        ),
        TaalDefinition(
            name=TaalName.DADRA.value,
            matras=6,
            bols=("Dha", "Dhi", "Na", "|", "Ti", "Na"),
        ),
        TaalDefinition(
            name=TaalName.KEHARWA.value,
            matras=8,
            bols=("Dha", "Ge", "Na", "Ti", "|", "Na", "Ka", "Dhi", "Na"),
        ),
    )
}

DEFAULT_TAAL = TaalName.TEENTAAL.value


def get_taal(name: str) -> TaalDefinition:
    """Look up a tāl by name (case-insensitive).

    Raises:
        KeyError: If the name is not registered.
    """
    if name in _TAALS:
        return _TAALS[name]

    name_lower = name.lower()
    for taal in _TAALS.values():
        if taal.name.lower() == name_lower:
            return taal

    raise KeyError(f"Taal not found: {name}")


def list_taals() -> list[TaalDefinition]:
    """Return all registered tāls in registry order."""
    return list(_TAALS.values())
