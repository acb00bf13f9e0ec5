"""Rāga catalog — records, bundled fallback set, and the one-shot loader."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path

import httpx

from lotus_riyaaz.raga.text import (
    EMPTY_TEXT,
    Language,
    LocalizedText,
    PlainText,
    parse_text,
    resolve,
)

logger = logging.getLogger(__name__)

_CONFIGS_DIR = Path(__file__).resolve().parents[3] / "configs"

DEFAULT_CATALOG_PATH = _CONFIGS_DIR / "ragas.json"


class CatalogUnavailable(Exception):
    """The catalog resource could not be fetched or did not parse."""


class CatalogSource(Enum):
    """Where the active catalog came from."""

    REMOTE = "remote"
    FALLBACK = "fallback"
    EMPTY = "empty"


class FallbackPolicy(Enum):
    """What to use when the catalog resource is unavailable."""

    BUILTIN = "builtin"   # the two bundled records
    EMPTY = "empty"       # no records, shown as "No ragas found."


@dataclass(frozen=True)
class RagaRecord:
    """Theoretical description of one rāga.

    Attributes:
        name: Rāga name (e.g. "Yaman").
        thaat: Parent scale family (e.g. "Kalyan").
        aroh: Ascending note sequence.
        avroh: Descending note sequence.
        pakad: Characteristic phrase.
        vadi: Most emphasized note.
        samvadi: Second most emphasized note.
        jati: Note-count classification (e.g. "Audav–Audav").
        time_of_day: Traditional performance time.
        mood: Rasa / emotional character.
        difficulty_level: Learner difficulty.
    """

    name: LocalizedText
    thaat: LocalizedText = EMPTY_TEXT
    aroh: LocalizedText = EMPTY_TEXT
    avroh: LocalizedText = EMPTY_TEXT
    pakad: LocalizedText = EMPTY_TEXT
    vadi: LocalizedText = EMPTY_TEXT
    samvadi: LocalizedText = EMPTY_TEXT
    jati: LocalizedText = EMPTY_TEXT
    time_of_day: LocalizedText = EMPTY_TEXT
    mood: LocalizedText = EMPTY_TEXT
    difficulty_level: LocalizedText = EMPTY_TEXT

    def localized(self, language: Language | str) -> dict[str, str]:
        """Resolve every field for one display language."""
        return {f.name: resolve(getattr(self, f.name), language) for f in fields(self)}


RAGA_FIELDS = tuple(f.name for f in fields(RagaRecord))


def _plain(**values: str) -> RagaRecord:
    return RagaRecord(**{k: PlainText(v) for k, v in values.items()})


FALLBACK_RAGAS: tuple[RagaRecord, ...] = (
    _plain(
        name="Yaman", thaat="Kalyan",
        aroh="N R G M^ D N S'", avroh="S' N D P M^ G R S",
        pakad="N R G M^ G R S", vadi="G", samvadi="N",
        jati="Sampurna–Sampurna", time_of_day="Evening (6–9 PM)",
        mood="Shanta, Romantic", difficulty_level="Intermediate",
    ),
    _plain(
        name="Bhoopali", thaat="Kalyan",
        aroh="S R G P D S'", avroh="S' D P G R S",
        pakad="G R S, D S', D P G R S", vadi="G", samvadi="D",
        jati="Audav–Audav", time_of_day="Evening",
        mood="Peaceful, Devotional", difficulty_level="Easy",
    ),
)


@dataclass(frozen=True)
class Catalog:
    """An immutable list of rāga records plus where it came from."""

    records: tuple[RagaRecord, ...]
    source: CatalogSource

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def __getitem__(self, index: int) -> RagaRecord:
        return self.records[index]

    @property
    def is_empty(self) -> bool:
        return not self.records


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_raga_record(raw: object) -> RagaRecord:
    """Build a RagaRecord from one parsed JSON object.

    Only ``name`` is required; other fields default to an empty string.

    Raises:
        ValueError: If the entry is not an object, has no name, or any field
            has an unsupported shape.
    """
    if not isinstance(raw, dict):
        raise ValueError(f"Raga entry must be an object, got {type(raw).__name__}")
    if raw.get("name") is None:
        raise ValueError("Raga entry has no name")

    values: dict[str, LocalizedText] = {}
    for name in RAGA_FIELDS:
        if raw.get(name) is None:
            continue
        try:
            values[name] = parse_text(raw[name])
        except ValueError as e:
            raise ValueError(f"Field '{name}': {e}") from e

    # resolve() already falls back across languages, so "" means no name at all
    if not resolve(values["name"], Language.en):
        raise ValueError("Raga entry has an empty name")
    return RagaRecord(**values)


def parse_catalog(payload: object) -> tuple[RagaRecord, ...]:
    """Validate a decoded catalog document.

    Raises:
        CatalogUnavailable: If the payload is not a non-empty array of
            well-formed raga entries.
    """
    if not isinstance(payload, list) or not payload:
        raise CatalogUnavailable("Catalog must be a non-empty JSON array")
    try:
        return tuple(parse_raga_record(entry) for entry in payload)
    except ValueError as e:
        raise CatalogUnavailable(f"Malformed catalog entry: {e}") from e


# ---------------------------------------------------------------------------
# Fetching
# ---------------------------------------------------------------------------


def _is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


async def _fetch_remote(url: str, client: httpx.AsyncClient | None) -> object:
    headers = {"Cache-Control": "no-store"}
    try:
        if client is not None:
            response = await client.get(url, headers=headers)
        else:
            async with httpx.AsyncClient() as own_client:
                response = await own_client.get(url, headers=headers)
        response.raise_for_status()
        return response.json()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise CatalogUnavailable(f"Could not fetch {url}: {e}") from e
    except ValueError as e:
        raise CatalogUnavailable(f"Invalid JSON from {url}: {e}") from e


def _read_local(path: Path) -> object:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise CatalogUnavailable(f"Could not read {path}: {e}") from e
    except ValueError as e:
        raise CatalogUnavailable(f"Invalid JSON in {path}: {e}") from e


async def fetch_catalog(
    source: str | Path = DEFAULT_CATALOG_PATH,
    *,
    client: httpx.AsyncClient | None = None,
) -> tuple[RagaRecord, ...]:
    """Fetch and parse the catalog from a URL or a local JSON file.

    Args:
        source: ``http(s)://`` URL or filesystem path.
        client: Optional httpx client for URL sources.

    Raises:
        CatalogUnavailable: On any network, status, I/O or shape failure.
    """
    if _is_url(source):
        payload = await _fetch_remote(str(source), client)
    else:
        payload = _read_local(Path(source))
    return parse_catalog(payload)


async def load_catalog(
    source: str | Path = DEFAULT_CATALOG_PATH,
    *,
    fallback: FallbackPolicy = FallbackPolicy.BUILTIN,
    client: httpx.AsyncClient | None = None,
) -> Catalog:
    """Load the catalog once, degrading to the fallback on any failure.

    There is no retry: a failed attempt yields the fallback catalog.
    """
    try:
        records = await fetch_catalog(source, client=client)
    except CatalogUnavailable as e:
        if fallback is FallbackPolicy.EMPTY:
            logger.warning("Catalog unavailable (%s); no ragas found", e)
            return Catalog(records=(), source=CatalogSource.EMPTY)
        logger.warning("Catalog unavailable (%s); using built-in ragas", e)
        return Catalog(records=FALLBACK_RAGAS, source=CatalogSource.FALLBACK)

    logger.info("Loaded %d ragas from %s", len(records), source)
    return Catalog(records=records, source=CatalogSource.REMOTE)


class CatalogLoader:
    """Owns the single catalog load attempt of an application lifetime."""

    def __init__(
        self,
        source: str | Path = DEFAULT_CATALOG_PATH,
        fallback: FallbackPolicy = FallbackPolicy.BUILTIN,
        client: httpx.AsyncClient | None = None,
    ):
        self.source = source
        self.fallback = fallback
        self._client = client
        self._catalog: Catalog | None = None

    @property
    def loaded(self) -> bool:
        return self._catalog is not None

    async def load(self) -> Catalog:
        """Return the catalog, fetching it only on the first call."""
        if self._catalog is None:
            self._catalog = await load_catalog(
                self.source, fallback=self.fallback, client=self._client,
            )
        return self._catalog
