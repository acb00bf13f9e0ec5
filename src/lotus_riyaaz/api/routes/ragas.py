"""Catalog endpoints — rāga cards, detail view, selection, and the tāl registry."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request

from lotus_riyaaz.api.schemas import CatalogOut, RagaCardOut, RagaDetailOut, TaalOut
from lotus_riyaaz.raga.catalog import RagaRecord
from lotus_riyaaz.raga.text import Language, resolve
from lotus_riyaaz.tala.models import list_taals

router = APIRouter()

NO_RAGAS_MESSAGE = "No ragas found."

_LANG_PARAM = Query(None, description="Display language (hi or en)")


def request_language(request: Request, lang: Language | None) -> Language:
    """Use the requested language or the configured default."""
    return lang or request.app.state.settings.default_language


def _detail(index: int, raga: RagaRecord, lang: Language) -> RagaDetailOut:
    return RagaDetailOut(index=index, **raga.localized(lang))


@router.get("/ragas", response_model=CatalogOut)
async def get_ragas(request: Request, lang: Language | None = _LANG_PARAM) -> CatalogOut:
    """Return the catalog as cards (name, thaat, time of day)."""
    state = request.app.state.practice
    language = request_language(request, lang)
    return CatalogOut(
        source=state.catalog.source.value,
        ragas=[
            RagaCardOut(
                index=i,
                name=resolve(r.name, language),
                thaat=resolve(r.thaat, language),
                time_of_day=resolve(r.time_of_day, language),
            )
            for i, r in enumerate(state.catalog)
        ],
        message=NO_RAGAS_MESSAGE if state.catalog.is_empty else None,
    )


@router.get("/ragas/{index}", response_model=RagaDetailOut)
async def get_raga(
    request: Request, index: int, lang: Language | None = _LANG_PARAM,
) -> RagaDetailOut:
    """Return every resolved field of one rāga."""
    catalog = request.app.state.practice.catalog
    if not 0 <= index < len(catalog):
        raise HTTPException(404, f"No raga at index {index}")
    return _detail(index, catalog[index], request_language(request, lang))


@router.post("/ragas/{index}/select", response_model=RagaDetailOut)
async def select_raga(
    request: Request, index: int, lang: Language | None = _LANG_PARAM,
) -> RagaDetailOut:
    """Open a rāga's detail view; resets scale and tempo to their defaults."""
    state = request.app.state.practice
    try:
        raga = state.select_raga(index)
    except IndexError as e:
        raise HTTPException(404, str(e)) from e
    return _detail(index, raga, request_language(request, lang))


@router.delete("/selection", status_code=204)
async def clear_selection(request: Request) -> None:
    """Close the detail view."""
    request.app.state.practice.clear_selection()


@router.get("/taals", response_model=list[TaalOut])
async def get_taals() -> list[TaalOut]:
    """Return the tāl registry."""
    return [
        TaalOut(name=t.name, matras=t.matras, bols=list(t.bols))
        for t in list_taals()
    ]
