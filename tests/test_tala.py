"""Tests for the tāl registry and beat cycle rendering."""

import pytest

from lotus_riyaaz.tala.models import (
    DEFAULT_TAAL,
    TaalDefinition,
    TaalName,
    get_taal,
    list_taals,
)
from lotus_riyaaz.tala.notation import render_cycle, render_cycle_text

# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestTaalRegistry:
    def test_three_taals(self):
        assert [t.name for t in list_taals()] == ["Teentaal", "Dadra", "Keharwa"]

    @pytest.mark.parametrize(
        ("name", "matras"),
        [("Teentaal", 16), ("Dadra", 6), ("Keharwa", 8)],
    )
    def test_matras(self, name, matras):
        assert get_taal(name).matras == matras

    def test_teentaal_bols(self):
        taal = get_taal("Teentaal")
        assert len(taal.bols) == 19
        assert taal.bols[:4] == ("Dha", "Dhin", "Dhin", "Dha")
        assert taal.bols.count("|") == 2
        assert taal.bols.count("||") == 1

    def test_dadra_bols(self):
        assert get_taal("Dadra").bols == ("Dha", "Dhi", "Na", "|", "Ti", "Na")

    def test_keharwa_bols(self):
        assert get_taal("Keharwa").bols == (
            "Dha", "Ge", "Na", "Ti", "|", "Na", "Ka", "Dhi", "Na",
        )

    def test_lookup_is_case_insensitive(self):
        assert get_taal("keharwa").name == "Keharwa"

    def test_enum_names_match_registry(self):
        assert {t.value for t in TaalName} == {t.name for t in list_taals()}
        assert DEFAULT_TAAL == "Teentaal"

    def test_unknown_taal_raises(self):
        with pytest.raises(KeyError):
            get_taal("Jhaptaal")

    def test_matras_must_be_positive(self):
        with pytest.raises(ValueError):
            TaalDefinition(name="Broken", matras=0, bols=())

    def test_definitions_are_immutable(self):
        taal = get_taal("Dadra")
        with pytest.raises(AttributeError):
            taal.matras = 7


# ---------------------------------------------------------------------------
# Cycle rendering
# ---------------------------------------------------------------------------


class TestRenderCycle:
    def test_one_cell_per_bol(self):
        taal = get_taal("Keharwa")
        cells = render_cycle(taal, 0)
        assert [c.bol for c in cells] == list(taal.bols)
        assert [c.position for c in cells] == list(range(len(taal.bols)))

    def test_dadra_single_active(self):
        cells = render_cycle(get_taal("Dadra"), 1)
        assert [c.bol for c in cells if c.active] == ["Dhi"]

    def test_wraps_when_bols_exceed_matras(self):
        # Teentaal lists 19 bols for 16 matras: positions 0 and 16 share beat 0
        cells = render_cycle(get_taal("Teentaal"), 0)
        assert [c.position for c in cells if c.active] == [0, 16]

    def test_separator_can_be_active(self):
        cells = render_cycle(get_taal("Dadra"), 3)
        assert [c.bol for c in cells if c.active] == ["|"]

    def test_text_rendering(self):
        assert render_cycle_text(get_taal("Dadra"), 1) == "Dha [Dhi] Na | Ti Na"
