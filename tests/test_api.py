"""Tests for the Lotus Riyaaz API endpoints."""

import json

import pytest
from fastapi.testclient import TestClient

from lotus_riyaaz.api.main import create_app
from lotus_riyaaz.raga.catalog import DEFAULT_CATALOG_PATH, FallbackPolicy
from lotus_riyaaz.raga.text import Language
from lotus_riyaaz.settings import Settings


def _client(settings: Settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def client():
    yield from _client(Settings(catalog_source=DEFAULT_CATALOG_PATH, log_level="WARNING"))


@pytest.fixture()
def fallback_client(tmp_path):
    yield from _client(Settings(catalog_source=tmp_path / "missing.json"))


@pytest.fixture()
def empty_client(tmp_path):
    yield from _client(Settings(
        catalog_source=tmp_path / "missing.json",
        catalog_fallback=FallbackPolicy.EMPTY,
    ))


@pytest.fixture()
def hindi_client(tmp_path):
    path = tmp_path / "ragas.json"
    path.write_text(
        json.dumps([{"name": {"hi": "यमन", "en": "Yaman"}, "thaat": "Kalyan"}]),
        encoding="utf-8",
    )
    yield from _client(Settings(catalog_source=path, default_language=Language.hi))


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


class TestHealthEndpoint:
    def test_returns_ok(self, client):
        r = client.get("/api/v1/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "ok"
        assert data["taals"] == ["Teentaal", "Dadra", "Keharwa"]

    def test_has_version(self, client):
        r = client.get("/api/v1/health")
        assert r.json()["version"] == "0.1.0"


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class TestCatalogEndpoints:
    def test_bundled_catalog(self, client):
        r = client.get("/api/v1/ragas")
        assert r.status_code == 200
        data = r.json()
        assert data["source"] == "remote"
        assert data["message"] is None
        names = [c["name"] for c in data["ragas"]]
        assert "Yaman" in names

    def test_hindi_cards(self, client):
        data = client.get("/api/v1/ragas", params={"lang": "hi"}).json()
        assert data["ragas"][0]["name"] == "यमन"

    def test_default_language_from_settings(self, hindi_client):
        data = hindi_client.get("/api/v1/ragas").json()
        assert data["ragas"][0]["name"] == "यमन"
        assert data["ragas"][0]["thaat"] == "Kalyan"

    def test_fallback_catalog(self, fallback_client):
        data = fallback_client.get("/api/v1/ragas").json()
        assert data["source"] == "fallback"
        assert [c["name"] for c in data["ragas"]] == ["Yaman", "Bhoopali"]

    def test_empty_catalog_message(self, empty_client):
        data = empty_client.get("/api/v1/ragas").json()
        assert data["source"] == "empty"
        assert data["ragas"] == []
        assert data["message"] == "No ragas found."

    def test_detail(self, fallback_client):
        r = fallback_client.get("/api/v1/ragas/1")
        assert r.status_code == 200
        body = r.json()
        assert body["name"] == "Bhoopali"
        assert body["aroh"] == "S R G P D S'"
        assert body["jati"] == "Audav–Audav"

    def test_detail_not_found(self, fallback_client):
        assert fallback_client.get("/api/v1/ragas/9").status_code == 404

    def test_select_and_clear(self, fallback_client):
        fallback_client.patch("/api/v1/practice/config", json={"tempo": 150})
        r = fallback_client.post("/api/v1/ragas/0/select")
        assert r.status_code == 200
        config = fallback_client.get("/api/v1/practice/config").json()
        assert config["selected_raga"] == "Yaman"
        assert config["tempo"] == 90

        assert fallback_client.delete("/api/v1/selection").status_code == 204
        config = fallback_client.get("/api/v1/practice/config").json()
        assert config["selected_raga"] is None

    def test_select_not_found(self, empty_client):
        assert empty_client.post("/api/v1/ragas/0/select").status_code == 404

    def test_taals(self, client):
        data = client.get("/api/v1/taals").json()
        by_name = {t["name"]: t for t in data}
        assert by_name["Teentaal"]["matras"] == 16
        assert by_name["Dadra"]["bols"] == ["Dha", "Dhi", "Na", "|", "Ti", "Na"]


# ---------------------------------------------------------------------------
# Practice
# ---------------------------------------------------------------------------


class TestPracticeEndpoints:
    def test_config_defaults(self, client):
        body = client.get("/api/v1/practice/config").json()
        assert body["scale_hz"] == 440.0
        assert body["tempo"] == 90
        assert body["taal"] == "Teentaal"
        assert body["instruments"]["tanpura"] is True
        assert body["instruments"]["dholak"] is False

    def test_update_config(self, client):
        r = client.patch(
            "/api/v1/practice/config",
            json={"tempo": 120, "scale_hz": 261.63, "taal": "Keharwa"},
        )
        assert r.status_code == 200
        body = r.json()
        assert body["tempo"] == 120
        assert body["scale_hz"] == 261.63
        assert body["taal"] == "Keharwa"

    @pytest.mark.parametrize(
        "payload",
        [{"tempo": 0}, {"tempo": -5}, {"scale_hz": 0}, {"taal": "Ektaal"}],
    )
    def test_rejects_invalid_config(self, client, payload):
        assert client.patch("/api/v1/practice/config", json=payload).status_code == 422

    def test_toggle_instrument(self, client):
        r = client.post("/api/v1/practice/instruments/harmonium/toggle")
        assert r.status_code == 200
        assert r.json()["instruments"]["harmonium"] is True

    def test_unknown_instrument(self, client):
        r = client.post("/api/v1/practice/instruments/sitar/toggle")
        assert r.status_code == 422

    def test_practice_view_without_session(self, client):
        body = client.get("/api/v1/practice").json()
        assert body["view"] == "ragas"
        assert body["session"] is None
        assert body["message"] == "Open Ragas, pick one and tap Start."
        assert body["cycle"] == []

    def test_start_session_without_raga(self, client):
        r = client.post("/api/v1/practice/session", json={"mode": "alap"})
        assert r.status_code == 200
        assert r.json()["mode"] == "alap"
        assert r.json()["raga"] is None

        view = client.get("/api/v1/practice").json()
        assert view["view"] == "practice"
        assert view["session"]["raga"] is None
        assert len(view["cycle"]) == 19
        assert [c["position"] for c in view["cycle"] if c["active"]] == [0, 16]

    def test_start_session_with_raga(self, fallback_client):
        fallback_client.post("/api/v1/ragas/0/select")
        fallback_client.patch("/api/v1/practice/config", json={"taal": "Dadra"})
        r = fallback_client.post("/api/v1/practice/session", json={"mode": "composition"})
        body = r.json()
        assert body["raga"] == "Yaman"
        assert body["taal"] == "Dadra"

        view = fallback_client.get("/api/v1/practice").json()
        assert [c["bol"] for c in view["cycle"]] == ["Dha", "Dhi", "Na", "|", "Ti", "Na"]

    def test_rejects_unknown_mode(self, client):
        r = client.post("/api/v1/practice/session", json={"mode": "tarana"})
        assert r.status_code == 422

    def test_metronome_toggle(self, client):
        r = client.post("/api/v1/practice/metronome/toggle")
        assert r.status_code == 200
        body = r.json()
        assert body["running"] is True
        assert body["tempo"] == 90

        r = client.post("/api/v1/practice/metronome/toggle")
        body = r.json()
        assert body["running"] is False
        assert 0 <= body["beat_index"] < 16

    def test_config_change_keeps_metronome_running(self, client):
        client.post("/api/v1/practice/metronome/toggle")
        client.patch("/api/v1/practice/config", json={"tempo": 200, "taal": "Dadra"})
        body = client.get("/api/v1/practice").json()["metronome"]
        assert body["running"] is True
        assert body["tempo"] == 200
        assert body["taal"] == "Dadra"
        assert 0 <= body["beat_index"] < 6


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


class TestLifespan:
    def test_shutdown_stops_running_metronome(self, tmp_path):
        app = create_app(Settings(catalog_source=tmp_path / "missing.json"))
        with TestClient(app) as c:
            r = c.post("/api/v1/practice/metronome/toggle")
            assert r.json()["running"] is True
            assert app.state.practice.engine.running is True
        assert app.state.practice.engine.running is False

    def test_catalog_loaded_on_startup(self, tmp_path):
        app = create_app(Settings(catalog_source=tmp_path / "missing.json"))
        with TestClient(app):
            assert len(app.state.practice.catalog) == 2
