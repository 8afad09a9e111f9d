"""Tests for API endpoints."""

import pytest
from httpx import AsyncClient, ASGITransport

from groundgame.engine.session import CampaignSession, create_default_session, get_session
from groundgame.engine.targets import CANDIDATE_SAFE_THRESHOLD, PARTY_TOTAL_PROJECTION
from groundgame.main import app
from groundgame.schemas.zone import Zone
from groundgame.seed_data import SEGMENT_RECORDS, ZONE_RECORDS


@pytest.fixture
def session():
    """Fresh session per test, injected in place of the process-wide one."""
    fresh = create_default_session()
    app.dependency_overrides[get_session] = lambda: fresh
    yield fresh
    app.dependency_overrides.clear()


@pytest.fixture
def client(session):
    """Create test client."""
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestObservability:
    """Tests for observability endpoints."""

    @pytest.mark.asyncio
    async def test_health(self, client):
        """Test health check endpoint."""
        async with client:
            response = await client.get("/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "groundgame"

    @pytest.mark.asyncio
    async def test_targets(self, client):
        """Thresholds are fixed constants."""
        async with client:
            response = await client.get("/v1/targets")

        assert response.status_code == 200
        data = response.json()
        assert data["safe_threshold"] == CANDIDATE_SAFE_THRESHOLD
        assert data["party_total_projection"] == PARTY_TOTAL_PROJECTION
        assert data["party_seats_projection"] == 5
        assert data["threshold"]["status"] == "safe"

    @pytest.mark.asyncio
    async def test_tiers(self, client):
        async with client:
            response = await client.get("/v1/tiers")

        keys = [t["key"] for t in response.json()["tiers"]]
        assert keys == ["very_high", "high", "medium", "low", "minimal"]


class TestZones:
    """Tests for ranking and geometry endpoints."""

    @pytest.mark.asyncio
    async def test_ranking(self, client):
        """Zones come back best-first with totals over every zone."""
        async with client:
            response = await client.get("/v1/zones/ranking")

        assert response.status_code == 200
        data = response.json()
        zones = data["zones"]
        assert data["zone_count"] == len(ZONE_RECORDS)
        assert len(zones) == len(ZONE_RECORDS)
        indexes = [z["opportunity_index"] for z in zones]
        assert indexes == sorted(indexes, reverse=True)
        assert data["total_votes"] == sum(z["estimated_votes"] for z in zones)
        assert zones[0]["breakdown"]["avg_weight"] == pytest.approx(1.425)

    @pytest.mark.asyncio
    async def test_ranking_limit_keeps_total(self, client):
        async with client:
            full = (await client.get("/v1/zones/ranking")).json()
            top = (await client.get("/v1/zones/ranking", params={"limit": 3})).json()

        assert len(top["zones"]) == 3
        assert top["total_votes"] == full["total_votes"]
        assert top["zone_count"] == full["zone_count"]

    @pytest.mark.asyncio
    async def test_top_zones(self, client):
        async with client:
            response = await client.get("/v1/zones/top")

        data = response.json()
        assert len(data["zones"]) == 8
        assert data["zones"][0]["breakdown"] is None

    @pytest.mark.asyncio
    async def test_hexagons_geo(self, client, session):
        async with client:
            response = await client.get("/v1/zones/hexagons")

        assert response.status_code == 200
        hexagons = response.json()
        assert len(hexagons) == len(session.zones)
        for h in hexagons:
            assert len(h["vertices"]) == 6
            assert h["color"].startswith("#")

    @pytest.mark.asyncio
    async def test_hexagons_grid(self, client):
        async with client:
            response = await client.get("/v1/zones/hexagons", params={"layout": "grid", "radius": 10})

        hexagons = response.json()
        origin = next(h for h in hexagons if h["zone_id"] == "b-04")
        assert origin["center"][1] == pytest.approx(0.0)

    @pytest.mark.asyncio
    async def test_zone_detail(self, client):
        async with client:
            found = await client.get("/v1/zones/b-01")
            missing = await client.get("/v1/zones/x-99")

        assert found.status_code == 200
        assert found.json()["rank"] == 1
        assert (found.json()["hex_q"], found.json()["hex_r"]) == (2, 0)
        assert missing.status_code == 404


class TestSimulation:
    """Tests for parameter and segment endpoints."""

    @pytest.mark.asyncio
    async def test_scenario_crisis(self, client):
        async with client:
            baseline = (await client.get("/v1/zones/ranking")).json()["total_votes"]
            response = await client.post("/v1/simulation/scenario", json={"text": "Estamos en crisis total"})

        assert response.status_code == 200
        data = response.json()
        assert data["matched_rule"] == "crisis"
        assert data["parameters"] == {
            "party_strength": 0.8,
            "turnout_factor": 1.0,
            "competitor_impact": 0.15,
            "focus_area": "All",
        }
        assert data["total_votes"] < baseline

    @pytest.mark.asyncio
    async def test_scenario_fallback(self, client):
        async with client:
            response = await client.post("/v1/simulation/scenario", json={"text": "hola"})

        # "hola" contains "ola"
        assert response.json()["matched_rule"] == "optimista"

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
            response = await c.post("/v1/simulation/scenario", json={"text": "sin cambios"})
        assert response.json()["matched_rule"] == "fallback"
        assert response.json()["parameters"]["turnout_factor"] == 1.05

    @pytest.mark.asyncio
    async def test_scenario_long_text(self, client):
        """Long free text is matched like any other text, not rejected."""
        async with client:
            response = await client.post("/v1/simulation/scenario", json={"text": "crisis " + "x" * 1000})

        assert response.status_code == 200
        assert response.json()["matched_rule"] == "crisis"

    @pytest.mark.asyncio
    async def test_preset_and_reset(self, client):
        async with client:
            preset = await client.post("/v1/simulation/preset/bello")
            reset = await client.post("/v1/simulation/preset/reset")
            params = await client.get("/v1/simulation/parameters")

        assert preset.json()["parameters"]["focus_area"] == "Bello"
        assert reset.json()["matched_rule"] == "reset"
        assert params.json() == {
            "party_strength": 1.0,
            "turnout_factor": 1.0,
            "competitor_impact": 0.0,
            "focus_area": "All",
        }

    @pytest.mark.asyncio
    async def test_unknown_preset(self, client):
        async with client:
            response = await client.post("/v1/simulation/preset/landslide")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_set_field(self, client, session):
        async with client:
            ok = await client.post("/v1/simulation/field", json={"field": "turnout_factor", "value": 1.2})
            too_high = await client.post("/v1/simulation/field", json={"field": "party_strength", "value": 1.8})
            bad_field = await client.post("/v1/simulation/field", json={"field": "budget", "value": 1.0})
            focus = await client.post("/v1/simulation/field", json={"field": "focus_area", "value": "Medellín"})
            boolean = await client.post("/v1/simulation/field", json={"field": "party_strength", "value": True})

        assert ok.status_code == 200
        assert ok.json()["turnout_factor"] == 1.2
        assert too_high.status_code == 422
        assert bad_field.status_code == 422
        assert focus.json()["focus_area"] == "Medellín"
        assert boolean.status_code == 422
        assert session.parameters.party_strength == 1.0

    @pytest.mark.asyncio
    async def test_reset_endpoint(self, client, session):
        session.apply_preset("crisis")
        async with client:
            response = await client.post("/v1/simulation/reset")
        assert response.json()["party_strength"] == 1.0

    @pytest.mark.asyncio
    async def test_segments(self, client):
        async with client:
            listing = await client.get("/v1/segments")
            toggled = await client.post("/v1/segments/s5/toggle")
            missing = await client.post("/v1/segments/s99/toggle")

        assert len(listing.json()) == len(SEGMENT_RECORDS)
        assert toggled.json()["active"] is True
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_list_presets(self, client):
        async with client:
            response = await client.get("/v1/presets")
        names = [p["name"] for p in response.json()["presets"]]
        assert names == ["crisis", "optimista", "bello", "reset"]


class TestScoringFailure:
    """A corrupted zone fails the request instead of returning a partial ranking."""

    @pytest.mark.asyncio
    async def test_nan_zone_returns_500(self):
        good = Zone(**ZONE_RECORDS[0])
        bad = Zone.model_construct(**{**good.model_dump(), "id": "bad", "historical_support": float("nan")})
        broken = CampaignSession([good, bad], SEGMENT_RECORDS)
        app.dependency_overrides[get_session] = lambda: broken
        try:
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
                response = await client.get("/v1/zones/ranking")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json()["zone_id"] == "bad"
