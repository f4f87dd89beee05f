"""Tests for analysis API endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from scoopdash.config import settings
from scoopdash.main import app


@pytest.fixture
async def client():
    """Provide an async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


class TestGetAnalysis:
    async def test_default_specs(self, client: AsyncClient) -> None:
        """Without parameters, analyzes the dashboard's initial inputs."""
        response = await client.get("/analysis")

        assert response.status_code == 200
        data = response.json()
        assert data["total_combinations"] == 36
        assert [g["value"] for g in data["scoopers"]] == [5, 6, 7, 8]

    async def test_analysis_response_shape(
        self, client: AsyncClient, scoopee_spec: str, scooper_spec: str
    ) -> None:
        response = await client.get(
            "/analysis",
            params={"scoopees": scoopee_spec, "scoopers": scooper_spec},
        )

        assert response.status_code == 200
        data = response.json()

        assert data["scoopees"][0] == {"value": 1, "count": 2, "label": "1 (×2)"}
        assert [e["value"] for e in data["sum_frequency"]] == [2, 3, 4, 5, 6, 7, 8, 9, 10]
        six = next(e for e in data["sum_frequency"] if e["value"] == 6)
        assert six == {"value": 6, "frequency": 7, "is_valid_scooper": True}

        effectiveness = data["scooper_effectiveness"]
        assert [e["combinations"] for e in effectiveness] == [6, 7, 6, 5]
        assert effectiveness[3]["count"] == 3
        assert effectiveness[1]["probability"] == pytest.approx(7 / 36)

    async def test_insights_summary(self, client: AsyncClient) -> None:
        response = await client.get("/analysis")

        insights = response.json()["insights"]
        assert [e["value"] for e in insights["top_sums"]] == [6, 5, 7]
        assert [e["value"] for e in insights["top_scoopers"]] == [6, 5, 7]
        assert insights["summary"][2] == "Total possible combinations: 36"

    async def test_empty_specs(self, client: AsyncClient) -> None:
        response = await client.get("/analysis", params={"scoopees": "", "scoopers": ""})

        assert response.status_code == 200
        data = response.json()
        assert data["scoopees"] == []
        assert data["sum_frequency"] == []
        assert data["scooper_effectiveness"] == []
        assert data["total_combinations"] == 0

    async def test_malformed_spec_is_not_an_error(self, client: AsyncClient) -> None:
        response = await client.get("/analysis", params={"scoopees": "abc, 5-3", "scoopers": "x"})

        assert response.status_code == 200
        assert response.json()["total_combinations"] == 0

    async def test_oversized_spec_rejected(self, client: AsyncClient) -> None:
        spec = "1," * settings.max_spec_length

        response = await client.get("/analysis", params={"scoopees": spec})

        assert response.status_code == 422


class TestParseSpec:
    async def test_parse_clean_spec(self, client: AsyncClient) -> None:
        response = await client.post("/analysis/parse", json={"spec": "1 (2), 3-4"})

        assert response.status_code == 200
        data = response.json()
        assert [g["value"] for g in data["groups"]] == [1, 3, 4]
        assert data["total_cards"] == 4
        assert data["issues"] == []

    async def test_parse_reports_issues(self, client: AsyncClient) -> None:
        response = await client.post("/analysis/parse", json={"spec": "abc, 2 (0), 5-3"})

        assert response.status_code == 200
        data = response.json()
        assert data["groups"] == [{"value": 2, "count": 1, "label": "2"}]
        assert [i["kind"] for i in data["issues"]] == [
            "invalid_value",
            "invalid_multiplier",
            "inverted_range",
        ]
        assert [i["position"] for i in data["issues"]] == [0, 1, 2]

    async def test_parse_empty_body(self, client: AsyncClient) -> None:
        response = await client.post("/analysis/parse", json={})

        assert response.status_code == 200
        assert response.json()["groups"] == []


class TestOversizedPools:
    async def test_huge_multiplier_is_not_an_error(self, client: AsyncClient) -> None:
        response = await client.get(
            "/analysis",
            params={"scoopees": "1 (100000000000000)", "scoopers": "2"},
        )

        assert response.status_code == 200
        assert response.json()["total_combinations"] == 0

    async def test_parse_reports_card_limit(self, client: AsyncClient) -> None:
        response = await client.post("/analysis/parse", json={"spec": "1-10000"})

        assert response.status_code == 200
        data = response.json()
        assert data["total_cards"] == 0
        assert [i["kind"] for i in data["issues"]] == ["too_many_cards"]
