"""Integration tests for the REST API.

These tests verify:
- Catalog endpoints with calculated volumes
- Volume endpoints and calculation error responses
- Plan calculation and validation
- Bag estimation
"""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from soilcalc.web import create_app


@pytest.fixture
def client() -> TestClient:
    """Create a test client for a fresh application."""
    return TestClient(create_app())


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestBedsEndpoints:
    """Tests for /api/v1/beds."""

    def test_list(self, client: TestClient) -> None:
        response = client.get("/api/v1/beds")
        assert response.status_code == 200
        beds = response.json()["beds"]
        assert len(beds) == 23
        assert beds[0]["id"] == "classic-large"
        assert beds[0]["volume"]["cubic_feet"] == 32.0
        assert beds[0]["dimensions_text"] == "8ft × 4ft × 1ft"

    def test_list_by_shape(self, client: TestClient) -> None:
        response = client.get("/api/v1/beds", params={"shape": "circular"})
        assert response.status_code == 200
        beds = response.json()["beds"]
        assert [bed["id"] for bed in beds] == [
            "round-small",
            "birdies-round-small",
            "round-medium",
        ]
        assert beds[0]["dimensions"]["diameter"] == 3

    def test_get(self, client: TestClient) -> None:
        response = client.get("/api/v1/beds/round-medium")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Round Medium"
        assert data["volume"]["cubic_feet"] == 12.57
        assert data["nominal_cubic_feet"] == 12.57

    def test_get_unknown(self, client: TestClient) -> None:
        response = client.get("/api/v1/beds/moon-crater")
        assert response.status_code == 404
        data = response.json()
        assert data["error_type"] == "not_found"
        assert "moon-crater" in data["error"]


class TestVolumeEndpoints:
    """Tests for /api/v1/volume."""

    def test_rectangular(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/volume/rectangular",
            json={"length": 4, "width": 3, "height": 1},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["volume"] == {
            "cubic_feet": 12.0,
            "cubic_yards": 0.44,
            "cubic_meters": 0.34,
            "liters": 339.8,
            "gallons": 89.77,
            "display_unit": "cubic_feet",
        }
        assert data["fill_factor"] == 1.0
        assert data["formatted"] == "12 ft³"

    def test_rectangular_inches_with_fill(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/volume/rectangular",
            json={
                "length": 48,
                "width": 36,
                "height": 12,
                "length_width_unit": "inches",
                "height_unit": "inches",
                "fill_factor": 0.5,
                "display_unit": "liters",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["volume"]["cubic_feet"] == 12.0
        assert data["filled_volume"]["cubic_feet"] == 6.0
        assert data["formatted"] == "169.9 L"

    def test_circular(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/volume/circular", json={"diameter": 4, "height": 1}
        )
        assert response.status_code == 200
        assert response.json()["volume"]["cubic_feet"] == 12.57
        assert response.json()["volume"]["liters"] == 355.84

    @pytest.mark.parametrize(
        "body,error_type,field",
        [
            ({"length": 0, "width": 3, "height": 1}, "invalid_dimension", "length"),
            ({"length": 4, "width": -3, "height": 1}, "invalid_dimension", "width"),
            (
                {"length": 1001, "width": 3, "height": 1},
                "dimension_too_large",
                "length",
            ),
            (
                {"length": 4, "width": 3, "height": 1, "fill_factor": 0.6},
                "invalid_input",
                "fill_factor",
            ),
        ],
    )
    def test_calculation_errors(
        self, client: TestClient, body: dict[str, Any], error_type: str, field: str
    ) -> None:
        response = client.post("/api/v1/volume/rectangular", json=body)
        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == error_type
        assert data["details"] == {"field": field}

    def test_missing_field(self, client: TestClient) -> None:
        response = client.post("/api/v1/volume/circular", json={"diameter": 4})
        assert response.status_code == 422


class TestPlanEndpoints:
    """Tests for /api/v1/plan."""

    def test_calculate(self, client: TestClient, sample_plan_data: dict[str, Any]) -> None:
        response = client.post("/api/v1/plan", json=sample_plan_data)
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert len(data["entries"]) == 4
        assert data["entries"][2]["bed"]["name"] == "Herb bed"
        assert data["entries"][2]["filled_volume"]["cubic_feet"] == 6.0
        assert data["total"]["cubic_feet"] == 82.57
        assert data["formatted_total"] == "82.57 ft³"
        assert data["bags_required"] == 56
        assert data["cost"] == pytest.approx(107.1)

    def test_calculate_with_bed_errors(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/plan",
            json={"beds": [{"catalog_id": "moon-crater"}, {"catalog_id": "small-square"}]},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"] == ["beds[0]: Garden bed not found: moon-crater"]
        assert data["total"]["cubic_feet"] == 16.0

    def test_calculate_empty(self, client: TestClient) -> None:
        response = client.post("/api/v1/plan", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["total"] is None
        assert data["formatted_total"] == "0 ft³"
        assert data["bags_required"] == 0

    def test_calculate_invalid_schema(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/plan", json={"beds": [{"catalog_id": "small-square", "fill_factor": 2}]}
        )
        assert response.status_code == 422

    def test_validate_valid(
        self, client: TestClient, sample_plan_data: dict[str, Any]
    ) -> None:
        response = client.post("/api/v1/plan/validate", json={"plan": sample_plan_data})
        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": []}

    def test_validate_invalid(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/plan/validate",
            json={"plan": {"beds": [{"catalog_id": "small-square", "fill_factor": 0.3}]}},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "beds[0].fill_factor"


class TestBagsEndpoint:
    """Tests for /api/v1/bags."""

    def test_bags(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/bags", json={"total_cubic_feet": 12.1, "bag_size": 1.5}
        )
        assert response.status_code == 200
        assert response.json()["bags_required"] == 9

    def test_zero_volume(self, client: TestClient) -> None:
        response = client.post("/api/v1/bags", json={"total_cubic_feet": 0, "bag_size": 1.5})
        assert response.json()["bags_required"] == 0

    def test_invalid_bag_size(self, client: TestClient) -> None:
        response = client.post("/api/v1/bags", json={"total_cubic_feet": 12, "bag_size": 0})
        assert response.status_code == 422


def _post_raw(client: TestClient, url: str, body: str):
    """Post a JSON body as text so it can carry NaN and Infinity tokens."""
    return client.post(url, content=body, headers={"Content-Type": "application/json"})


class TestNonFiniteInput:
    """NaN and Infinity are rejected with a 422 response, never a 500."""

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    def test_rectangular_dimension(self, client: TestClient, token: str) -> None:
        response = _post_raw(
            client,
            "/api/v1/volume/rectangular",
            f'{{"length": {token}, "width": 3, "height": 1}}',
        )
        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        assert data["details"][0]["path"] == "length"

    def test_circular_dimension(self, client: TestClient) -> None:
        response = _post_raw(
            client, "/api/v1/volume/circular", '{"diameter": 4, "height": NaN}'
        )
        assert response.status_code == 422
        assert response.json()["details"][0]["path"] == "height"

    @pytest.mark.parametrize(
        "body",
        [
            '{"total_cubic_feet": Infinity, "bag_size": 1.5}',
            '{"total_cubic_feet": NaN, "bag_size": 1.5}',
            '{"total_cubic_feet": 12, "bag_size": Infinity}',
        ],
    )
    def test_bags(self, client: TestClient, body: str) -> None:
        response = _post_raw(client, "/api/v1/bags", body)
        assert response.status_code == 422
        assert response.json()["error_type"] == "validation"

    def test_plan(self, client: TestClient) -> None:
        response = _post_raw(
            client,
            "/api/v1/plan",
            '{"beds": [{"shape": "rectangular", "length": NaN, "width": 3, "height": 1}]}',
        )
        assert response.status_code == 422
        assert response.json()["details"][0]["path"] == "beds[0].length"

    def test_plan_validate(self, client: TestClient) -> None:
        response = _post_raw(
            client,
            "/api/v1/plan/validate",
            '{"plan": {"beds": [{"shape": "circular", "diameter": NaN, "height": 1}]}}',
        )
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "beds[0].diameter"
        assert data["errors"][0]["value"] == "nan"


class TestPlanValidateMatchesCalculation:
    """/plan/validate reports the same bed errors as /plan."""

    PLAN = {
        "beds": [
            {"catalog_id": "no-such-bed"},
            {"shape": "rectangular", "length": -1, "width": 3, "height": 1},
            {"catalog_id": "small-square"},
        ]
    }

    def test_validate_reports_bed_errors(self, client: TestClient) -> None:
        response = client.post("/api/v1/plan/validate", json={"plan": self.PLAN})
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"] == [
            {
                "path": "beds[0]",
                "message": "Garden bed not found: no-such-bed",
                "error_type": "bed",
            },
            {
                "path": "beds[1]",
                "message": "Length must be a positive number",
                "error_type": "bed",
            },
        ]

    def test_calculation_agrees(self, client: TestClient) -> None:
        validated = client.post("/api/v1/plan/validate", json={"plan": self.PLAN}).json()
        calculated = client.post("/api/v1/plan", json=self.PLAN).json()
        assert calculated["is_valid"] is validated["is_valid"] is False
        assert len(calculated["errors"]) == len(validated["errors"]) == 2


class TestPlanSize:
    def test_oversized_plan_rejected(self, client: TestClient) -> None:
        beds = [{"catalog_id": "classic-large", "quantity": 100} for _ in range(500)]
        response = client.post("/api/v1/plan", json={"beds": beds})
        assert response.status_code == 422
        assert response.json()["details"][0]["path"] == "beds"

    def test_plan_at_limit(self, client: TestClient) -> None:
        beds = [{"catalog_id": "classic-large", "quantity": 100} for _ in range(10)]
        response = client.post("/api/v1/plan", json={"beds": beds})
        assert response.status_code == 200
        data = response.json()
        assert len(data["entries"]) == 1000
        assert data["total"]["cubic_feet"] == 32_000.0


class TestCors:
    """Tests for the CORS configuration."""

    PREFLIGHT = {
        "Origin": "https://garden.example",
        "Access-Control-Request-Method": "POST",
    }

    def test_default_allows_any_origin_without_credentials(
        self, client: TestClient
    ) -> None:
        response = client.options("/api/v1/bags", headers=self.PREFLIGHT)
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "access-control-allow-credentials" not in response.headers

    def test_explicit_origins_allow_credentials(self) -> None:
        client = TestClient(create_app(allowed_origins=["https://garden.example"]))
        response = client.options("/api/v1/bags", headers=self.PREFLIGHT)
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "https://garden.example"
        assert response.headers["access-control-allow-credentials"] == "true"

    def test_explicit_origins_reject_others(self) -> None:
        client = TestClient(create_app(allowed_origins=["https://garden.example"]))
        response = client.options(
            "/api/v1/bags",
            headers={**self.PREFLIGHT, "Origin": "https://elsewhere.example"},
        )
        assert response.status_code == 400
