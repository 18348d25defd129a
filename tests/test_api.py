"""
Tests for the landmass generation API.
"""

from fastapi.testclient import TestClient

from py_landmass.api.main import app
from py_landmass.config import settings


class TestLandmassAPI:
    """Test API endpoints."""

    def setup_method(self):
        """Set up test client."""
        self.client = TestClient(app)

    def test_root(self):
        response = self.client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self):
        response = self.client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_generate_map(self):
        response = self.client.post("/maps/generate", json={"width": 20, "height": 15, "seed": 4242})

        assert response.status_code == 200
        data = response.json()
        assert data["seed"] == 4242
        assert (data["width"], data["height"]) == (20, 15)
        assert len(data["rows"]) == 15
        assert all(len(row) == 40 for row in data["rows"])
        assert data["land_cells"] == sum(row.split().count("1") for row in data["rows"])
        assert data["degenerate"] == (data["land_cells"] == 0)
        assert data["stats"]["final_land"] == data["land_cells"]
        assert data["region_count"] == data["stats"]["region_count"]

    def test_generation_is_reproducible(self):
        request = {"width": 25, "height": 25, "seed": 98765, "noise_scale": 0.12, "threshold": 0.45}

        first = self.client.post("/maps/generate", json=request).json()
        second = self.client.post("/maps/generate", json=request).json()

        assert first["rows"] == second["rows"]

    def test_random_seed_assigned(self):
        response = self.client.post("/maps/generate", json={"width": 10, "height": 10, "seed": 0})

        assert response.status_code == 200
        assert 100000 <= response.json()["seed"] < 999999

    def test_out_of_range_values_are_bad_requests(self):
        """Values the generator rejects come back as 400 with the reason."""
        for request in ({"width": 0}, {"height": -5}, {"threshold": 1.5}, {"noise_scale": -1}):
            response = self.client.post("/maps/generate", json=request)
            assert response.status_code == 400
            assert response.json()["detail"]

    def test_oversized_map_rejected(self):
        response = self.client.post("/maps/generate", json={"width": 100000, "height": 10})

        assert response.status_code == 400
        assert "limit" in response.json()["detail"]

    def test_size_limit_follows_settings(self):
        """Maps one cell past the configured limit are refused, at the limit they run."""
        too_wide = {"width": settings.max_map_width + 1, "height": 4}
        at_limit = {"width": settings.max_map_width, "height": 4, "seed": 5}

        assert settings.max_map_width <= 256
        assert self.client.post("/maps/generate", json=too_wide).status_code == 400
        assert self.client.post("/maps/generate", json=at_limit).status_code == 200

    def test_malformed_request_rejected(self):
        """Values of the wrong type fail request validation."""
        for request in ({"width": "wide"}, {"width": 2.5}, {"threshold": "high"}):
            response = self.client.post("/maps/generate", json=request)
            assert response.status_code == 422
