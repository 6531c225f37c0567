"""Tests for the HTTP service."""

from fastapi.testclient import TestClient

from py_worldgen.api.main import app


class TestWorldAPI:
    """Test the world generation endpoints."""

    def setup_method(self):
        """Set up test client."""
        self.client = TestClient(app)

    def test_root(self):
        """Root endpoint reports the service."""
        response = self.client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self):
        """Health endpoint."""
        response = self.client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_generate_minimal(self):
        """A minimal world has primordials, creators and geography only."""
        response = self.client.post(
            "/worlds/generate", json={"seed": "api-seed", "depth": "minimal"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["seed"] == "api-seed"
        assert len(data["primordials"]) == 6
        assert len(data["cosmic_creators"]) == 8
        assert data["geography"]
        assert data["mortal_races"] == []

    def test_generate_is_deterministic(self):
        """Identical requests give identical entities."""
        body = {"seed": "api-seed", "include_levels": [1, 2, 2.5, 5, 6]}

        first = self.client.post("/worlds/generate", json=body).json()
        second = self.client.post("/worlds/generate", json=body).json()

        assert [o["name"] for o in first["organizations"]] == [
            o["name"] for o in second["organizations"]
        ]
        assert [o["id"] for o in first["organizations"]] == [
            o["id"] for o in second["organizations"]
        ]

    def test_generate_default_seed(self):
        """A request without a seed uses the configured default."""
        response = self.client.post("/worlds/generate", json={"depth": "minimal"})

        assert response.status_code == 200
        assert response.json()["seed"]

    def test_generation_error_maps_to_422(self):
        """Dependency violations come back as 422 with the message."""
        response = self.client.post(
            "/worlds/generate", json={"seed": "api-seed", "include_levels": [3]}
        )

        assert response.status_code == 422
        assert "must be generated before" in response.json()["detail"]

    def test_invalid_body(self):
        """Unknown densities are rejected by validation."""
        response = self.client.post(
            "/worlds/generate", json={"seed": "api-seed", "organization_density": "crowded"}
        )

        assert response.status_code == 422

    def test_summary(self):
        """Summary counts every collection of the full world."""
        response = self.client.get("/worlds/api-seed/summary")

        assert response.status_code == 200
        counts = response.json()["counts"]
        assert counts["primordials"] == 6
        assert counts["dungeons"] > 0

    def test_primordials(self):
        """Primordials endpoint."""
        response = self.client.get("/worlds/api-seed/primordials")

        assert response.status_code == 200
        assert [p["primordial_type"] for p in response.json()] == [
            "space", "time", "light", "dark", "order", "chaos"
        ]

    def test_geography_filter(self):
        """Geography endpoint filters by kind."""
        response = self.client.get(
            "/worlds/api-seed/geography", params={"geography_type": "river"}
        )

        assert response.status_code == 200
        rivers = response.json()
        assert rivers
        assert all(g["geography_type"] == "river" for g in rivers)

    def test_organizations_filter(self):
        """Organizations endpoint filters by magnitude."""
        response = self.client.get(
            "/worlds/api-seed/organizations", params={"magnitude": "kingdom"}
        )

        assert response.status_code == 200
        assert all(o["magnitude"] == "kingdom" for o in response.json())

    def test_standout_boss_flag_serialized(self):
        """is_boss is part of the serialized standouts."""
        response = self.client.post(
            "/worlds/generate", json={"seed": "api-seed", "depth": "partial"}
        )

        standouts = response.json()["standout_mortals"]
        assert standouts
        for standout in standouts:
            assert standout["is_boss"] == (standout["alignment"] == "evil")
