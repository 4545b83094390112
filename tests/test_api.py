"""
Tests for the HTTP layer
"""

from random import Random

import pytest
from fastapi.testclient import TestClient

from ladle.internal.operations import default_operations
from ladle.main import create_server

RED = {"h": 0, "s": 100, "v": 100}


class TestConvert:

    def test_hex(self, client):
        response = client.post("/api/convert", json={"type": "hex", "value": "#3498DB"})

        assert response.status_code == 200
        assert response.json() == {
            "hex": "#3498db",
            "rgb": {"r": 52, "g": 152, "b": 219},
            "hsl": {"h": 204, "s": 70, "l": 53},
            "hsv": {"h": 204, "s": 76, "v": 86},
        }

    def test_rgb(self, client):
        response = client.post("/api/convert", json={"type": "rgb", "value": {"r": 0, "g": 255, "b": 255}})

        assert response.status_code == 200
        assert response.json()["hex"] == "#00ffff"
        assert response.json()["hsl"] == {"h": 180, "s": 100, "l": 50}

    def test_hsl(self, client):
        response = client.post("/api/convert", json={"type": "hsl", "value": {"h": 120, "s": 100, "l": 50}})

        assert response.status_code == 200
        assert response.json()["rgb"] == {"r": 0, "g": 255, "b": 0}

    def test_hsv(self, client):
        response = client.post("/api/convert", json={"type": "hsv", "value": RED})

        assert response.status_code == 200
        assert response.json()["hex"] == "#ff0000"

    @pytest.mark.parametrize(
        "body",
        [
            {"type": "hex", "value": "#12345"},
            {"type": "rgb", "value": {"r": 256, "g": 0, "b": 0}},
            {"type": "hsl", "value": {"h": 360, "s": 50, "l": 50}},
            {"type": "hsv", "value": {"h": 0, "s": 101, "v": 50}},
        ],
    )
    def test_invalid_values_are_client_errors(self, client, body):
        response = client.post("/api/convert", json=body)

        assert response.status_code == 400
        assert response.json()["detail"]

    @pytest.mark.parametrize(
        "body",
        [
            {"type": "rgb", "value": "#ffffff"},
            {"type": "hex", "value": {"r": 1, "g": 2, "b": 3}},
            {"type": "cmyk", "value": [0, 0, 0, 0]},
            {"value": "#ffffff"},
        ],
    )
    def test_mismatched_payloads_are_rejected(self, client, body):
        assert client.post("/api/convert", json=body).status_code == 422

    def test_malformed_json(self, client):
        response = client.post("/api/convert", content=b"{not json", headers={"Content-Type": "application/json"})

        assert response.status_code == 422


class TestPalette:

    def test_complementary(self, client):
        response = client.post("/api/palette", json={"baseColor": {"hsv": RED}, "type": "complementary", "count": 2})

        assert response.status_code == 200
        palette = response.json()["palette"]
        assert [c["hex"] for c in palette] == ["#ff0000", "#00ffff"]
        assert [c["hsv"]["h"] for c in palette] == [0, 180]

    def test_accepts_full_color_record(self, client):
        base = client.post("/api/convert", json={"type": "hex", "value": "#3498db"}).json()
        response = client.post("/api/palette", json={"baseColor": base, "type": "triadic", "count": 6})

        assert response.status_code == 200
        assert [c["hsv"]["h"] for c in response.json()["palette"]] == [204, 324, 84, 204, 324, 84]

    def test_missing_count_uses_configured_default(self, client):
        response = client.post("/api/palette", json={"baseColor": {"hsv": RED}, "type": "monochromatic"})

        assert response.status_code == 200
        assert [c["hsv"]["v"] for c in response.json()["palette"]] == [20, 60, 100]

    def test_unknown_type_falls_back_to_analogous(self, client):
        body = {"baseColor": {"hsv": {"h": 200, "s": 60, "v": 60}}, "count": 3}
        fallback = client.post("/api/palette", json={**body, "type": "tetradic"})
        analogous = client.post("/api/palette", json={**body, "type": "analogous"})

        assert fallback.status_code == 200
        assert fallback.json() == analogous.json()

    @pytest.mark.parametrize("count", [0, -3])
    def test_non_positive_count(self, client, count):
        response = client.post("/api/palette", json={"baseColor": {"hsv": RED}, "type": "triadic", "count": count})

        assert response.status_code == 400

    def test_invalid_base_color(self, client):
        response = client.post("/api/palette", json={"baseColor": {"hsv": {"h": 0, "s": 150, "v": 50}}, "type": "triadic", "count": 3})

        assert response.status_code == 400

    def test_base_color_needs_hsv(self, client):
        response = client.post("/api/palette", json={"baseColor": {"hex": "#ff0000"}, "type": "triadic", "count": 3})

        assert response.status_code == 422


class TestRandom:

    def test_get_and_post(self, client):
        for response in (client.get("/api/random"), client.post("/api/random")):
            assert response.status_code == 200
            color = response.json()
            assert 50 <= color["hsv"]["s"] <= 100
            assert 50 <= color["hsv"]["v"] <= 100

    def test_injected_random_source(self, config):
        expected = default_operations(Random(7)).random_color()

        with TestClient(create_server(config, default_operations(Random(7)))) as client:
            response = client.get("/api/random")

        assert response.json()["hex"] == expected.hex


class TestSite:

    def test_root_redirects_to_docs(self, client):
        response = client.get("/", follow_redirects=False)

        assert response.status_code in (302, 307)
        assert response.headers["location"] == "/docs"

    def test_health(self, client):
        assert client.get("/api/health").json() == {"status": "ok"}

    def test_cors_allows_configured_origin(self, client):
        response = client.get("/api/health", headers={"Origin": "http://localhost:8080"})

        assert response.headers["access-control-allow-origin"] == "http://localhost:8080"

    def test_cors_ignores_unknown_origin(self, client):
        response = client.get("/api/health", headers={"Origin": "http://elsewhere.example"})

        assert "access-control-allow-origin" not in response.headers
