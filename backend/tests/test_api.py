"""
Integration tests for the HueTone HTTP API.
"""

import pytest


class TestHealth:
    """Test service health endpoints."""

    def test_healthz(self, test_client):
        response = test_client.get("/healthz")
        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is True
        assert data["service"] == "huetone"
        assert "version" in data

    def test_root(self, test_client):
        response = test_client.get("/")
        assert response.status_code == 200
        assert response.json()["health"] == "/healthz"


class TestSchemeEndpoint:
    """Test POST /v1/scheme."""

    def test_hex_seed(self, test_client):
        response = test_client.post("/v1/scheme", json={"seed": "#ff0000"})
        assert response.status_code == 200
        data = response.json()
        assert data["source_hex"] == "#ff0000"
        assert data["variant"] == "tonal_spot"
        assert data["spec_version"] == "2021"
        assert data["roles"]["primary"].startswith("#")
        assert "primary_dim" not in data["roles"]
        assert data["argb"]["primary"] >> 24 == 0xff

    def test_int_and_hct_seeds(self, test_client):
        by_int = test_client.post("/v1/scheme", json={"seed": 0xff3366cc, "is_dark": True})
        by_hct = test_client.post(
            "/v1/scheme",
            json={"seed": {"hue": 200.0, "chroma": 30.0, "tone": 60.0}, "variant": "expressive"},
        )
        assert by_int.status_code == 200
        assert by_int.json()["is_dark"] is True
        assert by_hct.status_code == 200
        assert by_hct.json()["variant"] == "expressive"

    def test_2025_watch(self, test_client):
        response = test_client.post(
            "/v1/scheme",
            json={"seed": "#0000ff", "is_dark": True, "platform": "watch", "spec_version": "2025"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["roles"]["surface"] == "#000000"
        assert "primary_dim" in data["roles"]

    @pytest.mark.parametrize("body", [
        {"seed": "#ff0000", "contrast_level": 2.0},
        {"seed": "#ff0000", "variant": "pastel"},
        {"seed": "not-a-color"},
        {"seed": -1},
        {"seed": {"hue": 10.0, "chroma": 10.0, "tone": 120.0}},
    ])
    def test_invalid_values(self, test_client, body):
        response = test_client.post("/v1/scheme", json=body)
        assert response.status_code == 400
        assert "detail" in response.json()

    def test_malformed_body(self, test_client):
        response = test_client.post("/v1/scheme", json={"variant": "tonal_spot"})
        assert response.status_code == 422


class TestQuantizeEndpoint:
    """Test POST /v1/quantize."""

    def test_ranks_colors(self, test_client):
        pixels = [0xffff0000] * 30 + [0xff0000ff] * 20 + [0x00ffffff] * 10
        response = test_client.post("/v1/quantize", json={"pixels": pixels, "k": 8, "top_n": 4})
        assert response.status_code == 200
        data = response.json()
        assert data["pixel_count"] == 60
        assert data["request_id"].startswith("quant-")
        assert [entry["hex"] for entry in data["colors"]] == ["#ff0000", "#0000ff"]

    def test_empty_pixels(self, test_client):
        response = test_client.post("/v1/quantize", json={"pixels": []})
        assert response.status_code == 200
        assert response.json()["colors"] == []

    @pytest.mark.parametrize("body", [
        {"pixels": [0xffff0000], "k": 0},
        {"pixels": [0xffff0000], "top_n": -1},
        {"pixels": [-1]},
    ])
    def test_invalid_values(self, test_client, body):
        response = test_client.post("/v1/quantize", json=body)
        assert response.status_code == 400


class TestConversionEndpoints:
    """Test HCT, contrast and palette endpoints."""

    def test_argb_to_hct(self, test_client):
        response = test_client.get(f"/v1/hct/{0xffff0000}")
        assert response.status_code == 200
        data = response.json()
        assert data["hex"] == "#ff0000"
        assert data["hue"] == pytest.approx(27.408, abs=0.01)
        assert data["tone"] == pytest.approx(53.233, abs=0.01)

    def test_argb_out_of_range(self, test_client):
        assert test_client.get("/v1/hct/-1").status_code == 400
        assert test_client.get("/v1/hct/red").status_code == 422

    def test_solve_hct(self, test_client):
        response = test_client.post("/v1/hct/solve", json={"hue": 0.0, "chroma": 0.0, "tone": 100.0})
        assert response.status_code == 200
        assert response.json()["hex"] == "#ffffff"

    def test_contrast(self, test_client):
        response = test_client.get("/v1/contrast", params={"tone_a": 0, "tone_b": 100})
        assert response.status_code == 200
        assert response.json()["ratio"] == pytest.approx(21.0)

    def test_contrast_requires_both_tones(self, test_client):
        assert test_client.get("/v1/contrast", params={"tone_a": 10}).status_code == 422

    def test_palette_tone(self, test_client):
        response = test_client.get("/v1/palette/tone", params={"hue": 120, "chroma": 30, "tone": 0})
        assert response.status_code == 200
        assert response.json()["argb"] == 0xff000000


class TestOpenApi:
    """Test the published API description."""

    @pytest.mark.parametrize("path,method", [
        ("/v1/scheme", "post"),
        ("/v1/quantize", "post"),
        ("/v1/hct/{argb}", "get"),
        ("/v1/hct/solve", "post"),
        ("/v1/contrast", "get"),
        ("/v1/palette/tone", "get"),
    ])
    def test_bad_request_uses_error_model(self, test_client, path, method):
        schema = test_client.get("/openapi.json").json()
        bad_request = schema["paths"][path][method]["responses"]["400"]
        assert bad_request["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
        assert "ErrorResponse" in schema["components"]["schemas"]
