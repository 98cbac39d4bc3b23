"""Tests for the HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


class TestParseEndpoint:
    def test_parse_hex(self, client):
        response = client.post("/parse_color_code", json={"code": "#FF0000"})
        assert response.status_code == 200
        body = response.json()
        assert body["style"] == "hex"
        assert body["components"] == {"model": "rgb", "alpha": 1.0, "red": 1.0, "green": 0.0, "blue": 0.0}

    def test_parse_into_model(self, client):
        response = client.post("/parse_color_code", json={"code": "red", "model": "hsl"})
        body = response.json()
        assert body["style"] == "cssKeyword"
        assert body["components"]["model"] == "hsl"
        assert body["components"]["lightness"] == pytest.approx(0.5)

    def test_invalid_code(self, client):
        response = client.post("/parse_color_code", json={"code": "notacolor"})
        assert response.status_code == 400
        assert "notacolor" in response.json()["detail"]


class TestFormatEndpoint:
    def test_format_hsl(self, client):
        payload = {"components": {"model": "hsl", "hue": 0, "saturation": 0, "lightness": 1}, "style": "cssHSL"}
        response = client.post("/format_color_code", json=payload)
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "hsl(0,0%,100%)"}

    def test_format_rgba(self, client):
        payload = {"components": {"model": "rgb", "red": 1, "green": 0, "blue": 0, "alpha": 1}, "style": "cssRGBa"}
        assert client.post("/format_color_code", json=payload).json()["message"] == "rgba(255,0,0,1)"

    def test_no_keyword(self, client):
        payload = {"components": {"model": "rgb", "red": 0.1, "green": 0.2, "blue": 0.3}, "style": "cssKeyword"}
        assert client.post("/format_color_code", json=payload).status_code == 404

    def test_unknown_model(self, client):
        payload = {"components": {"model": "cmyk", "red": 0}, "style": "hex"}
        assert client.post("/format_color_code", json=payload).status_code == 422

    def test_out_of_range_channel(self, client):
        payload = {"components": {"model": "rgb", "red": 2, "green": 0, "blue": 0}, "style": "cssHSL"}
        assert client.post("/format_color_code", json=payload).status_code == 422


class TestConvertEndpoint:
    def test_convert(self, client):
        response = client.post("/convert_color_code", json={"code": "hsla(0,0%,100%,0.5)", "target": "hex"})
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "#ffffff", "detected_style": "cssHSLa"}

    def test_convert_to_keyword(self, client):
        response = client.post("/convert_color_code", json={"code": "#00ffff", "target": "cssKeyword"})
        assert response.json()["message"] == "aqua"

    def test_invalid_code(self, client):
        response = client.post("/convert_color_code", json={"code": "rgb(256,0,0)", "target": "hex"})
        assert response.status_code == 400

    def test_no_keyword(self, client):
        response = client.post("/convert_color_code", json={"code": "#123456", "target": "cssKeyword"})
        assert response.status_code == 404

    def test_unknown_target(self, client):
        response = client.post("/convert_color_code", json={"code": "red", "target": "lab"})
        assert response.status_code == 422


class TestKeywordEndpoints:
    def test_list(self, client):
        body = client.get("/keywords").json()
        assert len(body) == 147
        assert body[0] == {"keyword": "aliceblue", "value": "#f0f8ff"}

    def test_get(self, client):
        assert client.get("/keywords/CornflowerBlue").json() == {"keyword": "cornflowerblue", "value": "#6495ed"}

    def test_get_unknown(self, client):
        assert client.get("/keywords/notacolor").status_code == 404
