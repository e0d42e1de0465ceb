import json
from pathlib import Path

from fastapi.testclient import TestClient

import menu_service.app as app_module
from menu_service.app import app
from menu_service.normalizer.config import NormalizerConfig

client = TestClient(app)


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_menu_from_bundled_sample():
    resp = client.get("/menu")
    assert resp.status_code == 200
    body = resp.json()
    assert body["config"]["currency"] == "MXN"
    assert body["menu"]["pizza"]["items"][0]["id"] == "piz-001"


def test_menu_missing_source_returns_404(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(
        app_module,
        "DEFAULT_NORMALIZER_CONFIG",
        NormalizerConfig(input_path=tmp_path / "missing.json"),
    )
    resp = client.get("/menu")
    assert resp.status_code == 404


def test_menu_summary(monkeypatch, tmp_path: Path):
    source = tmp_path / "old-menu.json"
    source.write_text(
        json.dumps([
            {"SECCIÓN": "SOPAS", "NOMBRE DEL PLATILLO": "Pozole", "PRECIO": 130},
            {"SECCIÓN": "SOPAS", "NOMBRE DEL PLATILLO": "Tortilla", "PRECIO": 85},
        ]),
        encoding="utf-8",
    )
    monkeypatch.setattr(app_module, "DEFAULT_NORMALIZER_CONFIG", NormalizerConfig(input_path=source))
    resp = client.get("/menu/summary")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_items"] == 2
    assert body["sections"][0]["min_price"] == 85.0
    assert body["sections"][0]["max_price"] == 130.0


def test_normalize_endpoint():
    resp = client.post(
        "/menu/normalize",
        json=[
            {"SECCIÓN": "COCINA MEXICANA", "NOMBRE DEL PLATILLO": "Mole", "PRECIO": 160},
            {"NOMBRE DEL PLATILLO": "Sin sección"},
        ],
    )
    assert resp.status_code == 200
    body = resp.json()
    assert list(body["menu"]) == ["cocina_mexicana"]
    item = body["menu"]["cocina_mexicana"]["items"][0]
    assert item["id"] == "mex-001"
    assert item["name"] == {"es": "Mole", "en": "Mole"}
    assert item["description"] == {"en": ""}
    assert item["price"] == 160
    assert "subcategory" not in item


def test_normalize_rejects_non_array_body():
    resp = client.post("/menu/normalize", json={"SECCIÓN": "PIZZA"})
    assert resp.status_code == 422
