from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from configurator.api.main import create_app
from configurator.api.settings import AppSettings


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(AppSettings()))


def test_health(client: TestClient) -> None:
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_configure(client: TestClient) -> None:
    r = client.post("/api/configure", json={"params": {"height_ft": 20}})
    assert r.status_code == 200
    body = r.json()
    assert body["configuration"]["sections"] == [10, 10]
    assert body["wall_pairs"] == 4
    assert body["ladder_feet"] == 20
    assert body["rule_count"] == 6


def test_configure_reports_error_in_body(client: TestClient) -> None:
    r = client.post("/api/configure", json={"params": {"height_ft": 0}})
    assert r.status_code == 200
    body = r.json()
    assert body["configuration"]["error"] == "Height must be positive."
    assert body["configuration"]["bom"] == []


def test_invalid_inches_are_rejected(client: TestClient) -> None:
    r = client.post("/api/configure", json={"params": {"height_ft": 10, "height_in": 12}})
    assert r.status_code == 422


def test_huge_height_is_rejected(client: TestClient) -> None:
    r = client.post("/api/configure", json={"params": {"height_ft": 10**400}})
    assert r.status_code == 422


@pytest.mark.parametrize("value", ["inf", "-inf", "nan"])
def test_non_finite_standoff_is_rejected(client: TestClient, value: str) -> None:
    r = client.post("/api/configure", json={"params": {"standoff_in": value}})
    assert r.status_code == 422


def test_bom_csv_download(client: TestClient) -> None:
    r = client.post("/api/bom.csv", json={"params": {"height_ft": 13}})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    assert "EZ-Ladder-BOM.csv" in r.headers["content-disposition"]
    rows = r.text.split("\n")
    assert rows[0] == "Inventory ID,Quantity,Project Task,Cost Code"
    assert rows[1] == "FL-10,0.7,06PROD,40-030"
    assert rows[2] == "FL-10,0.6,06PROD,40-030"


def test_standoff_catalog(client: TestClient) -> None:
    r = client.get("/api/catalog/standoffs")
    assert r.status_code == 200
    body = r.json()
    assert len(body["wall"]) == 7
    assert [f["first_rung_inches"] for f in body["feet"]] == [8.5, 10.75, 11.875, 13.0, 14.125]


def test_rules(client: TestClient) -> None:
    r = client.get("/api/rules")
    assert r.status_code == 200
    assert r.json()[0] == {"id": "bom.ladder_sections", "name": "Ladder Sections"}


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("LADDER_PORT", "9001")
    monkeypatch.setenv("LADDER_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LADDER_CORS_ORIGINS", '["http://a.test", "http://b.test"]')
    settings = AppSettings()
    assert settings.log_level == "DEBUG"
    assert settings.port == 9001
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
