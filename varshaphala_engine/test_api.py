import pytest
from fastapi.testclient import TestClient

from main import app, get_ephemeris_factory
from varshaphala_engine.conftest import BIRTH, LinearEphemeris


@pytest.fixture
def client():
    ephemeris = LinearEphemeris()
    app.dependency_overrides[get_ephemeris_factory] = lambda: (lambda ayanamsa: ephemeris)
    yield TestClient(app)
    app.dependency_overrides.clear()


def _body(**overrides):
    body = dict(BIRTH, target_year=2025, as_of="2025-08-01", name="Test Native")
    body.update(overrides)
    return body


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_varshaphala_payload(client):
    response = client.post("/api/varshaphala", json=_body())
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["natal_summary"]["sun_sign"] == "Aries"
    assert data["natal_summary"]["name"] == "Test Native"
    result = data["varshaphala"]
    assert result["year"] == 2025
    assert result["age"] == 35
    assert len(result["house_predictions"]) == 12
    assert len(result["mudda_dasha"]) == 9
    assert result["current_mudda"] is not None
    assert "report" not in data


def test_report_in_nepali(client):
    response = client.post("/api/varshaphala",
                           json=_body(language="ne", include_report=True))
    assert response.status_code == 200
    data = response.json()
    assert data["varshaphala"]["language"] == "ne"
    assert "वर्षफल" in data["report"]


def test_year_before_birth_is_422(client):
    response = client.post("/api/varshaphala", json=_body(target_year=1985, language="ne"))
    assert response.status_code == 422
    assert response.json()["detail"] == "लक्ष्य वर्ष 1985 जन्म वर्ष 1990 भन्दा अघि छ।"


@pytest.mark.parametrize("field, value", [
    ("house_system", "placidus"), ("language", "fr"), ("latitude", 91.0), ("month", 13),
])
def test_invalid_request_is_422(client, field, value):
    response = client.post("/api/varshaphala", json=_body(**{field: value}))
    assert response.status_code == 422


def test_impossible_birth_date_is_422(client):
    response = client.post("/api/varshaphala", json=_body(month=2, day=30))
    assert response.status_code == 422
