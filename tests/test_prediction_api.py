"""
Tests for the HTTP surface (FastAPI TestClient with an overridden generator)
"""
import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.routers.prediction import get_generator
from app.services.prediction_service import GENERATION_FAILED, PARSE_FAILED
from main import app


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def use_generator(generator):
    app.dependency_overrides[get_generator] = lambda: generator
    return generator


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "healthy"
    assert client.get("/health").json()["ok"] is True


def test_predict_success(client, scripted_generator, valid_analysis, valid_analysis_text):
    generator = use_generator(scripted_generator(text=f"```json\n{valid_analysis_text}\n```"))
    r = client.post("/analysis/predict", json={
        "medicalHistory": {"conditions": ["asma"]},
        "personalData": {"age": 30},
        "lifestyleFactors": None,
    })
    assert r.status_code == 200
    assert r.json() == {"success": True, "analysis": valid_analysis}
    assert '{"conditions": ["asma"]}' in generator.prompts[0]


def test_predict_empty_body_is_allowed(client, scripted_generator):
    use_generator(scripted_generator(text="not json at all"))
    r = client.post("/analysis/predict", json={})
    assert r.status_code == 502
    assert r.json() == {"success": False, "error": PARSE_FAILED}


def test_predict_generation_failure(client, scripted_generator):
    use_generator(scripted_generator(error=ConnectionError("offline")))
    r = client.post("/analysis/predict", json={})
    assert r.status_code == 502
    assert r.json() == {"success": False, "error": GENERATION_FAILED}


def test_predict_requires_token_when_configured(client, scripted_generator, valid_analysis_text, monkeypatch):
    monkeypatch.setattr(settings, "UI_API_TOKEN", "secret")
    use_generator(scripted_generator(text=valid_analysis_text))

    assert client.post("/analysis/predict", json={}).status_code == 401
    assert client.post("/analysis/predict", json={}, headers={"X-API-Token": "wrong"}).status_code == 401
    r = client.post("/analysis/predict", json={}, headers={"X-API-Token": "secret"})
    assert r.status_code == 200


def test_debug_prompt_does_not_call_generator(client, scripted_generator):
    generator = use_generator(scripted_generator(error=AssertionError("should not be called")))
    r = client.post("/debug/prompt", json={"personalData": "usia 45"})
    assert r.status_code == 200
    assert "usia 45" in r.json()["prompt"]
    assert generator.prompts == []


def test_debug_env(client, monkeypatch):
    monkeypatch.setattr(settings, "GEMINI_API_KEY", None)
    body = client.get("/debug/env").json()
    assert body["has_GEMINI_API_KEY"] is False
    assert body["GEMINI_MODEL"] == settings.GEMINI_MODEL


def test_request_model_uses_snake_case_attributes():
    from app.models.analysis import PredictionRequest

    body = PredictionRequest.model_validate({"medicalHistory": {"a": 1}, "lifestyleFactors": "aktif"})
    assert body.medical_history == {"a": 1}
    assert body.personal_data is None
    assert body.lifestyle_factors == "aktif"
