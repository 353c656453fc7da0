"""Tests for the survey API: catalog, progress, results and shared links."""
from __future__ import annotations

import base64
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("PUBLIC_BASE_URL", "https://survey.example.com/")

import pytest
from fastapi.testclient import TestClient

from api.app import app
from api.deps import get_app_settings
from core.catalog import catalog_fingerprint
from core.config import Settings
from core.exceptions import ConfigurationError
from domain import share_token


def _body(answers):
    return {"answers": {str(position): value.value for position, value in answers.items()}}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------

class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_detailed(self, client):
        data = client.get("/health/detailed").json()
        assert data["catalog"]["questions"] == 20
        assert data["catalog"]["fingerprint"] == catalog_fingerprint()


# ---------------------------------------------------------------------------
# Catalog & progress
# ---------------------------------------------------------------------------

class TestQuestions:
    def test_lists_catalog(self, client):
        data = client.get("/survey/questions").json()
        assert len(data["questions"]) == 20
        assert data["questions"][3]["polarity"] is False
        assert data["fingerprint"] == catalog_fingerprint()
        assert data["title"]


class TestProgress:
    def test_empty(self, client):
        data = client.post("/survey/progress", json={"answers": {}}).json()
        assert data == {"answered": 0, "total": 20, "percent": 0.0, "rounded": 0, "complete": False}

    def test_partial(self, client):
        data = client.post("/survey/progress", json={"answers": {"0": "yes", "1": "no", "2": "yes"}}).json()
        assert data["answered"] == 3
        assert data["percent"] == 15.0
        assert data["complete"] is False

    def test_complete(self, client, all_yes):
        data = client.post("/survey/progress", json=_body(all_yes)).json()
        assert data["rounded"] == 100
        assert data["complete"] is True

    def test_invalid_position(self, client):
        response = client.post("/survey/progress", json={"answers": {"20": "yes"}})
        assert response.status_code == 400
        assert response.json()["error"] == "invalid_position"

    def test_invalid_response(self, client):
        response = client.post("/survey/progress", json={"answers": {"0": "maybe"}})
        assert response.status_code == 422


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class TestResults:
    def test_scores_and_classifies(self, client, make_answers):
        response = client.post("/survey/results", json=_body(make_answers(5)))
        assert response.status_code == 200
        data = response.json()
        assert data["score"] == 5
        assert data["classification"]["category"] == "avoid_failure"
        assert data["token"] == share_token.encode(make_answers(5))
        assert data["share_url"] == f"https://survey.example.com/?r={data['token']}"

    def test_mixed_lean(self, client, make_answers):
        data = client.post("/survey/results", json=_body(make_answers(12))).json()
        assert data["classification"]["category"] == "mixed"
        assert data["classification"]["lean"] == "toward_success"

    def test_incomplete(self, client):
        response = client.post("/survey/results", json={"answers": {"0": "yes"}})
        assert response.status_code == 400
        assert response.json()["error"] == "incomplete_answers"


# ---------------------------------------------------------------------------
# Shared results
# ---------------------------------------------------------------------------

class TestShared:
    def test_round_trip(self, client, make_answers):
        token = share_token.encode(make_answers(15))
        response = client.get(f"/survey/shared/{token}")
        assert response.status_code == 200
        data = response.json()
        assert data["locked"] is True
        assert data["complete"] is True
        assert data["answered"] == 20
        assert data["result"]["score"] == 15
        assert data["result"]["classification"]["category"] == "success"

    def test_partial_token_has_no_result(self, client):
        payload = base64.urlsafe_b64encode(b'{"0":"yes"}').decode("ascii").rstrip("=")
        data = client.get(f"/survey/shared/{payload}.{catalog_fingerprint()}").json()
        assert data["complete"] is False
        assert data["result"] is None
        assert data["answers"] == {"0": "yes"}

    def test_malformed(self, client):
        response = client.get("/survey/shared/not-valid-base64!!")
        assert response.status_code == 400
        assert response.json()["error"] == "malformed_token"

    def test_deeply_nested(self, client):
        payload = base64.urlsafe_b64encode(b"[" * 5000).decode("ascii").rstrip("=")
        response = client.get(f"/survey/shared/{payload}.{catalog_fingerprint()}")
        assert response.status_code == 400
        assert response.json()["error"] == "malformed_token"

    def test_catalog_mismatch(self, client, all_yes):
        token = share_token.encode(all_yes).rpartition(".")[0] + ".00000000"
        response = client.get(f"/survey/shared/{token}")
        assert response.status_code == 409
        assert response.json()["error"] == "catalog_mismatch"

    def test_legacy_rejected_when_disabled(self, client, all_yes):
        app.dependency_overrides[get_app_settings] = lambda: Settings(ACCEPT_LEGACY_TOKENS=False)
        legacy = share_token.encode(all_yes).rpartition(".")[0]
        response = client.get(f"/survey/shared/{legacy}")
        assert response.status_code == 409


class TestErrors:
    def test_configuration_error(self, client, all_yes):
        def broken_settings():
            raise ConfigurationError("Invalid configuration: LOG_LEVEL")

        app.dependency_overrides[get_app_settings] = broken_settings
        response = client.post("/survey/results", json=_body(all_yes))
        assert response.status_code == 500
        assert response.json() == {"error": "configuration_error", "message": "Service misconfiguration"}
