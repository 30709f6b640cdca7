"""
Tests for API layer.

Tests:
- API service methods
- HTTP endpoints and status codes
- Session lifecycle via API
- Error handling
"""

import pytest
from fastapi.testclient import TestClient

from ..api.app import create_app
from ..api.models import (
    CreateSessionRequest,
    SubmitGuessRequest,
    SessionStatus,
)
from ..api.service import APIService


@pytest.fixture
def service(manager):
    """API service whose sessions always use root word 'train'."""
    return APIService(session_manager=manager)


@pytest.fixture
def client(service):
    """HTTP test client around the service."""
    return TestClient(create_app(service=service))


class TestAPIService:
    """Tests for APIService."""

    def test_create_session(self, service):
        response = service.create_session(CreateSessionRequest())

        assert response.session_id is not None
        assert response.status == SessionStatus.ACTIVE
        assert response.root_word == "train"
        assert response.score == 0
        assert response.used_words == []

    def test_create_session_with_words(self, service):
        response = service.create_session(CreateSessionRequest(words=["umbrella"]))
        assert response.root_word == "umbrella"

    def test_create_session_with_empty_words_uses_fallback(self, service):
        """An explicitly empty list draws the fallback root word."""
        response = service.create_session(CreateSessionRequest(words=[]))
        assert response.root_word == "silkroad"

    def test_get_nonexistent_session(self, service):
        response = service.get_session("nonexistent-id")

        assert hasattr(response, "error")
        assert response.error_code == "SESSION_NOT_FOUND"

    def test_submit_guess(self, service):
        session = service.create_session(CreateSessionRequest())
        response = service.submit_guess(
            SubmitGuessRequest(session_id=session.session_id, word="Rain")
        )

        assert response.accepted
        assert response.word == "rain"
        assert response.score == 4
        assert response.used_words == ["rain"]
        assert response.reason is None
        assert response.title is None

    def test_rejected_guess_has_message(self, service):
        session = service.create_session(CreateSessionRequest())
        response = service.submit_guess(
            SubmitGuessRequest(session_id=session.session_id, word="aria")
        )

        assert not response.accepted
        assert response.reason == "not_feasible"
        assert response.title == "Word not possible"
        assert "'train'" in response.message

    def test_message_names_root_word_checked_against(self, service, monkeypatch):
        """A restart right after a guess does not change that guess's message."""
        session = service.create_session(CreateSessionRequest())
        manager = service.session_manager
        submit = manager.submit_guess

        def submit_then_restart(session_id, word):
            result = submit(session_id, word)
            managed = manager.get_session(session_id)
            managed.word_list = ["umbrella"]
            manager.restart_session(session_id)
            return result

        monkeypatch.setattr(manager, "submit_guess", submit_then_restart)
        response = service.submit_guess(
            SubmitGuessRequest(session_id=session.session_id, word="aria")
        )

        assert response.reason == "not_feasible"
        assert "'train'" in response.message
        assert "umbrella" not in response.message

    def test_submit_to_nonexistent_session(self, service):
        response = service.submit_guess(SubmitGuessRequest(session_id="nope", word="rain"))
        assert response.error_code == "SESSION_NOT_FOUND"

    def test_restart_session(self, service):
        session = service.create_session(CreateSessionRequest())
        service.submit_guess(SubmitGuessRequest(session_id=session.session_id, word="rain"))

        response = service.restart_session(session.session_id)

        assert response.score == 0
        assert response.used_words == []

    def test_end_session(self, service):
        session = service.create_session(CreateSessionRequest())

        assert service.end_session(session.session_id)
        assert session.session_id not in service.list_sessions()

    def test_create_from_files(self, tmp_path):
        words = tmp_path / "start.txt"
        words.write_text("train\n", encoding="utf-8")
        dictionary = tmp_path / "dictionary.txt"
        dictionary.write_text("rain\n", encoding="utf-8")

        service = APIService.create(
            words_file=str(words), dictionary_file=str(dictionary), min_length=4, seed=1
        )
        session = service.create_session(CreateSessionRequest())

        assert session.root_word == "train"
        ant = service.submit_guess(SubmitGuessRequest(session_id=session.session_id, word="ant"))
        assert ant.reason == "too_short"
        assert "at least 4 letters" in ant.message


class TestHTTPEndpoints:
    """Tests for the FastAPI application."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_create_session(self, client):
        response = client.post("/api/v1/sessions")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "active"
        assert data["root_word"] == "train"
        assert data["api_version"] == "v1"

    def test_create_session_with_words(self, client):
        response = client.post("/api/v1/sessions", json={"words": ["notebook"]})
        assert response.json()["root_word"] == "notebook"

    def test_create_session_with_empty_words(self, client):
        response = client.post("/api/v1/sessions", json={"words": []})
        assert response.json()["root_word"] == "silkroad"

    def test_guess_flow(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]
        url = f"/api/v1/sessions/{session_id}/guesses"

        first = client.post(url, json={"word": "rain"}).json()
        assert first["accepted"] is True
        assert first["score"] == 4

        again = client.post(url, json={"word": "Rain "}).json()
        assert again["accepted"] is False
        assert again["reason"] == "already_used"
        assert again["score"] == 4

        status = client.get(f"/api/v1/sessions/{session_id}").json()
        assert status["used_words"] == ["rain"]
        assert status["score"] == 4

    def test_rejection_reasons(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]
        url = f"/api/v1/sessions/{session_id}/guesses"

        expected = {
            "": "empty",
            "at": "too_short",
            "train": "same_as_root",
            "aria": "not_feasible",
            "tain": "not_real",
        }
        for word, reason in expected.items():
            data = client.post(url, json={"word": word}).json()
            assert data["reason"] == reason, word

    def test_missing_word_is_validation_error(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]
        response = client.post(f"/api/v1/sessions/{session_id}/guesses", json={})
        assert response.status_code == 422

    def test_restart(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]
        client.post(f"/api/v1/sessions/{session_id}/guesses", json={"word": "rain"})

        data = client.post(f"/api/v1/sessions/{session_id}/restart").json()

        assert data["score"] == 0
        assert data["used_words"] == []

    def test_unknown_session_is_404(self, client):
        for response in [
            client.get("/api/v1/sessions/nope"),
            client.post("/api/v1/sessions/nope/restart"),
            client.post("/api/v1/sessions/nope/guesses", json={"word": "rain"}),
        ]:
            assert response.status_code == 404
            assert response.json()["error_code"] == "SESSION_NOT_FOUND"

    def test_list_and_end_sessions(self, client):
        session_id = client.post("/api/v1/sessions").json()["session_id"]

        listing = client.get("/api/v1/sessions").json()
        assert session_id in listing["sessions"]
        assert listing["count"] == 1

        ended = client.delete(f"/api/v1/sessions/{session_id}").json()
        assert ended["success"] is True
        assert client.get("/api/v1/sessions").json()["count"] == 0
