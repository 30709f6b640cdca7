"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine calls
2. Manages sessions
3. Attaches display text to rejected guesses

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass

from .models import (
    # Requests
    CreateSessionRequest,
    SubmitGuessRequest,
    # Responses
    SessionResponse,
    GuessResultResponse,
    ErrorResponse,
    # Enums
    SessionStatus,
)
from ..engine_core.outcome import describe
from ..session import SessionManager, ManagedSession, SessionState, SubmitResult
from ..words import default_spell_checker, default_word_list


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        # Create session
        session_response = service.create_session(CreateSessionRequest())

        # Submit a guess
        result = service.submit_guess(
            SubmitGuessRequest(session_id=session_response.session_id, word="rain")
        )
    """
    session_manager: SessionManager

    @classmethod
    def create(
        cls,
        words_file: str | None = None,
        dictionary_file: str | None = None,
        min_length: int | None = None,
        seed: int | None = None,
    ) -> APIService:
        """Build a service from file locations, falling back to bundled data."""
        kwargs = {}
        if min_length is not None:
            kwargs["min_length"] = min_length
        manager = SessionManager(
            spell_checker=default_spell_checker(dictionary_file),
            word_list=default_word_list(words_file),
            seed=seed,
            **kwargs,
        )
        return cls(session_manager=manager)

    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """
        Create and start a new game session.
        """
        session = self.session_manager.create_session(word_list=request.words)
        return self._session_to_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        """
        Get session status.
        """
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found()
        return self._session_to_response(session)

    def restart_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        """
        Start the session again with a new root word.
        """
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found()
        self.session_manager.restart_session(session_id)
        return self._session_to_response(session)

    def submit_guess(self, request: SubmitGuessRequest) -> GuessResultResponse | ErrorResponse:
        """
        Submit a guess to a session.
        """
        result = self.session_manager.submit_guess(request.session_id, request.word)
        if result is None:
            return self._not_found()
        return self._result_to_response(request.session_id, result)

    def end_session(self, session_id: str) -> bool:
        """
        End a game session.
        """
        return self.session_manager.end_session(session_id)

    def list_sessions(self) -> list[str]:
        """
        List active session IDs.
        """
        return self.session_manager.list_active_sessions()

    # =========================================================================
    # Helper methods
    # =========================================================================

    def _not_found(self) -> ErrorResponse:
        return ErrorResponse(
            error="Session not found",
            error_code="SESSION_NOT_FOUND",
        )

    def _session_to_response(self, session: ManagedSession) -> SessionResponse:
        """Convert ManagedSession to SessionResponse."""
        game = session.game
        return SessionResponse(
            session_id=session.session_id,
            status=self._session_state_to_status(game.state),
            root_word=game.root_word,
            score=game.score,
            used_words=list(game.used_words),
            created_at=session.created_at,
        )

    def _session_state_to_status(self, state: SessionState) -> SessionStatus:
        """Convert session state to API status."""
        mapping = {
            SessionState.UNINITIALIZED: SessionStatus.UNINITIALIZED,
            SessionState.ACTIVE: SessionStatus.ACTIVE,
        }
        return mapping.get(state, SessionStatus.ACTIVE)

    def _result_to_response(
        self,
        session_id: str,
        result: SubmitResult,
    ) -> GuessResultResponse:
        """Convert SubmitResult to GuessResultResponse."""
        title = message = None
        if result.reason is not None:
            title, message = describe(
                result.reason,
                root_word=result.root_word,
                min_length=self.session_manager.validator.min_length,
            )

        return GuessResultResponse(
            session_id=session_id,
            accepted=result.accepted,
            word=result.word,
            score=result.score,
            used_words=list(result.used_words),
            reason=result.reason.value if result.reason else None,
            title=title,
            message=message,
        )
