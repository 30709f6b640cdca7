"""
API Module - Client interface.

Exposes the engine via REST API.
A client:
1. Creates a game session (root word drawn)
2. Submits guesses and shows the score and accepted words
3. Restarts for a new root word
4. Ends the session when done

All state is session-scoped. No persistent user accounts required.
"""

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
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "SubmitGuessRequest",
    # Responses
    "SessionResponse",
    "GuessResultResponse",
    "ErrorResponse",
    # Enums
    "SessionStatus",
    # Service
    "APIService",
    "create_app",
]
