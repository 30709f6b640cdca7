"""
API Models - Request and response schemas for clients.

These models define the contract between a client and the engine.
All models are serializable to JSON.

Design principles:
- Framework-agnostic (plain dataclasses)
- Self-describing (rejections carry a title and message for display)
- Versioned (API version in responses)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


# =============================================================================
# Enums for API
# =============================================================================

class APIVersion(Enum):
    V1 = "v1"


class SessionStatus(Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"


# =============================================================================
# Request Models
# =============================================================================

@dataclass
class CreateSessionRequest:
    """
    Request to create a new game session.

    POST /api/v1/sessions
    """
    words: list[str] | None = None  # Root words to draw from, defaults to the server's list


@dataclass
class SubmitGuessRequest:
    """
    Request to submit a guess.

    POST /api/v1/sessions/{id}/guesses
    """
    session_id: str
    word: str


# =============================================================================
# Response Models
# =============================================================================

@dataclass
class ErrorResponse:
    """
    Error response.

    Returned for any 4xx or 5xx status.
    """
    error: str
    error_code: str
    api_version: str = APIVersion.V1.value


@dataclass
class SessionResponse:
    """Current state of a session."""
    session_id: str
    status: SessionStatus
    root_word: str
    score: int = 0
    used_words: list[str] = field(default_factory=list)
    created_at: float = 0.0
    api_version: str = APIVersion.V1.value


@dataclass
class GuessResultResponse:
    """
    Result of a guess.

    On rejection, `reason` names the failed check and `title`/`message`
    are ready to show to the player.
    """
    session_id: str
    accepted: bool
    word: str
    score: int
    used_words: list[str] = field(default_factory=list)
    reason: str | None = None
    title: str | None = None
    message: str | None = None
    api_version: str = APIVersion.V1.value
