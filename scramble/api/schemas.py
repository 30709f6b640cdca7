"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between clients and the engine.
All responses include explicit types for OpenAPI schema generation.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has expired
- VALIDATION_ERROR: Request body is malformed
- INTERNAL_ERROR: Unexpected failure

A rejected guess is NOT an error: it is a normal 200 response with
accepted=false and a rejection code.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"


class RejectionCode(str, Enum):
    """Why a guess was rejected."""
    EMPTY = "empty"
    TOO_SHORT = "too_short"
    SAME_AS_ROOT = "same_as_root"
    ALREADY_USED = "already_used"
    NOT_FEASIBLE = "not_feasible"
    NOT_REAL = "not_real"
    CHECKER_UNAVAILABLE = "checker_unavailable"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to create a new game session."""
    words: Optional[list[str]] = Field(
        None, description="Root words to draw from (defaults to the server's list)"
    )


class GuessRequest(BaseModel):
    """Request to submit a guess."""
    word: str = Field(..., description="The guessed word, case and surrounding spaces ignored")


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    api_version: str = Field("v1", description="API version")


class SessionResponse(BaseModel):
    """Current state of a game session."""
    session_id: str
    status: SessionStatus
    root_word: str = Field(..., description="Word every guess must be spelled from")
    score: int = Field(0, ge=0, description="Sum of the lengths of accepted words")
    used_words: list[str] = Field(
        default_factory=list, description="Accepted words, most recent first"
    )
    created_at: float = 0.0
    api_version: str = "v1"


class GuessResponse(BaseModel):
    """Result of a guess."""
    session_id: str
    accepted: bool
    word: str = Field(..., description="The guess after normalization")
    score: int = Field(0, ge=0)
    used_words: list[str] = Field(default_factory=list)
    reason: Optional[RejectionCode] = None
    title: Optional[str] = Field(None, description="Short rejection title for display")
    message: Optional[str] = Field(None, description="Rejection message for display")
    api_version: str = "v1"


class SessionListResponse(BaseModel):
    """Response listing active sessions."""
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    """Response after ending a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
