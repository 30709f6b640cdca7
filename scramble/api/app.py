"""
FastAPI Application - REST API for game clients.

Endpoints:
    POST   /api/v1/sessions                 Create and start a session
    GET    /api/v1/sessions                 List active sessions
    GET    /api/v1/sessions/{id}            Get session status
    DELETE /api/v1/sessions/{id}            End session
    POST   /api/v1/sessions/{id}/restart    New root word, cleared history
    POST   /api/v1/sessions/{id}/guesses    Submit a guess

Guess Flow:
    1. POST /guesses with {"word": "..."}
    2. accepted=true: word prepended to used_words, score updated
    3. accepted=false: session unchanged, reason/title/message explain why

All responses are JSON with explicit Pydantic schemas.

Run with: uvicorn scramble.api.app:create_app --factory
"""

from typing import Optional, Union
import os

# Environment configuration
SCRAMBLE_ENV = os.getenv("SCRAMBLE_ENV", "development")
SCRAMBLE_WORDS_FILE = os.getenv("SCRAMBLE_WORDS_FILE", None)
SCRAMBLE_DICTIONARY_FILE = os.getenv("SCRAMBLE_DICTIONARY_FILE", None)
SCRAMBLE_MIN_LENGTH = int(os.getenv("SCRAMBLE_MIN_LENGTH", "3"))
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from .service import APIService
    from .models import (
        CreateSessionRequest as ServiceCreateRequest,
        SubmitGuessRequest,
    )
    from .schemas import (
        # Request models
        CreateSessionRequest,
        GuessRequest,
        # Response models
        SessionResponse,
        GuessResponse,
        ErrorResponse,
        SessionListResponse,
        EndSessionResponse,
        HealthResponse,
        # Enums
        ErrorCode,
    )

    app = FastAPI(
        title="Scramble Engine API",
        description="""
Anagram word game engine - spell as many words as you can from a root word.

## Guess Flow

After starting a session via `POST /sessions`:

1. **Accepted** (`accepted=true`):
   - The word is added to `used_words` (most recent first)
   - `score` grows by the word's length

2. **Rejected** (`accepted=false`):
   - The session is unchanged
   - `reason`, `title` and `message` explain the rejection

## Rejection Reasons

| Reason | Description |
|--------|-------------|
| `empty` | Nothing was typed |
| `too_short` | Shorter than the minimum length |
| `same_as_root` | The root word itself |
| `already_used` | Already accepted in this session |
| `not_feasible` | Needs letters the root does not have |
| `not_real` | Not a recognized word |

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist |
        """,
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Service instance
    api_service = service or APIService.create(
        words_file=SCRAMBLE_WORDS_FILE,
        dictionary_file=SCRAMBLE_DICTIONARY_FILE,
        min_length=SCRAMBLE_MIN_LENGTH,
    )

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
            ).model_dump(mode="json"),
        )

    def session_not_found(session_id: str) -> JSONResponse:
        return make_error_response(
            ErrorCode.SESSION_NOT_FOUND,
            f"Session {session_id} not found",
            status_code=404,
        )

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        tags=["Sessions"],
        summary="Create and start a game session",
    )
    async def create_session(
        body: Optional[CreateSessionRequest] = None,
    ) -> SessionResponse:
        """
        Create a new game session with a freshly drawn root word.

        Pass `words` to draw from a custom list; an empty list falls back
        to the default root word.
        """
        request = ServiceCreateRequest(words=body.words if body else None)
        response = api_service.create_session(request)
        return _convert_session_response(response)

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    async def list_sessions() -> SessionListResponse:
        """List all active session IDs."""
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session status",
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        """Get the current root word, score and accepted words."""
        response = api_service.get_session(session_id)
        if hasattr(response, "error"):
            return session_not_found(session_id)
        return _convert_session_response(response)

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(session_id: str) -> EndSessionResponse:
        """End a game session and release it."""
        success = api_service.end_session(session_id)
        return EndSessionResponse(success=success, session_id=session_id)

    @app.post(
        "/api/v1/sessions/{session_id}/restart",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game Loop"],
        summary="Restart with a new root word",
    )
    async def restart_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        """Draw a new root word; accepted words and score are cleared."""
        response = api_service.restart_session(session_id)
        if hasattr(response, "error"):
            return session_not_found(session_id)
        return _convert_session_response(response)

    @app.post(
        "/api/v1/sessions/{session_id}/guesses",
        response_model=GuessResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game Loop"],
        summary="Submit a guess",
    )
    async def submit_guess(
        session_id: str,
        body: GuessRequest,
    ) -> Union[GuessResponse, JSONResponse]:
        """
        Submit a guess for the session's root word.

        **Request Body:**
        ```json
        {"word": "rain"}
        ```
        """
        response = api_service.submit_guess(
            SubmitGuessRequest(session_id=session_id, word=body.word)
        )
        if hasattr(response, "error"):
            return session_not_found(session_id)

        return GuessResponse(
            session_id=response.session_id,
            accepted=response.accepted,
            word=response.word,
            score=response.score,
            used_words=response.used_words,
            reason=response.reason,
            title=response.title,
            message=response.message,
        )

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="scramble-engine",
            version="1.0.0",
        )

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Scramble Engine API",
            "version": "1.0.0",
            "environment": SCRAMBLE_ENV,
            "docs": "/api/docs",
            "health": "/health",
        }

    # =========================================================================
    # Conversion Helpers
    # =========================================================================

    def _convert_session_response(response) -> SessionResponse:
        """Convert service SessionResponse to Pydantic model."""
        return SessionResponse(
            session_id=response.session_id,
            status=response.status.value,
            root_word=response.root_word,
            score=response.score,
            used_words=response.used_words,
            created_at=response.created_at,
        )

    return app
