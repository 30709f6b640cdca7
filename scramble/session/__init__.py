"""
Session Module - Manages ephemeral game sessions.

A session represents one play-through of a game:
- Created when the player starts a game (root word drawn)
- Holds accepted words and the score
- Restarted in place when the player asks for a new word
- Destroyed when the player leaves

Sessions are EPHEMERAL:
- No persistence to database
- Ends cleanly when the caller ends it
"""

from .game_session import (
    GameSession,
    SessionState,
    SessionNotStartedError,
    StartResult,
    SubmitResult,
)
from .manager import SessionManager, ManagedSession

__all__ = [
    "GameSession",
    "SessionState",
    "SessionNotStartedError",
    "StartResult",
    "SubmitResult",
    "SessionManager",
    "ManagedSession",
]
