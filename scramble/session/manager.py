"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. Caller creates a session -> root word drawn, session ACTIVE
2. Caller submits guesses -> validated, accepted words scored
3. Caller restarts -> same session id, new root word, cleared history
4. Caller ends the session -> removed from memory

PERSISTENCE RULES:
- NO database for gameplay
- Sessions are ephemeral and in-memory only

Each session has its own lock. GameSession itself performs no locking,
so every mutation from here goes through that lock.
"""

from __future__ import annotations
from collections.abc import Sequence
from dataclasses import dataclass, field
import logging
import random
import threading
import time
import uuid

from ..engine_core.scoring import MIN_WORD_LENGTH
from ..engine_core.selector import RootWordSelector
from ..engine_core.validator import GuessValidator
from ..words.spell_checker import SpellChecker
from .game_session import GameSession, StartResult, SubmitResult

logger = logging.getLogger(__name__)


@dataclass
class ManagedSession:
    """
    A game session tracked by the manager.

    Holds the word list it draws from so that restarts use the same list.
    """
    session_id: str
    game: GameSession
    word_list: Sequence[str] | None
    created_at: float
    last_activity: float
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def touch(self):
        self.last_activity = time.time()


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions sharing one validator
    - Serialize access to each session
    - Clean up idle sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(
        self,
        spell_checker: SpellChecker,
        word_list: Sequence[str] | None = None,
        min_length: int = MIN_WORD_LENGTH,
        seed: int | None = None,
    ):
        self.validator = GuessValidator(spell_checker=spell_checker, min_length=min_length)
        self.word_list = word_list
        self.seed = seed
        self._sessions: dict[str, ManagedSession] = {}
        self._lock = threading.Lock()

    def create_session(self, word_list: Sequence[str] | None = None) -> ManagedSession:
        """
        Create and start a new session.

        Args:
            word_list: Root words for this session (defaults to the manager's list)

        Returns:
            New ManagedSession, already ACTIVE
        """
        session_id = str(uuid.uuid4())
        word_list = word_list if word_list is not None else self.word_list

        game = GameSession(
            validator=self.validator,
            selector=RootWordSelector(random.Random(self.seed)),
        )
        game.start(word_list)

        now = time.time()
        session = ManagedSession(
            session_id=session_id,
            game=game,
            word_list=word_list,
            created_at=now,
            last_activity=now,
        )

        with self._lock:
            self._sessions[session_id] = session
        logger.info("Created session %s", session_id)
        return session

    def get_session(self, session_id: str) -> ManagedSession | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def restart_session(self, session_id: str) -> StartResult | None:
        """Start a session again with a new root word. None if unknown."""
        session = self.get_session(session_id)
        if not session:
            return None

        with session.lock:
            result = session.game.start(session.word_list)
            session.touch()
        logger.info("Restarted session %s", session_id)
        return result

    def submit_guess(self, session_id: str, word: str) -> SubmitResult | None:
        """Submit a guess to a session. None if unknown."""
        session = self.get_session(session_id)
        if not session:
            return None

        with session.lock:
            result = session.game.submit(word)
            session.touch()
        return result

    def end_session(self, session_id: str) -> bool:
        """
        End a session and remove it from memory.

        Returns False if the session did not exist.
        """
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session:
            logger.info("Ended session %s with score %s", session_id, session.game.score)
        return session is not None

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        with self._lock:
            sessions = list(self._sessions.items())
        return [sid for sid, session in sessions if session.game.is_active]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> list[str]:
        """
        Remove sessions idle for longer than max_age_seconds.

        Returns the removed session IDs.
        """
        current_time = time.time()
        with self._lock:
            sessions = list(self._sessions.items())
        to_remove = [
            session_id for session_id, session in sessions
            if current_time - session.last_activity > max_age_seconds
        ]

        for session_id in to_remove:
            self.end_session(session_id)
        return to_remove
