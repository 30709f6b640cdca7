"""
Game Session - One play-through against a single root word.

STATE MACHINE:
    UNINITIALIZED --start--> ACTIVE
    ACTIVE --start--> ACTIVE  (new root word, history and score cleared)
    ACTIVE --submit--> ACTIVE (history and score grow only on acceptance)

There is no terminal state. Ending a game is the caller's decision.

The session performs no locking; callers sharing a session across threads
must serialize access (see SessionManager).
"""

from __future__ import annotations
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
import logging

from ..engine_core.outcome import RejectionReason
from ..engine_core.scoring import score_for
from ..engine_core.selector import RootWordSelector
from ..engine_core.validator import GuessValidator

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"


class SessionNotStartedError(Exception):
    """Raised when a guess is submitted before start()."""


@dataclass(frozen=True)
class StartResult:
    """Result of starting a session."""
    root_word: str


@dataclass(frozen=True)
class SubmitResult:
    """
    Result of submitting a guess.

    Always carries the root word, score and history at submit time, so the caller can
    render the board whether or not the guess was accepted.
    """
    accepted: bool
    word: str
    root_word: str
    score: int
    used_words: tuple[str, ...]
    reason: RejectionReason | None = None


@dataclass
class GameSession:
    """
    Session state: root word, accepted words and score.

    Usage:
        session = GameSession(validator=GuessValidator(spell_checker=checker))
        session.start(word_list)
        result = session.submit("rain")
    """
    validator: GuessValidator
    selector: RootWordSelector = field(default_factory=RootWordSelector)

    state: SessionState = SessionState.UNINITIALIZED
    root_word: str = ""
    used_words: list[str] = field(default_factory=list)
    score: int = 0

    @property
    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE

    def start(self, word_list: Sequence[str] | None) -> StartResult:
        """
        Start (or restart) the session with a fresh root word.

        Replaces the whole state; never fails.
        """
        self.root_word = self.selector.select(word_list)
        self.used_words = []
        self.score = 0
        self.state = SessionState.ACTIVE
        logger.info("Session started with root word %r", self.root_word)
        return StartResult(root_word=self.root_word)

    def submit(self, candidate: str) -> SubmitResult:
        """
        Submit a guess.

        Accepted guesses are prepended to the history and scored.
        Rejected guesses leave the session untouched.

        Raises:
            SessionNotStartedError: If start() has not been called.
        """
        if not self.is_active:
            raise SessionNotStartedError("Call start() before submitting guesses")

        outcome = self.validator.validate(candidate, self.root_word, self.used_words)

        if not outcome.accepted:
            logger.debug("Rejected %r for %r: %s", outcome.word, self.root_word, outcome.reason.value)
            return SubmitResult(
                accepted=False,
                word=outcome.word,
                root_word=self.root_word,
                score=self.score,
                used_words=tuple(self.used_words),
                reason=outcome.reason,
            )

        self.used_words.insert(0, outcome.word)
        self.score += score_for(outcome.word)
        logger.debug("Accepted %r, score now %s", outcome.word, self.score)

        return SubmitResult(
            accepted=True,
            word=outcome.word,
            root_word=self.root_word,
            score=self.score,
            used_words=tuple(self.used_words),
        )
