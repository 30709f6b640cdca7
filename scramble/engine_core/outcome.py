"""
Validation Outcome - Result of checking one guess.

Rejections are normal game outcomes, not faults:
- Every rejection carries a RejectionReason
- No outcome carries mutable state
- Titles and messages for display come from describe()
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .scoring import MIN_WORD_LENGTH


class RejectionReason(Enum):
    """Why a guess was not accepted."""
    EMPTY = "empty"
    TOO_SHORT = "too_short"
    SAME_AS_ROOT = "same_as_root"
    ALREADY_USED = "already_used"
    NOT_FEASIBLE = "not_feasible"
    NOT_REAL = "not_real"
    CHECKER_UNAVAILABLE = "checker_unavailable"


@dataclass(frozen=True)
class ValidationOutcome:
    """
    Outcome of running a guess through the validator.

    `word` is the normalized candidate, so callers never normalize twice.
    """
    accepted: bool
    word: str
    reason: RejectionReason | None = None

    @classmethod
    def accept(cls, word: str) -> ValidationOutcome:
        """Create an accepted outcome."""
        return cls(accepted=True, word=word)

    @classmethod
    def reject(cls, word: str, reason: RejectionReason) -> ValidationOutcome:
        """Create a rejected outcome."""
        return cls(accepted=False, word=word, reason=reason)


_MESSAGES: dict[RejectionReason, tuple[str, str]] = {
    RejectionReason.EMPTY: (
        "Word is empty",
        "Type a word before submitting",
    ),
    RejectionReason.TOO_SHORT: (
        "Word too short",
        "Words must be at least {min_length} letters long",
    ),
    RejectionReason.SAME_AS_ROOT: (
        "Word cannot be same as the root",
        "You cannot provide a word same as '{root_word}'",
    ),
    RejectionReason.ALREADY_USED: (
        "Word already used",
        "You've already used this word. Try again!",
    ),
    RejectionReason.NOT_FEASIBLE: (
        "Word not possible",
        "You can't spell that word from '{root_word}'",
    ),
    RejectionReason.NOT_REAL: (
        "Word not recognized",
        "You can't just make up words at your whim",
    ),
    RejectionReason.CHECKER_UNAVAILABLE: (
        "Spell checker unavailable",
        "Could not check that word right now",
    ),
}


def describe(
    reason: RejectionReason,
    root_word: str = "",
    min_length: int = MIN_WORD_LENGTH,
) -> tuple[str, str]:
    """Return the (title, message) pair shown to the player for a rejection."""
    title, message = _MESSAGES[reason]
    return title, message.format(root_word=root_word, min_length=min_length)
