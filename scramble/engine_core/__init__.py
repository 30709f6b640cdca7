"""
Engine Core - Guess validation and scoring.

The engine is the runtime that:
1. Draws a root word
2. Validates each guess against the root and the history
3. Scores accepted guesses
"""

from .outcome import RejectionReason, ValidationOutcome, describe
from .scoring import MIN_WORD_LENGTH, normalize, score_for
from .selector import RootWordSelector, FALLBACK_ROOT_WORD
from .validator import GuessValidator, is_feasible

__all__ = [
    "RejectionReason",
    "ValidationOutcome",
    "describe",
    "MIN_WORD_LENGTH",
    "normalize",
    "score_for",
    "RootWordSelector",
    "FALLBACK_ROOT_WORD",
    "GuessValidator",
    "is_feasible",
]
