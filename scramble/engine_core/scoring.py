"""
Scoring - Word normalization and score deltas.
"""

MIN_WORD_LENGTH = 3


def normalize(word: str) -> str:
    """Lowercase and trim surrounding whitespace."""
    return word.strip().lower()


def score_for(word: str) -> int:
    """Score delta for an accepted word: its length once normalized."""
    return len(normalize(word))
