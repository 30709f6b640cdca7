"""
Guess Validator - Decides whether a guess can be accepted.

Stages run in a fixed order and stop at the first failure:
1. Non-empty
2. Minimum length
3. Not the root word
4. Not already used
5. Spellable from the root's letters (multiset, not set)
6. Recognized by the spell checker

Design principles:
- Pure: never mutates a session, the caller applies the outcome
- Later stages assume earlier ones passed
- The spell checker is injected, so tests can use a static word set
"""

from __future__ import annotations
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
import logging

from .outcome import RejectionReason, ValidationOutcome
from .scoring import MIN_WORD_LENGTH, normalize
from ..words.spell_checker import SpellChecker, SpellCheckerUnavailable

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


def is_feasible(candidate: str, root_word: str) -> bool:
    """
    Check that candidate can be spelled with the root's letters.

    Each letter of the root may be used at most once, so a root with a
    single 'a' cannot spell a word that needs two.
    """
    remaining = Counter(root_word)
    for letter in candidate:
        if remaining[letter] == 0:
            return False
        remaining[letter] -= 1
    return True


@dataclass
class GuessValidator:
    """
    Validation pipeline for guesses.

    Usage:
        validator = GuessValidator(spell_checker=WordSetSpellChecker(words))
        outcome = validator.validate("rain", "train", [])
    """
    spell_checker: SpellChecker
    min_length: int = MIN_WORD_LENGTH
    language: str = DEFAULT_LANGUAGE

    def validate(
        self,
        candidate: str,
        root_word: str,
        used_words: Iterable[str] = (),
    ) -> ValidationOutcome:
        """
        Run candidate through every stage.

        Returns an accepted outcome, or a rejected one naming the first
        stage that failed.
        """
        word = normalize(candidate)
        root_word = normalize(root_word)

        if not word:
            return ValidationOutcome.reject(word, RejectionReason.EMPTY)

        if len(word) < self.min_length:
            return ValidationOutcome.reject(word, RejectionReason.TOO_SHORT)

        if word == root_word:
            return ValidationOutcome.reject(word, RejectionReason.SAME_AS_ROOT)

        if word in {normalize(w) for w in used_words}:
            return ValidationOutcome.reject(word, RejectionReason.ALREADY_USED)

        if not is_feasible(word, root_word):
            return ValidationOutcome.reject(word, RejectionReason.NOT_FEASIBLE)

        try:
            recognized = self.spell_checker.is_recognized(word, self.language)
        except SpellCheckerUnavailable as e:
            logger.warning("Spell checker unavailable for %r: %s", word, e)
            return ValidationOutcome.reject(word, RejectionReason.CHECKER_UNAVAILABLE)

        if not recognized:
            return ValidationOutcome.reject(word, RejectionReason.NOT_REAL)

        return ValidationOutcome.accept(word)
