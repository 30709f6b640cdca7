"""
Spell Checker - Decides whether a word is a real word of a language.

The engine only depends on the SpellChecker protocol. WordSetSpellChecker
is a static lookup backed by a newline-delimited dictionary file.
"""

from __future__ import annotations
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable
import logging
import os

from .word_list import DATA_DIR

logger = logging.getLogger(__name__)

DICTIONARY_FILE = DATA_DIR / "dictionary.txt"


class SpellCheckerUnavailable(Exception):
    """Raised by a checker that cannot answer for a word or language."""


@runtime_checkable
class SpellChecker(Protocol):
    """Anything that can tell whether a word is recognized."""

    def is_recognized(self, word: str, language: str) -> bool:
        ...


class WordSetSpellChecker:
    """
    Static word-set lookup.

    Usage:
        checker = WordSetSpellChecker(["rain", "rant"])
        checker.is_recognized("rain", "en")  # True
    """

    def __init__(self, words: Iterable[str] = (), language: str = "en"):
        self.language = language
        self.words = {w.strip().lower() for w in words if w.strip()}

    def __len__(self) -> int:
        return len(self.words)

    def is_recognized(self, word: str, language: str) -> bool:
        if language != self.language:
            raise SpellCheckerUnavailable(f"No dictionary for language {language!r}")
        return word.strip().lower() in self.words

    @classmethod
    def from_file(cls, path: str | os.PathLike, language: str = "en") -> WordSetSpellChecker:
        """Load a dictionary with one word per line."""
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            checker = cls(f, language=language)
        logger.info("Loaded %s dictionary words from %s", len(checker), path)
        return checker


def default_spell_checker(path: str | os.PathLike | None = None) -> WordSetSpellChecker:
    """Load the configured dictionary, falling back to the bundled one."""
    if path:
        try:
            return WordSetSpellChecker.from_file(path)
        except OSError as e:
            logger.warning("Could not read dictionary %s (%s), using bundled dictionary", path, e)
    return WordSetSpellChecker.from_file(DICTIONARY_FILE)
