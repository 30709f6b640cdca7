"""
Word List - Candidate root words for new sessions.

File format: newline-delimited text, one word per line, no header.
Blank lines are skipped; words are lowercased.
"""

from __future__ import annotations
from collections.abc import Sequence
from pathlib import Path
import logging
import os

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
START_WORDS_FILE = DATA_DIR / "start.txt"


class WordListError(Exception):
    """Raised when a word list file cannot be read."""


class WordList(Sequence):
    """
    Ordered, read-only sequence of root words.

    Loaded once and shared by every session that draws from it.
    """

    def __init__(self, words: Sequence[str] = ()):
        self._words = tuple(words)

    def __getitem__(self, index):
        return self._words[index]

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordList({len(self._words)} words)"

    @classmethod
    def from_text(cls, text: str) -> WordList:
        """Parse newline-delimited text."""
        words = []
        for line in text.splitlines():
            word = line.strip().lower()
            if word:
                words.append(word)
        return cls(words)


def load_word_list(path: str | os.PathLike) -> WordList:
    """
    Load a word list from disk.

    Raises:
        WordListError: If the file is missing or unreadable.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise WordListError(f"Could not read word list {path}: {e}") from e

    word_list = WordList.from_text(text)
    logger.info("Loaded %s words from %s", len(word_list), path)
    return word_list


def default_word_list(path: str | os.PathLike | None = None) -> WordList:
    """
    Load the configured word list, falling back to the bundled one.

    If the bundled list is unavailable too, an empty list is returned and
    the selector's fallback root word takes over.
    """
    if path:
        try:
            return load_word_list(path)
        except WordListError as e:
            logger.warning("%s, using bundled word list", e)

    try:
        return load_word_list(START_WORDS_FILE)
    except WordListError as e:
        logger.warning("%s, starting with an empty word list", e)
        return WordList()
