"""
Root Word Selector - Draws the root word for a session.
"""

from __future__ import annotations
from collections.abc import Sequence
import logging
import random

logger = logging.getLogger(__name__)

FALLBACK_ROOT_WORD = "silkroad"


class RootWordSelector:
    """
    Picks a root word uniformly at random.

    An empty or missing word list yields FALLBACK_ROOT_WORD so a session
    can always start. Pass a seeded random.Random for repeatable draws.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def select(self, word_list: Sequence[str] | None) -> str:
        """Return one word from word_list, or the fallback word."""
        if not word_list:
            logger.warning("Empty word list, using fallback root word %r", FALLBACK_ROOT_WORD)
            return FALLBACK_ROOT_WORD

        word = self.rng.choice(word_list).strip().lower()
        if not word:
            return FALLBACK_ROOT_WORD
        return word
