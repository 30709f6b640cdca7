"""
Pytest fixtures for Scramble tests.
"""

import random

import pytest

from ..engine_core.selector import RootWordSelector
from ..engine_core.validator import GuessValidator
from ..session.game_session import GameSession
from ..session.manager import SessionManager
from ..words.spell_checker import WordSetSpellChecker


# Real words spellable from "train", plus a few that are not
TRAIN_WORDS = [
    "rain", "rant", "tarn", "ant", "art", "rat", "tar", "tin",
    "nit", "air", "ran", "tan", "train", "aria", "tart",
]


@pytest.fixture
def spell_checker() -> WordSetSpellChecker:
    """Spell checker that knows a handful of words (but not 'tain')."""
    return WordSetSpellChecker(TRAIN_WORDS)


@pytest.fixture
def validator(spell_checker: WordSetSpellChecker) -> GuessValidator:
    """Validator with the default minimum length."""
    return GuessValidator(spell_checker=spell_checker)


@pytest.fixture
def session(validator: GuessValidator) -> GameSession:
    """Active session whose root word is 'train'."""
    game = GameSession(validator=validator, selector=RootWordSelector(random.Random(0)))
    game.start(["train"])
    return game


@pytest.fixture
def manager(spell_checker: WordSetSpellChecker) -> SessionManager:
    """Session manager drawing every root word from ['train']."""
    return SessionManager(spell_checker=spell_checker, word_list=["train"], seed=0)
