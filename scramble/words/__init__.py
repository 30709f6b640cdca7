"""
Words Module - Root word lists and spell checking.

Both are collaborators of the engine:
- WordList supplies candidate root words
- SpellChecker tells the validator whether a guess is a real word
"""

from .word_list import (
    WordList,
    WordListError,
    load_word_list,
    default_word_list,
    START_WORDS_FILE,
)
from .spell_checker import (
    SpellChecker,
    SpellCheckerUnavailable,
    WordSetSpellChecker,
    default_spell_checker,
    DICTIONARY_FILE,
)

__all__ = [
    "WordList",
    "WordListError",
    "load_word_list",
    "default_word_list",
    "START_WORDS_FILE",
    "SpellChecker",
    "SpellCheckerUnavailable",
    "WordSetSpellChecker",
    "default_spell_checker",
    "DICTIONARY_FILE",
]
