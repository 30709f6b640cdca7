"""
Scramble - Anagram Word Game Engine

A deterministic, rules-driven engine for a word game where players spell
as many words as they can from the letters of a root word.
The engine provides:
- Root word selection
- Guess validation
- Scoring
- Session state management
"""

__version__ = "0.1.0"
