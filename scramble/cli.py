"""
Scramble CLI - Command-line interface for the engine.

Usage:
    scramble play                    Play interactively against a random root word
    scramble check <root> <word>...  Check words against a root word
    scramble words                   Show the root word list
"""

import argparse
import logging
import os
import random
import sys

from .engine_core import GuessValidator, RootWordSelector, RejectionReason, describe
from .session import GameSession
from .words import default_spell_checker, default_word_list

RESTART_COMMAND = ":restart"
QUIT_COMMAND = ":quit"


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Scramble - Anagram Word Game Engine",
        prog="scramble",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play interactively")
    play_parser.add_argument("--words", help="Root word list file")
    play_parser.add_argument("--dictionary", help="Dictionary file for the spell checker")
    play_parser.add_argument("--seed", type=int, help="Random seed for root word selection")
    play_parser.add_argument("--min-length", type=int, default=3, help="Minimum guess length")

    # Check command
    check_parser = subparsers.add_parser("check", help="Check words against a root word")
    check_parser.add_argument("root", help="Root word")
    check_parser.add_argument("guesses", nargs="+", help="Words to check, in order")
    check_parser.add_argument("--dictionary", help="Dictionary file for the spell checker")
    check_parser.add_argument("--min-length", type=int, default=3, help="Minimum guess length")

    # Words command
    words_parser = subparsers.add_parser("words", help="Show the root word list")
    words_parser.add_argument("--words", help="Root word list file")
    words_parser.add_argument("--sample", type=int, default=10, help="Number of words to show")

    args = parser.parse_args(argv)

    level = "DEBUG" if args.verbose else os.getenv("SCRAMBLE_LOG_LEVEL", "WARNING")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "play":
        cmd_play(args)
    elif args.command == "check":
        cmd_check(args)
    elif args.command == "words":
        cmd_words(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args, stdin=None, stdout=None):
    """Interactive game loop on stdin/stdout."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    word_list = default_word_list(args.words or os.getenv("SCRAMBLE_WORDS_FILE"))
    checker = default_spell_checker(args.dictionary or os.getenv("SCRAMBLE_DICTIONARY_FILE"))
    validator = GuessValidator(spell_checker=checker, min_length=args.min_length)
    session = GameSession(
        validator=validator,
        selector=RootWordSelector(random.Random(args.seed)),
    )

    session.start(word_list)
    print(f"Root word: {session.root_word}", file=stdout)
    print(f"Type {RESTART_COMMAND} for a new word, {QUIT_COMMAND} to stop.", file=stdout)

    for line in stdin:
        command = line.strip()
        if command == QUIT_COMMAND:
            break
        if command == RESTART_COMMAND:
            session.start(word_list)
            print(f"\nRoot word: {session.root_word}", file=stdout)
            continue

        result = session.submit(line)
        if result.accepted:
            print(f"  {len(result.word)}  {result.word}", file=stdout)
            print(f"Score: {result.score}", file=stdout)
        elif result.reason != RejectionReason.EMPTY:
            # Empty input just re-prompts
            title, message = describe(result.reason, session.root_word, validator.min_length)
            print(f"{title}: {message}", file=stdout)

    print(f"Final score: {session.score} ({len(session.used_words)} words)", file=stdout)


def cmd_check(args, stdout=None):
    """Check words against a root word, accepting them in order."""
    stdout = stdout or sys.stdout

    checker = default_spell_checker(args.dictionary or os.getenv("SCRAMBLE_DICTIONARY_FILE"))
    validator = GuessValidator(spell_checker=checker, min_length=args.min_length)
    session = GameSession(validator=validator)
    session.start([args.root])

    for guess in args.guesses:
        result = session.submit(guess)
        if result.accepted:
            print(f"{result.word}: accepted (+{len(result.word)})", file=stdout)
        else:
            print(f"{result.word}: {result.reason.value}", file=stdout)

    print(f"Score: {session.score}", file=stdout)


def cmd_words(args, stdout=None):
    """Show the size of the root word list and a sample."""
    stdout = stdout or sys.stdout

    word_list = default_word_list(args.words or os.getenv("SCRAMBLE_WORDS_FILE"))
    print(f"Words: {len(word_list)}", file=stdout)
    for word in word_list[:args.sample]:
        print(f"  {word}", file=stdout)


if __name__ == "__main__":
    main()
