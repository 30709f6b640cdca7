"""
Tests for the command-line interface.
"""

import argparse
import io

import pytest

from ..cli import cmd_check, cmd_play, cmd_words, main


def write_files(tmp_path):
    words = tmp_path / "start.txt"
    words.write_text("train\n", encoding="utf-8")
    dictionary = tmp_path / "dictionary.txt"
    dictionary.write_text("rain\nrant\nant\n", encoding="utf-8")
    return str(words), str(dictionary)


class TestPlay:
    """Tests for the interactive game loop."""

    def test_play_session(self, tmp_path):
        words, dictionary = write_files(tmp_path)
        args = argparse.Namespace(words=words, dictionary=dictionary, seed=0, min_length=3)
        stdin = io.StringIO("rain\nrain\n\naria\n:restart\nrant\n:quit\nant\n")
        stdout = io.StringIO()

        cmd_play(args, stdin=stdin, stdout=stdout)
        output = stdout.getvalue()

        assert "Root word: train" in output
        assert "Score: 4" in output
        assert "Word already used" in output
        assert "Word not possible: You can't spell that word from 'train'" in output
        assert "Final score: 4 (1 words)" in output
        assert "Word is empty" not in output


class TestCheck:
    """Tests for checking words against a root."""

    def test_check(self, tmp_path):
        _, dictionary = write_files(tmp_path)
        args = argparse.Namespace(
            root="Train", guesses=["rain", "RAIN", "at", "tain"],
            dictionary=dictionary, min_length=3,
        )
        stdout = io.StringIO()

        cmd_check(args, stdout=stdout)
        lines = stdout.getvalue().splitlines()

        assert lines == [
            "rain: accepted (+4)",
            "rain: already_used",
            "at: too_short",
            "tain: not_real",
            "Score: 4",
        ]


class TestWords:
    """Tests for the word list command."""

    def test_words(self, tmp_path):
        words, _ = write_files(tmp_path)
        stdout = io.StringIO()

        cmd_words(argparse.Namespace(words=words, sample=5), stdout=stdout)

        assert stdout.getvalue().splitlines() == ["Words: 1", "  train"]


class TestMain:
    """Tests for argument parsing."""

    def test_no_command_exits(self):
        with pytest.raises(SystemExit):
            main([])

    def test_check_command(self, tmp_path, capsys):
        _, dictionary = write_files(tmp_path)
        main(["check", "train", "rant", "--dictionary", dictionary])

        assert "rant: accepted (+4)" in capsys.readouterr().out
