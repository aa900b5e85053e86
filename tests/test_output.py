"""Tests for aicommit.cli.output module."""

import time

from aicommit.cli.output import Spinner, colorize, print_error
from aicommit.config import ConfigError, MissingAPIKeyError
from aicommit.git import DiffTooLargeError, NoStagedChangesError, NotARepositoryError


class TestColorize:
    """Tests for colorize function."""

    def test_enabled_adds_ansi(self):
        """Test that enabled colors wrap text in escape codes."""
        result = colorize("hello", "red")
        assert "\x1b[" in result
        assert "hello" in result

    def test_disabled_returns_text(self):
        """Test that disabled colors return the plain text."""
        assert colorize("hello", "red", enabled=False) == "hello"


class TestPrintError:
    """Tests for print_error function."""

    def test_not_a_repository_tip(self, capsys):
        """Test the tip for running outside a repository."""
        print_error(NotARepositoryError("not a git repository"), color_enabled=False)

        out = capsys.readouterr().out
        assert "Error: Not a git repository" in out
        assert "Tip: Initialize a git repository with 'git init'" in out

    def test_no_staged_changes_tip(self, capsys):
        """Test the tip for an empty index."""
        print_error(NoStagedChangesError("no staged changes"), color_enabled=False)

        out = capsys.readouterr().out
        assert "Error: No staged changes found" in out
        assert "git add <files>" in out

    def test_missing_api_key_tip(self, capsys):
        """Test the tip for a missing API key."""
        print_error(MissingAPIKeyError("API key is required"), color_enabled=False)

        out = capsys.readouterr().out
        assert "Error: API key is missing" in out
        assert "ai-commit init" in out

    def test_generic_error(self, capsys):
        """Test that other errors print their message without a tip."""
        print_error(DiffTooLargeError(100, 200), color_enabled=False)

        out = capsys.readouterr().out
        assert out.strip() == "Error: diff size exceeds maximum allowed size of 100 bytes"

    def test_goes_to_stdout(self, capsys):
        """Test that errors are written to stdout."""
        print_error(ConfigError("bad"), color_enabled=False)

        captured = capsys.readouterr()
        assert "Error: bad" in captured.out
        assert captured.err == ""


class TestSpinner:
    """Tests for Spinner context manager."""

    def test_non_interactive_prints_static_message(self, capsys):
        """Test the static message and Done line without a terminal."""
        with Spinner("Generating commit message...", interactive=False) as spinner:
            assert spinner._thread is None

        out = capsys.readouterr().out
        assert out == "Generating commit message... Done!\n"

    def test_detects_non_tty(self, capsys):
        """Test that captured stdout is treated as non-interactive."""
        spinner = Spinner("Working...")
        assert spinner.interactive is False

    def test_interactive_thread_is_joined(self, capsys):
        """Test that the spinner thread stops before the block returns."""
        spinner = Spinner("Working...", interactive=True)

        with spinner:
            thread = spinner._thread
            assert thread.is_alive()
            time.sleep(0.15)

        assert not thread.is_alive()
        assert spinner._thread is None
        out = capsys.readouterr().out
        assert "Working... ⠋" in out
        assert out.endswith("\rWorking... Done!\n")

    def test_done_printed_on_error(self, capsys):
        """Test that the spinner finishes even when the block raises."""
        try:
            with Spinner("Committing changes...", interactive=False):
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        assert "Done!" in capsys.readouterr().out
