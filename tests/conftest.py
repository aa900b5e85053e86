"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from aicommit.config import Config
from aicommit.git import GitCommandError
from aicommit.llm.base import BaseLLMProvider


class FakeGitRunner:
    """Stands in for run_git_command.

    responses maps a command prefix (e.g. "diff --cached") to the output
    (str or bytes) or to an exception to raise. The longest matching prefix
    wins. raw calls get bytes back, as from the real runner.
    """

    def __init__(self, responses: dict):
        self.responses = responses
        self.calls = []

    def __call__(self, args, *, strip=True, merge_stderr=False, raw=False):
        self.calls.append({
            "args": list(args),
            "strip": strip,
            "merge_stderr": merge_stderr,
            "raw": raw,
        })
        command = " ".join(args)
        matches = [key for key in self.responses if command.startswith(key)]
        if not matches:
            return b"" if raw else ""
        result = self.responses[max(matches, key=len)]
        if isinstance(result, Exception):
            raise result
        if raw:
            return result if isinstance(result, bytes) else result.encode("utf-8")
        return result.strip() if strip else result

    def commands(self, prefix: str) -> list:
        """Argument lists of the calls whose command starts with prefix."""
        return [c["args"] for c in self.calls if " ".join(c["args"]).startswith(prefix)]


class StubProvider(BaseLLMProvider):
    """LLM provider returning scripted outcomes, one per call."""

    model = "stub-model"

    def __init__(self, outcomes: list):
        self.outcomes = list(outcomes)
        self.prompts = []
        self.closed = False

    def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(temp_dir, mocker, monkeypatch):
    """Point the global config directory at a temp dir and clear API_KEY."""
    mock_dir = temp_dir / ".ai-commit"
    mocker.patch("aicommit.global_config._CONFIG_DIR", mock_dir)
    monkeypatch.delenv("API_KEY", raising=False)
    return mock_dir


@pytest.fixture
def make_git_runner():
    """Factory for FakeGitRunner instances."""
    return FakeGitRunner


@pytest.fixture
def make_provider():
    """Factory for StubProvider instances."""
    return StubProvider


@pytest.fixture
def no_commits_error():
    """The error git log raises in a repository without commits."""
    return GitCommandError(
        ["log", "-5", "--pretty=format:%s"],
        "fatal: your current branch 'main' does not have any commits yet",
    )


@pytest.fixture
def sample_config():
    """A valid configuration."""
    return Config(api_key="test-key", history_depth=2)


@pytest.fixture
def sample_diff():
    """Sample staged diff for testing."""
    return """diff --git a/app.py b/app.py
index 1234567..abcdefg 100644
--- a/app.py
+++ b/app.py
@@ -1,3 +1,6 @@
 def login():
     return True
+
+def logout():
+    return True
"""
