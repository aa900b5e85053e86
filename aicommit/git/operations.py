"""Staged diff, commit history and commit operations.

Contains:
- GitOperations: the git calls needed by the commit workflow
"""

import logging
from typing import Optional

from aicommit.git.exceptions import (
    DiffTooLargeError,
    GitCommandError,
    GitCommitError,
    GitError,
    NoStagedChangesError,
    NotARepositoryError,
)
from aicommit.git.runner import GitRunner, run_git_command

logger = logging.getLogger(__name__)

# Printed by `git log` in a repository whose current branch has no commits
NO_COMMITS_MARKER = "does not have any commits yet"


class GitOperations:
    """Git access for the commit workflow.

    All subprocess calls go through ``runner`` (run_git_command by default),
    which takes a list of git arguments and returns the output or raises
    GitError.
    """

    def __init__(self, runner: GitRunner = run_git_command):
        self.runner = runner

    def ensure_repository(self) -> None:
        """Raise NotARepositoryError unless the working directory is in a repo."""
        try:
            self.runner(["rev-parse", "--git-dir"])
        except GitError:
            raise NotARepositoryError("not a git repository")

    def get_staged_files(self) -> list[str]:
        """Get list of staged file paths.

        Returns:
            List of staged file paths.
        """
        try:
            output = self.runner(["diff", "--cached", "--name-only"])
        except GitError as e:
            raise GitError(f"failed to check staged changes: {e}")
        if not output:
            return []
        return output.split("\n")

    def get_diff(self, max_bytes: int) -> str:
        """Get the raw staged diff.

        The size limit is checked against the bytes git printed, before any
        decoding; a diff of exactly max_bytes is accepted.

        Args:
            max_bytes: Largest diff, in bytes, that may be returned.

        Returns:
            The unified diff of the staged changes.

        Raises:
            NotARepositoryError: If not inside a git repository.
            NoStagedChangesError: If nothing is staged.
            DiffTooLargeError: If the diff is larger than max_bytes.
            GitError: If a git command fails.
        """
        self.ensure_repository()

        if not self.get_staged_files():
            raise NoStagedChangesError("no staged changes")

        try:
            raw = self.runner(["diff", "--cached"], raw=True)
        except GitError as e:
            raise GitError(f"failed to get diff: {e}")

        size = len(raw)
        logger.debug("Staged diff is %d bytes (limit %d)", size, max_bytes)
        if size > max_bytes:
            raise DiffTooLargeError(max_bytes, size)

        return raw.decode("utf-8", errors="replace")

    def get_recent_commits(self, count: int) -> list[str]:
        """Get the subjects of the most recent commits, newest first.

        Args:
            count: Maximum number of subjects to return.

        Returns:
            List of commit subject lines. Empty for a repository without commits.

        Raises:
            GitError: If git log fails for any other reason.
        """
        try:
            output = self.runner(["log", f"-{count}", "--pretty=format:%s"])
        except GitCommandError as e:
            if NO_COMMITS_MARKER in e.output:
                return []
            raise GitError(f"failed to get recent commits: {e.output}")

        if not output:
            return []
        return output.split("\n")

    def commit(self, message: str) -> None:
        """Commit the staged changes with the given message.

        Raises:
            GitCommitError: With git's combined output if the commit fails.
        """
        try:
            self.runner(["commit", "-m", message], merge_stderr=True)
        except GitCommandError as e:
            raise GitCommitError(f"failed to commit: {e.output}")

    def get_configured_editor(self) -> Optional[str]:
        """Get git's core.editor setting.

        Returns:
            The configured editor command, or None if unset.
        """
        try:
            editor = self.runner(["config", "--get", "core.editor"])
        except GitError:
            return None
        return editor or None
