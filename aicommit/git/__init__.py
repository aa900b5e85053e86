"""Git access for ai-commit.

This package isolates every git subprocess call:
- exceptions: GitError and its subclasses
- runner: run_git_command
- operations: GitOperations (diff, history, commit, core.editor)
"""

# Exceptions
from aicommit.git.exceptions import (
    DiffTooLargeError,
    GitCommandError,
    GitCommitError,
    GitError,
    NoStagedChangesError,
    NotARepositoryError,
)

# Runner
from aicommit.git.runner import GitRunner, run_git_command

# Operations
from aicommit.git.operations import GitOperations


__all__ = [
    # Exceptions
    "GitError",
    "GitCommandError",
    "NotARepositoryError",
    "NoStagedChangesError",
    "DiffTooLargeError",
    "GitCommitError",
    # Runner
    "GitRunner",
    "run_git_command",
    # Operations
    "GitOperations",
]
