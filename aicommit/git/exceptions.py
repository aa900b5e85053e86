"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- GitCommandError: Raised when a git subprocess fails
- NotARepositoryError: Raised outside of a git working tree
- NoStagedChangesError: Raised when there are no staged changes
- DiffTooLargeError: Raised when the staged diff exceeds the size limit
- GitCommitError: Raised when `git commit` exits with an error
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class GitCommandError(GitError):
    """Raised when a git subprocess exits with a non-zero status."""

    def __init__(self, args: list[str], output: str):
        super().__init__(f"Git command failed: git {' '.join(args)}\n{output}")
        self.command = args
        self.output = output


class NotARepositoryError(GitError):
    """Raised when the working directory is not inside a git repository."""

    pass


class NoStagedChangesError(GitError):
    """Raised when there are no staged changes."""

    pass


class DiffTooLargeError(GitError):
    """Raised when the staged diff is larger than the configured limit."""

    def __init__(self, max_bytes: int, actual_bytes: int):
        super().__init__(
            f"diff size exceeds maximum allowed size of {max_bytes} bytes"
        )
        self.max_bytes = max_bytes
        self.actual_bytes = actual_bytes


class GitCommitError(GitError):
    """Raised when the commit itself fails."""

    pass
