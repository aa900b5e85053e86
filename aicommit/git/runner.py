"""Git command runner.

Every git invocation goes through run_git_command so callers can swap it
for a fake in tests.
"""

import logging
import subprocess
from typing import Callable, Union

from aicommit.git.exceptions import GitCommandError, GitError

logger = logging.getLogger(__name__)

GitRunner = Callable[..., Union[str, bytes]]


def run_git_command(
    args: list[str],
    *,
    strip: bool = True,
    merge_stderr: bool = False,
    raw: bool = False,
) -> Union[str, bytes]:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        strip: Strip surrounding whitespace from the output.
        merge_stderr: Capture stderr into the returned output (and into the
            error message on failure).
        raw: Return stdout as undecoded bytes, exactly as git wrote it.
            strip is ignored.

    Returns:
        The stdout of the git command, as bytes when raw is set.

    Raises:
        GitCommandError: If the command exits with a non-zero status.
        GitError: If git is not installed.
    """
    logger.debug("Running git %s", " ".join(args))
    try:
        result = subprocess.run(
            ["git"] + args,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
            text=not raw,
            encoding=None if raw else "utf-8",
            errors=None if raw else "replace",
            check=True,
        )
    except subprocess.CalledProcessError as e:
        output = _as_text(e.stdout if merge_stderr else e.stderr)
        raise GitCommandError(args, output.strip())
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")

    if raw:
        return result.stdout or b""

    output = result.stdout or ""
    return output.strip() if strip else output


def _as_text(output: Union[str, bytes, None]) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output
