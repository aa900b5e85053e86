"""Editor helpers for the interactive commit prompt."""

import logging
import os
import shlex
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Optional

from aicommit.git import GitOperations

logger = logging.getLogger(__name__)

FALLBACK_EDITORS = ["vim", "nano", "vi"]


class EditorError(Exception):
    """Raised when the message could not be edited."""

    pass


class EditorNotFoundError(EditorError):
    """Raised when no text editor can be found."""

    pass


class EmptyMessageError(EditorError):
    """Raised when the edited message is empty."""

    pass


def find_editor(git: Optional[GitOperations] = None) -> list[str]:
    """Find an available text editor.

    Preference order:
    1. $VISUAL environment variable
    2. $EDITOR environment variable
    3. git's core.editor setting
    4. The first of vim, nano, vi found on PATH

    Args:
        git: Used to read core.editor. Defaults to a GitOperations instance.

    Returns:
        List of command parts to run the editor.

    Raises:
        EditorNotFoundError: If no editor is configured or installed.
        EditorError: If the editor command cannot be parsed.
    """
    editor = os.environ.get("VISUAL") or os.environ.get("EDITOR")

    if not editor:
        editor = (git or GitOperations()).get_configured_editor()

    if not editor:
        for candidate in FALLBACK_EDITORS:
            if shutil.which(candidate):
                editor = candidate
                break

    if not editor:
        raise EditorNotFoundError("no text editor found. Please set EDITOR environment variable")

    try:
        editor_cmd = shlex.split(editor)
    except ValueError as e:
        raise EditorError(f"invalid editor command {editor!r}: {e}")

    if not editor_cmd:
        raise EditorError(f"invalid editor command {editor!r}")

    return editor_cmd


def open_editor(file_path: Path, editor_cmd: list[str]) -> None:
    """Open the file in an editor attached to the terminal and wait for it to close.

    Raises:
        EditorError: If the editor cannot be started or exits with an error.
    """
    logger.debug("Opening editor: %s", " ".join(editor_cmd))
    try:
        result = subprocess.run(editor_cmd + [str(file_path)], check=False)
    except OSError as e:
        raise EditorError(f"failed to run editor: {e}")

    if result.returncode != 0:
        raise EditorError(f"failed to run editor: exit status {result.returncode}")


def edit_message(message: str, git: Optional[GitOperations] = None) -> str:
    """Let the user edit a message in their text editor.

    The message is written to a temporary file that is removed afterwards,
    whether or not editing succeeds.

    Args:
        message: The text to start from.
        git: Used to look up core.editor.

    Returns:
        The edited message with surrounding whitespace removed.

    Raises:
        EditorNotFoundError: If no editor is available.
        EmptyMessageError: If the edited message is empty.
        EditorError: If the file cannot be written or read, or the editor fails.
    """
    try:
        fd, tmp_name = tempfile.mkstemp(prefix="commit-msg-", suffix=".txt")
    except OSError as e:
        raise EditorError(f"failed to create temporary file: {e}")

    tmp_path = Path(tmp_name)
    try:
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(message)
        except OSError as e:
            raise EditorError(f"failed to write to temporary file: {e}")

        open_editor(tmp_path, find_editor(git))

        try:
            edited = tmp_path.read_text(encoding="utf-8").strip()
        except OSError as e:
            raise EditorError(f"failed to read edited message: {e}")
    finally:
        tmp_path.unlink(missing_ok=True)

    if not edited:
        raise EmptyMessageError("commit message cannot be empty")

    return edited
