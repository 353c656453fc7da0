"""System clipboard access through the platform's copy command."""
from __future__ import annotations

import shutil
import subprocess
import time
from typing import List, Optional

from core.exceptions import ClipboardUnavailableError
from core.logging_config import get_logger

LOGGER = get_logger(__name__)

# Tried in order; the first one on PATH wins
CLIPBOARD_COMMANDS: List[List[str]] = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
]

CLIPBOARD_TIMEOUT_SECONDS = 5


def find_clipboard_command() -> Optional[List[str]]:
    """Return the first available clipboard command, or None."""
    for command in CLIPBOARD_COMMANDS:
        if shutil.which(command[0]):
            return command
    return None


def copy_to_clipboard(text: str) -> None:
    """
    Write text to the system clipboard.

    Raises:
        ClipboardUnavailableError: If no clipboard command exists or it fails.
    """
    command = find_clipboard_command()
    if command is None:
        raise ClipboardUnavailableError("No clipboard command found on PATH")

    start = time.perf_counter()
    try:
        subprocess.run(
            command,
            input=text.encode("utf-8"),
            check=True,
            timeout=CLIPBOARD_TIMEOUT_SECONDS,
            capture_output=True,
        )
    except (OSError, subprocess.SubprocessError) as e:
        raise ClipboardUnavailableError(f"{command[0]} failed: {e}") from e

    LOGGER.debug(f"Copied {len(text)} characters with {command[0]} in {(time.perf_counter() - start) * 1000:.2f}ms")
