"""External services used by the survey surfaces.

- System clipboard access for the share action
"""
from __future__ import annotations

from .clipboard import copy_to_clipboard, find_clipboard_command

__all__ = [
    "copy_to_clipboard",
    "find_clipboard_command",
]
