"""
Clipboard tool detection.

Finds a command-line program able to write the system clipboard.
"""

import os
import platform
import shutil
from typing import List, Optional


# Candidates per OS family, in order of preference
CLIPBOARD_COMMANDS = {
    "MacOS": [["pbcopy"]],
    "Windows": [["clip"]],
    "Linux": [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ],
}


def detect_os_family() -> str:
    """
    Auto-detect OS family.

    Returns:
        str: MacOS, Linux, Windows, or the raw platform.system() value
    """
    system = platform.system()

    if system == "Darwin":
        return "MacOS"
    elif system == "Linux":
        return "Linux"
    elif system == "Windows":
        return "Windows"

    return system


def detect_clipboard_command(os_family: Optional[str] = None) -> Optional[List[str]]:
    """
    Find the first installed clipboard writer for this OS.

    On Linux, wl-copy is only considered under a Wayland session.

    Returns:
        list: argv for the clipboard tool, or None if none is installed
    """
    os_family = os_family or detect_os_family()

    for argv in CLIPBOARD_COMMANDS.get(os_family, []):
        if argv[0] == "wl-copy" and not os.environ.get("WAYLAND_DISPLAY"):
            continue
        if shutil.which(argv[0]):
            return argv

    return None
