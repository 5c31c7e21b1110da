"""Clipboard writes through the platform tool, with a terminal fallback."""

import base64
import logging
import subprocess
import sys
from typing import List, Optional, TextIO

from xmlprompt.utils.detection import detect_clipboard_command

logger = logging.getLogger(__name__)

CLIPBOARD_TIMEOUT_S = 5
TTY_PATH = "/dev/tty"


def _copy_with_command(argv: List[str], text: str) -> bool:
    """Pipe text into a clipboard program. Returns True on exit code 0."""
    try:
        result = subprocess.run(
            argv,
            input=text.encode("utf-8"),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            timeout=CLIPBOARD_TIMEOUT_S,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug("Clipboard command %s failed: %s", argv[0], e)
        return False

    if result.returncode != 0:
        logger.debug(
            "Clipboard command %s exited with %d: %s",
            argv[0],
            result.returncode,
            result.stderr.decode("utf-8", errors="replace").strip(),
        )
        return False
    return True


def osc52_sequence(text: str) -> str:
    """
    Build the OSC 52 escape sequence that sets the terminal clipboard.

    Example:
        >>> osc52_sequence("hi")
        '\\x1b]52;c;aGk=\\x07'
    """
    payload = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return f"\033]52;c;{payload}\a"


def _copy_with_terminal(text: str, stream: Optional[TextIO] = None) -> bool:
    """
    Ask the terminal emulator to set the clipboard via OSC 52.

    Writes to the controlling TTY so that piped stdout stays clean.
    Falls back to stdout only when it is itself a terminal.
    """
    sequence = osc52_sequence(text)

    if stream is not None:
        stream.write(sequence)
        stream.flush()
        return True

    try:
        with open(TTY_PATH, "w") as tty:
            tty.write(sequence)
            tty.flush()
        return True
    except OSError as e:
        logger.debug("Cannot open %s: %s", TTY_PATH, e)

    if sys.stdout.isatty():
        sys.stdout.write(sequence)
        sys.stdout.flush()
        return True

    return False


def write_to_clipboard(text: str, stream: Optional[TextIO] = None) -> bool:
    """
    Copy text to the system clipboard.

    Strategy:
    1. Platform clipboard tool (pbcopy, clip, wl-copy, xclip, xsel)
    2. OSC 52 terminal escape sequence

    Args:
        text: Content to copy, verbatim
        stream: Terminal stream for the OSC 52 fallback (default: controlling TTY)

    Returns:
        True if either mechanism accepted the text, False otherwise
    """
    argv = detect_clipboard_command()
    if argv is not None and _copy_with_command(argv, text):
        return True

    logger.debug("Falling back to OSC 52 clipboard sequence")
    return _copy_with_terminal(text, stream)
