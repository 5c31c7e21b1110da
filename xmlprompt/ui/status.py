"""Transient copy status indicator."""

import time
from typing import Callable, Optional

COPY = "Copy"
COPIED = "Copied!"
FAILED = "Failed"


class CopyStatus:
    """
    Label for the copy action that clears itself.

    After mark() the label reads "Copied!" or "Failed" until reset_after
    seconds have passed, then reads "Copy" again.
    """

    def __init__(
        self,
        reset_after: float = 2.0,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.reset_after = reset_after
        self._clock = clock or time.monotonic
        self._label = COPY
        self._marked_at: Optional[float] = None

    def mark(self, success: bool) -> str:
        """Record the outcome of a copy attempt and return the new label."""
        self._label = COPIED if success else FAILED
        self._marked_at = self._clock()
        return self._label

    @property
    def label(self) -> str:
        if self._marked_at is not None and self._clock() - self._marked_at >= self.reset_after:
            self._label = COPY
            self._marked_at = None
        return self._label

    @property
    def style(self) -> str:
        """Rich style matching the current label."""
        return {COPIED: "green", FAILED: "red"}.get(self.label, "")
