"""Form state holder for one editing session."""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional

from xmlprompt.core.serializer import render
from xmlprompt.core.spec import PromptSpecification

logger = logging.getLogger(__name__)

Listener = Callable[[str], None]


class FormState:
    """
    Holds the current PromptSpecification and re-serializes on every edit.

    Each field has its own setter. After a setter runs, every subscribed
    listener receives the freshly rendered XML. There is no caching: the
    document is rebuilt from the current snapshot each time.

    Thread safety: not thread-safe. Edits are expected from a single
    user-input loop.
    """

    def __init__(
        self,
        initial: Optional[PromptSpecification] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Args:
            initial: Starting values (defaults to an empty specification)
            clock: Returns the current time; defaults to UTC now
        """
        self._defaults = initial.copy() if initial else PromptSpecification()
        self._spec = self._defaults.copy()
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        """Register a callback receiving the XML after every change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _changed(self, field: str) -> None:
        logger.debug("Field %s changed", field)
        if not self._listeners:
            return
        xml = self.render()
        for listener in list(self._listeners):
            listener(xml)

    def _set(self, field: str, value: Any) -> None:
        setattr(self._spec, field, value)
        self._changed(field)

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_task(self, task: str) -> None:
        self._set("task", task)

    def set_lines(self, lines: Any) -> None:
        self._set("lines", lines)

    def set_tone(self, tone: str) -> None:
        self._set("tone", tone)

    def set_language(self, language: str) -> None:
        self._set("language", language)

    def set_additional_notes(self, notes: str) -> None:
        self._set("additional_notes", notes)

    def set_include_examples(self, include: bool) -> None:
        self._set("include_examples", include)

    def set_examples(self, examples: str) -> None:
        self._set("examples", examples)

    def reset(self) -> None:
        """Restore the starting values."""
        self._spec = self._defaults.copy()
        self._changed("*")

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def snapshot(self) -> PromptSpecification:
        """Return a copy of the current values."""
        return self._spec.copy()

    def render(self, now: Optional[datetime] = None) -> str:
        """
        Serialize the current snapshot.

        Args:
            now: Generation time; the clock is read when omitted

        Returns:
            The XML document
        """
        return render(self._spec, now if now is not None else self._clock())
