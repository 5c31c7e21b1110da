"""The PromptSpecification record and its closed choice sets."""

from dataclasses import dataclass, replace
from typing import Any, Dict


# Tone value -> display label. Order is the order shown to the user.
TONES: Dict[str, str] = {
    "neutral": "Neutral",
    "formal": "Formal",
    "informal": "Informal",
    "friendly": "Friendly",
    "technical": "Technical",
}

LANGUAGES = (
    "English",
    "Spanish",
    "French",
    "German",
    "Italian",
    "Portuguese",
    "Russian",
    "Japanese",
    "Korean",
    "Chinese (Simplified)",
    "Chinese (Traditional)",
    "Arabic",
    "Hindi",
    "Dutch",
    "Swedish",
    "Norwegian",
    "Danish",
    "Finnish",
    "Polish",
    "Turkish",
    "Hebrew",
    "Thai",
    "Vietnamese",
    "Indonesian",
    "Other",
)

DEFAULT_LINES = 5
DEFAULT_TONE = "neutral"
DEFAULT_LANGUAGE = "English"


@dataclass
class PromptSpecification:
    """
    Transient record of what the user wants the prompt to do.

    Lives only in memory for one editing session. Its only external form
    is the serialized XML document.
    """
    task: str = ""
    lines: Any = DEFAULT_LINES
    tone: str = DEFAULT_TONE
    language: str = DEFAULT_LANGUAGE
    additional_notes: str = ""
    include_examples: bool = False
    examples: str = ""

    def copy(self, **changes: Any) -> "PromptSpecification":
        """Return a copy, optionally with some fields replaced."""
        return replace(self, **changes)


def is_known_tone(tone: str) -> bool:
    return tone in TONES


def is_known_language(language: str) -> bool:
    return language in LANGUAGES


def tone_label(tone: str) -> str:
    """Display label for a tone, falling back to the raw value."""
    return TONES.get(tone, tone)
