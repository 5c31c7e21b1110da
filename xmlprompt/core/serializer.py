"""XML serialization of a PromptSpecification.

Builds the document line by line with fixed indentation; every text node
goes through escape_xml.
"""

import re
from datetime import datetime, timezone
from typing import Any, List

from xmlprompt.core.spec import PromptSpecification

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
ROOT_TAG = "PromptSpecification"

_LINE_BREAK = re.compile(r"\r?\n")


def escape_xml(text: Any) -> str:
    """
    Escape special XML characters in text or attribute content.

    Args:
        text: Raw value; non-strings are converted with str()

    Returns:
        Text with & < > " ' replaced by entity references

    Note:
        Order matters: & must be escaped first to avoid double-escaping
    """
    return (str(text)
            .replace('&', '&amp;')   # Must be first
            .replace('<', '&lt;')
            .replace('>', '&gt;')
            .replace('"', '&quot;')
            .replace("'", '&apos;'))


def simple_xml_tag(tag: str, content: str, indent: int = 0) -> str:
    """
    Create a single-line XML element with already-escaped content.

    Args:
        tag: Tag name (without angle brackets)
        content: Escaped content
        indent: Number of spaces to indent (default: 0)

    Returns:
        Single-line XML element
    """
    return f"{' ' * indent}<{tag}>{content}</{tag}>"


def split_example_lines(examples: str) -> List[str]:
    """Split example text on Unix or Windows line breaks, keeping blank lines."""
    return _LINE_BREAK.split(examples)


def format_timestamp(now: datetime) -> str:
    """
    ISO-8601 UTC timestamp with millisecond precision and a Z suffix.

    Naive datetimes are taken to already be in UTC.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    else:
        now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_examples(examples: str) -> str:
    """Build the <Examples> block, one <Example> per line."""
    items = [
        simple_xml_tag("Example", escape_xml(line), indent=4)
        for line in split_example_lines(examples)
    ]
    return "\n".join(["  <Examples>", *items, "  </Examples>"])


def serialize(
    task: str,
    lines: Any,
    tone: str,
    language: str,
    additional_notes: str,
    include_examples: bool,
    examples: str,
    now: datetime,
) -> str:
    """
    Serialize the seven form fields into a PromptSpecification document.

    The output depends only on the arguments; the generation time is
    injected so that callers decide when the document is stamped.
    """
    parts = [
        XML_DECLARATION,
        f'<{ROOT_TAG} generatedAt="{escape_xml(format_timestamp(now))}">',
        simple_xml_tag("Task", escape_xml(task), indent=2),
        simple_xml_tag("Lines", escape_xml(lines), indent=2),
        simple_xml_tag("Tone", escape_xml(tone), indent=2),
        simple_xml_tag("Language", escape_xml(language), indent=2),
        build_examples(examples) if include_examples else "",
        simple_xml_tag("AdditionalNotes", escape_xml(additional_notes), indent=2),
        f"</{ROOT_TAG}>",
    ]
    # Omitted sections must not leave a blank line behind
    return "\n".join(part for part in parts if part)


def render(spec: PromptSpecification, now: datetime) -> str:
    """Serialize a PromptSpecification record."""
    return serialize(
        task=spec.task,
        lines=spec.lines,
        tone=spec.tone,
        language=spec.language,
        additional_notes=spec.additional_notes,
        include_examples=spec.include_examples,
        examples=spec.examples,
        now=now,
    )
