"""
Terminal rendering for the generated document and its summary.
"""

from datetime import date
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from xmlprompt.core.serializer import split_example_lines
from xmlprompt.core.spec import PromptSpecification

HOW_TO_USE = (
    "Fill the fields describing what you want the prompt to do.",
    "Toggle examples if you want to provide sample lines the prompt should follow.",
    "Copy the XML or download it as prompt.xml and paste into your workflow.",
)


def summary_lines(spec: PromptSpecification) -> List[str]:
    """
    Human-readable summary of the form.

    Unlike the XML, blank example lines are dropped here.
    """
    lines = [
        f"Task: {spec.task or '(none)'}",
        f"Lines: {spec.lines}",
        f"Tone: {spec.tone}",
        f"Language: {spec.language}",
    ]
    if spec.include_examples:
        lines.append("Examples:")
        lines.extend(
            f"  • {example}"
            for example in split_example_lines(spec.examples)
            if example
        )
    return lines


def footer_text(today: Optional[date] = None) -> str:
    """Footer with the local date, e.g. 'Generated on 03/14/2025'."""
    today = today or date.today()
    return f"Generated on {today.strftime('%x')}"


class UIManager:
    """Manages Rich terminal output for XML Prompt Generator."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def success(self, message: str) -> None:
        self.console.print(message, style="green")

    def error(self, message: str) -> None:
        self.console.print(message, style="red")

    def warning(self, message: str) -> None:
        self.console.print(message, style="yellow")

    def info(self, message: str) -> None:
        self.console.print(message, style="blue")

    def dim(self, text: str) -> None:
        self.console.print(text, style="dim")

    def xml_preview(self, xml: str, copy_label: Optional[str] = None, copy_style: str = "") -> None:
        """
        Show the XML with syntax highlighting.

        Args:
            xml: Document to display
            copy_label: Current copy status, shown in the panel subtitle
            copy_style: Rich style for the copy status
        """
        subtitle = Text(f"[{copy_label}] [Download]", style=copy_style) if copy_label else None
        self.console.print(
            Panel(
                Syntax(xml, "xml", word_wrap=True),
                title="Generated XML",
                subtitle=subtitle,
            )
        )

    def summary(self, spec: PromptSpecification) -> None:
        """Show the rendered preview of the form values."""
        body = Text("\n".join(summary_lines(spec)))
        if not spec.task:
            body.highlight_words(["(none)"], style="dim")
        self.console.print(Panel(body, title="Preview (rendered)"))

    def how_to_use(self) -> None:
        steps = Text("\n".join(f"{i}. {step}" for i, step in enumerate(HOW_TO_USE, 1)))
        self.console.print(Panel(steps, title="How to use"))

    def footer(self, today: Optional[date] = None) -> None:
        self.console.print(Text(footer_text(today), justify="right"), style="dim")
