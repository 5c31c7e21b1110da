"""Main CLI entry point - clean subcommand architecture."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

import typer

from xmlprompt.core.configs import AppSettings, get_app_settings, load_raw_config
from xmlprompt.core.serializer import render
from xmlprompt.core.spec import LANGUAGES, TONES
from xmlprompt.tools.clipboard import write_to_clipboard
from xmlprompt.tools.download import offer_download
from xmlprompt.ui.output import UIManager
from xmlprompt.ui.status import FAILED, CopyStatus
from xmlprompt.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="XML Prompt Generator - quickly build copyable XML prompts.",
)


# ============================================================================
# Shared Setup
# ============================================================================

def _load_settings() -> AppSettings:
    """Load configuration. Exits on error."""
    try:
        return get_app_settings(load_raw_config())
    except ValueError as e:
        typer.echo(f"Error loading configuration: {e}", err=True)
        typer.echo("Run 'xml-prompt settings edit' to fix the configuration", err=True)
        raise typer.Exit(1)


def _validate_tone(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in TONES:
        raise typer.BadParameter(f"choose from {', '.join(TONES)}")
    return value


def _validate_language(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in LANGUAGES:
        raise typer.BadParameter("run 'xml-prompt options' to list languages")
    return value


def _collect_examples(examples: List[str], examples_file: Optional[Path]) -> Optional[str]:
    """Join --example values and --examples-file content, or None if neither given."""
    parts: List[str] = []
    if examples_file is not None:
        try:
            parts.append(examples_file.read_text(encoding="utf-8"))
        except OSError as e:
            typer.echo(f"Error reading examples file: {e}", err=True)
            raise typer.Exit(1)
    parts.extend(examples)
    if not parts:
        return None
    return "\n".join(parts)


# ============================================================================
# Commands
# ============================================================================

@app.command()
def generate(
    task: Optional[str] = typer.Option(None, "--task", "-t", help="Describe the task (e.g. Write a formal email)"),
    lines: Optional[int] = typer.Option(None, "--lines", "-n", min=1, help="Preferred number of lines (approx)"),
    tone: Optional[str] = typer.Option(None, "--tone", callback=_validate_tone, help="neutral, formal, informal, friendly or technical"),
    language: Optional[str] = typer.Option(None, "--language", "-l", callback=_validate_language, help="Output language"),
    notes: str = typer.Option("", "--notes", help="Additional notes / constraints"),
    example: List[str] = typer.Option([], "--example", "-e", help="Example line (repeatable)"),
    examples_file: Optional[Path] = typer.Option(None, "--examples-file", help="File with one example per line"),
    copy: bool = typer.Option(False, "--copy", "-c", help="Copy the XML to the clipboard"),
    download: bool = typer.Option(False, "--download", "-d", help="Save the XML to a file"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="File name for --download"),
    preview: bool = typer.Option(False, "--preview/--no-preview", help="Show highlighted preview and summary"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    Build the XML document from options and print it.

    Example: xml-prompt generate -t "Write a formal email" --tone formal -l French --copy
    """
    configure_logging(verbose)
    app_settings = _load_settings()

    example_text = _collect_examples(example, examples_file)
    spec = app_settings.initial_spec().copy(additional_notes=notes)
    if task is not None:
        spec.task = task
    if lines is not None:
        spec.lines = lines
    if tone is not None:
        spec.tone = tone
    if language is not None:
        spec.language = language
    if example_text is not None:
        spec.include_examples = True
        spec.examples = example_text

    # One stamp for stdout, clipboard and file
    xml = render(spec, datetime.now(timezone.utc))
    logger.debug("Rendered document (%d chars)", len(xml))

    ui = UIManager()
    if preview:
        ui.xml_preview(xml)
        ui.summary(spec)
        ui.footer()
    else:
        typer.echo(xml)

    failed = False
    if copy:
        status = CopyStatus(reset_after=app_settings.copy_reset_seconds)
        label = status.mark(write_to_clipboard(xml))
        typer.echo(label, err=True)
        failed = label == FAILED

    if download:
        try:
            path = offer_download(
                xml, output or app_settings.output_filename, app_settings.output_dir
            )
        except OSError as e:
            typer.echo(f"Error saving file: {e}", err=True)
            raise typer.Exit(1)
        typer.echo(f"Saved {path}", err=True)

    if failed:
        raise typer.Exit(1)


@app.command()
def interactive(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    Fill the form step by step, then copy or download the XML.

    Performance: Lazy import of the form to keep one-shot commands light.
    """
    configure_logging(verbose)
    app_settings = _load_settings()

    from xmlprompt.ui.form import run_interactive
    run_interactive(app_settings)


@app.command()
def options() -> None:
    """List the available tones and languages."""
    typer.echo("Tones:")
    for value, label in TONES.items():
        typer.echo(f"  {value:<10} {label}")
    typer.echo("\nLanguages:")
    for language in LANGUAGES:
        typer.echo(f"  {language}")


@app.command()
def settings(
    action: str = typer.Argument(..., help="Action: init, show, or edit"),
) -> None:
    """
    Manage XML Prompt Generator configuration.

    Actions:
        init - Interactive configuration wizard
        show - Display current configuration
        edit - Open config file in $EDITOR
    """
    from xmlprompt.ui.config_commands import handle_config
    handle_config(action)


def run() -> None:
    """Entry point for console script mapping."""
    app()


if __name__ == "__main__":
    run()
