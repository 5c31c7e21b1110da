"""
Configuration Management Commands

Interactive configuration wizard for XML Prompt Generator.
This module is lazy-loaded only when settings commands are used.
"""

import os
import subprocess
from typing import Dict

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from xmlprompt.core import configs
from xmlprompt.core.configs import get_app_settings, load_raw_config, save_config_file
from xmlprompt.core.spec import LANGUAGES, TONES

console = Console()

CONFIG_TEMPLATE = """[DEFAULT]
default_task =
default_lines = 5
default_tone = neutral
default_language = English
output_filename = prompt.xml
output_dir =
copy_reset_seconds = 2
"""


def handle_config(action: str) -> None:
    """
    Route to appropriate settings action.

    Args:
        action: One of 'init', 'show', or 'edit'
    """
    actions = {
        "init": init_config,
        "show": show_config,
        "edit": edit_config,
    }

    if action not in actions:
        console.print(f"[red]Unknown action: {action}[/red]")
        console.print("Available actions: init, show, edit")
        raise SystemExit(1)

    actions[action]()


def init_config() -> None:
    """
    Interactive configuration wizard.
    Works on both new and existing configurations.
    """
    console.print(
        Panel.fit(
            "[bold blue]XML Prompt Generator Configuration[/bold blue]",
            title="Setup",
        )
    )

    try:
        current = get_app_settings(load_raw_config())
    except ValueError as e:
        console.print(f"[yellow]Ignoring invalid configuration: {e}[/yellow]")
        current = configs.AppSettings()

    console.print("\n[bold cyan]📝 Form defaults[/bold cyan]")
    default_lines = IntPrompt.ask("Default number of lines", default=current.default_lines)
    while default_lines < 1:
        console.print("[yellow]Must be at least 1[/yellow]")
        default_lines = IntPrompt.ask("Default number of lines", default=current.default_lines)

    default_tone = Prompt.ask(
        "Default tone", choices=list(TONES), default=current.default_tone
    )

    default_language = current.default_language
    console.print(f"Current default language: {default_language}")
    if Confirm.ask("Change default language?", default=False):
        default_language = Prompt.ask(
            "Default language",
            choices=list(LANGUAGES),
            default=default_language,
            show_choices=True,
        )

    console.print("\n[bold cyan]💾 Export[/bold cyan]")
    output_filename = Prompt.ask("Download file name", default=current.output_filename)
    output_dir = Prompt.ask(
        "Download directory (empty for current directory)",
        default=str(current.output_dir or ""),
    )

    config_data = {
        "default_task": current.default_task,
        "default_lines": str(default_lines),
        "default_tone": default_tone,
        "default_language": default_language,
        "output_filename": output_filename,
        "output_dir": output_dir,
        "copy_reset_seconds": str(current.copy_reset_seconds),
    }
    save_config_file(config_data, configs.CONFIG_PATH)

    console.print(
        Panel.fit(
            f"[green]✅ Configuration saved![/green]\n"
            f"Location: {configs.CONFIG_PATH}",
            title="Success",
        )
    )


def show_config() -> None:
    """Display the effective configuration in a formatted table."""
    try:
        raw = load_raw_config()
        settings = get_app_settings(raw)
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise SystemExit(1)

    table = Table(title="XML Prompt Generator Configuration", show_header=True)
    table.add_column("Setting", style="cyan", width=25)
    table.add_column("Value", style="green")
    table.add_column("Source", style="dim")

    values: Dict[str, str] = {
        "default_task": settings.default_task or "(empty)",
        "default_lines": str(settings.default_lines),
        "default_tone": settings.default_tone,
        "default_language": settings.default_language,
        "output_filename": settings.output_filename,
        "output_dir": str(settings.output_dir or "(current directory)"),
        "copy_reset_seconds": str(settings.copy_reset_seconds),
    }
    for key, value in values.items():
        table.add_row(key, value, "config" if key in raw else "default")

    console.print(table)
    if not configs.CONFIG_PATH.exists():
        console.print("[yellow]No configuration file. Run 'xml-prompt settings init'[/yellow]")
    console.print(f"\n[dim]Config file: {configs.CONFIG_PATH}[/dim]")


def edit_config() -> None:
    """Open config file in user's default editor."""
    path = configs.CONFIG_PATH
    if not path.exists():
        console.print("[yellow]No configuration found. Creating template...[/yellow]")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(CONFIG_TEMPLATE)

    editor = os.environ.get("EDITOR", "vim")

    try:
        console.print(f"[dim]Opening {path} with {editor}...[/dim]")
        subprocess.run([editor, str(path)], check=True)
        console.print("[green]✓ Config file updated[/green]")
    except subprocess.CalledProcessError:
        console.print(f"[red]Failed to open editor: {editor}[/red]")
        console.print(f"Edit manually: {path}")
    except FileNotFoundError:
        console.print(f"[red]Editor not found: {editor}[/red]")
        console.print(f"Set EDITOR environment variable or edit manually: {path}")
