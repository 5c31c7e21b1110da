"""
Interactive terminal form.

Walks the user through every field of the specification, then offers
copy / download / edit actions on the generated document.
Heavy dependencies (Rich, prompt_toolkit) are isolated here.
"""

import logging
from typing import Optional

from prompt_toolkit import prompt
from rich.prompt import Confirm, IntPrompt, Prompt

from xmlprompt.core.configs import AppSettings
from xmlprompt.core.form_state import FormState
from xmlprompt.core.spec import DEFAULT_LINES, LANGUAGES, TONES
from xmlprompt.tools.clipboard import write_to_clipboard
from xmlprompt.tools.download import offer_download
from xmlprompt.ui.output import UIManager
from xmlprompt.ui.status import FAILED, CopyStatus

logger = logging.getLogger(__name__)

ACTIONS = ["copy", "download", "edit", "reset", "quit"]


def ask_multiline(message: str, default: str = "") -> str:
    """
    Read multi-line text.

    Enter inserts a newline; Esc followed by Enter (or Meta+Enter) submits.
    """
    return prompt(f"{message} (Esc+Enter to finish):\n", multiline=True, default=default)


def ask_lines(ui: UIManager, current: int) -> int:
    """Ask for the preferred number of lines, at least 1."""
    while True:
        value = IntPrompt.ask(
            "Preferred number of lines (approx)",
            default=current if isinstance(current, int) else DEFAULT_LINES,
            console=ui.console,
        )
        if value >= 1:
            return value
        ui.warning("Number of lines must be at least 1")


def ask_tone(ui: UIManager, current: str) -> str:
    ui.console.print("\nTones: " + ", ".join(TONES.values()))
    return Prompt.ask(
        "Tone",
        choices=list(TONES),
        default=current if current in TONES else "neutral",
        console=ui.console,
    )


def ask_language(ui: UIManager, current: str) -> str:
    """Numbered language picker, same layout as other choice lists."""
    ui.console.print("\nLanguages:")
    for idx, language in enumerate(LANGUAGES, 1):
        ui.console.print(f"  {idx:>2}. {language}")

    default_idx = LANGUAGES.index(current) + 1 if current in LANGUAGES else 1
    choice = Prompt.ask(
        "Select language",
        choices=[str(i) for i in range(1, len(LANGUAGES) + 1)],
        default=str(default_idx),
        show_choices=False,
        console=ui.console,
    )
    return LANGUAGES[int(choice) - 1]


def fill_form(state: FormState, ui: UIManager) -> None:
    """
    Prompt for every field, pushing each answer through the state setters.

    Current values are offered as defaults, so this doubles as the edit
    step of the action loop.
    """
    spec = state.snapshot()

    ui.console.print("\n[bold cyan]📝 Task[/bold cyan]")
    state.set_task(
        Prompt.ask(
            "Describe the task (e.g. Write a formal email)",
            default=spec.task,
            console=ui.console,
        )
    )

    state.set_language(ask_language(ui, spec.language))
    state.set_lines(ask_lines(ui, spec.lines))
    state.set_tone(ask_tone(ui, spec.tone))

    ui.console.print("\n[bold cyan]🗒  Additional Notes / Constraints[/bold cyan]")
    state.set_additional_notes(
        ask_multiline(
            "Any required phrases, words to avoid, or other constraints",
            default=spec.additional_notes,
        )
    )

    include = Confirm.ask(
        "Include example lines?", default=spec.include_examples, console=ui.console
    )
    state.set_include_examples(include)
    if include:
        state.set_examples(
            ask_multiline("Put one example per line", default=spec.examples)
        )


def copy_document(state: FormState, status: CopyStatus, ui: UIManager) -> str:
    """Copy a freshly stamped document and record the outcome."""
    label = status.mark(write_to_clipboard(state.render()))
    if label == FAILED:
        ui.error(label)
    else:
        ui.success(label)
    return label


def download_document(state: FormState, settings: AppSettings, ui: UIManager) -> None:
    """Save a freshly stamped document to the configured location."""
    try:
        path = offer_download(
            state.render(), settings.output_filename, settings.output_dir
        )
    except OSError as e:
        ui.error(f"Could not save file: {e}")
        return
    ui.success(f"Saved {path}")


def run_interactive(settings: AppSettings, ui: Optional[UIManager] = None) -> None:
    """
    Run the form and the action loop until the user quits.

    The preview is re-rendered whenever a field changes; copy and download
    stamp a new document at the moment of export.
    """
    ui = ui or UIManager()
    state = FormState(settings.initial_spec())
    status = CopyStatus(reset_after=settings.copy_reset_seconds)

    latest = {"xml": state.render()}
    state.subscribe(lambda xml: latest.update(xml=xml))

    ui.how_to_use()
    try:
        fill_form(state, ui)
        while True:
            ui.xml_preview(latest["xml"], copy_label=status.label, copy_style=status.style)
            ui.summary(state.snapshot())
            ui.footer()

            action = Prompt.ask("Action", choices=ACTIONS, default="copy", console=ui.console)
            logger.debug("Action selected: %s", action)

            if action == "copy":
                copy_document(state, status, ui)
            elif action == "download":
                download_document(state, settings, ui)
            elif action == "edit":
                fill_form(state, ui)
            elif action == "reset":
                state.reset()
                fill_form(state, ui)
            else:
                break
    except (KeyboardInterrupt, EOFError):
        ui.console.print()
    ui.dim("Bye.")
