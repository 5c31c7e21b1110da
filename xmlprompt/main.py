#!/usr/bin/env python3
"""
Main entry point for the Typer-based XML Prompt Generator CLI.

This delegates to the UI layer in xmlprompt.ui.cli to keep the
console script mapping stable.
"""

from xmlprompt.ui.cli import run as xml_prompt


if __name__ == "__main__":
    xml_prompt()
