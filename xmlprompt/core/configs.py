"""Configuration management for XML Prompt Generator.

Loads user settings from ~/.config/xmlprompt/config.cfg, overlays a
project-local .env file and XMLPROMPT_* environment variables.
Provides AppSettings (form defaults and export behaviour).
"""

import configparser
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values

from xmlprompt.core.spec import (
    DEFAULT_LANGUAGE,
    DEFAULT_LINES,
    DEFAULT_TONE,
    PromptSpecification,
    is_known_language,
    is_known_tone,
)

CONFIG_PATH = Path.home() / ".config" / "xmlprompt" / "config.cfg"
ENV_PATH = Path(".env")

DEFAULT_FILENAME = "prompt.xml"
DEFAULT_COPY_RESET_SECONDS = 2.0

# Environment variable -> config key
ENV_OVERRIDES = {
    "XMLPROMPT_OUTPUT_DIR": "output_dir",
    "XMLPROMPT_OUTPUT_FILENAME": "output_filename",
}


@dataclass
class AppSettings:
    default_task: str = ""
    default_lines: int = DEFAULT_LINES
    default_tone: str = DEFAULT_TONE
    default_language: str = DEFAULT_LANGUAGE
    output_filename: str = DEFAULT_FILENAME
    output_dir: Optional[Path] = None
    copy_reset_seconds: float = DEFAULT_COPY_RESET_SECONDS

    def initial_spec(self) -> PromptSpecification:
        """Blank form pre-filled with the configured defaults."""
        return PromptSpecification(
            task=self.default_task,
            lines=self.default_lines,
            tone=self.default_tone,
            language=self.default_language,
        )


def load_raw_config(
    path: Optional[Path] = None, env_path: Optional[Path] = None
) -> Dict[str, str]:
    """
    Load configuration values from the config file, .env and environment.
    Values are returned with lowercase keys for convenience.
    Raises ValueError if the config file cannot be parsed.
    """
    path = path or CONFIG_PATH
    env_path = env_path or ENV_PATH

    # Values are free text; '%' must not be treated as interpolation
    cfg = configparser.ConfigParser(interpolation=None)
    data: Dict[str, str] = {}

    if path.exists():
        try:
            cfg.read(path)
        except configparser.Error as e:
            raise ValueError(f"Cannot parse {path}: {e}")
        if "DEFAULT" in cfg:
            data.update({k.lower(): v for k, v in cfg["DEFAULT"].items()})

    if env_path.exists():
        for key, value in dotenv_values(env_path).items():
            mapped = ENV_OVERRIDES.get(key.upper())
            if mapped and value is not None:
                data[mapped] = value

    for env_key, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_key)
        if value is not None and value.strip() != "":
            data[key] = value

    return data


def get_app_settings(raw: Optional[Dict[str, str]] = None) -> AppSettings:
    """
    Build AppSettings from raw configuration values.
    Raises ValueError if a value is malformed or outside the known choices.
    """
    raw = raw if raw is not None else load_raw_config()

    lines_value = raw.get("default_lines", "").strip()
    try:
        default_lines = int(lines_value) if lines_value else DEFAULT_LINES
    except ValueError:
        raise ValueError(f"default_lines must be an integer (got: {lines_value!r})")
    if default_lines < 1:
        raise ValueError(f"default_lines must be at least 1 (got: {default_lines})")

    tone = raw.get("default_tone", "").strip().lower() or DEFAULT_TONE
    if not is_known_tone(tone):
        raise ValueError(f"Unknown default_tone '{tone}'.")

    language = raw.get("default_language", "").strip() or DEFAULT_LANGUAGE
    if not is_known_language(language):
        raise ValueError(f"Unknown default_language '{language}'.")

    reset_value = raw.get("copy_reset_seconds", "").strip()
    try:
        copy_reset = float(reset_value) if reset_value else DEFAULT_COPY_RESET_SECONDS
    except ValueError:
        raise ValueError(f"copy_reset_seconds must be a number (got: {reset_value!r})")

    output_dir = raw.get("output_dir", "").strip()

    return AppSettings(
        default_task=raw.get("default_task", ""),
        default_lines=default_lines,
        default_tone=tone,
        default_language=language,
        output_filename=raw.get("output_filename", "").strip() or DEFAULT_FILENAME,
        output_dir=Path(output_dir).expanduser() if output_dir else None,
        copy_reset_seconds=copy_reset,
    )


def save_config_file(config: Dict[str, str], path: Optional[Path] = None) -> None:
    """Write the given values to the [DEFAULT] section of the config file."""
    path = path or CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)

    cfg = configparser.ConfigParser(interpolation=None)
    cfg["DEFAULT"] = {k: str(v) for k, v in config.items()}

    with open(path, "w") as f:
        cfg.write(f)
