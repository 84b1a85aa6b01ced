"""Configuration management for feedtext.

Handles loading and generating TOML config files that choose which feed
elements are extracted as text and which are parsed as people.
"""

from __future__ import annotations

import sys
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_CONFIG_PATH = "feedtext.toml"

# Elements decoded as text (RSS 2.0 and Atom 1.0 local names)
DEFAULT_TEXT_FIELDS = [
    "title",
    "subtitle",
    "description",
    "summary",
    "content",
    "rights",
    "copyright",
]

# Elements holding "Name (address)" strings or Atom person constructs
DEFAULT_PERSON_FIELDS = [
    "author",
    "contributor",
    "managingEditor",
    "webMaster",
    "creator",
]

DEFAULT_CONFIG_TEMPLATE = """\
# feedtext configuration
#
# [fields]
#   text   = local element names decoded to plain text
#   person = local element names split into name and address

[fields]
text = [{text_fields}]
person = [{person_fields}]

[parser]
# Use lxml's recovery mode for documents that aren't well-formed
recover = {recover}
"""


@dataclass
class ExtractConfig:
    """Which elements to extract and how to parse the document."""

    text_fields: list[str] = field(default_factory=lambda: list(DEFAULT_TEXT_FIELDS))
    person_fields: list[str] = field(default_factory=lambda: list(DEFAULT_PERSON_FIELDS))
    recover: bool = False


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> ExtractConfig:
    """Load configuration from a TOML file.

    Keys missing from the file keep their defaults. Falls back to defaults
    entirely if the config file doesn't exist.
    """
    path = Path(config_path)
    if not path.exists():
        print(
            f"Warning: Config file '{config_path}' not found, using defaults. "
            f"Run 'python -m feedtext init-config' to generate one.",
            file=sys.stderr,
        )
        return ExtractConfig()

    with open(path, "rb") as f:
        raw = tomllib.load(f)

    config = ExtractConfig()

    fields = raw.get("fields", {})
    if "text" in fields:
        config.text_fields = [str(name) for name in fields["text"]]
    if "person" in fields:
        config.person_fields = [str(name) for name in fields["person"]]

    parser = raw.get("parser", {})
    if "recover" in parser:
        config.recover = bool(parser["recover"])

    return config


def generate_config(config: ExtractConfig | None = None) -> str:
    """Render *config* (defaults when None) as TOML text."""
    config = config or ExtractConfig()
    return DEFAULT_CONFIG_TEMPLATE.format(
        text_fields=", ".join(f'"{name}"' for name in config.text_fields),
        person_fields=", ".join(f'"{name}"' for name in config.person_fields),
        recover=str(config.recover).lower(),
    )


def save_config(config_path: str, config: ExtractConfig | None = None) -> str:
    """Write a config file and return its path."""
    Path(config_path).write_text(generate_config(config), encoding="utf-8")
    return config_path
