# Declopt Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads option declarations and their help text from YAML or TOML files.

    options:
      - names: ["--port", "-p"]
        appearance: optional
        default: "8080"
        metavar: num
        help: Port to listen on.
        section: Network options

Entries are validated with pydantic and turned into an `OptionSpec`: the
`Option` list to hand to the parser, and the `HelpSection`s to hand to the
formatter. Sections keep the order in which they are first mentioned.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from declopt.appearance import Appearance
from declopt.exceptions import ConfigError, OptionDeclarationError
from declopt.help import HelpLine, HelpSection, help_line_for
from declopt.logger import logger
from declopt.option import Option

DEFAULT_SECTION = "Options"


class RawOption(BaseModel):
    """Raw option model for declaration files."""

    names: list[str]
    appearance: Appearance = Appearance.OPTIONAL
    default: str | None = None
    metavar: str | None = None
    help: str = ""
    section: str = DEFAULT_SECTION

    @field_validator("names")
    @classmethod
    def validate_names(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("names must contain at least one spelling.")
        if any(not name for name in value):
            raise ValueError("names must not contain empty strings.")
        return value

    @field_validator("default", mode="before")
    @classmethod
    def validate_default_scalar(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("appearance", mode="before")
    @classmethod
    def validate_appearance(cls, value: Any) -> Appearance:
        if isinstance(value, Appearance):
            return value
        if not isinstance(value, str):
            raise ValueError("appearance must be a string.")
        return Appearance(value)

    @model_validator(mode="after")
    def validate_default(self) -> RawOption:
        if self.default is not None and not self.appearance.accepts_default:
            raise ValueError(
                f"'{self.names[0]}' is {self.appearance} and cannot have a default."
            )
        return self

    def to_option(self) -> Option:
        return Option.from_appearance(self.names, self.appearance, default=self.default)


class RawSpec(BaseModel):
    """Top-level model of a declaration file."""

    options: list[RawOption] = Field(default_factory=list)


@dataclass
class OptionSpec:
    """Declared options together with the help text describing them."""

    options: list[Option] = field(default_factory=list)
    help_sections: list[HelpSection] = field(default_factory=list)


def convert_options(raw_options: list[dict[str, Any]]) -> OptionSpec:
    """Validate raw option entries and build an `OptionSpec`."""
    try:
        raw_spec = RawSpec(options=raw_options)
    except ValidationError as error:
        raise ConfigError(f"Invalid option declarations:\n{error}") from error

    options: list[Option] = []
    grouped: dict[str, list[HelpLine]] = {}
    for raw_option in raw_spec.options:
        try:
            option = raw_option.to_option()
        except OptionDeclarationError as error:
            raise ConfigError(str(error)) from error
        options.append(option)
        grouped.setdefault(raw_option.section, []).append(
            help_line_for(option, metavar=raw_option.metavar, blurb=raw_option.help)
        )

    sections = [HelpSection(title=title, lines=lines) for title, lines in grouped.items()]
    return OptionSpec(options=options, help_sections=sections)


def _read_file(path: Path) -> Any:
    suffix = path.suffix.lower()
    if suffix not in (".yaml", ".yml", ".toml"):
        raise ConfigError(f"Unsupported declaration file format: '{path.suffix}'")
    try:
        with path.open("r", encoding="UTF-8") as file:
            if suffix == ".toml":
                return toml.load(file)
            return yaml.safe_load(file)
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse '{path}': {error}") from error


def loader(file_path: Path | str) -> OptionSpec:
    """
    Load option declarations from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to a `.yaml`, `.yml` or `.toml` file.

    Returns:
        OptionSpec: Parsed options and help sections.

    Raises:
        ConfigError: If the file is missing, malformed, or declares invalid options.
    """
    path = Path(file_path)
    if not path.is_file():
        raise ConfigError(f"Declaration file not found: '{path}'")

    raw_config = _read_file(path)
    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Declaration file must contain a mapping with an 'options' list."
        )
    raw_options = raw_config.get("options", [])
    if not isinstance(raw_options, list):
        raise ConfigError("'options' must be a list of option entries.")

    spec = convert_options(raw_options)
    logger.debug("Loaded %d options from '%s'", len(spec.options), path)
    return spec
