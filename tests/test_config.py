from pathlib import Path

import pytest

from declopt import Appearance, ConfigError, HelpLine, HelpSection, Option, names
from declopt.config import OptionSpec, convert_options, loader

YAML_TEXT = """\
options:
  - names: ["--port", "-p"]
    appearance: optional
    default: "8080"
    metavar: num
    help: Port to listen on.
    section: Network options
  - names: ["--join", "-j"]
    appearance: repeat
    metavar: host:port
    help: Host and port of a node to join.
    section: Network options
  - names: ["--verbose"]
    appearance: flag
    help: Print more.
"""

TOML_TEXT = """\
[[options]]
names = ["--port", "-p"]
appearance = "optional"
default = "8080"
metavar = "num"
help = "Port to listen on."
section = "Network options"

[[options]]
names = ["--join", "-j"]
appearance = "repeat"
metavar = "host:port"
help = "Host and port of a node to join."
section = "Network options"

[[options]]
names = ["--verbose"]
appearance = "flag"
help = "Print more."
"""

EXPECTED = OptionSpec(
    options=[
        Option.from_appearance(names("--port", "-p"), Appearance.OPTIONAL, default="8080"),
        Option.from_appearance(names("--join", "-j"), Appearance.OPTIONAL_REPEAT),
        Option.from_appearance(names("--verbose"), Appearance.OPTIONAL_NO_PARAMETER),
    ],
    help_sections=[
        HelpSection(
            "Network options",
            [
                HelpLine("--port, -p <num>", "Port to listen on."),
                HelpLine("--join, -j <host:port>", "Host and port of a node to join."),
            ],
        ),
        HelpSection("Options", [HelpLine("--verbose", "Print more.")]),
    ],
)


def write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="UTF-8")
    return path


def test_load_yaml(tmp_path):
    assert loader(write(tmp_path, "opts.yaml", YAML_TEXT)) == EXPECTED


def test_load_yml_extension(tmp_path):
    assert loader(str(write(tmp_path, "opts.yml", YAML_TEXT))) == EXPECTED


def test_load_toml(tmp_path):
    assert loader(write(tmp_path, "opts.toml", TOML_TEXT)) == EXPECTED


def test_empty_file(tmp_path):
    assert loader(write(tmp_path, "empty.yaml", "")) == OptionSpec()


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        loader(tmp_path / "nope.yaml")


def test_unsupported_extension(tmp_path):
    with pytest.raises(ConfigError, match="Unsupported"):
        loader(write(tmp_path, "opts.json", "{}"))


def test_malformed_yaml(tmp_path):
    with pytest.raises(ConfigError, match="Could not parse"):
        loader(write(tmp_path, "bad.yaml", "options: [unclosed"))


def test_malformed_toml(tmp_path):
    with pytest.raises(ConfigError, match="Could not parse"):
        loader(write(tmp_path, "bad.toml", "[[options]]\nnames = \n"))


def test_top_level_must_be_mapping(tmp_path):
    with pytest.raises(ConfigError, match="mapping"):
        loader(write(tmp_path, "list.yaml", "- a\n- b\n"))


def test_options_must_be_list(tmp_path):
    with pytest.raises(ConfigError, match="must be a list"):
        loader(write(tmp_path, "opts.yaml", "options: nope\n"))


def test_default_on_mandatory_rejected():
    with pytest.raises(ConfigError, match="cannot have a default"):
        convert_options([{"names": ["--host"], "appearance": "mandatory", "default": "x"}])


def test_invalid_appearance_rejected():
    with pytest.raises(ConfigError, match="Invalid option declarations"):
        convert_options([{"names": ["--host"], "appearance": "often"}])


def test_empty_names_rejected():
    with pytest.raises(ConfigError):
        convert_options([{"names": []}])
    with pytest.raises(ConfigError):
        convert_options([{"names": ["--ok", ""]}])


def test_defaults():
    spec = convert_options([{"names": ["--log-file"]}])
    assert spec.options == [
        Option.from_appearance(names("--log-file"), Appearance.OPTIONAL)
    ]
    assert spec.help_sections == [
        HelpSection("Options", [HelpLine("--log-file <value>", "")])
    ]


def test_unquoted_numeric_default_yaml(tmp_path):
    path = write(tmp_path, "opts.yaml", 'options:\n  - names: ["--port"]\n    default: 8080\n')
    spec = loader(path)
    assert spec.options[0].default_values == ("8080",)


def test_unquoted_numeric_default_toml(tmp_path):
    path = write(
        tmp_path,
        "opts.toml",
        '[[options]]\nnames = ["--port"]\ndefault = 8080\n\n'
        '[[options]]\nnames = ["--ratio"]\ndefault = 0.5\n',
    )
    spec = loader(path)
    assert spec.options[0].default_values == ("8080",)
    assert spec.options[1].default_values == ("0.5",)


def test_boolean_default_rejected():
    with pytest.raises(ConfigError, match="Invalid option declarations"):
        convert_options([{"names": ["--color"], "default": True}])
