import json
import logging
from pathlib import Path

import pytest

from declopt.__main__ import (
    EXIT_CONFIG_ERROR,
    EXIT_PARSE_ERROR,
    get_root_parser,
    main,
    split_tokens,
)

DECLARATIONS = """\
options:
  - names: ["--host"]
    appearance: mandatory
    help: Host to connect to.
  - names: ["--port", "-p"]
    default: "8080"
    metavar: num
    help: Port to listen on.
  - names: ["--verbose"]
    appearance: flag
    help: Print more.
"""


@pytest.fixture
def declarations(tmp_path: Path) -> Path:
    path = tmp_path / "opts.yaml"
    path.write_text(DECLARATIONS, encoding="UTF-8")
    return path


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_split_tokens():
    assert split_tokens(["parse", "f.yaml", "--", "--port", "--"]) == (
        ["parse", "f.yaml"],
        ["--port", "--"],
    )
    assert split_tokens(["help", "f.yaml"]) == (["help", "f.yaml"], [])


def test_root_parser_requires_command():
    with pytest.raises(SystemExit):
        get_root_parser().parse_args([])


def test_help(declarations, capsys):
    assert main(["help", str(declarations)]) == 0
    captured = capsys.readouterr()
    assert captured.out == (
        "Options:\n"
        "  --host <value>    Host to connect to.\n"
        "  --port, -p <num>  Port to listen on.\n"
        "  --verbose         Print more.\n"
        "\n"
    )


def test_parse(declarations, capsys):
    assert main(["parse", str(declarations), "--", "--host", "db", "--verbose"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data == {
        "values": {"--host": ["db"], "--verbose": [""], "--port": ["8080"]}
    }


def test_parse_collect_unrecognized(declarations, capsys):
    code = main(
        ["parse", str(declarations), "--collect-unrecognized", "--", "--extra", "-p", "1"]
    )
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["unrecognized"] == ["--extra"]
    assert data["values"]["--port"] == ["1"]


def test_parse_failure(declarations, capsys):
    assert main(["parse", str(declarations), "--", "--host"]) == EXIT_PARSE_ERROR
    captured = capsys.readouterr()
    assert "option '--host' is missing its parameter" in captured.err
    assert captured.out == ""


def test_parse_check_minimums(declarations, capsys):
    code = main(["parse", str(declarations), "--check-minimums", "--", "-p", "1"])
    assert code == EXIT_PARSE_ERROR
    assert "option '--host' is mandatory" in capsys.readouterr().err


def test_config_error(tmp_path, capsys):
    code = main(["help", str(tmp_path / "missing.yaml")])
    assert code == EXIT_CONFIG_ERROR
    assert "Declaration file not found" in capsys.readouterr().err


def test_json_log_mode(declarations, capsys):
    assert main(["--log-mode", "json", "help", str(declarations)]) == 0
    assert "Options:" in capsys.readouterr().out
