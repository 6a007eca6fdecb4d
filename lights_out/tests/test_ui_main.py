from __future__ import annotations

import pytest

from lights_out.config import ROWS_ENV_VAR, GameConfig
from lights_out.ui.main import build_parser, describe_config, main


def test_parser_defaults_leave_config_untouched():
    args = build_parser().parse_args([])

    assert args.rows is None
    assert args.cols is None
    assert args.lit_probability is None
    assert not args.info


def test_describe_config_lists_options():
    text = describe_config(GameConfig(rows=2, cols=3, lit_probability=0.5, seed=4))

    assert "rows: 2" in text
    assert "cols: 3" in text
    assert "lit probability: 0.5" in text
    assert "seed: 4" in text


def test_cli_info_prints_configuration(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(ROWS_ENV_VAR, "7")

    exit_code = main(["--info", "--cols", "4"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "Lights Out configuration" in output
    assert "rows: 7" in output
    assert "cols: 4" in output
    assert "seed: random" in output


def test_cli_rejects_invalid_probability(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        main(["--info", "--lit-probability", "2"])

    assert excinfo.value.code == 2
    assert "lit_probability" in capsys.readouterr().err


def test_cli_console_mode_plays_in_terminal(
    capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.setattr("builtins.input", lambda prompt="": "q")

    exit_code = main(["--console", "--rows", "1", "--cols", "1", "--lit-probability", "1"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "=== Lights Out ===" in output
    assert "0: O" in output
