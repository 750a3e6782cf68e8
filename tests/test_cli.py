from __future__ import annotations

import pytest

from tempconv import cli
from tempconv.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TEMPCONV_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TEMPCONV_DECIMAL_PRECISION", raising=False)


def test_cli_prints_conversion(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["32F", "c"]) == cli.EXIT_OK
    captured = capsys.readouterr()
    assert captured.out == "32 F is equal to 0 C\n"
    assert captured.err == ""


def test_cli_accepts_negative_after_separator(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--", "-18C", "F"]) == cli.EXIT_OK
    assert capsys.readouterr().out == "-18 C is equal to -0.4 F\n"


def test_cli_identity_keeps_original_text(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["12.50k", "K"]) == cli.EXIT_OK
    assert capsys.readouterr().out == "12.5 k is equal to 12.5 k\n"


def test_cli_rejects_invalid_target_unit(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["25C", "x"]) == cli.EXIT_USER_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "x is not a valid temperature unit" in captured.err


def test_cli_reports_token_and_unit_errors_together(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["15d", "q"]) == cli.EXIT_USER_ERROR
    err = capsys.readouterr().err
    assert "Unable to convert 15d into temperature" in err
    assert "q is not a valid temperature unit" in err


def test_cli_rejects_multi_character_unit() -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["25C", "KF"])
    assert exc.value.code == 2


def test_apply_overrides_updates_settings() -> None:
    args = cli.parse_args(["1C", "F", "--log-level", "DEBUG", "--precision", "50"])
    settings = cli.apply_overrides(Settings(), args)
    assert settings.log_level == "DEBUG"
    assert settings.decimal_precision == 50


def test_cli_uses_configured_precision(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("TEMPCONV_DECIMAL_PRECISION", "12")
    assert cli.main(["1F", "C"]) == cli.EXIT_OK
    assert capsys.readouterr().out == "1 F is equal to -17.2222222222 C\n"


def test_cli_rejects_out_of_range_token(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["1e9999999C", "F"]) == cli.EXIT_USER_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "out of the supported range" in captured.err


def test_cli_reports_conversion_overflow(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["9.9e999999K", "F"]) == cli.EXIT_USER_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "out of range" in captured.err


def test_cli_display_ignores_low_precision(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["1.23456789012345C", "C", "--precision", "10"]) == cli.EXIT_OK
    assert capsys.readouterr().out == "1.23456789012345 C is equal to 1.23456789012345 C\n"


@pytest.mark.parametrize("precision", ["5", "0"])
def test_cli_rejects_invalid_precision_option(precision: str) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["32F", "C", "--precision", precision])
    assert exc.value.code == 2


def test_cli_rejects_invalid_precision_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMPCONV_DECIMAL_PRECISION", "abc")
    with pytest.raises(SystemExit) as exc:
        cli.main(["32F", "C"])
    assert exc.value.code == 2


def test_cli_rejects_unknown_log_level_option() -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["32F", "C", "--log-level", "loud"])
    assert exc.value.code == 2


def test_cli_rejects_unknown_log_level_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMPCONV_LOG_LEVEL", "loud")
    with pytest.raises(SystemExit) as exc:
        cli.main(["32F", "C"])
    assert exc.value.code == 2


def test_cli_log_level_option_is_case_insensitive() -> None:
    args = cli.parse_args(["32F", "C", "--log-level", "debug"])
    assert cli.apply_overrides(Settings(), args).log_level == "DEBUG"
