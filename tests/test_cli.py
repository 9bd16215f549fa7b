import json
import logging

import pytest
from click.testing import CliRunner

from colornope import __version__, logger
from colornope.cli import EXIT_DISABLED, EXIT_OK, EXIT_USAGE, cli
from colornope.cli._shared import configure_logging

pytestmark = pytest.mark.usefixtures("clean_env")

# --------------------------------------------------------------------------- #
# helpers                                                                     #
# --------------------------------------------------------------------------- #


def _run(runner: CliRunner, args: list[str], env: dict[str, str | None] | None = None) -> tuple[int, str]:
    """Invoke the CLI and return *(exit_code, output)* for convenience."""
    result = runner.invoke(cli, args, env=env)
    return result.exit_code, result.output


# --------------------------------------------------------------------------- #
# check                                                                       #
# --------------------------------------------------------------------------- #


def test_check_enabled_on_tty(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["check", "--tty"])
    assert code == EXIT_OK
    assert out.strip() == "enabled"


def test_check_disabled_when_piped(cli_runner: CliRunner) -> None:
    # CliRunner's stdout is never a terminal
    code, out = _run(cli_runner, ["check"])
    assert code == EXIT_DISABLED
    assert out.strip() == "disabled"


def test_check_no_tty_override(cli_runner: CliRunner) -> None:
    code, _ = _run(cli_runner, ["check", "--no-tty"])
    assert code == EXIT_DISABLED


@pytest.mark.parametrize("value", ["", "1", "false"])
def test_check_respects_no_color_presence(cli_runner: CliRunner, value: str) -> None:
    code, out = _run(cli_runner, ["check", "--tty"], env={"NO_COLOR": value})
    assert code == EXIT_DISABLED
    assert out.strip() == "disabled"


def test_check_dumb_terminal(cli_runner: CliRunner) -> None:
    code, _ = _run(cli_runner, ["check", "--tty"], env={"TERM": "dumb"})
    assert code == EXIT_DISABLED


def test_check_color_flag_forces_on(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["check", "--color", "--no-tty"], env={"TERM": "dumb", "NO_COLOR": "1"})
    assert code == EXIT_OK
    assert out.strip() == "enabled"


def test_check_no_color_flag_forces_off(cli_runner: CliRunner) -> None:
    code, _ = _run(cli_runner, ["check", "--no-color", "--tty"], env={"CLICOLOR_FORCE": "1"})
    assert code == EXIT_DISABLED


def test_check_clicolor_force(cli_runner: CliRunner) -> None:
    code, _ = _run(cli_runner, ["check", "--no-tty"], env={"CLICOLOR_FORCE": "1"})
    assert code == EXIT_OK


def test_check_rejects_conflicting_flags(cli_runner: CliRunner) -> None:
    # wide terminal so the usage panel keeps the message on one line
    result = cli_runner.invoke(cli, ["check", "--color", "--no-color"], env={"COLUMNS": "200"})
    assert result.exit_code == EXIT_USAGE
    assert isinstance(result.exception, SystemExit)
    assert "cannot combine --color and --no-color" in result.output
    assert "Traceback" not in result.output


def test_explain_rejects_conflicting_flags(cli_runner: CliRunner) -> None:
    code, _ = _run(cli_runner, ["explain", "--no-color", "--color"])
    assert code == EXIT_USAGE


def test_check_json_output(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["check", "--stream", "stderr", "--no-tty", "--format", "json"])
    assert code == EXIT_DISABLED
    assert json.loads(out) == {
        "stream": "stderr",
        "tty": False,
        "enabled": False,
        "reason": "not-a-tty",
    }


def test_check_rejects_unknown_stream(cli_runner: CliRunner) -> None:
    code, _ = _run(cli_runner, ["check", "--stream", "stdin"])
    assert code == EXIT_USAGE


# --------------------------------------------------------------------------- #
# explain                                                                     #
# --------------------------------------------------------------------------- #


def test_explain_json_lists_both_streams(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["explain", "--format", "json"], env={"NO_COLOR": "1"})
    assert code == EXIT_OK
    payload = json.loads(out)
    assert [row["stream"] for row in payload] == ["stdout", "stderr"]
    assert {row["reason"] for row in payload} == {"no-color"}


def test_explain_table_is_plain_when_color_disabled(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["explain", "--no-color", "--tty"])
    assert code == EXIT_OK
    assert "stdout" in out
    assert "forced-off" in out
    assert "\x1b[" not in out


def test_explain_table_is_styled_when_color_enabled(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["explain", "--tty"])
    assert code == EXIT_OK
    assert "default" in out
    assert "\x1b[" in out


# --------------------------------------------------------------------------- #
# root                                                                        #
# --------------------------------------------------------------------------- #


def test_cli_version_flag(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["--version"])
    assert code == EXIT_OK
    assert out.strip() == f"colornope {__version__}"


def test_cli_without_command_shows_help(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, [])
    assert code == EXIT_OK
    assert "check" in out
    assert "explain" in out


def test_cli_verbose_logs_collected_signals(cli_runner: CliRunner, caplog: pytest.LogCaptureFixture) -> None:
    code, _ = _run(cli_runner, ["--verbose", "check", "--tty"])
    assert code == EXIT_OK
    messages = [r.getMessage() for r in caplog.records if r.name == "colornope"]
    assert any(m.startswith("color signals: term=") for m in messages)


def test_cli_default_run_hides_debug_records(cli_runner: CliRunner, caplog: pytest.LogCaptureFixture) -> None:
    code, _ = _run(cli_runner, ["check", "--tty"])
    assert code == EXIT_OK
    assert not [r for r in caplog.records if r.name == "colornope" and r.levelno < logging.WARNING]


def test_cli_restores_logger_level_after_run(cli_runner: CliRunner) -> None:
    before = logger.level
    for flag in ("--verbose", "--quiet"):
        code, _ = _run(cli_runner, [flag, "check", "--tty"])
        assert code == EXIT_OK
        assert logger.level == before


@pytest.mark.parametrize(
    ("quiet", "verbose", "expected"),
    [
        (False, False, logging.WARNING),
        (False, True, logging.DEBUG),
        (True, False, logging.ERROR),
        (True, True, logging.ERROR),
    ],
)
def test_configure_logging_levels(quiet: bool, verbose: bool, expected: int) -> None:
    previous = configure_logging(quiet=quiet, verbose=verbose)
    try:
        assert logger.level == expected
    finally:
        logger.setLevel(previous)
