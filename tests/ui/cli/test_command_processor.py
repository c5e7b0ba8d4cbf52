"""Tests for CLI functionality."""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from zzsleep.ui.cli import CommandProcessor, main

NOW = datetime(2026, 2, 20, 10, 0, 0, tzinfo=timezone(timedelta(hours=9)))


@pytest.fixture(autouse=True)
def _no_log_file(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ZZSLEEP_LOG_FILE", raising=False)
    monkeypatch.delenv("ZZSLEEP_LOG_LEVEL", raising=False)


@pytest.fixture
def fixed_now(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("zzsleep.ui.cli.cli.local_now", return_value=NOW)


@pytest.fixture
def mock_wait(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("zzsleep.ui.cli.cli.wait_until")


@pytest.fixture
def mock_display(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("zzsleep.ui.cli.cli.CountdownProgressDisplay")


def test_no_arguments_prints_usage(capsys: pytest.CaptureFixture[str], mock_wait: MagicMock) -> None:
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([])

    assert excinfo.value.code == 1
    assert "usage: zz" in capsys.readouterr().err
    mock_wait.assert_not_called()


def test_parse_error_is_reported(
    capsys: pytest.CaptureFixture[str], fixed_now: MagicMock, mock_wait: MagicMock
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["abc"])

    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert "error: could not parse argument: abc" in captured.err
    assert captured.out == ""
    mock_wait.assert_not_called()


def test_quiet_flag_alone_is_a_parse_error(
    capsys: pytest.CaptureFixture[str], fixed_now: MagicMock, mock_wait: MagicMock
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["-q"])

    assert excinfo.value.code == 1
    assert "error: no arguments provided" in capsys.readouterr().err


def test_quiet_wait(fixed_now: MagicMock, mock_wait: MagicMock, mock_display: MagicMock) -> None:
    CommandProcessor.process_command(["-q", "5m", "30s"])

    mock_wait.assert_called_once_with(NOW + timedelta(minutes=5, seconds=30), True, None)
    mock_display.assert_not_called()


def test_progress_wait(fixed_now: MagicMock, mock_wait: MagicMock, mock_display: MagicMock) -> None:
    CommandProcessor.process_command(["10"])

    mock_wait.assert_called_once_with(
        NOW + timedelta(seconds=10), False, mock_display.return_value
    )


def test_keyboard_interrupt_exits_130(
    fixed_now: MagicMock, mock_wait: MagicMock, mock_display: MagicMock
) -> None:
    mock_wait.side_effect = KeyboardInterrupt

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["10"])

    assert excinfo.value.code == 130


def test_unexpected_error_exits_1(
    mocker: MockerFixture, fixed_now: MagicMock, mock_wait: MagicMock, mock_display: MagicMock
) -> None:
    mock_logger = mocker.patch("zzsleep.ui.cli.cli.logger")
    mock_wait.side_effect = RuntimeError("boom")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["10"])

    assert excinfo.value.code == 1
    mock_logger.error.assert_called_once_with("An unexpected error occurred: %s", "boom")


def test_main_returns_zero(fixed_now: MagicMock, mock_wait: MagicMock) -> None:
    assert main(["--quiet", "1s"]) == 0
    mock_wait.assert_called_once_with(NOW + timedelta(seconds=1), True, None)
