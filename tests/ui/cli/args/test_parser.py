"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from kpopneon.platform.logging import DEFAULT_LOG_FILE
from kpopneon.ui.cli.args import AboutArgs, ArgumentParser, SearchArgs, ShellArgs


@pytest.fixture
def mock_config(mocker: MockerFixture) -> MagicMock:
    config = mocker.patch("kpopneon.ui.cli.args.parser.Config")
    loaded = config.load.return_value
    loaded.log_file = None
    loaded.request_timeout = None
    loaded.max_workers = 1
    return config


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    search_args: Namespace = parser.parse_args(["search", "Stray", "Kids", "--json"])
    assert search_args.command == "search"
    assert search_args.query == ["Stray", "Kids"]
    assert search_args.as_json

    assert parser.parse_args(["shell", "--verbose"]).verbose
    assert parser.parse_args(["about"]).command == "about"


def test_verbose_and_quiet_are_exclusive() -> None:
    parser = ArgumentParser.create_parser()

    with pytest.raises(SystemExit):
        _ = parser.parse_args(["search", "BTS", "--verbose", "--quiet"])


def test_search_requires_a_name() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.create_parser().parse_args(["search"])


def test_process_args_search(mock_config: MagicMock, mocker: MockerFixture) -> None:
    mock_setup_logger = mocker.patch("kpopneon.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.request_timeout = 9.0

    args = ArgumentParser.process_args(["search", "Red", "Velvet"])

    assert args == SearchArgs(
        command="search",
        query="Red Velvet",
        as_json=False,
        verbose=False,
        quiet=False,
        request_timeout=9.0,
    )
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.WARNING
    assert mock_setup_logger.call_args.kwargs["log_file"] == DEFAULT_LOG_FILE
    mock_config.load.assert_called_once()


@pytest.mark.parametrize(
    ("flag", "level"),
    [("--verbose", logging.DEBUG), ("--quiet", logging.ERROR)],
)
def test_process_args_log_levels(
    mock_config: MagicMock, mocker: MockerFixture, flag: str, level: int
) -> None:
    mock_setup_logger = mocker.patch("kpopneon.ui.cli.args.parser.setup_logger")

    _ = ArgumentParser.process_args(["search", "BTS", flag])

    assert mock_setup_logger.call_args.kwargs["console_level"] == level


def test_process_args_uses_configured_log_file(
    mock_config: MagicMock, mocker: MockerFixture, tmp_path: Path
) -> None:
    mock_setup_logger = mocker.patch("kpopneon.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = tmp_path / "k.log"

    _ = ArgumentParser.process_args(["about"])

    assert mock_setup_logger.call_args.kwargs["log_file"] == tmp_path / "k.log"


def test_process_args_blank_search_exits(mock_config: MagicMock, mocker: MockerFixture) -> None:
    _ = mocker.patch("kpopneon.ui.cli.args.parser.setup_logger")

    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["search", "  "])

    assert excinfo.value.code == 2


def test_process_args_shell_and_about(mock_config: MagicMock, mocker: MockerFixture) -> None:
    _ = mocker.patch("kpopneon.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.max_workers = 2

    shell = ArgumentParser.process_args(["shell", "--quiet"])
    assert shell == ShellArgs(
        command="shell", verbose=False, quiet=True, request_timeout=None, max_workers=2
    )

    assert ArgumentParser.process_args(["about"]) == AboutArgs(command="about")


def test_process_args_about_accepts_verbosity(
    mock_config: MagicMock, mocker: MockerFixture
) -> None:
    mock_setup_logger = mocker.patch("kpopneon.ui.cli.args.parser.setup_logger")

    assert ArgumentParser.process_args(["about", "--quiet"]) == AboutArgs(command="about")
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR
