from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Defaults of every listing option.
2. Mapping of CLI flags to ListingConfig fields.
3. Rejection of malformed depth values as InvalidArguments.
"""

import pytest

from dirlist import __version__
from dirlist.domain.config import ListingConfig
from dirlist.domain.errors import InvalidArguments
from dirlist.interface.cli.args import args_to_config, build_parser


def parse_config(arg_list) -> ListingConfig:
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return args_to_config(parser.parse_args(arg_list))


def test_cli_defaults() -> None:
    config = parse_config([])

    assert config == ListingConfig(
        root_path=".",
        min_depth=1,
        max_depth=1,
        show_headers=False,
        show_hidden=False,
        show_modified=False,
    )


def test_cli_flags_mapping() -> None:
    config = parse_config([
        "-p", "/some/where",
        "--min-depth", "2",
        "--max-depth", "4",
        "--headers",
        "--hidden",
        "--modified",
    ])

    assert config.root_path == "/some/where"
    assert config.min_depth == 2
    assert config.max_depth == 4
    assert config.show_headers is True
    assert config.show_hidden is True
    assert config.show_modified is True


def test_cli_long_path_flag() -> None:
    assert parse_config(["--path", "sub/dir"]).root_path == "sub/dir"


def test_cli_path_expands_home(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", "/home/tester")
    monkeypatch.setenv("USERPROFILE", "/home/tester")

    assert parse_config(["-p", "~/docs"]).root_path.replace("\\", "/") == "/home/tester/docs"


def test_cli_diagnostic_flags_do_not_leak_into_config() -> None:
    args = build_parser().parse_args(["--debug", "--no-color", "--log-file", "x.log"])

    assert args.debug is True
    assert args.no_color is True
    assert args.log_file == "x.log"
    assert args_to_config(args) == ListingConfig()


@pytest.mark.parametrize("bad", [
    ["--min-depth", "abc"],
    ["--max-depth", "1.5"],
    ["--max-depth", "-1"],
    ["--unknown-flag"],
    ["--min-depth"],
])
def test_cli_invalid_arguments_raise(bad) -> None:
    with pytest.raises(InvalidArguments):
        build_parser().parse_args(bad)


def test_cli_version_exits_cleanly(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["--version"])

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_cli_path_whitespace_is_preserved() -> None:
    assert parse_config(["-p", " dir"]).root_path == " dir"
