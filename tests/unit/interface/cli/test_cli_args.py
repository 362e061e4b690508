from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Historical report flags (-pf/-pl/-po) and their mutual exclusion.
2. Attached and detached forms of -f.
3. Mapping of parsed flags to configuration overrides.
"""

import pytest

from wordtracker.infra.logging import get_default_log_path
from wordtracker.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


@pytest.mark.parametrize("flag, expected", [("-pf", "pf"), ("-pl", "pl"), ("-po", "po")])
def test_report_level_flags(flag, expected):
    args = parse_args(["input.txt", flag])

    assert args.report_format == expected
    assert args.inputs == ["input.txt"]


def test_report_level_flags_are_mutually_exclusive():
    with pytest.raises(SystemExit):
        parse_args(["input.txt", "-pf", "-pl"])


def test_output_flag_attached_form():
    """The legacy '-f<file>' spelling is accepted."""
    args = parse_args(["input.txt", "-po", "-freport.txt"])

    assert args.output_file == "report.txt"
    assert args.report_format == "po"


def test_output_flag_detached_and_long_form():
    assert parse_args(["in.txt", "-f", "out.txt"]).output_file == "out.txt"
    assert parse_args(["in.txt", "--output", "out.txt"]).output_file == "out.txt"


def test_multiple_inputs():
    args = parse_args(["a.txt", "b.txt", "-pl"])

    assert args.inputs == ["a.txt", "b.txt"]


def test_overrides_only_contain_passed_options():
    overrides = args_to_overrides(parse_args([]))

    assert overrides == {}


def test_overrides_mapping():
    args = parse_args([
        "a.txt",
        "-pl",
        "-fout.txt",
        "--repository", "store.json",
        "--tokenizer", "alpha",
        "--no-save",
        "--log-file", "run.log",
        "--debug",
    ])

    overrides = args_to_overrides(args)

    assert overrides == {
        "input_paths": ["a.txt"],
        "report_format": "pl",
        "output_file": "out.txt",
        "repository_path": "store.json",
        "tokenizer_mode": "alpha",
        "persist": False,
        "log_file": "run.log",
        "log_level": "DEBUG",
    }


def test_invalid_tokenizer_choice_exits():
    with pytest.raises(SystemExit):
        parse_args(["a.txt", "--tokenizer", "emoji"])


def test_report_level_flag_is_optional():
    args = parse_args(["input.txt"])

    assert args.report_format is None
    assert "report_format" not in args_to_overrides(args)


def test_log_file_without_path_uses_default_location():
    args = parse_args(["input.txt", "-pl", "--log-file"])

    assert args.log_file == get_default_log_path()
    assert args_to_overrides(args)["log_file"] == get_default_log_path()


def test_log_file_omitted_stays_unset():
    assert parse_args(["input.txt"]).log_file is None
