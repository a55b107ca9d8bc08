import logging

import pytest

from skirmish.__main__ import build_parser, main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TURNS", "SEED", "PLAYER0", "PLAYER1", "LOG_LEVEL"):
        monkeypatch.delenv(f"SKIRMISH_{name}", raising=False)


def test_parser_leaves_unset_options_empty():
    args = build_parser().parse_args([])
    assert (args.turns, args.seed, args.player0, args.player1, args.log_level) == (None,) * 5
    assert args.quiet is False


def test_random_match_prints_turn_markers(capsys):
    code = main(["--player0", "random", "--player1", "random:3", "--turns", "4", "--seed", "9"])
    assert code == 0
    out = capsys.readouterr().out
    assert [line for line in out.splitlines() if line.endswith("===")] == [
        "0===",
        "1===",
        "2===",
        "3===",
    ]


def test_quiet_suppresses_dumps(capsys):
    assert main(["--player0", "random", "--player1", "random", "--turns", "2", "--quiet"]) == 0
    assert capsys.readouterr().out == ""


def test_invalid_turns_exit_code(capsys):
    assert main(["--turns", "-3"]) == 2
    assert "invalid configuration" in capsys.readouterr().err


def test_match_error_exit_code(caplog):
    caplog.set_level(logging.ERROR)
    # a command that prints nothing is a broken decision process
    code = main(["--player0", "cmd:true", "--player1", "random", "--turns", "1", "--quiet"])
    assert code == 1
    assert any("match failed" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize(
    "argv",
    [
        ["--player0", "telepathy"],
        ["--player0", "random:abc"],
        ["--player1", "cmd:"],
        ["--player1", "cmd:'unterminated"],
        ["--log-level", "loud"],
    ],
    ids=["unknown-kind", "non-numeric-seed", "empty-command", "bad-quoting", "unknown-level"],
)
def test_bad_settings_exit_code(argv, capsys):
    assert main(argv + ["--turns", "1", "--quiet"]) == 2
    assert "invalid configuration" in capsys.readouterr().err


def test_missing_executable_exit_code(caplog):
    caplog.set_level(logging.ERROR)
    code = main(["--player0", "cmd:/nonexistent/skirmish-bot", "--player1", "random", "--quiet"])
    assert code == 2
    assert any("cannot start decision process" in r.getMessage() for r in caplog.records)
