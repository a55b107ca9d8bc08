"""
Skirmish match runner.

Usage:
    python -m skirmish                                  # two move_forward processes, 100 turns
    python -m skirmish --player0 random --player1 random:7 --seed 42
    python -m skirmish --player1 "cmd:./my_bot" --turns 20
    python -m skirmish --quiet --log-level DEBUG        # no board dumps, per-turn log lines

Settings can also come from SKIRMISH_TURNS, SKIRMISH_SEED, SKIRMISH_PLAYER0,
SKIRMISH_PLAYER1 and SKIRMISH_LOG_LEVEL.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from .config import load_config
from .engine.errors import MatchError, PlayerLaunchError
from .engine.orchestrator import run_match
from .logging_listeners import register_listeners

log = logging.getLogger("skirmish")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="skirmish", description="Run one two-player grid match.")
    parser.add_argument("--player0", help="player spec for the bottom side (random[:seed] or cmd:<command>)")
    parser.add_argument("--player1", help="player spec for the top side")
    parser.add_argument("--turns", type=int, help="number of turns (default 100)")
    parser.add_argument("--seed", type=int, help="seed for random players")
    parser.add_argument("--log-level", dest="log_level", help="logging level (default INFO)")
    parser.add_argument("--quiet", action="store_true", help="do not print board dumps")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(
            turns=args.turns,
            seed=args.seed,
            player0=args.player0,
            player1=args.player1,
            log_level=args.log_level,
        )
    except ValidationError as e:
        print(f"invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    register_listeners()

    try:
        result = run_match(config, out=None if args.quiet else sys.stdout)
    except PlayerLaunchError as e:
        log.error("invalid configuration: %s", e)
        return 2
    except MatchError as e:
        log.error("match failed: %s", e)
        return 1
    log.info("final alive %s, hp %s", result.alive, result.hp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
