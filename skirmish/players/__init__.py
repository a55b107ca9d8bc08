"""Decision process registry.

A player is chosen by a spec string at match start:

- ``random`` / ``random:<seed>``: RandomPlayer with its own seeded generator
- ``cmd:<command line>``: external program spoken to over stdin/stdout
"""

from __future__ import annotations

import random
import shlex
from typing import TYPE_CHECKING

from .process import ProtocolPlayer
from .random_player import RandomPlayer

if TYPE_CHECKING:
    from collections.abc import Callable

    from .base import DecisionProcess

_REG: dict[str, Callable[[str, random.Random], DecisionProcess]] = {}
_CHECKS: dict[str, Callable[[str], None]] = {}


def register_player(kind: str, check: Callable[[str], None] | None = None):
    def deco(factory: Callable[[str, random.Random], DecisionProcess]):
        _REG[kind] = factory
        if check is not None:
            _CHECKS[kind] = check
        return factory

    return deco


def _check_seed(arg: str) -> None:
    if arg:
        int(arg)


def _check_command(arg: str) -> None:
    if not shlex.split(arg):
        raise ValueError("cmd player needs a command line")


@register_player("random", check=_check_seed)
def _random(arg: str, rng: random.Random) -> DecisionProcess:
    return RandomPlayer(random.Random(int(arg)) if arg else rng)


@register_player("cmd", check=_check_command)
def _command(arg: str, rng: random.Random) -> DecisionProcess:
    _check_command(arg)
    return ProtocolPlayer.spawn(arg)


def check_player_spec(spec: str) -> str:
    """Raise ValueError unless ``spec`` names a registered kind with a usable argument."""
    kind, _, arg = spec.partition(":")
    if kind not in _REG:
        raise ValueError(f"unknown player kind {kind!r}, expected one of {list_players()}")
    check = _CHECKS.get(kind)
    if check is not None:
        try:
            check(arg)
        except ValueError as e:
            raise ValueError(f"bad {kind} player spec {spec!r}: {e}") from None
    return spec


def build_player(spec: str, rng: random.Random | None = None) -> DecisionProcess:
    kind, _, arg = spec.partition(":")
    if kind not in _REG:
        raise KeyError(f"Unknown player kind: {kind}")
    return _REG[kind](arg, rng or random.Random())


def list_players() -> list[str]:
    return sorted(_REG)
