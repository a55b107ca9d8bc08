import pytest
from pydantic import ValidationError

from skirmish.config import load_config
from skirmish.models.enums import DEFAULT_TURNS
from skirmish.models.match import DEFAULT_PLAYER


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TURNS", "SEED", "PLAYER0", "PLAYER1", "LOG_LEVEL"):
        monkeypatch.delenv(f"SKIRMISH_{name}", raising=False)


def test_defaults():
    cfg = load_config()
    assert cfg.turns == DEFAULT_TURNS == 100
    assert cfg.seed is None
    assert cfg.player0 == cfg.player1 == DEFAULT_PLAYER
    assert cfg.log_level == "INFO"


def test_environment_then_overrides(monkeypatch):
    monkeypatch.setenv("SKIRMISH_TURNS", "12")
    monkeypatch.setenv("SKIRMISH_SEED", "5")
    monkeypatch.setenv("SKIRMISH_PLAYER1", "random")
    monkeypatch.setenv("SKIRMISH_LOG_LEVEL", "debug")
    cfg = load_config(turns=3, seed=None)
    assert cfg.turns == 3
    assert cfg.seed == 5
    assert cfg.player1 == "random"
    assert cfg.log_level == "DEBUG"


def test_invalid_values_are_rejected(monkeypatch):
    with pytest.raises(ValidationError):
        load_config(turns=-1)
    monkeypatch.setenv("SKIRMISH_TURNS", "many")
    with pytest.raises(ValidationError):
        load_config()


@pytest.mark.parametrize("spec", ["random", "random:42", "cmd:./bot --fast"])
def test_player_specs_accepted(spec):
    assert load_config(player0=spec).player0 == spec


@pytest.mark.parametrize("spec", ["telepathy", "random:abc", "cmd:", "cmd:   ", ""])
def test_player_specs_rejected(spec):
    with pytest.raises(ValidationError):
        load_config(player1=spec)


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        load_config(log_level="loud")
    assert load_config(log_level="warning").log_level == "WARNING"
