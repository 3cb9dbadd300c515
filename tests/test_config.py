"""Command line parsing into GameConfig."""

import pytest

from tictactoe.config import COMPUTER_DELAY_MS, GameConfig, parse_args
from tictactoe.game_logic import Mode


def test_defaults():
    config = parse_args([])
    assert config == GameConfig()
    assert config.mode is Mode.PLAYER_VS_PLAYER
    assert config.computer_delay_ms == COMPUTER_DELAY_MS == 500
    assert config.seed is None
    assert not config.console
    assert config.log_level == "WARNING"


def test_all_options():
    config = parse_args(["--console", "--mode", "ai", "--delay", "0",
                         "--seed", "7", "--log-level", "debug"])
    assert config.console
    assert config.mode is Mode.PLAYER_VS_COMPUTER
    assert config.computer_delay_ms == 0
    assert config.seed == 7
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("argv", [
    ["--delay", "-1"],
    ["--delay", "soon"],
    ["--mode", "online"],
    ["--log-level", "loud"],
])
def test_bad_options_exit(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args(argv)
    assert exc.value.code == 2
