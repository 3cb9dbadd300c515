import argparse
from dataclasses import dataclass
from typing import Optional

from .game_logic import Mode

COMPUTER_DELAY_MS = 500                 # how long the computer "thinks"
DEFAULT_MODE = Mode.PLAYER_VS_PLAYER
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class GameConfig:
    """
    startup options for either front end
    """
    mode: Mode = DEFAULT_MODE
    computer_delay_ms: int = COMPUTER_DELAY_MS
    seed: Optional[int] = None
    console: bool = False
    log_level: str = DEFAULT_LOG_LEVEL


def _delay(text):
    # argparse type: non-negative ms
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError("delay must be >= 0")
    return value


def build_parser():
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe, player vs player or player vs AI")
    parser.add_argument("--console", action="store_true",
                        help="play in the terminal instead of the window")
    parser.add_argument("--mode", choices=[m.value for m in Mode], default=DEFAULT_MODE.value,
                        help="start mode (default: %(default)s)")
    parser.add_argument("--delay", type=_delay, default=COMPUTER_DELAY_MS, metavar="MS",
                        help="computer thinking delay in ms (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the computer opponent")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        type=str.upper, help="logging level (default: %(default)s)")
    return parser


def parse_args(argv=None):
    """
    command line -> GameConfig
    """
    args = build_parser().parse_args(argv)
    return GameConfig(
        mode=Mode(args.mode),
        computer_delay_ms=args.delay,
        seed=args.seed,
        console=args.console,
        log_level=args.log_level,
    )
