import random

import pytest

from tictactoe.game_logic import Mode
from tictactoe.scheduler import ManualScheduler
from tictactoe.session import GameSession


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def session(scheduler):
    return GameSession(scheduler=scheduler, rng=random.Random(1234))


@pytest.fixture
def ai_session(scheduler):
    return GameSession(mode=Mode.PLAYER_VS_COMPUTER, scheduler=scheduler,
                       rng=random.Random(1234))
