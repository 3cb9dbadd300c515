import random

from .game_logic import empty_cells


def select_move(board, rng=None):
    """
    uniform random pick among empty cells, None on a full board
    """
    choices = empty_cells(board)
    if not choices:
        return None
    return (rng or random).choice(choices)
