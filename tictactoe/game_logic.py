import enum
from dataclasses import dataclass
from typing import Optional, Tuple

BOARD_SIZE = 3                         # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# rows, cols, diags; order decides which line gets reported
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Mark(enum.Enum):
    X = "X"
    O = "O"


class Mode(enum.Enum):
    PLAYER_VS_PLAYER = "pvp"
    PLAYER_VS_COMPUTER = "ai"


class ResultKind(enum.Enum):
    ONGOING = "ongoing"
    WIN = "win"
    DRAW = "draw"


class IllegalMove(ValueError):
    """
    move rejected: bad index, taken cell, finished game or wrong turn
    """
    def __init__(self, index, reason):
        super().__init__(f"illegal move at {index!r}: {reason}")
        self.index = index
        self.reason = reason


@dataclass(frozen=True)
class GameResult:
    """
    outcome derived from a board, never stored on its own
    """
    kind: ResultKind
    winner: Optional[Mark] = None
    line: Optional[Tuple[int, int, int]] = None

    @classmethod
    def win(cls, mark, line):
        return cls(ResultKind.WIN, mark, tuple(line))

    @property
    def is_ongoing(self):
        return self.kind is ResultKind.ONGOING

    @property
    def is_draw(self):
        return self.kind is ResultKind.DRAW

    @property
    def is_over(self):
        return self.kind is not ResultKind.ONGOING


ONGOING = GameResult(ResultKind.ONGOING)
DRAW = GameResult(ResultKind.DRAW)


def new_board():
    """
    fresh board, every cell empty
    """
    return (None,) * CELL_COUNT


def next_turn(mark):
    # X -> O, O -> X
    return Mark.O if mark is Mark.X else Mark.X


def _in_range(index):
    # bools are ints too, reject them
    return isinstance(index, int) and not isinstance(index, bool) \
        and 0 <= index < CELL_COUNT


def empty_cells(board):
    """
    indices of unplayed cells, ascending
    """
    return [i for i, cell in enumerate(board) if cell is None]


def compute_result(board):
    """
    scan lines in fixed order, first full line wins;
    full board without a line is a draw
    """
    for line in WINNING_LINES:
        a, b, c = (board[i] for i in line)
        if a is not None and a == b == c:
            return GameResult.win(a, line)
    if all(cell is not None for cell in board):
        return DRAW
    return ONGOING


def apply_move(board, turn, index):
    """
    return a new board with turn's mark at index;
    raises IllegalMove, input board untouched
    """
    if not _in_range(index):
        raise IllegalMove(index, f"index must be 0-{CELL_COUNT - 1}")
    if board[index] is not None:
        raise IllegalMove(index, f"cell already holds {board[index].value}")
    if compute_result(board).is_over:
        raise IllegalMove(index, "game is already over")
    cells = list(board)
    cells[index] = turn
    return tuple(cells)


def is_cell_playable(board, result, index, mode, turn, is_computer_thinking):
    """
    gate for human clicks; never raises
    """
    if is_computer_thinking or not result.is_ongoing:
        return False
    # human only ever plays X against the computer
    if mode is Mode.PLAYER_VS_COMPUTER and turn is not Mark.X:
        return False
    return _in_range(index) and board[index] is None


def format_board(board):
    """
    text grid; empty cells show their index
    """
    rows = []
    for r in range(BOARD_SIZE):
        cells = []
        for c in range(BOARD_SIZE):
            i = r * BOARD_SIZE + c
            cells.append(board[i].value if board[i] is not None else str(i))
        rows.append(" " + " | ".join(cells))
    return "\n---+---+---\n".join(rows)
