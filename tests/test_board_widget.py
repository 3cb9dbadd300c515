"""Board widget: hit testing, click gating, highlight and accessible text."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtCore import QEvent, QPointF, Qt  # noqa: E402
from PySide6.QtGui import QMouseEvent  # noqa: E402

from tictactoe.game_logic import Mode  # noqa: E402
from tictactoe.scheduler import ManualScheduler  # noqa: E402
from tictactoe.session import GameSession  # noqa: E402
from tictactoe.ui.board_widget import BACKGROUND_COLOR, BoardWidget  # noqa: E402

SIDE = 300
CELL = SIDE // 3


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def make_widget(qapp):
    def build(session):
        widget = BoardWidget(session)
        widget.resize(SIDE, SIDE)
        clicks = []
        widget.cell_clicked.connect(clicks.append)
        return widget, clicks
    return build


def cell_center(index):
    row, col = divmod(index, 3)
    return QPointF(col * CELL + CELL / 2, row * CELL + CELL / 2)


def release(widget, index, button=Qt.LeftButton):
    pos = cell_center(index)
    event = QMouseEvent(QEvent.MouseButtonRelease, pos, pos, button, button, Qt.NoModifier)
    widget.mouseReleaseEvent(event)


def test_index_at_maps_cells(make_widget):
    widget, _ = make_widget(GameSession())
    assert widget.index_at(1, 1) == 0
    assert widget.index_at(SIDE / 2, SIDE / 2) == 4
    assert widget.index_at(SIDE - 1, SIDE - 1) == 8
    assert widget.index_at(SIDE + 5, 10) is None
    assert widget.index_at(-1, 10) is None


def test_click_on_empty_cell_emits_index(make_widget):
    widget, clicks = make_widget(GameSession())
    release(widget, 7)
    assert clicks == [7]


def test_right_click_ignored(make_widget):
    widget, clicks = make_widget(GameSession())
    release(widget, 7, button=Qt.RightButton)
    assert clicks == []


def test_click_on_taken_cell_emits_nothing(make_widget):
    session = GameSession()
    session.human_move(4)
    widget, clicks = make_widget(session)
    release(widget, 4)
    assert clicks == []


def test_no_clicks_while_computer_thinks(make_widget):
    session = GameSession(mode=Mode.PLAYER_VS_COMPUTER, scheduler=ManualScheduler())
    session.human_move(0)
    assert session.computer_pending
    widget, clicks = make_widget(session)
    for index in range(9):
        release(widget, index)
    assert clicks == []


def test_accessible_description_follows_board(make_widget):
    session = GameSession()
    widget, _ = make_widget(session)
    assert widget.accessibleDescription() == ", ".join(["Empty cell"] * 9)
    session.human_move(0)
    session.human_move(4)
    widget.refresh()
    parts = widget.accessibleDescription().split(", ")
    assert parts[0] == "Cell X"
    assert parts[4] == "Cell O"
    assert parts.count("Empty cell") == 7


def test_winning_line_is_highlighted(make_widget):
    session = GameSession()
    for index in (0, 4, 1, 7, 2):
        session.human_move(index)
    widget, _ = make_widget(session)
    image = widget.grab().toImage()
    dpr = image.devicePixelRatio()

    # a spot near each cell's top-left corner, clear of grid lines and marks
    def corner(index):
        row, col = divmod(index, 3)
        return image.pixelColor(int((col * CELL + 10) * dpr), int((row * CELL + 10) * dpr))
    for index in (0, 1, 2):
        assert corner(index) != BACKGROUND_COLOR
    for index in (3, 4, 5, 6, 7, 8):
        assert corner(index) == BACKGROUND_COLOR
