from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, Mark

X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
GRID_COLOR = QColor("#555")
BACKGROUND_COLOR = QColor("#333")
HIGHLIGHT_COLOR = QColor(138, 202, 255, 60)
HOVER_COLOR = QColor(255, 255, 255, 20)


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits board index on click

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session  # reference to game state
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(QSize(150, 150))
        self.setMouseTracking(True)
        self._hover = None      # index under the mouse
        self.refresh()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def sizeHint(self):
        return QSize(360, 360)

    def refresh(self):
        """
        repaint + update accessible text after a state change
        """
        marks = [cell.value if cell is not None else None for cell in self.session.board]
        self.setAccessibleName("Tic tac toe board")
        self.setAccessibleDescription(", ".join(
            f"Cell {m}" if m else "Empty cell" for m in marks))
        playable = any(self.session.is_cell_playable(i) for i in range(len(marks)))
        self.setCursor(Qt.PointingHandCursor if playable else Qt.ArrowCursor)
        self.update()

    def _geometry(self):
        # square area centered in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_rect(self, index):
        ox, oy, side = self._geometry()
        cell = side / BOARD_SIZE
        row, col = divmod(index, BOARD_SIZE)
        return QRectF(ox + col * cell, oy + row * cell, cell, cell)

    def index_at(self, x, y):
        """
        board index under widget coords, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        col = min(int((x - ox) // cell), BOARD_SIZE - 1)
        row = min(int((y - oy) // cell), BOARD_SIZE - 1)
        return row * BOARD_SIZE + col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            # winning cells / hover first so marks stay on top
            line = self.session.winning_line or ()
            for i in line:
                painter.fillRect(self.cell_rect(i), HIGHLIGHT_COLOR)
            if self._hover is not None and self.session.is_cell_playable(self._hover):
                painter.fillRect(self.cell_rect(self._hover), HOVER_COLOR)
            # grid lines
            cell_size = side / BOARD_SIZE
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i * cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy + side))
                y = oy + i * cell_size
                painter.drawLine(int(ox), int(y), int(ox + side), int(y))
            # draw marks
            for i, mark in enumerate(self.session.board):
                if mark is None:
                    continue
                center = self.cell_rect(i).center()
                cx, cy = center.x(), center.y()
                rad = cell_size / 2 * 0.6
                if mark is Mark.X:
                    painter.setPen(QPen(X_COLOR, 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                    painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                else:
                    painter.setPen(QPen(O_COLOR, 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseMoveEvent(self, event):
        pos = event.position()
        index = self.index_at(pos.x(), pos.y())
        if index != self._hover:
            self._hover = index
            self.update()

    def leaveEvent(self, event):
        self._hover = None
        self.update()

    def mouseReleaseEvent(self, event):
        """
        map click to a cell; only playable cells are emitted
        """
        if event.button() != Qt.LeftButton:
            return
        pos = event.position()
        index = self.index_at(pos.x(), pos.y())
        if index is None or not self.session.is_cell_playable(index):
            return
        self.cell_clicked.emit(index)  # notify main window
