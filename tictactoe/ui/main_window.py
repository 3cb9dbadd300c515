import logging

from ..game_logic import IllegalMove, Mode
from ..ui.board_widget import BoardWidget
from ..ui.qt_bridge import SessionSignals

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu,
    QRadioButton, QButtonGroup, QSizePolicy
)
from PySide6.QtGui import QAction, QActionGroup, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

MODE_LABELS = {
    Mode.PLAYER_VS_PLAYER: "Player vs Player",
    Mode.PLAYER_VS_COMPUTER: "Player vs AI",
}


class TicTacToeWindow(QMainWindow):
    """
    main window: mode picker, status, board, restart
    """
    def __init__(self, session):
        """
        init ui widgets, hook session changes
        """
        super().__init__()
        self.session = session
        self.signals = SessionSignals(session, parent=self)
        self.board_widget = BoardWidget(session, parent=self)
        self._setup_ui()
        self.signals.changed.connect(self._refresh)
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic Tac Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QRadioButton, QLabel { color: #eee; }
            QPushButton { padding: 6px 14px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        title = QLabel("Tic Tac Toe")
        f = QFont(); f.setPointSize(20); f.setBold(True); title.setFont(f)
        title.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(title)
        self._create_mode_controls()       # pvp / ai radios
        self.main_layout.addWidget(self.mode_controls_widget)
        self._create_status_label()
        self.main_layout.addWidget(self.message_label)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self.restart_button = QPushButton("Restart Game")
        self.restart_button.setAccessibleName("Restart game")
        self.restart_button.clicked.connect(self.session.restart)
        self.main_layout.addWidget(self.restart_button, alignment=Qt.AlignCenter)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.session.restart)
        game_menu.addAction(new_action)
        game_menu.addSeparator()
        self.mode_actions = {}
        group = QActionGroup(self)
        for mode, label in MODE_LABELS.items():
            act = QAction(label, self, checkable=True)
            act.triggered.connect(lambda checked=False, m=mode: self.session.set_mode(m))
            group.addAction(act); game_menu.addAction(act)
            self.mode_actions[mode] = act
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_mode_controls(self):
        '''mode radio buttons'''
        self.mode_controls_widget = QWidget()
        hl = QHBoxLayout(self.mode_controls_widget)
        hl.addStretch(1)
        self.mode_buttons = {}
        self.mode_group = QButtonGroup(self)
        for mode, label in MODE_LABELS.items():
            btn = QRadioButton(label)
            btn.setAccessibleName(f"Select {label}")
            btn.clicked.connect(lambda checked=False, m=mode: self.session.set_mode(m))
            self.mode_group.addButton(btn); hl.addWidget(btn)
            self.mode_buttons[mode] = btn
        hl.addStretch(1)

    def _create_status_label(self):
        # status line under the mode picker
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(14); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)

    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:  style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    @Slot()
    def _refresh(self):
        # redraw everything from session state
        session = self.session
        result = session.result
        waiting = session.computer_pending
        self._update_message(session.status, is_success=result.is_over,
                             is_turn=not result.is_over and not waiting)
        self.mode_buttons[session.mode].setChecked(True)
        self.mode_actions[session.mode].setChecked(True)
        self.board_widget.refresh()

    @Slot(int)
    def _on_cell_clicked(self, index):
        # board already filters unplayable cells
        try:
            self.session.human_move(index)
        except IllegalMove as e:
            logger.debug("click ignored: %s", e)

    def closeEvent(self, event):
        # stop listening before widgets go away
        self.signals.detach()
        event.accept()
