import logging
import random
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from .config import LOG_FORMAT, parse_args
from .console import run_console
from .session import GameSession
from .ui.main_window import TicTacToeWindow
from .ui.qt_bridge import QtScheduler

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# DARK THEME
# -----------------------------------------------------------------------------

# role -> color, applied to the whole app once at startup
PALETTE_COLORS = {
    QPalette.Window: QColor(34, 34, 34),
    QPalette.WindowText: QColor(238, 238, 238),
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: QColor(51, 51, 51),
    QPalette.Text: QColor(238, 238, 238),
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: QColor(238, 238, 238),
    QPalette.Highlight: QColor(42, 130, 218),
    QPalette.HighlightedText: Qt.white,
}
DISABLED_COLOR = QColor(127, 127, 127)


def apply_default_palette(app):
    """
    dark palette for every widget
    """
    palette = QPalette()
    for role, color in PALETTE_COLORS.items():
        palette.setColor(role, color)
    # greyed out restart/mode buttons
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, DISABLED_COLOR)
    app.setPalette(palette)


# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def run_window(config, rng=None):
    """
    start the qt app with a session driven by QTimers
    """
    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    scheduler = QtScheduler(app)
    session = GameSession(mode=config.mode, scheduler=scheduler, rng=rng,
                          computer_delay_ms=config.computer_delay_ms)
    window = TicTacToeWindow(session)
    window.show()
    return app.exec()


def main(argv=None):
    config = parse_args(argv)
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
    rng = random.Random(config.seed) if config.seed is not None else None
    logger.info("starting %s front end, mode=%s", "console" if config.console else "window",
                config.mode.value)
    if config.console:
        return run_console(config, rng=rng)
    return run_window(config, rng=rng)
