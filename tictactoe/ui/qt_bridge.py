import logging

from PySide6.QtCore import QObject, QTimer, Signal, Slot

logger = logging.getLogger(__name__)


class QtScheduler(QObject):
    """
    scheduler backed by single-shot QTimers; callbacks run on the gui
    thread so they never race a click handler
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self._timers = set()              # live timers

    @property
    def pending_count(self):
        return len(self._timers)

    def schedule(self, delay_ms, callback):
        """
        fire callback once after delay_ms, returns the timer as handle
        """
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.setInterval(max(0, int(delay_ms)))
        timer.timeout.connect(lambda: self._fire(timer, callback))
        self._timers.add(timer)
        timer.start()
        return timer

    def cancel(self, timer):
        # stop + drop; unknown or already fired timers are ignored
        if timer not in self._timers:
            return
        timer.stop()
        self._discard(timer)

    def _fire(self, timer, callback):
        if timer not in self._timers:
            return
        self._discard(timer)
        callback()

    def _discard(self, timer):
        self._timers.discard(timer)
        timer.deleteLater()


class SessionSignals(QObject):
    """
    re-emits session changes as a qt signal for the widgets
    """
    changed = Signal()

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session
        session.add_listener(self._on_session_changed)

    def _on_session_changed(self, session):
        self.changed.emit()

    @Slot()
    def detach(self):
        # stop forwarding, e.g. when the window closes
        self.session.remove_listener(self._on_session_changed)
