import itertools
import logging

logger = logging.getLogger(__name__)


class ManualScheduler:
    """
    deferred tasks on a virtual clock; nothing fires until advance()
    or run_pending() is called. drives the console and the tests
    """
    def __init__(self):
        self.now_ms = 0                   # virtual clock
        self._tasks = {}                  # handle -> (due_ms, callback)
        self._ids = itertools.count(1)

    @property
    def pending_count(self):
        return len(self._tasks)

    def schedule(self, delay_ms, callback):
        """
        queue callback delay_ms from now, returns a handle
        """
        handle = next(self._ids)
        self._tasks[handle] = (self.now_ms + max(0, delay_ms), callback)
        logger.debug("task %d scheduled for t=%d", handle, self._tasks[handle][0])
        return handle

    def cancel(self, handle):
        # unknown or already fired handles are fine
        if self._tasks.pop(handle, None) is not None:
            logger.debug("task %d cancelled", handle)

    def advance(self, ms):
        """
        move the clock forward, fire whatever came due, in due order
        returns how many tasks ran
        """
        target = self.now_ms + ms
        fired = 0
        while True:
            due = [(when, h) for h, (when, _) in self._tasks.items() if when <= target]
            if not due:
                break
            when, handle = min(due)
            _, callback = self._tasks.pop(handle)
            self.now_ms = max(self.now_ms, when)
            callback()                    # may schedule or cancel more
            fired += 1
        self.now_ms = target
        return fired

    def run_pending(self):
        """
        fire everything queued right now, regardless of delay
        """
        if not self._tasks:
            return 0
        latest = max(when for when, _ in self._tasks.values())
        return self.advance(max(0, latest - self.now_ms))
