import logging
from functools import partial

from .config import COMPUTER_DELAY_MS, DEFAULT_MODE
from .game_logic import (
    IllegalMove, Mark, Mode, apply_move, compute_result,
    is_cell_playable, new_board, next_turn
)
from .move_selector import select_move
from .scheduler import ManualScheduler

logger = logging.getLogger(__name__)


def status_text(result, mode, turn):
    """
    status line for the current (result, mode, turn)
    """
    vs_ai = mode is Mode.PLAYER_VS_COMPUTER
    if result.is_draw:
        return "It's a draw! 🤝"
    if result.winner is Mark.X:
        return "You win! 🎉" if vs_ai else "Player X wins! 🏆"
    if result.winner is Mark.O:
        return "AI wins! 🤖🏆" if vs_ai else "Player O wins! 🏆"
    if vs_ai:
        return "Your turn (X)" if turn is Mark.X else "AI's turn (O)"
    return f"Player {turn.value}'s turn"


class GameSession:
    """
    one running game: board, turn, mode and the pending computer move.

    front ends read the accessors, call human_move / restart / set_mode,
    and get told about every change through listeners. in computer mode
    the session schedules O's reply itself, via the scheduler it was
    given, computer_delay_ms after X moves.
    """
    def __init__(self, mode=DEFAULT_MODE, scheduler=None, rng=None,
                 computer_delay_ms=COMPUTER_DELAY_MS):
        self.board = new_board()
        self.turn = Mark.X                # X always starts
        self.mode = Mode(mode)
        self.computer_pending = False     # thinking window open
        self.computer_delay_ms = computer_delay_ms
        self.scheduler = scheduler if scheduler is not None else ManualScheduler()
        self.rng = rng
        self._generation = 0              # bumped on schedule/cancel
        self._pending_task = None
        self._listeners = []

    # -- derived state -------------------------------------------------

    @property
    def result(self):
        return compute_result(self.board)

    @property
    def winning_line(self):
        return self.result.line

    @property
    def status(self):
        return status_text(self.result, self.mode, self.turn)

    def is_cell_playable(self, index):
        return is_cell_playable(self.board, self.result, index, self.mode,
                                self.turn, self.computer_pending)

    # -- listeners -----------------------------------------------------

    def add_listener(self, callback):
        # callback(session) after every change
        self._listeners.append(callback)

    def remove_listener(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self):
        for callback in list(self._listeners):
            callback(self)

    # -- intents -------------------------------------------------------

    def restart(self):
        """
        empty board, X to move, mode kept
        """
        self._cancel_pending()
        self.board = new_board()
        self.turn = Mark.X
        logger.info("game restarted (%s)", self.mode.value)
        self._notify()

    def set_mode(self, mode):
        """
        switch mode and restart; same mode does nothing
        """
        mode = Mode(mode)
        if mode is self.mode:
            return
        logger.info("mode %s -> %s", self.mode.value, mode.value)
        self.mode = mode
        self.restart()

    def human_move(self, index):
        """
        play index for the side to move; raises IllegalMove
        """
        if self.computer_pending:
            raise IllegalMove(index, "computer move pending")
        if self.mode is Mode.PLAYER_VS_COMPUTER and self.turn is not Mark.X:
            raise IllegalMove(index, "not your turn")
        self.board = apply_move(self.board, self.turn, index)
        logger.debug("%s played %d", self.turn.value, index)
        self.turn = next_turn(self.turn)
        self._sync_computer_turn()
        self._notify()

    def computer_move_if_due(self):
        """
        play O's random move if the computer is due;
        returns the index played or None
        """
        if not self._computer_due():
            return None
        self._cancel_pending()
        index = select_move(self.board, self.rng)
        if index is None:
            # full board is already a draw, so this is a caller bug
            logger.warning("computer due on a full board")
            return None
        self.board = apply_move(self.board, Mark.O, index)
        logger.debug("computer played %d", index)
        self.turn = Mark.X
        self._notify()
        return index

    # -- pending computer move -----------------------------------------

    def _computer_due(self):
        return (self.mode is Mode.PLAYER_VS_COMPUTER and self.turn is Mark.O
                and self.result.is_ongoing)

    def _sync_computer_turn(self):
        # open or close the thinking window to match current state
        due = self._computer_due()
        if due and not self.computer_pending:
            self._generation += 1
            self.computer_pending = True
            self._pending_task = self.scheduler.schedule(
                self.computer_delay_ms,
                partial(self._on_computer_timer, self._generation))
            logger.debug("computer move scheduled (generation %d)", self._generation)
        elif not due and self.computer_pending:
            self._cancel_pending()

    def _cancel_pending(self):
        if not self.computer_pending:
            return
        if self._pending_task is not None:
            self.scheduler.cancel(self._pending_task)
            self._pending_task = None
        self.computer_pending = False
        self._generation += 1
        logger.debug("pending computer move cleared (generation %d)", self._generation)

    def _on_computer_timer(self, generation):
        # fired by the scheduler; stale generations do nothing
        if generation != self._generation:
            logger.debug("stale computer move dropped (generation %d)", generation)
            return
        self._pending_task = None
        self.computer_move_if_due()
