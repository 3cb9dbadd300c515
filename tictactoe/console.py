import logging
import time

from .game_logic import IllegalMove, Mode, format_board
from .scheduler import ManualScheduler
from .session import GameSession

logger = logging.getLogger(__name__)

HELP_TEXT = """commands:
  0-8      play that cell
  r        restart the game
  m pvp    player vs player
  m ai     player vs AI
  h        this help
  q        quit"""


class ConsoleGame:
    """
    terminal front end: reads commands, prints the board after every change
    """
    def __init__(self, session, input_func=input, print_func=print, sleep=time.sleep):
        if not isinstance(session.scheduler, ManualScheduler):
            raise TypeError("console play needs a ManualScheduler")
        self.session = session
        self._input = input_func
        self._print = print_func
        self._sleep = sleep
        self.running = False
        session.add_listener(self._on_change)

    def _on_change(self, session):
        # redraw on every state change
        if session.computer_pending:
            return                        # thinking... printed in _wait_for_computer
        self._print("")
        self._print(format_board(session.board))
        self._print(session.status)

    def _wait_for_computer(self):
        # let the thinking delay pass, then fire the queued move
        if not self.session.computer_pending:
            return
        self._print("AI is thinking...")
        self._sleep(self.session.computer_delay_ms / 1000)
        self.session.scheduler.advance(self.session.computer_delay_ms)

    def handle(self, line):
        """
        run one command; returns False once the player quits
        """
        cmd = line.strip().lower()
        if not cmd:
            return True
        if cmd in ("q", "quit", "exit"):
            return False
        if cmd in ("h", "help", "?"):
            self._print(HELP_TEXT)
        elif cmd in ("r", "restart"):
            self.session.restart()
        elif cmd.startswith("m"):
            parts = cmd.split()
            try:
                self.session.set_mode(parts[1])
            except (IndexError, ValueError):
                self._print("!! usage: m pvp | m ai")
        elif cmd.isascii() and cmd.isdigit():
            try:
                self.session.human_move(int(cmd))
            except IllegalMove as e:
                self._print(f"!! {e.reason}. Try again.")
            self._wait_for_computer()
        else:
            self._print(f"!! unknown command {cmd!r}, type h for help")
        return True

    def run(self):
        """
        read-eval loop until q or end of input
        """
        mode_name = "Player vs AI" if self.session.mode is Mode.PLAYER_VS_COMPUTER \
            else "Player vs Player"
        self._print(f"--- Tic Tac Toe ({mode_name}) ---")
        self._print(HELP_TEXT)
        self._on_change(self.session)
        self.running = True
        while self.running:
            try:
                line = self._input("> ")
            except (EOFError, KeyboardInterrupt):
                self._print("")
                break
            self.running = self.handle(line)
        logger.info("console game finished")
        self._print("Exiting.")


def run_console(config, rng=None):
    session = GameSession(mode=config.mode, scheduler=ManualScheduler(), rng=rng,
                          computer_delay_ms=config.computer_delay_ms)
    ConsoleGame(session).run()
    return 0
