"""Terminal front end driven by scripted input."""

import random

import pytest

from tictactoe.game_logic import GameResult, Mark, Mode, new_board
from tictactoe.scheduler import ManualScheduler
from tictactoe.session import GameSession
from tictactoe.console import ConsoleGame


class Script:
    """Feeds lines to input(), then raises EOFError."""

    def __init__(self, *lines):
        self.lines = list(lines)

    def __call__(self, prompt=""):
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


def make_game(*lines, mode=Mode.PLAYER_VS_PLAYER):
    session = GameSession(mode=mode, scheduler=ManualScheduler(), rng=random.Random(5))
    out, sleeps = [], []
    game = ConsoleGame(session, input_func=Script(*lines), print_func=out.append,
                       sleep=sleeps.append)
    return game, out, sleeps


def test_two_player_game_to_a_win():
    game, out, _ = make_game("0", "4", "1", "7", "2", "q")
    game.run()
    assert game.session.result == GameResult.win(Mark.X, (0, 1, 2))
    assert "Player X wins! 🏆" in out
    assert out[-1] == "Exiting."


def test_taken_cell_reports_and_keeps_turn():
    game, out, _ = make_game("4", "4")
    game.run()
    assert any(line.startswith("!! cell already holds X") for line in out)
    assert game.session.turn is Mark.O


def test_unknown_and_blank_commands():
    game, out, _ = make_game("", "jump", "m", "m chess")
    game.run()
    assert any("unknown command 'jump'" in line for line in out)
    assert out.count("!! usage: m pvp | m ai") == 2
    assert game.session.board == new_board()


def test_restart_command():
    game, out, _ = make_game("0", "r")
    game.run()
    assert game.session.board == new_board()
    assert game.session.turn is Mark.X


def test_switch_to_ai_and_computer_answers():
    game, out, sleeps = make_game("m ai", "4")
    game.run()
    session = game.session
    assert session.mode is Mode.PLAYER_VS_COMPUTER
    assert "AI is thinking..." in out
    assert sleeps == [0.5]
    assert session.turn is Mark.X
    assert sum(cell is Mark.O for cell in session.board) == 1
    assert not session.computer_pending


def test_help_is_printed():
    game, out, _ = make_game("h")
    game.run()
    assert sum("m ai" in line for line in out) == 2


def test_handle_returns_false_on_quit():
    game, _, _ = make_game()
    assert game.handle("q") is False
    assert game.handle("r") is True


def test_needs_manual_scheduler():
    class OtherScheduler:
        def schedule(self, delay_ms, callback):
            return None

        def cancel(self, handle):
            pass

    session = GameSession(scheduler=OtherScheduler())
    with pytest.raises(TypeError):
        ConsoleGame(session)


@pytest.mark.parametrize("command", ["²", "٣", "½"])
def test_non_ascii_digits_are_unknown_commands(command):
    game, out, _ = make_game()
    assert game.handle(command) is True
    assert out == [f"!! unknown command {command!r}, type h for help"]
    assert game.session.board == new_board()
    assert game.session.turn is Mark.X


def test_non_ascii_digit_does_not_end_the_game():
    game, out, _ = make_game("²", "4")
    game.run()
    assert game.session.board[4] is Mark.X
    assert out[-1] == "Exiting."
