"""Tests for the command loop: dispatch, error reporting, and quitting."""

import io

from connect_six.config import GameConfig
from connect_six.game import ConnectSixGame
from connect_six.handler import execute, handle_line, run
from connect_six.models import GameState, PlaceCmd, QuitCmd


def make_game(topology="standard") -> ConnectSixGame:
    return ConnectSixGame(GameConfig.create(topology, 18, 2))


def run_session(lines: list[str], topology="standard") -> list[str]:
    out = io.StringIO()
    run(make_game(topology), [line + "\n" for line in lines], out)
    return out.getvalue().splitlines()


class TestExecute:
    def test_place(self):
        game = make_game()
        assert execute(PlaceCmd(first_row=0, first_col=0, second_row=0, second_col=1), game) == "OK"
        assert game.placements == 1

    def test_quit_has_no_output(self):
        assert execute(QuitCmd(), make_game()) is None


class TestHandleLine:
    def test_ok_and_continue(self):
        assert handle_line("place 0;0;0;1", make_game()) == ("OK", True)

    def test_quit_stops(self):
        assert handle_line("quit", make_game()) == (None, False)

    def test_invalid_command(self):
        assert handle_line("jump 1", make_game()) == ("Error, invalid command.", True)

    def test_numeric_format(self):
        assert handle_line("state a;1", make_game()) == ("Error, input isn't equal to an integer.", True)

    def test_engine_errors_are_reported(self):
        game = make_game()
        handle_line("place 0;0;0;1", game)
        assert handle_line("place 0;0;5;5", game) == (
            "Error, one or both cells are already occupied.",
            True,
        )
        assert handle_line("place 5;5;5;5", game)[0] == "Error, tokens must be placed in different positions."
        assert handle_line("place 18;0;5;5", game)[0] == "Error, invalid row or column."
        assert handle_line("rowprint 18", game)[0] == "Error, invalid row or column."
        assert game.placements == 1


class TestRun:
    def test_example_session(self):
        output = run_session([
            "place 0;0;0;1",
            "place 1;0;1;1",
            "state 0;0",
            "state 5;5",
            "rowprint 1",
            "quit",
            "print",
        ])
        assert output[:4] == ["OK", "OK", "P1", "**"]
        assert output[4] == "P2 P2 " + " ".join(["**"] * 16)
        assert len(output) == 5

    def test_win_then_game_over_then_reset(self):
        output = run_session([
            "place 0;15;0;16",
            "place 9;9;9;11",
            "place 0;17;0;0",
            "place 11;9;11;11",
            "place 0;1;0;2",
            "place 3;3;4;4",
            "reset",
            "place 3;3;4;4",
        ], topology="torus")
        assert output == ["OK", "OK", "OK", "OK", "P1 wins", "Error, game is over.", "OK", "OK"]

    def test_print_board(self):
        output = run_session(["place 17;0;17;17", "print"])
        assert output[1:] == [" ".join(["**"] * 18)] * 17 + ["P1 " + " ".join(["**"] * 16) + " P1"]

    def test_errors_do_not_stop_loop(self):
        output = run_session(["bogus", "place x;1;2;3", "colprint 0"])
        assert output[0] == "Error, invalid command."
        assert output[1] == "Error, input isn't equal to an integer."
        assert output[2] == " ".join(["**"] * 18)

    def test_end_of_input_stops(self):
        game = make_game()
        run(game, iter(["place 0;0;0;1\n"]), io.StringIO())
        assert game.state is GameState.RUNNING
        assert game.placements == 1
