import pytest

from nqueens import runner
from nqueens.exceptions import InvalidBoardSize, InvalidMode
from nqueens.helpers.Board import Board
from nqueens.strategy import RunResult


@pytest.mark.parametrize("n", [3, 0, -4, "8", 4.0, True, None])
def test_validate_size_rejects(n):
    with pytest.raises(InvalidBoardSize):
        runner.validate_size(n)


def test_validate_size_accepts():
    assert runner.validate_size(4) == 4


@pytest.mark.parametrize("mode", [5, -1, "1", None, False])
def test_validate_mode_rejects(mode):
    with pytest.raises(InvalidMode):
        runner.validate_mode(mode)


def test_small_size_rejected_before_board_allocated(monkeypatch):
    def no_board(n):
        raise AssertionError("board allocated for an invalid size")

    monkeypatch.setattr(runner, "Board", no_board)
    with pytest.raises(InvalidBoardSize):
        runner.run_modes(3, 4)


def test_single_mode():
    [result] = runner.run_modes(6, 4)
    assert result.mode == 4
    assert result.label == "Backtracking"
    assert result.board_size == 6
    assert result.solutions == 4
    assert result.elapsed >= 0


def test_all_modes_in_order_with_same_count():
    results = runner.run_modes(5, runner.ALL_MODES)
    assert [r.mode for r in results] == [1, 2, 3, 4]
    assert {r.solutions for r in results} == {10}


def test_board_reset_before_each_strategy(monkeypatch):
    resets = []
    original = Board.reset

    def spy(self):
        resets.append(self.n)
        original(self)

    monkeypatch.setattr(Board, "reset", spy)
    runner.run_modes(4, runner.ALL_MODES)
    assert resets == [4, 4, 4, 4]


def test_backtracking_gets_shared_board():
    board = Board(5)
    strategy = runner.make_strategy(4, board)
    assert strategy.board is board
    assert runner.run_strategy(strategy, 5).solutions == 10


def test_report_lines():
    result = RunResult(mode=4, label="Backtracking", board_size=8, solutions=92, elapsed=0.5)
    assert runner.report_lines(result) == [
        "Total solutions found (Backtracking): 92",
        "Time taken for Backtracking algorithm to solve 8-queens problem is: 0.500000",
    ]


def test_report_lines_no_solutions():
    result = RunResult(mode=1, label="Brute Force", board_size=3, solutions=0, elapsed=0.0)
    lines = runner.report_lines(result)
    assert lines[0] == "No solutions found for the 3-queens problem. (Brute Force)"
    assert lines[1] == "Total solutions found (Brute Force): 0"
