"""
Mode registry and timed strategy runs shared by the terminal and HTTP front ends.

Modes:
  1  Brute Force
  2  Optimized 1
  3  Optimized 2
  4  Backtracking
  0  All together, in the order above, on one board reset between runs
"""

import time

from loguru import logger

from nqueens.config import MIN_BOARD_SIZE
from nqueens.enumerators import BruteForce, OptimizedOne, OptimizedTwo
from nqueens.exceptions import InvalidBoardSize, InvalidMode
from nqueens.helpers.Board import Board
from nqueens.queens import Backtracking
from nqueens.strategy import RunResult

STRATEGIES = {
    1: BruteForce,
    2: OptimizedOne,
    3: OptimizedTwo,
    4: Backtracking,
}

ALL_MODES = 0

MODE_NAMES = {
    1: "Brute Force",
    2: "Optimized 1",
    3: "Optimized 2",
    4: "Backtracking",
    ALL_MODES: "All together",
}


def validate_size(n) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < MIN_BOARD_SIZE:
        raise InvalidBoardSize(n)
    return n


def validate_mode(mode) -> int:
    if isinstance(mode, bool) or not isinstance(mode, int) or mode not in MODE_NAMES:
        raise InvalidMode(mode)
    return mode


def selected_modes(mode: int) -> list:
    return list(STRATEGIES) if mode == ALL_MODES else [mode]


def make_strategy(mode: int, board: Board = None):
    cls = STRATEGIES[mode]
    if cls is Backtracking:
        return cls(board)
    return cls()


def run_strategy(strategy, n: int) -> RunResult:
    """
    Run one strategy to completion and time it.

    Returns:
        RunResult: Solution count, wall-clock seconds and candidates examined.
    """
    logger.debug(f"Running {strategy.label} for N={n}")
    start = time.perf_counter()
    solutions = strategy.count_solutions(n)
    elapsed = time.perf_counter() - start
    logger.info(f"{strategy.label}: {solutions} solutions for N={n} in {elapsed:.6f}s")
    return RunResult(
        mode=strategy.mode,
        label=strategy.label,
        board_size=n,
        solutions=solutions,
        elapsed=elapsed,
        candidates=strategy.candidates,
    )


def iter_runs(n: int, mode: int):
    """
    Validate the input, allocate one board, and yield a RunResult per strategy.

    The size is checked before anything is allocated. The board is reset
    before every strategy so each one starts from an empty board.

    Raises:
        InvalidBoardSize: n is not an int >= 4.
        InvalidMode: mode is not 0-4.
        AllocationError: the board cannot be allocated.
    """
    validate_size(n)
    validate_mode(mode)
    board = Board(n)

    for m in selected_modes(mode):
        board.reset()
        yield run_strategy(make_strategy(m, board), n)


def run_modes(n: int, mode: int) -> list:
    return list(iter_runs(n, mode))


def report_lines(result: RunResult) -> list:
    """Text lines describing one run: the count, then the time taken."""
    lines = []
    if result.solutions == 0:
        lines.append(
            f"No solutions found for the {result.board_size}-queens problem. ({result.label})"
        )
    lines.append(f"Total solutions found ({result.label}): {result.solutions}")
    lines.append(
        f"Time taken for {result.label} algorithm to solve "
        f"{result.board_size}-queens problem is: {result.elapsed:.6f}"
    )
    return lines
